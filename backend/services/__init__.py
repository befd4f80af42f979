"""Services module - Business logic layer"""

from .archive_extractor import ArchiveFormatError, extract_entries, is_text_file, normalize_path
from .entry_comparator import compare_entries
from .diff_generator import DiffGenerator
from .archive_comparison import ComparisonSettings, compare_archives
from .archive_fetcher import ArchiveFetchError, fetch_archive, fetch_archives
from .config_manager import ConfigManager

__all__ = [
    "ArchiveFormatError",
    "extract_entries",
    "is_text_file",
    "normalize_path",
    "compare_entries",
    "DiffGenerator",
    "ComparisonSettings",
    "compare_archives",
    "ArchiveFetchError",
    "fetch_archive",
    "fetch_archives",
    "ConfigManager",
]
