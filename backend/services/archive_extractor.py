"""
Archive Extractor - Read ZIP archives into path-keyed entries
"""

from __future__ import annotations

import io
import logging
import posixpath
import re
import zipfile
import zlib
from typing import Iterable

from models.entry import ArchiveEntry

logger = logging.getLogger(__name__)

TEXT_FILE_EXTENSIONS = (
    ".txt", ".md", ".json", ".html", ".js", ".ts", ".css", ".tsx", ".jsx",
    ".py", ".java", ".cpp", ".c", ".h", ".php", ".rb", ".go", ".rs", ".swift",
    ".kt", ".scala", ".sh", ".bat", ".ps1", ".yml", ".yaml", ".xml", ".sql",
    ".dockerfile", ".gitignore", ".env", ".config", ".ini", ".toml", ".lock",
)

_MULTIPLE_SLASHES = re.compile(r"/+")


class ArchiveFormatError(Exception):
    """Input bytes are not a readable ZIP archive"""


def normalize_path(path: str) -> str:
    """Normalize an archive member name to a/b/c form"""
    path = path.replace("\\", "/")
    path = _MULTIPLE_SLASHES.sub("/", path)
    return path.strip("/").strip()


def is_text_file(path: str, text_extensions: Iterable[str] | None = None) -> bool:
    """Allow-listed extension, or no extension at all"""
    extensions = tuple(text_extensions) if text_extensions is not None else TEXT_FILE_EXTENSIONS
    if path.lower().endswith(extensions):
        return True
    return "." not in posixpath.basename(path)


def _read_text(archive: zipfile.ZipFile, info: zipfile.ZipInfo, path: str) -> str | None:
    """Decode a member as UTF-8, or None if it can't be read"""
    try:
        return archive.read(info).decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"Not valid UTF-8, treating as binary: {path} ({e})")
    except (zipfile.BadZipFile, zlib.error, NotImplementedError, RuntimeError, OSError) as e:
        logger.warning(f"Failed to read text content for {path}: {e}")
    return None


def extract_entries(
    data: bytes,
    text_extensions: Iterable[str] | None = None,
) -> list[ArchiveEntry]:
    """Extract all entries of a ZIP archive, sorted by path"""
    if text_extensions is not None:
        text_extensions = tuple(text_extensions)

    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, OSError) as e:
        raise ArchiveFormatError(f"Failed to load ZIP file: {e}") from e

    entries: dict[str, ArchiveEntry] = {}

    with archive:
        for info in archive.infolist():
            path = normalize_path(info.filename)

            # Skip degenerate root entries
            if not path:
                continue

            if info.is_dir():
                entries[path] = ArchiveEntry(path=path, is_directory=True, size=0)
                continue

            content = None
            if is_text_file(path, text_extensions):
                content = _read_text(archive, info, path)

            # Duplicate names: last occurrence wins
            entries[path] = ArchiveEntry(
                path=path,
                is_directory=False,
                content=content,
                size=info.file_size,
            )

    return [entries[path] for path in sorted(entries)]
