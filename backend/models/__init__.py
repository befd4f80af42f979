"""Models module - Pydantic data models"""

from .entry import ArchiveEntry, ArchiveListing, EntryListing
from .diff import DiffHunk, DiffLine, DiffResult, DiffStats, FileDiffSummary
from .compare import (
    CompareEvent,
    CompareResponse,
    CompareUrlsRequest,
    ErrorResponse,
    ParseDiffRequest,
)

__all__ = [
    # Entry models
    "ArchiveEntry",
    "ArchiveListing",
    "EntryListing",
    # Diff models
    "DiffHunk",
    "DiffLine",
    "DiffResult",
    "DiffStats",
    "FileDiffSummary",
    # Compare API models
    "CompareEvent",
    "CompareResponse",
    "CompareUrlsRequest",
    "ErrorResponse",
    "ParseDiffRequest",
]
