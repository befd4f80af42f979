"""Archive entry data models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class ArchiveEntry(BaseModel):
    """A single file or directory found in an archive"""

    model_config = ConfigDict(frozen=True)

    path: str  # Normalized, forward-slash separated
    is_directory: bool
    content: str | None = None  # Decoded text, only for text files
    size: int | None = None  # Uncompressed byte size


class EntryListing(BaseModel):
    """Entry metadata for one archive, without file contents"""

    path: str
    is_directory: bool
    is_text: bool
    size: int | None = None


class ArchiveListing(BaseModel):
    """Listing of an uploaded archive"""

    entries: list[EntryListing]
    total_entries: int
    total_size: int
