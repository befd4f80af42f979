"""Diff-related data models"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DiffStats(BaseModel):
    """Per-category counts for a comparison"""

    model_config = ConfigDict(frozen=True)

    total_files: int
    added_count: int
    removed_count: int
    modified_count: int
    unchanged_count: int


class DiffResult(BaseModel):
    """Classified comparison of two archives"""

    model_config = ConfigDict(frozen=True)

    added: list[str]
    removed: list[str]
    modified: list[str]
    unchanged: list[str]
    diffs: dict[str, str]  # path -> unified diff, text modifications only
    stats: DiffStats


class DiffLine(BaseModel):
    """A single row of a parsed unified diff"""

    kind: str  # "context", "add", "delete"
    content: str
    old_number: int | None = None  # 1-indexed
    new_number: int | None = None


class DiffHunk(BaseModel):
    """A single change hunk in a diff"""

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: list[DiffLine]


class FileDiffSummary(BaseModel):
    """Parsed unified diff for one file"""

    path: str
    additions: int
    deletions: int
    hunks: list[DiffHunk]
