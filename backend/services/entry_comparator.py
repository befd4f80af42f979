"""
Entry Comparator - Classify paths of two archives as added/removed/modified/unchanged
"""

from __future__ import annotations

from typing import Iterable

from models.diff import DiffResult, DiffStats
from models.entry import ArchiveEntry
from services.archive_extractor import is_text_file
from services.diff_generator import DiffGenerator


def _index_by_path(entries: Iterable[ArchiveEntry]) -> dict[str, ArchiveEntry]:
    # Later entries overwrite earlier ones with the same path
    return {entry.path: entry for entry in entries}


def compare_entries(
    left: Iterable[ArchiveEntry],
    right: Iterable[ArchiveEntry],
    *,
    context_lines: int = 3,
    labels: tuple[str, str] = ("ZIP 1", "ZIP 2"),
    text_extensions: Iterable[str] | None = None,
) -> DiffResult:
    """Compare two entry lists and build the classified diff result

    Binary files (no decoded content on either side) are compared by size
    only, so two different binaries of equal length are reported unchanged.
    """
    if text_extensions is not None:
        text_extensions = tuple(text_extensions)

    left_by_path = _index_by_path(left)
    right_by_path = _index_by_path(right)
    generator = DiffGenerator(labels=labels, context_lines=context_lines)

    added: list[str] = []
    removed: list[str] = []
    modified: list[str] = []
    unchanged: list[str] = []
    diffs: dict[str, str] = {}

    all_paths = left_by_path.keys() | right_by_path.keys()

    for path in all_paths:
        left_entry = left_by_path.get(path)
        right_entry = right_by_path.get(path)

        if left_entry is None:
            added.append(path)
        elif right_entry is None:
            removed.append(path)
        elif left_entry.is_directory != right_entry.is_directory:
            # Type change (file <-> directory)
            modified.append(path)
            if is_text_file(path, text_extensions):
                diffs[path] = generator.generate_diff(
                    left_entry.content or "",
                    right_entry.content or "",
                    path,
                )
        elif left_entry.is_directory:
            unchanged.append(path)
        elif left_entry.content is not None and right_entry.content is not None:
            if left_entry.content == right_entry.content:
                unchanged.append(path)
            else:
                modified.append(path)
                diffs[path] = generator.generate_diff(left_entry.content, right_entry.content, path)
        elif left_entry.size != right_entry.size:
            modified.append(path)
        else:
            unchanged.append(path)

    stats = DiffStats(
        total_files=len(all_paths),
        added_count=len(added),
        removed_count=len(removed),
        modified_count=len(modified),
        unchanged_count=len(unchanged),
    )

    return DiffResult(
        added=sorted(added),
        removed=sorted(removed),
        modified=sorted(modified),
        unchanged=sorted(unchanged),
        diffs={path: diffs[path] for path in sorted(diffs)},
        stats=stats,
    )
