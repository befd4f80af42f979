"""
Archive Comparison Service - Extract two archives concurrently and compare them
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any

from models.diff import DiffResult
from models.entry import ArchiveEntry
from services.archive_extractor import TEXT_FILE_EXTENSIONS, extract_entries
from services.entry_comparator import compare_entries

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonSettings:
    """Comparison options taken from the "comparison" config section"""

    context_lines: int = 3
    left_label: str = "ZIP 1"
    right_label: str = "ZIP 2"
    text_extensions: tuple[str, ...] = TEXT_FILE_EXTENSIONS

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ComparisonSettings":
        cfg = config.get("comparison", {})
        return cls(
            context_lines=int(cfg.get("contextLines", 3)),
            left_label=cfg.get("leftLabel", "ZIP 1"),
            right_label=cfg.get("rightLabel", "ZIP 2"),
            text_extensions=tuple(ext.lower() for ext in cfg.get("textExtensions", TEXT_FILE_EXTENSIONS)),
        )


async def extract_pair(
    left_bytes: bytes,
    right_bytes: bytes,
    settings: ComparisonSettings,
) -> tuple[list[ArchiveEntry], list[ArchiveEntry]]:
    """Extract both archives in worker threads; raises ArchiveFormatError"""
    left_entries, right_entries = await asyncio.gather(
        asyncio.to_thread(extract_entries, left_bytes, settings.text_extensions),
        asyncio.to_thread(extract_entries, right_bytes, settings.text_extensions),
    )
    return left_entries, right_entries


def compare_pair(
    left_entries: list[ArchiveEntry],
    right_entries: list[ArchiveEntry],
    settings: ComparisonSettings,
) -> DiffResult:
    return compare_entries(
        left_entries,
        right_entries,
        context_lines=settings.context_lines,
        labels=(settings.left_label, settings.right_label),
        text_extensions=settings.text_extensions,
    )


async def compare_archives(
    left_bytes: bytes,
    right_bytes: bytes,
    settings: ComparisonSettings | None = None,
) -> DiffResult:
    """Extract and compare two archives"""
    settings = settings or ComparisonSettings()
    started = time.perf_counter()

    left_entries, right_entries = await extract_pair(left_bytes, right_bytes, settings)
    result = await asyncio.to_thread(compare_pair, left_entries, right_entries, settings)

    elapsed_ms = (time.perf_counter() - started) * 1000
    stats = result.stats
    logger.info(
        f"Compared archives in {elapsed_ms:.1f}ms: {stats.total_files} paths, "
        f"+{stats.added_count} -{stats.removed_count} ~{stats.modified_count} "
        f"={stats.unchanged_count}"
    )
    return result
