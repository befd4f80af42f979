"""
Diff Generator Service - Generate and parse unified diffs for archive entries
"""

from __future__ import annotations

import re
from difflib import unified_diff

from models.diff import DiffHunk, DiffLine, FileDiffSummary

NO_NEWLINE_MARKER = "\\ No newline at end of file\n"

_HUNK_HEADER = re.compile(r"^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@")


def split_lines(text: str) -> list[str]:
    """Split on \\n only, keeping line endings"""
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


class DiffGenerator:
    """Generate unified diffs between two versions of an archive entry"""

    def __init__(
        self,
        labels: tuple[str, str] = ("ZIP 1", "ZIP 2"),
        context_lines: int = 3,
    ):
        self.labels = labels
        self.context_lines = context_lines

    def generate_diff(
        self,
        original_content: str,
        new_content: str,
        file_path: str,
    ) -> str:
        """Generate a patch-compatible unified diff"""
        original_lines = split_lines(original_content)
        new_lines = split_lines(new_content)

        left_label, right_label = self.labels
        result = [
            f"--- {file_path}\t{left_label}\n",
            f"+++ {file_path}\t{right_label}\n",
        ]

        body = unified_diff(original_lines, new_lines, n=self.context_lines)

        # difflib's own ---/+++ header lines are replaced above
        for index, line in enumerate(body):
            if index < 2:
                continue
            if line.endswith("\n"):
                result.append(line)
            else:
                result.append(line + "\n")
                result.append(NO_NEWLINE_MARKER)

        return "".join(result)

    def parse_hunks(self, diff_text: str) -> list[DiffHunk]:
        """Parse unified diff text into line-numbered hunks"""
        hunks: list[DiffHunk] = []
        current: DiffHunk | None = None
        old_number = new_number = 0

        for raw_line in split_lines(diff_text):
            # Only the \n terminator is stripped; \r and form feeds are content
            line = raw_line[:-1] if raw_line.endswith("\n") else raw_line
            match = _HUNK_HEADER.match(line)
            if match:
                old_start, old_count, new_start, new_count = match.groups()
                current = DiffHunk(
                    old_start=int(old_start),
                    old_lines=int(old_count) if old_count is not None else 1,
                    new_start=int(new_start),
                    new_lines=int(new_count) if new_count is not None else 1,
                    lines=[],
                )
                hunks.append(current)
                old_number = current.old_start
                new_number = current.new_start
                continue

            # File headers and anything before the first hunk
            if current is None or line.startswith("\\"):
                continue

            if line.startswith("+"):
                current.lines.append(DiffLine(kind="add", content=line[1:], new_number=new_number))
                new_number += 1
            elif line.startswith("-"):
                current.lines.append(DiffLine(kind="delete", content=line[1:], old_number=old_number))
                old_number += 1
            else:
                current.lines.append(
                    DiffLine(
                        kind="context",
                        content=line[1:],
                        old_number=old_number,
                        new_number=new_number,
                    )
                )
                old_number += 1
                new_number += 1

        return hunks

    def summarize(self, file_path: str, diff_text: str) -> FileDiffSummary:
        """Count additions and deletions of a unified diff"""
        hunks = self.parse_hunks(diff_text)
        additions = sum(1 for hunk in hunks for line in hunk.lines if line.kind == "add")
        deletions = sum(1 for hunk in hunks for line in hunk.lines if line.kind == "delete")

        return FileDiffSummary(
            path=file_path,
            additions=additions,
            deletions=deletions,
            hunks=hunks,
        )
