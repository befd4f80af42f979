"""Unified diff parsing endpoints"""

from __future__ import annotations

from fastapi import APIRouter

from models.compare import ParseDiffRequest
from models.diff import FileDiffSummary
from services.diff_generator import DiffGenerator

router = APIRouter()
diff_generator = DiffGenerator()


@router.post("/parse", response_model=FileDiffSummary)
async def parse_diff(request: ParseDiffRequest) -> FileDiffSummary:
    """Parse a unified diff into numbered hunks with change counts"""
    return diff_generator.summarize(request.path, request.diff)
