"""Compare API request/response models"""

from __future__ import annotations

from pydantic import BaseModel

from .diff import DiffResult


class CompareResponse(BaseModel):
    """Successful comparison"""

    diff: DiffResult


class ErrorResponse(BaseModel):
    """Error payload returned instead of a comparison"""

    error: str


class CompareUrlsRequest(BaseModel):
    """Request to compare two remotely hosted archives"""

    left_url: str
    right_url: str


class ParseDiffRequest(BaseModel):
    """Unified diff text to parse into hunks"""

    path: str
    diff: str


class CompareEvent(BaseModel):
    """SSE stream event"""

    type: str  # "progress", "done", "error"
    stage: str | None = None  # "extracting", "comparing"
    diff: DiffResult | None = None
    done: bool = False
    error: str | None = None
