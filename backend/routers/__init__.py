"""Routers module - FastAPI route handlers"""

from . import compare, config, diff

__all__ = ["compare", "config", "diff"]
