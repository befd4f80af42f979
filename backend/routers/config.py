"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    comparison: dict | None = None
    fetch: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    comparison: dict
    fetch: dict


def _validate_comparison(section: dict[str, Any]):
    context_lines = section.get("contextLines")
    if context_lines is not None and (not isinstance(context_lines, int) or context_lines < 0):
        raise HTTPException(status_code=400, detail="contextLines must be a non-negative integer")

    extensions = section.get("textExtensions")
    if extensions is not None:
        if not isinstance(extensions, list) or not all(isinstance(ext, str) for ext in extensions):
            raise HTTPException(status_code=400, detail="textExtensions must be a list of strings")


def _validate_fetch(section: dict[str, Any]):
    for key in ("timeoutSeconds", "maxArchiveBytes", "maxRetries"):
        value = section.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise HTTPException(status_code=400, detail=f"{key} must be a positive integer")


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        comparison=config.get("comparison", {}),
        fetch=config.get("fetch", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.comparison:
        _validate_comparison(request.comparison)
        current_config["comparison"] = {**current_config.get("comparison", {}), **request.comparison}
    if request.fetch:
        _validate_fetch(request.fetch)
        current_config["fetch"] = {**current_config.get("fetch", {}), **request.fetch}

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}
