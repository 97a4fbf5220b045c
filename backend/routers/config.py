"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    theme: str | None = None
    algorithm: str | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    theme: str
    algorithm: str
    server: dict


class ThemeResponse(BaseModel):
    """Theme after a toggle"""

    theme: str


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config_manager = ConfigManager.get_instance()
    config = config_manager.get_config()

    return ConfigResponse(
        theme=config_manager.get_theme(),
        algorithm=config_manager.get_algorithm(),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()

    # Update only provided fields
    try:
        if request.theme:
            config_manager.set_theme(request.theme)
        if request.algorithm:
            config_manager.set_algorithm(request.algorithm)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}


@router.post("/theme/toggle", response_model=ThemeResponse)
async def toggle_theme() -> ThemeResponse:
    """Switch between light and dark theme"""
    try:
        theme = ConfigManager.get_instance().toggle_theme()
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return ThemeResponse(theme=theme)
