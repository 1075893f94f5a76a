"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager
from services.logging_utils import set_log_level

from . import compare

router = APIRouter()


class AcceptanceDefaults(BaseModel):
    """Initial acceptance of changed segments for one engine"""

    acceptAdded: bool | None = None
    acceptRemoved: bool | None = None


class SessionSettings(BaseModel):
    """Session registry settings"""

    maxSessions: int | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    code: AcceptanceDefaults | None = None
    text: AcceptanceDefaults | None = None
    sessions: SessionSettings | None = None
    logLevel: str | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    code: dict
    text: dict
    sessions: dict
    logLevel: str


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        code=config.get("code", {}),
        text=config.get("text", {}),
        sessions=config.get("sessions", {}),
        logLevel=config.get("logLevel", "INFO"),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    for section in ("code", "text", "sessions"):
        update = getattr(request, section)
        if update is not None:
            current_config[section] = {
                **current_config.get(section, {}),
                **update.model_dump(exclude_none=True),
            }
    if request.logLevel:
        current_config["logLevel"] = request.logLevel.upper()

    max_sessions = current_config.get("sessions", {}).get("maxSessions")
    if not isinstance(max_sessions, int) or isinstance(max_sessions, bool):
        max_sessions = None
    elif max_sessions < 1:
        raise HTTPException(status_code=400, detail="maxSessions must be at least 1")

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    # Apply to the running app as well as the saved file
    if request.logLevel:
        set_log_level(current_config["logLevel"])
    if max_sessions is not None:
        compare.sessions.resize(max_sessions)

    return {"status": "success", "message": "Configuration updated"}
