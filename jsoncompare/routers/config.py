"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from jsoncompare.exceptions import ConfigError
from jsoncompare.models.config import DiffSettings, JsonSettings, ServerSettings
from jsoncompare.services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    model_config = ConfigDict(populate_by_name=True)

    diff: DiffSettings | None = None
    json_settings: JsonSettings | None = Field(default=None, alias="json")
    server: ServerSettings | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    model_config = ConfigDict(populate_by_name=True)

    diff: dict
    json_settings: dict = Field(alias="json")
    server: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        diff=config.get("diff", {}),
        json_settings=config.get("json", {}),
        server=config.get("server", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    # Update only provided fields
    update = request.model_dump(by_alias=True, exclude_none=True)
    update = {section: values for section, values in update.items() if values}

    try:
        ConfigManager.get_instance().save_config(update)
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=e.message)

    return {"status": "success", "message": "Configuration updated"}
