"""Settings data models"""

from __future__ import annotations

from pydantic import BaseModel, Field


class DiffSettings(BaseModel):
    """Diff engine settings"""

    maxCells: int | None = Field(default=None, ge=0)


class JsonSettings(BaseModel):
    """JSON formatting settings"""

    sortKeys: bool | None = None
    indent: int | None = Field(default=None, ge=1, le=8)


class ServerSettings(BaseModel):
    """HTTP server settings"""

    host: str | None = None
    port: int | None = Field(default=None, ge=1, le=65535)


# Section name in the settings file -> model validating it
SETTINGS_SECTIONS: dict[str, type[BaseModel]] = {
    "diff": DiffSettings,
    "json": JsonSettings,
    "server": ServerSettings,
}
