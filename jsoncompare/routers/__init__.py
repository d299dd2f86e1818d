"""Routers module - FastAPI route handlers"""

from . import config, diff, json_tools

__all__ = ["config", "diff", "json_tools"]
