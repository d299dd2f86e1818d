"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from jsoncompare.exceptions import ConfigError
from jsoncompare.models.config import SETTINGS_SECTIONS
from jsoncompare.services.diff_engine import DEFAULT_MAX_CELLS
from jsoncompare.services.json_document import DEFAULT_INDENT

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "JSON_COMPARE_CONFIG_DIR"


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self):
        # Environment variable first, then ~/.jsoncompare
        config_dir = os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.jsoncompare")

        try:
            config_path = Path(config_dir)
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # Last resort when the directory is not writable
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "jsoncompare"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.warning("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access re-reads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, filling in missing sections"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file, encoding="utf-8") as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config: %s", e)
            return config

        if not isinstance(stored, dict):
            logger.error("Ignoring config file %s: not a JSON object", self._config_file)
            return config

        return self._merge(config, self._validate_sections(stored))

    def _validate_sections(self, stored: dict[str, Any]) -> dict[str, Any]:
        """Check known sections against their models, dropping invalid ones"""
        valid = {}
        for section, values in stored.items():
            model = SETTINGS_SECTIONS.get(section)
            if model is None:
                valid[section] = values
                continue
            try:
                valid[section] = model.model_validate(values).model_dump(exclude_none=True)
            except ValidationError as e:
                logger.warning(
                    "Ignoring invalid '%s' section in %s: %s",
                    section,
                    self._config_file,
                    e.errors(include_url=False),
                )
        return valid

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "diff": {"maxCells": DEFAULT_MAX_CELLS},
            "json": {"sortKeys": False, "indent": DEFAULT_INDENT},
            "server": {"host": "127.0.0.1", "port": 8000},
        }

    @staticmethod
    def _merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        """Merge update into base, section by section"""
        merged = {key: value.copy() if isinstance(value, dict) else value for key, value in base.items()}
        for key, value in update.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key] = {**merged[key], **value}
            else:
                merged[key] = value
        return merged

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return self._merge(self._config, {})

    def save_config(self, config: dict[str, Any]):
        """Merge config into the current settings and write them to file"""
        # Reload first so edits made to the file since the last read survive
        self._config = self._merge(self._load_config(), config)

        try:
            self._config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self._config_file, "w", encoding="utf-8") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}", original_error=e) from e

        logger.info("Configuration saved to %s", self._config_file)
