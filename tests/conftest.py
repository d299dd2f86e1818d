"""Shared fixtures for the backend test suite"""

import pytest
from fastapi.testclient import TestClient

from jsoncompare.main import app
from jsoncompare.services.config_manager import CONFIG_DIR_ENV, ConfigManager


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point the settings file at a per-test directory"""
    path = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(path))
    ConfigManager.reset_instance()
    yield path
    ConfigManager.reset_instance()


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client
