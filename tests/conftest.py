"""Shared fixtures for the merge engine tests."""

import pytest
from fastapi.testclient import TestClient

from main import app
from routers import compare
from services.config_manager import CONFIG_DIR_ENV, ConfigManager
from services.merge_engine import CodeMergeEngine, TextMergeEngine


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    """Point the config manager at a throwaway directory."""
    directory = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(directory))
    ConfigManager.reset_instance()
    yield directory
    ConfigManager.reset_instance()


@pytest.fixture
def code_engine():
    return CodeMergeEngine()


@pytest.fixture
def text_engine():
    return TextMergeEngine()


@pytest.fixture
def client():
    """API client with an empty session registry."""
    compare.sessions.clear()
    compare.sessions.max_sessions = 100
    yield TestClient(app)
    compare.sessions.clear()
