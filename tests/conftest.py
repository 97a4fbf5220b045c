"""Shared fixtures for the code diff viewer backend tests."""

import pytest
from fastapi.testclient import TestClient

from services.config_manager import ConfigManager
from services.session_store import get_session_store


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config singleton at a fresh directory for every test."""
    config_dir = tmp_path / "config"
    monkeypatch.setenv("CODE_DIFF_VIEWER_CONFIG_DIR", str(config_dir))
    ConfigManager.reset_instance()
    yield config_dir
    ConfigManager.reset_instance()


@pytest.fixture(autouse=True)
def clean_sessions():
    get_session_store().clear()
    yield
    get_session_store().clear()


@pytest.fixture
def client():
    from main import app

    with TestClient(app) as test_client:
        yield test_client


# Pairs used by the property-style tests
TEXT_PAIRS = [
    ("", ""),
    ("", "a\nb"),
    ("a\nb", ""),
    ("a\nb\nc", "a\nx\nc"),
    ("a\nb", "a\nb\nc"),
    ("a\nb\nc\na\nb\nb\na", "c\nb\na\nb\na\nc"),
    ("x\nx\nx", "x"),
    ("a\nb\n", "a\nb"),
    ("\n\n\n", "\n"),
    ("   \n\t\n", "   "),
    ("one\ntwo\nthree\nfour", "zero\none\nthree\nfour\nfive"),
    ("héllo\nwörld\n世界", "héllo\n世界\n🙂"),
]
