"""Shared fixtures for payledger tests."""

import json

import pytest

from payledger.sdk.dao import MockDb


@pytest.fixture
def db():
    """Fresh in-memory store."""
    return MockDb()


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Point the SDK at an empty, isolated config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setenv("PAYLEDGER_CONFIG_PATH", str(config_dir))

    def write_settings(settings: dict):
        (config_dir / "settings.json").write_text(json.dumps(settings))

    return {
        "config_dir": config_dir,
        "write_settings": write_settings,
    }
