"""Configuration management for payledger.

Machine-specific preferences live in settings.json:
- default_output_format: text | json | yaml (for `payledger run`)
- log_level: DEBUG | INFO | WARNING | ERROR
- strict_scripts: stop with an error on bad script lines (default true)

Config directory resolution:
1. PAYLEDGER_CONFIG_PATH environment variable (if set)
2. $XDG_CONFIG_HOME/payledger/ (~/.config/payledger/ fallback)
"""

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError


APP_NAME = "payledger"
SETTINGS_FILENAME = "settings.json"


class SettingsError(Exception):
    """Raised for unknown setting keys or invalid setting values."""
    pass


class Settings(BaseModel):
    """Known settings and their defaults."""

    model_config = ConfigDict(extra="forbid")

    default_output_format: Literal["text", "json", "yaml"] = "text"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    strict_scripts: bool = True


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. PAYLEDGER_CONFIG_PATH environment variable
    2. ~/.config/payledger/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("PAYLEDGER_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings.json as stored.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save settings to settings.json.

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_settings() -> Settings:
    """Load settings.json merged over the defaults.

    Raises:
        SettingsError: settings.json holds unknown keys or invalid values
    """
    try:
        return Settings(**load_settings())
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {get_settings_path()}:\n{e}") from e


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json.

    Known keys fall back to their built-in default when unset; `default`
    is returned for keys that are neither set nor known.
    """
    settings = load_settings()
    if key in settings:
        return settings[key]
    if key in Settings.model_fields:
        return Settings.model_fields[key].default
    return default


def set_setting(key: str, value: Any) -> Path:
    """Validate and store a setting value in settings.json.

    Raises:
        SettingsError: unknown key or invalid value

    Returns:
        Path to the saved settings file
    """
    if key not in Settings.model_fields:
        known = ", ".join(Settings.model_fields)
        raise SettingsError(f"Unknown setting '{key}'. Known settings: {known}")
    if key == "log_level" and isinstance(value, str):
        value = value.upper()

    settings = load_settings()
    try:
        validated = Settings(**{**settings, key: value})
    except ValidationError as e:
        raise SettingsError(f"Invalid value for '{key}': {value!r}\n{e}") from e

    settings[key] = getattr(validated, key)
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting from settings.json. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True
