"""Configuration management for NYC Tax.

Configuration is split into two kinds of file:

1. settings.json - Machine-specific CLI preferences
   - filing: default filing status ('single' or 'married')
   - preset: default preset for 'budget'
   - output_format: 'text' or 'json'

2. Household profile YAML - a user's own income, deductions and spending,
   shaped like an entry in presets.yaml. Passed explicitly (--profile).

Config directory resolution:
1. NYC_TAX_CONFIG_PATH environment variable (if set)
2. ~/.config/nyc-tax/ (XDG_CONFIG_HOME fallback)

The calculation engine never reads configuration; only the CLI and MCP
server do.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from .schemas import Preset

logger = logging.getLogger(__name__)

APP_NAME = "nyc-tax"
SETTINGS_FILENAME = "settings.json"

# Allowed settings and their allowed values (None = any preset name)
SETTINGS_SCHEMA = {
    "filing": ("single", "married"),
    "preset": None,
    "output_format": ("text", "json"),
}


class ProfileNotFoundError(Exception):
    """Raised when a household profile file does not exist."""
    pass


class InvalidSettingError(ValueError):
    """Raised when a setting key or value is not allowed."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. NYC_TAX_CONFIG_PATH environment variable
    2. ~/.config/nyc-tax/ (XDG_CONFIG_HOME)
    """
    env_path = os.environ.get("NYC_TAX_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load settings from settings.json.

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

    logger.debug(f"Saved settings to {settings_file}")
    return settings_file


def validate_setting(key: str, value: Any) -> None:
    """Check a setting key and value against SETTINGS_SCHEMA.

    Raises:
        InvalidSettingError: If the key is unknown or the value not allowed
    """
    if key not in SETTINGS_SCHEMA:
        raise InvalidSettingError(
            f"Unknown setting: {key}. Available: {', '.join(SETTINGS_SCHEMA)}"
        )

    allowed = SETTINGS_SCHEMA[key]
    if key == "preset":
        from .presets import PRESETS
        allowed = tuple(PRESETS)

    if value not in allowed:
        raise InvalidSettingError(
            f"Invalid value for {key}: {value}. Allowed: {', '.join(allowed)}"
        )


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json, or default."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Validate and set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    validate_setting(key, value)
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def unset_setting(key: str) -> bool:
    """Remove a setting. Returns True if it was set."""
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def load_household_profile(path: Path) -> Dict[str, Any]:
    """Load a household profile YAML (same shape as a preset).

    Raises:
        ProfileNotFoundError: If the file does not exist
        pydantic.ValidationError: If the profile is malformed
    """
    path = Path(path).expanduser()
    if not path.exists():
        raise ProfileNotFoundError(f"Profile not found: {path}")

    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    logger.debug(f"Loaded household profile from {path}")
    return Preset.model_validate(raw).model_dump(exclude_none=True)
