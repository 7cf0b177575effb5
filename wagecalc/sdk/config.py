"""Configuration management for Wage Calc.

Configuration is split into two files:

1. settings.json - Machine-specific settings
   - schedules: path to a schedules.yaml (optional, if not colocated)

2. schedules.yaml - Raise schedule tables for the two proposals
   - anchor date, fallback rate, alliance/kp event lists
   - Absent file means the built-in reference tables are used

Config directory resolution:
1. WAGE_CALC_CONFIG_PATH environment variable (if set)
2. ~/.config/wage-calc/ (XDG_CONFIG_HOME fallback)

Schedules resolution:
1. settings.json "schedules" key (if set via CLI)
2. schedules.yaml in same config directory
"""

import json
import os
from pathlib import Path
from typing import Any


APP_NAME = "wage-calc"
SETTINGS_FILENAME = "settings.json"
SCHEDULES_FILENAME = "schedules.yaml"


class ConfigNotFoundError(Exception):
    """Raised when a configured file cannot be found."""
    pass


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Resolution order:
    1. WAGE_CALC_CONFIG_PATH environment variable
    2. ~/.config/wage-calc/ (XDG_CONFIG_HOME)

    Returns:
        Path to the configuration directory
    """
    # 1. Check environment variable
    env_path = os.environ.get("WAGE_CALC_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    # 2. Fall back to XDG config path
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(xdg_config_home) / APP_NAME


def get_settings_path() -> Path:
    """Get the path to settings.json (may not exist yet)."""
    return get_config_dir() / SETTINGS_FILENAME


def load_settings() -> dict:
    """Load machine-specific settings from settings.json.

    Returns:
        Settings dictionary (empty dict if file doesn't exist)
    """
    settings_file = get_settings_path()

    if not settings_file.exists():
        return {}

    with open(settings_file, "r") as f:
        return json.load(f)


def save_settings(settings: dict) -> Path:
    """Save machine-specific settings to settings.json.

    Args:
        settings: Settings dictionary to save

    Returns:
        Path to the saved settings file
    """
    config_dir = get_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)

    settings_file = config_dir / SETTINGS_FILENAME

    with open(settings_file, "w") as f:
        json.dump(settings, f, indent=2)

    return settings_file


def get_setting(key: str, default: Any = None) -> Any:
    """Get a setting value from settings.json."""
    settings = load_settings()
    return settings.get(key, default)


def set_setting(key: str, value: Any) -> Path:
    """Set a setting value in settings.json.

    Returns:
        Path to the saved settings file
    """
    settings = load_settings()
    settings[key] = value
    return save_settings(settings)


def clear_setting(key: str) -> bool:
    """Remove a setting from settings.json.

    Returns:
        True if the key was present and removed
    """
    settings = load_settings()
    if key not in settings:
        return False
    del settings[key]
    save_settings(settings)
    return True


def get_schedules_path(require_exists: bool = False) -> Path:
    """Get the path to the schedules.yaml file.

    Resolution order:
    1. settings.json "schedules" key (if set)
    2. schedules.yaml in config directory

    Args:
        require_exists: If True, raises ConfigNotFoundError if not found

    Returns:
        Path to schedules.yaml (may not exist unless require_exists)

    Raises:
        ConfigNotFoundError: If the configured path is missing, or if
            require_exists=True and no file was found
    """
    custom_path = get_setting("schedules")
    if custom_path:
        schedules_path = Path(custom_path).expanduser()
        if not schedules_path.exists():
            raise ConfigNotFoundError(
                f"Schedules file not found at configured path: {schedules_path}\n\n"
                f"Update with: wage-calc settings schedules-file /path/to/schedules.yaml\n"
                f"Or revert to defaults: wage-calc settings schedules-file --clear"
            )
        return schedules_path

    schedules_path = get_config_dir() / SCHEDULES_FILENAME
    if require_exists and not schedules_path.exists():
        raise ConfigNotFoundError(
            f"No schedules file found at {schedules_path}\n\n"
            f"Create one with: wage-calc schedules init"
        )
    return schedules_path
