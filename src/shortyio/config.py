# -*- coding: utf-8 -*-
"""
src/shortyio/config.py

Module for handling the persisted application settings.

Shortyio keeps exactly two settings: the short.io API key and an optional
default domain. They are stored as a small JSON object in the user's
configuration directory, loaded once at startup and rewritten only when the
user presses "Save" in the settings dialog.
"""

import json
import logging
import os
import platform
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# --- Constants ---
APP_NAME = "shortyio"
APP_QUALIFIER = "com"
APP_ORGANIZATION = "shortyio"
CONFIG_FILENAME = "config.json"


def get_config_dir() -> Path:
    """
    Gets the application's configuration directory in a cross-platform way.

    - Windows: %APPDATA%/shortyio/shortyio/config
    - macOS: ~/Library/Application Support/com.shortyio.shortyio
    - Linux: $XDG_CONFIG_HOME/shortyio (defaults to ~/.config/shortyio)

    The directory is not created here; `save_settings` creates it on demand.

    Returns:
        Path: A Path object to the configuration directory.
    """
    system = platform.system()
    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
        return base / APP_ORGANIZATION / APP_NAME / "config"
    if system == "Darwin":  # macOS
        return (Path.home() / "Library" / "Application Support"
                / f"{APP_QUALIFIER}.{APP_ORGANIZATION}.{APP_NAME}")
    # Linux and other Unix-like
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config_home) if xdg_config_home else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """The full path to the settings file."""
    return get_config_dir() / CONFIG_FILENAME


@dataclass
class Settings:
    """The user's short.io credentials and default domain."""

    api_key: str = ""
    domain: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Builds settings from a decoded JSON object, ignoring unknown keys."""
        values = {}
        for key in ("api_key", "domain"):
            value = data.get(key, "")
            values[key] = value if isinstance(value, str) else ""
        return cls(**values)


def load_settings(path: Optional[Path] = None) -> Settings:
    """
    Loads settings from disk.

    A missing, unreadable or malformed file is not an error: the application
    simply starts with empty settings.

    Args:
        path (Path, optional): Settings file. Defaults to `get_config_path()`.

    Returns:
        Settings: The loaded settings, or empty defaults.
    """
    path = path or get_config_path()
    if not path.exists():
        logger.info(f"No settings file at {path}; starting with defaults.")
        return Settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read settings from {path}: {e}")
        return Settings()

    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {path}: expected a JSON object.")
        return Settings()

    logger.info(f"Settings loaded from {path}")
    return Settings.from_dict(data)


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """
    Writes settings to disk, overwriting any previous file.

    Args:
        settings (Settings): The settings to persist.
        path (Path, optional): Settings file. Defaults to `get_config_path()`.

    Returns:
        Path: The file that was written.

    Raises:
        OSError: If the directory or the file cannot be written.
    """
    path = path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2)
    logger.info(f"Settings saved to {path}")
    return path


# --- Example Usage (for testing this module directly) ---
if __name__ == '__main__':
    print(f"--- {APP_NAME} Configuration ---")
    print(f"Config directory: {get_config_dir()}")
    print(f"Config file path: {get_config_path()}")

    current = load_settings()
    print(f"API key configured: {'yes' if current.api_key else 'no'}")
    print(f"Default domain: {current.domain or '(none)'}")
