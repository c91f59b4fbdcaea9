"""
Helper utilities for the Gerard launcher.

Provides:
- Settings loading (TOML merged over defaults)
- Launcher shutdown after an app is launched
- User stylesheet loading
"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import toml
from loguru import logger

DEFAULT_SETTINGS = {
    "launcher": {
        "close_delay_ms": 0,
        "width": 600,
        "height": 300,
    },
    "search": {
        "matcher": "subsequence",
        "fuzzy_threshold": 50,
    },
    "applications": {
        "include_hidden": False,
    },
}


def config_dir() -> Path:
    """
    Get the Gerard config directory ($XDG_CONFIG_HOME/gerard).

    Returns:
        Path, which may not exist yet
    """
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / "gerard"


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load launcher settings from TOML file.

    Args:
        settings_path: File to read, defaults to config_dir()/settings.toml

    Returns:
        Dictionary containing settings with defaults applied

    Example settings.toml:
        [launcher]
        close_delay_ms = 0

        [search]
        matcher = "weighted"
        fuzzy_threshold = 60
    """
    if settings_path is None:
        settings_path = config_dir() / "settings.toml"

    if not settings_path.exists():
        logger.debug(f"Settings file not found at {settings_path}, using defaults")
        return _deep_merge(DEFAULT_SETTINGS, {})

    try:
        loaded = toml.load(settings_path)
    except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return _deep_merge(DEFAULT_SETTINGS, {})

    # A section given as a scalar (e.g. `launcher = 1`) would replace the
    # whole defaults table
    for section in DEFAULT_SETTINGS:
        if section in loaded and not isinstance(loaded[section], dict):
            logger.warning(f"Ignoring [{section}] in {settings_path}: expected a table")
            del loaded[section]

    return _deep_merge(DEFAULT_SETTINGS, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = {
        key: _deep_merge(value, {}) if isinstance(value, dict) else value
        for key, value in base.items()
    }

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def exit_launcher(close_delay_ms: int = 0) -> None:
    """
    Quit the launcher, optionally after a short delay.

    Args:
        close_delay_ms: Milliseconds to wait before quitting (0 = now)
    """
    from ignis.app import IgnisApp

    app = IgnisApp.get_default()

    if close_delay_ms <= 0:
        app.quit()
        return

    from gi.repository import GLib

    def _quit() -> bool:
        app.quit()
        return False  # Don't repeat

    GLib.timeout_add(close_delay_ms, _quit)


def load_stylesheet(app, stylesheet: Optional[Path] = None) -> bool:
    """
    Apply the user stylesheet if there is one.

    Args:
        app: IgnisApp instance
        stylesheet: CSS file, defaults to config_dir()/style.css

    Returns:
        True if a stylesheet was applied
    """
    if stylesheet is None:
        stylesheet = config_dir() / "style.css"

    if not stylesheet.exists():
        return False

    try:
        app.apply_css(str(stylesheet))
    except Exception as e:
        logger.warning(f"Could not load stylesheet {stylesheet}: {e}")
        return False

    logger.debug(f"Applied stylesheet {stylesheet}")
    return True
