"""Optional user preferences read from a JSON config file.

The browser never writes this file. Missing or malformed config falls back to
defaults without raising.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..ui_theme import normalize_theme_name

APP_NAME = "millerview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Return the configured UI theme name, or ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    if not stripped:
        return None
    return normalize_theme_name(stripped)


def load_no_color() -> bool:
    """Return the configured no-color preference; only real booleans count."""
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_FILENAME",
    "CONFIG_PATH",
    "load_config",
    "load_theme_name",
    "load_no_color",
]
