"""Persistent JSON config helpers.

Stores the UI theme, key poll interval, and logging preferences. Items are
never persisted. All access is defensive: malformed or missing config falls
back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import available_theme_names

APP_NAME = "todotabs"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_POLL_INTERVAL_MS = 250
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so a read-only config dir never breaks the
    session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> bool:
    """Persist a known theme name; returns ``False`` and saves nothing otherwise."""
    candidate = str(theme_name).strip().lower()
    if candidate not in available_theme_names():
        return False
    config = load_config()
    config["theme"] = candidate
    save_config(config)
    return True


def load_poll_interval_ms() -> int:
    """Return the key poll interval; booleans and non-positive values are rejected."""
    value = load_config().get("poll_interval_ms")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_POLL_INTERVAL_MS
    return value


def load_log_level() -> str:
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    level = value.strip().upper()
    return level if level in LOG_LEVELS else DEFAULT_LOG_LEVEL


def load_log_file() -> Path | None:
    value = load_config().get("log_file")
    if not isinstance(value, str) or not value.strip():
        return None
    return Path(value.strip()).expanduser()
