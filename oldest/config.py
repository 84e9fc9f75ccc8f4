"""Persistent JSON config readers.

Holds the default selection mode and verbose-error preference. The file is
edited by hand; this tool only reads it. Malformed or missing config falls
back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "oldest"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

MODES = ("oldest", "newest")


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


def load_default_mode() -> str | None:
    """Return the persisted default mode, or ``None`` when unset or invalid."""
    value = load_config().get("default_mode")
    return value if value in MODES else None


def load_verbose() -> bool:
    """Return persisted verbose preference.

    Only explicit boolean values are accepted; any other type falls back to
    ``False``.
    """
    value = load_config().get("verbose")
    return bool(value) if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "MODES",
    "load_config",
    "load_default_mode",
    "load_verbose",
]
