"""Persistent JSON config helpers.

Stores the grep filter set, directory-browser limits, and key overrides.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "scopenav"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_DIR_MAX_DEPTH = 3
DEFAULT_DIR_EXCLUDES: tuple[str, ...] = (".git", "node_modules", "Library", ".cache", ".Trash")


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

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks a picker session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.debug("could not write %s: %s", CONFIG_PATH, exc)


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def load_grep_filters() -> tuple[list[str], list[str]]:
    """Return persisted ``(include, exclude)`` glob lists."""
    value = load_config().get("grep_filters")
    if not isinstance(value, dict):
        return [], []
    return _string_list(value.get("include")), _string_list(value.get("exclude"))


def save_grep_filters(include: list[str], exclude: list[str]) -> None:
    config = load_config()
    config["grep_filters"] = {"include": list(include), "exclude": list(exclude)}
    save_config(config)


def load_dir_max_depth() -> int:
    """Directory-browser depth limit; booleans and non-positive values are ignored."""
    value = load_config().get("dir_max_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return DEFAULT_DIR_MAX_DEPTH
    return value


def load_dir_excludes() -> tuple[str, ...]:
    value = load_config().get("dir_excludes")
    if not isinstance(value, list):
        return DEFAULT_DIR_EXCLUDES
    return tuple(_string_list(value))


def load_key_overrides() -> dict[str, str]:
    """Return ``{key token: command name}`` overrides with non-string pairs dropped."""
    value = load_config().get("key_bindings")
    if not isinstance(value, dict):
        return {}
    return {
        key: command
        for key, command in value.items()
        if isinstance(key, str) and key and isinstance(command, str) and command
    }
