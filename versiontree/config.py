"""Persistent JSON config helpers.

Stores the UI theme, log level, and key-binding overrides.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "versiontree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    return value if isinstance(value, str) and value else None


def save_theme_name(name: str) -> None:
    config = load_config()
    config["theme"] = name
    save_config(config)


def load_log_level() -> str:
    """Return the configured logging level name, defaulting to ``WARNING``."""
    value = load_config().get("log_level")
    if isinstance(value, str) and value.upper() in LOG_LEVELS:
        return value.upper()
    return DEFAULT_LOG_LEVEL


def load_key_bindings() -> dict[str, tuple[str, ...]]:
    """Load ``{action: [keys]}`` overrides.

    Non-list values and non-string or empty keys are dropped. Unknown
    action names are kept here and ignored by the router.
    """
    value = load_config().get("key_bindings")
    if not isinstance(value, dict):
        return {}

    bindings: dict[str, tuple[str, ...]] = {}
    for action, keys in value.items():
        if not isinstance(action, str) or not isinstance(keys, list):
            continue
        valid_keys = tuple(key for key in keys if isinstance(key, str) and key)
        if valid_keys:
            bindings[action] = valid_keys
    return bindings


def save_key_bindings(bindings: dict[str, tuple[str, ...]]) -> None:
    config = load_config()
    config["key_bindings"] = {action: list(keys) for action, keys in bindings.items()}
    save_config(config)
