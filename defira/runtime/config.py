"""Persistent JSON config helpers.

Stores the secrets root, reserved secret extension, GnuPG settings, log
level, syntax style, and UI theme. All access is defensive: malformed or
missing config falls back to defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..tree_model import DEFAULT_SECRET_EXTENSION

APP_NAME = "defira"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_ROOT = Path.home() / "ntech" / "mystiko"
DEFAULT_GPG_BINARY = "gpg"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_STYLE = "monokai"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def _load_nonempty_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_root() -> Path:
    """Return the configured secrets root, expanding ``~``."""
    value = _load_nonempty_string("root")
    if value is None:
        return DEFAULT_ROOT
    return Path(value).expanduser()


def save_settings(values: dict[str, object]) -> None:
    """Merge ``values`` into the persisted config, skipping ``None`` entries."""
    config = load_config()
    for key, value in values.items():
        if value is None:
            continue
        config[key] = str(value) if isinstance(value, Path) else value
    save_config(config)


def load_secret_extension() -> str:
    """Return the reserved secret suffix; it must start with a dot."""
    value = _load_nonempty_string("secret_extension")
    if value is None or not value.startswith(".") or len(value) < 2:
        return DEFAULT_SECRET_EXTENSION
    return value


def load_gpg_binary() -> str:
    return _load_nonempty_string("gpg_binary") or DEFAULT_GPG_BINARY


def load_gpg_homedir() -> Path | None:
    """Return an explicit GnuPG home directory, or ``None`` for gpg's default."""
    value = _load_nonempty_string("gpg_homedir")
    return Path(value).expanduser() if value is not None else None


def load_log_level() -> str:
    value = _load_nonempty_string("log_level")
    if value is None or value.upper() not in LOG_LEVELS:
        return DEFAULT_LOG_LEVEL
    return value.upper()


def load_style() -> str:
    return _load_nonempty_string("style") or DEFAULT_STYLE


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_nonempty_string("theme")

