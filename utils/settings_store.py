"""In-memory cache for deck settings."""

from __future__ import annotations

import os
import threading
from typing import Any

from utils.file_utils import load_json
from utils.log_utils import tprint, warn

DEFAULT_SETTINGS_PATH = "config/app_settings.json"

_lock = threading.Lock()
_settings_cache: dict[str, Any] = {}
_loaded = False


def settings_path() -> str:
    return os.getenv("WEBDECK_SETTINGS", DEFAULT_SETTINGS_PATH)


def refresh_settings(path: str | None = None) -> dict[str, Any]:
    """Reload settings from disk and replace the cache."""
    global _loaded
    data = load_json(path or settings_path())
    if not isinstance(data, dict):
        data = {}
    with _lock:
        _settings_cache.clear()
        _settings_cache.update(data)
        _loaded = True
        return dict(_settings_cache)


def get_settings() -> dict[str, Any]:
    """Return a copy of the cached settings."""
    if not _loaded:
        return refresh_settings()
    with _lock:
        return dict(_settings_cache)


def is_deep_logging() -> bool:
    """Return True when log_level requests deep tracing."""
    level = str(get_settings().get("log_level", "")).upper()
    return level in {"DEEP"}


def deep_log(message: str) -> None:
    if is_deep_logging():
        tprint(message)


def command_timeout() -> float | None:
    """Timeout for spawned commands; ``None`` (the default) waits forever."""
    raw = get_settings().get("command_timeout_secs")
    if raw in (None, "", 0):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        warn("SETTINGS", f"ignoring non-numeric command_timeout_secs={raw!r}")
        return None
    return value if value > 0 else None
