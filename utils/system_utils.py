"""Operating system detection helpers."""

from __future__ import annotations

import platform


def normalize_os_name(value: str | None) -> str | None:
    """Map loose OS names onto ``Darwin``/``Windows``/``Linux``."""
    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    lower = text.lower()
    if lower in {"darwin", "mac", "macos", "mac os", "mac os x", "osx"}:
        return "Darwin"
    if lower in {"windows", "win32", "win", "nt"}:
        return "Windows"
    if lower in {"linux", "gnu/linux"} or lower.startswith("linux"):
        return "Linux"
    return text


def current_os() -> str:
    return normalize_os_name(platform.system()) or "unknown"
