"""Timestamped console logging for the deck server."""

from __future__ import annotations

import builtins
import time
from typing import Any


_LEVELS = {"DEEP", "DEBUG", "INFO", "WARN", "ERROR"}
_DEFAULT_SYSTEM = "DECK"


def _split_tags(message: str) -> tuple[list[str], str]:
    tags: list[str] = []
    remaining = message.lstrip()
    while remaining.startswith("["):
        end = remaining.find("]")
        if end == -1:
            break
        tag = remaining[1:end].strip()
        if not tag:
            break
        tags.append(tag)
        remaining = remaining[end + 1 :].lstrip()
    return tags, remaining


def format_message(message: str) -> str:
    """Reorder leading ``[TAG]`` groups into ``[SYSTEM][VARIANT] text``."""
    tags, remaining = _split_tags(message)
    if not tags:
        return f"[{_DEFAULT_SYSTEM}] {remaining}" if remaining else f"[{_DEFAULT_SYSTEM}]"
    first = tags[0].upper()
    if first in _LEVELS:
        variant: str | None = first
        system = tags[1] if len(tags) > 1 else _DEFAULT_SYSTEM
        extra_tags = tags[2:]
    else:
        system = tags[0]
        variant = tags[1] if len(tags) > 1 else None
        extra_tags = tags[2:]
    extra = f" [{' '.join(extra_tags)}]" if extra_tags else ""
    suffix = f" {remaining}" if remaining else ""
    head = f"[{system}][{variant}]" if variant else f"[{system}]"
    return f"{head}{extra}{suffix}"


def tprint(*args: Any, **kwargs: Any) -> None:
    """Print with a timestamp prefix and normalized tag order."""
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    message = " ".join(str(arg) for arg in args)
    kwargs.setdefault("flush", True)
    builtins.print(f"[{timestamp}]{format_message(message)}", **kwargs)


def log(system: str, message: str, variant: str | None = None) -> None:
    """Log one line for ``system``, e.g. ``log("DISPATCH", "media ok")``."""
    if variant:
        tprint(f"[{system}][{variant}] {message}")
    else:
        tprint(f"[{system}] {message}")


def warn(system: str, message: str) -> None:
    log(system, message, variant="WARN")


def shorten(text: str, limit: int = 160) -> str:
    """Collapse a command line onto one line and cap its length for logs."""
    flat = " ".join(str(text).split())
    if len(flat) <= limit:
        return flat
    return flat[: max(0, limit - 3)] + "..."
