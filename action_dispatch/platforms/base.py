"""Per-platform command construction for dispatchable actions."""

from __future__ import annotations

from typing import Mapping

from action_dispatch.actions import CANONICAL_KEYS, MEDIA_ACTIONS, normalize_key_name
from action_dispatch.errors import UnsupportedActionError


class PlatformActions:
    """Translate logical operations into one shell command line.

    Subclasses fill ``media_commands`` and ``key_map`` for every media action
    and canonical key. A value of ``None`` marks the entry as unsupported on
    that platform; a missing entry is a table defect and fails construction.
    """

    family = "unknown"
    label = "unknown"
    media_commands: Mapping[str, str | None] = {}
    key_map: Mapping[str, str | None] = {}

    def __init__(self) -> None:
        self.verify_tables()

    def verify_tables(self) -> None:
        missing_media = [name for name in MEDIA_ACTIONS if name not in self.media_commands]
        missing_keys = sorted(CANONICAL_KEYS - set(self.key_map))
        if missing_media or missing_keys:
            raise RuntimeError(
                f"{self.family} command table incomplete: "
                f"media={missing_media} keys={missing_keys}"
            )

    def open_path_command(self, path: str) -> str:
        raise NotImplementedError

    def media_command(self, action: str) -> str:
        command = self.media_commands.get(str(action).strip().lower())
        if not command:
            raise UnsupportedActionError("Unsupported platform or action")
        return command

    def key_command(self, key: str) -> str:
        name = normalize_key_name(key)
        identifier = self.key_map.get(name) if name in CANONICAL_KEYS else None
        if identifier is None:
            raise UnsupportedActionError(f"Unsupported key: {key} for {self.label}")
        return self.send_key_command(identifier)

    def send_key_command(self, identifier: str) -> str:
        raise NotImplementedError


class UnsupportedPlatform(PlatformActions):
    """Stand-in for OS families with no command tables at all."""

    def __init__(self, family: str) -> None:
        self.family = family
        self.label = family

    def open_path_command(self, path: str) -> str:
        raise UnsupportedActionError(f"Unsupported platform: {self.label}")

    def media_command(self, action: str) -> str:
        raise UnsupportedActionError("Unsupported platform or action")

    def key_command(self, key: str) -> str:
        raise UnsupportedActionError(f"Unsupported key: {key} for {self.label}")


def posix_quote(value: str) -> str:
    """Wrap ``value`` in double quotes for sh, escaping what sh expands there."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("$", "\\$")
        .replace("`", "\\`")
    )
    return f'"{escaped}"'
