"""macOS commands built on open and AppleScript key codes."""

from __future__ import annotations

from action_dispatch.platforms.base import PlatformActions, posix_quote

_SYSTEM_EVENTS = 'tell application "System Events" to'

MAC_KEY_CODES = {
    "F13": "105",
    "F14": "107",
    "F15": "113",
    "F16": "106",
    "F17": "64",
    "F18": "79",
    "F19": "80",
    "MEDIA_PLAY_PAUSE": "100",
    "MEDIA_NEXT_TRACK": "101",
    "MEDIA_PREV_TRACK": "98",
    "VOLUME_UP": "111",
    "VOLUME_DOWN": "103",
    "VOLUME_MUTE": "102",
    "HOME": "115",
    "END": "119",
    "PAGEUP": "116",
    "PAGEDOWN": "121",
    "DELETE": "117",
    "INSERT": "114",
    "LWIN": "55",
    "RWIN": "54",
    "LALT": "58",
    "RALT": "61",
    "LCONTROL": "59",
    "RCONTROL": "62",
    "LSHIFT": "56",
    "RSHIFT": "60",
}


def _osascript(statement: str) -> str:
    return f"osascript -e '{_SYSTEM_EVENTS} {statement}'"


class MacOSPlatform(PlatformActions):
    family = "Darwin"
    label = "macOS"
    media_commands = {
        "play_pause": _osascript("key code 16 using {command down}"),
        "next": _osascript("key code 17 using {command down}"),
        "previous": _osascript("key code 18 using {command down}"),
    }
    key_map = MAC_KEY_CODES

    def open_path_command(self, path: str) -> str:
        return f"open {posix_quote(path)}"

    def send_key_command(self, identifier: str) -> str:
        return _osascript(f"key code {identifier}")
