"""Windows commands built on ``start`` and WScript.Shell SendKeys."""

from __future__ import annotations

from action_dispatch.errors import UnsupportedActionError
from action_dispatch.platforms.base import PlatformActions

# SendKeys arguments: brace tokens for named keys, [char] virtual key codes
# for the media/volume keys. SendKeys cannot press F17+ or a bare modifier.
WINDOWS_SENDKEYS = {
    "F13": "'{F13}'",
    "F14": "'{F14}'",
    "F15": "'{F15}'",
    "F16": "'{F16}'",
    "F17": None,
    "F18": None,
    "F19": None,
    "MEDIA_PLAY_PAUSE": "[char]179",
    "MEDIA_NEXT_TRACK": "[char]176",
    "MEDIA_PREV_TRACK": "[char]177",
    "VOLUME_UP": "[char]175",
    "VOLUME_DOWN": "[char]174",
    "VOLUME_MUTE": "[char]173",
    "HOME": "'{HOME}'",
    "END": "'{END}'",
    "PAGEUP": "'{PGUP}'",
    "PAGEDOWN": "'{PGDN}'",
    "DELETE": "'{DELETE}'",
    "INSERT": "'{INSERT}'",
    "LWIN": None,
    "RWIN": None,
    "LALT": None,
    "RALT": None,
    "LCONTROL": None,
    "RCONTROL": None,
    "LSHIFT": None,
    "RSHIFT": None,
}


def _sendkeys(argument: str) -> str:
    return (
        'powershell -NoProfile -Command '
        f'"(New-Object -ComObject WScript.Shell).SendKeys({argument})"'
    )


class WindowsPlatform(PlatformActions):
    family = "Windows"
    label = "Windows"
    media_commands = {
        "play_pause": _sendkeys("[char]179"),
        "next": _sendkeys("[char]176"),
        "previous": _sendkeys("[char]177"),
    }
    key_map = WINDOWS_SENDKEYS

    def open_path_command(self, path: str) -> str:
        if '"' in path:
            raise UnsupportedActionError(f"Unsupported path for Windows: {path}")
        return f'start "" "{path}"'

    def send_key_command(self, identifier: str) -> str:
        return _sendkeys(identifier)
