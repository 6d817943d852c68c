"""Linux commands built on xdg-open and xdotool."""

from __future__ import annotations

from action_dispatch.platforms.base import PlatformActions, posix_quote

LINUX_KEYSYMS = {
    "F13": "F13",
    "F14": "F14",
    "F15": "F15",
    "F16": "F16",
    "F17": "F17",
    "F18": "F18",
    "F19": "F19",
    "MEDIA_PLAY_PAUSE": "XF86AudioPlay",
    "MEDIA_NEXT_TRACK": "XF86AudioNext",
    "MEDIA_PREV_TRACK": "XF86AudioPrev",
    "VOLUME_UP": "XF86AudioRaiseVolume",
    "VOLUME_DOWN": "XF86AudioLowerVolume",
    "VOLUME_MUTE": "XF86AudioMute",
    "HOME": "Home",
    "END": "End",
    "PAGEUP": "Prior",
    "PAGEDOWN": "Next",
    "DELETE": "Delete",
    "INSERT": "Insert",
    "LWIN": "Super_L",
    "RWIN": "Super_R",
    "LALT": "Alt_L",
    "RALT": "Alt_R",
    "LCONTROL": "Control_L",
    "RCONTROL": "Control_R",
    "LSHIFT": "Shift_L",
    "RSHIFT": "Shift_R",
}


class LinuxPlatform(PlatformActions):
    family = "Linux"
    label = "Linux"
    media_commands = {
        "play_pause": "xdotool key XF86AudioPlay",
        "next": "xdotool key XF86AudioNext",
        "previous": "xdotool key XF86AudioPrev",
    }
    key_map = LINUX_KEYSYMS

    def open_path_command(self, path: str) -> str:
        return f"xdg-open {posix_quote(path)}"

    def send_key_command(self, identifier: str) -> str:
        return f"xdotool key {identifier}"
