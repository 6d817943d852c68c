from action_dispatch.platforms.base import PlatformActions, UnsupportedPlatform
from action_dispatch.platforms.linux import LinuxPlatform
from action_dispatch.platforms.macos import MacOSPlatform
from action_dispatch.platforms.router import PLATFORMS, select_platform
from action_dispatch.platforms.windows import WindowsPlatform

__all__ = [
    "PLATFORMS",
    "LinuxPlatform",
    "MacOSPlatform",
    "PlatformActions",
    "UnsupportedPlatform",
    "WindowsPlatform",
    "select_platform",
]
