"""Pick the platform command tables once at startup."""

from __future__ import annotations

from action_dispatch.platforms.base import PlatformActions, UnsupportedPlatform
from action_dispatch.platforms.linux import LinuxPlatform
from action_dispatch.platforms.macos import MacOSPlatform
from action_dispatch.platforms.windows import WindowsPlatform
from utils.log_utils import warn
from utils.system_utils import current_os, normalize_os_name

PLATFORMS: dict[str, type[PlatformActions]] = {
    "Darwin": MacOSPlatform,
    "Windows": WindowsPlatform,
    "Linux": LinuxPlatform,
}


def select_platform(os_name: str | None = None) -> PlatformActions:
    """Return the platform for ``os_name``, detecting the host OS when omitted."""
    family = normalize_os_name(os_name) or current_os()
    platform_cls = PLATFORMS.get(family)
    if platform_cls is None:
        warn("PLATFORM", f"no command tables for {family}; every action will be rejected")
        return UnsupportedPlatform(family)
    return platform_cls()
