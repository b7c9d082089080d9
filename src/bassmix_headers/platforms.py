"""
Target platforms and the BASSmix compatibility table.

Each platform maps to the first release that was shipped for it. The
table is vendor packaging history, not an algorithm:

  - Windows: every release
  - macOS:   every release (2.3 was 32-bit only, 2.4 is the first x64 build)
  - Linux:   2.4 onwards (the Linux port arrived with BASS 2.4)
"""

import platform as sys_platform
from enum import Enum
from typing import Optional, Union

from bassmix_headers.errors import UnsupportedPlatformError
from bassmix_headers.version import V2_3, V2_4, Version, coerce_version


class Platform(Enum):
    """Target operating system for a rendered header."""

    WINDOWS = "windows"
    LINUX = "linux"
    DARWIN = "darwin"

    def supported_by(self, version: Union[Version, str]) -> bool:
        return is_supported(self, version)

    @classmethod
    def current(cls) -> Optional["Platform"]:
        """Platform of the running interpreter, or None if unrecognised."""
        return _SYSTEM_NAMES.get(sys_platform.system())


# Minimum release shipped for each platform
COMPATIBILITY_TABLE: dict[Platform, Version] = {
    Platform.WINDOWS: V2_3,
    Platform.LINUX: V2_4,
    Platform.DARWIN: V2_3,
}

# platform.system() values
_SYSTEM_NAMES = {
    "Windows": Platform.WINDOWS,
    "Linux": Platform.LINUX,
    "Darwin": Platform.DARWIN,
}

_ALIASES = {
    "win32": Platform.WINDOWS,
    "win": Platform.WINDOWS,
    "macos": Platform.DARWIN,
    "osx": Platform.DARWIN,
}


def is_supported(
    platform: Optional[Platform], version: Union[Version, str]
) -> bool:
    """
    Check whether a version was ever shipped for a platform.

    Args:
        platform: Target platform, or None when no platform is specified.
        version: Version or version string.

    Returns:
        True if supported. An unspecified platform is always supported.
    """
    version = coerce_version(version)
    if platform is None:
        return True
    return version.gte(COMPATIBILITY_TABLE[platform])


def check_supported(
    platform: Optional[Platform], version: Union[Version, str]
) -> None:
    """
    Raise if a platform/version pair is not offered by the vendor.

    Raises:
        UnsupportedPlatformError: If the pair is not in the table.
    """
    version = coerce_version(version)
    if platform is not None and not is_supported(platform, version):
        raise UnsupportedPlatformError(
            f"Platform [{platform.name}] not supported by version [{version}]"
        )


def get_platform(name: str) -> Platform:
    """
    Get a platform by name.

    Args:
        name: Platform identifier (e.g., 'linux', 'windows', 'macos').

    Returns:
        Platform member.

    Raises:
        ValueError: If platform name is not recognized.
    """
    key = name.strip().lower()
    for member in Platform:
        if member.value == key:
            return member
    if key in _ALIASES:
        return _ALIASES[key]
    available = ", ".join(list_platforms())
    raise ValueError(f"Unknown platform: '{name}'. Available: {available}")


def list_platforms() -> list[str]:
    """
    List all platform names.

    Returns:
        Sorted list of platform identifiers.
    """
    return sorted(member.value for member in Platform)


__all__ = [
    "Platform",
    "COMPATIBILITY_TABLE",
    "is_supported",
    "check_supported",
    "get_platform",
    "list_platforms",
]
