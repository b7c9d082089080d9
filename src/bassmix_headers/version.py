"""
Known BASSmix releases.

A Version is an immutable tuple of numeric components. Ordering and
equality use the numeric tuple, so "2.10" sorts after "2.4".
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from bassmix_headers.errors import InvalidFormatError

if TYPE_CHECKING:
    from bassmix_headers.platforms import Platform


@dataclass(frozen=True, order=True)
class Version:
    """A BASSmix release identifier, e.g. ``Version(2, 4)``."""

    components: tuple[int, ...]

    # Up to four dot-separated numeric components: 2, 2.4, 2.4.17, 2.4.17.1
    PATTERN = re.compile(r"^[0-9]+(?:\.[0-9]+){0,3}$")

    def __init__(self, *components: int):
        if not components:
            raise InvalidFormatError("Version needs at least one component")
        if any(type(c) is not int or c < 0 for c in components):
            raise InvalidFormatError(
                f"Version components must be non-negative integers: {components!r}"
            )
        object.__setattr__(self, "components", tuple(components))

    @classmethod
    def parse(cls, text: str) -> "Version":
        """
        Parse a version string.

        Args:
            text: Version text such as "2.4".

        Returns:
            Parsed Version.

        Raises:
            InvalidFormatError: If text is not a dotted numeric version.
        """
        if not isinstance(text, str) or not cls.PATTERN.match(text.strip()):
            raise InvalidFormatError(f"Invalid version format: {text!r}")
        return cls(*(int(part) for part in text.strip().split(".")))

    def to_string(self) -> str:
        return ".".join(str(c) for c in self.components)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Version({self.to_string()!r})"

    def compare(self, other: Union["Version", str]) -> int:
        """Return -1, 0 or 1 comparing numeric components with ``other``."""
        other = coerce_version(other)
        if self.components < other.components:
            return -1
        if self.components > other.components:
            return 1
        return 0

    def lt(self, other: Union["Version", str]) -> bool:
        return self.compare(other) < 0

    def gte(self, other: Union["Version", str]) -> bool:
        return self.compare(other) >= 0

    def is_known(self) -> bool:
        """True if this version is one of the catalog releases."""
        return self in KNOWN_VERSIONS

    def archive_tag(self) -> str:
        """Digits used in vendor archive names ("2.4" -> "24")."""
        return "".join(str(c) for c in self.components)

    def bass_version_code(self) -> str:
        """
        Value of the BASSVERSION macro for this release.

        BASS encodes major/minor as a 16-bit hex number (2.4 -> 0x204).
        """
        major = self.components[0]
        minor = self.components[1] if len(self.components) > 1 else 0
        return f"0x{(major << 8) | minor:x}"

    def supported_on(self, platform: Optional["Platform"]) -> bool:
        from bassmix_headers.platforms import is_supported

        return is_supported(platform, self)


def coerce_version(value: Union[Version, str]) -> Version:
    """
    Accept either a Version or a version string.

    Raises:
        InvalidFormatError: If a string does not parse.
    """
    if isinstance(value, Version):
        return value
    return Version.parse(value)


V2_3 = Version(2, 3)
V2_4 = Version(2, 4)

# Ascending
KNOWN_VERSIONS: tuple[Version, ...] = (V2_3, V2_4)

LATEST = KNOWN_VERSIONS[-1]
