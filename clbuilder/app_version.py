"""Three-part application version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass

_U32_MAX = 0xFFFFFFFF
_NUMBER = re.compile(r"\+?[0-9]+")


class AppVersionParseError(ValueError):
    """A version string could not be read."""


def _parse_part(text: str) -> int:
    if not _NUMBER.fullmatch(text):
        raise AppVersionParseError(f"invalid version number {text!r}") from ValueError(text)
    value = int(text)
    if value > _U32_MAX:
        raise AppVersionParseError(f"version number {text!r} is too large") from ValueError(text)
    return value


@dataclass(frozen=True, order=True)
class AppVersion:
    """A major.minor.patch version, ordered part by part."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            value = getattr(self, name)
            if not 0 <= value <= _U32_MAX:
                raise ValueError(f"{name} out of range: {value}")

    @classmethod
    def parse(cls, text: str) -> AppVersion:
        """Read "major.minor.patch"; any further dot-separated parts are ignored."""
        parts = text.split(".")
        if len(parts) < 3:
            raise AppVersionParseError(f"version {text!r} needs three parts")
        major, minor, patch = (_parse_part(part) for part in parts[:3])
        return cls(major, minor, patch)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"