"""Keys of keyword arguments, such as "--name"."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from clbuilder.error import ArgParseError, ParseError


@dataclass(frozen=True, eq=False)
class ArgKey:
    """A keyword argument key; compares equal to its text."""

    value: str

    @staticmethod
    def is_arg_key(value: str) -> bool:
        return value.startswith("-")

    @classmethod
    def checked(cls, value: str) -> ArgKey:
        """Make a key, raising if the text does not start with a dash."""
        if not cls.is_arg_key(value):
            raise ArgParseError(None, ParseError.INVALID_KEY)
        return cls(value)

    @classmethod
    def from_cmd(cls, arg: str) -> Tuple[ArgKey, Optional[str]]:
        """Split a command-line word into its key and the value after the first '='."""
        if not cls.is_arg_key(arg):
            raise ArgParseError(None, ParseError.INVALID_KEY)
        key, sep, value = arg.partition("=")
        return cls(key), (value if sep else None)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ArgKey):
            return self.value == other.value
        if isinstance(other, str):
            return self.value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return self.value