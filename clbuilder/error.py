"""Errors reported while parsing command-line arguments."""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ParseError(Enum):
    """The kind of problem found in an argument."""

    VALUE_REQUIRED = "ValueRequired"
    TOO_MANY_OR_TOO_LITTLE_VALUE = "TooManyOrTooLittleValue"
    NOT_POSITIONAL = "NotPositional"
    END_OF_ARGUMENT_FOUND = "EndOfArgumentFound"
    INVALID_VALUE = "InvalidValue"
    INVALID_KEY = "InvalidKey"
    NOT_END = "NotEnd"

    def __str__(self) -> str:
        return self.value


class ArgParseError(Exception):
    """A parse problem, tied to the argument position or key it was found at."""

    def __init__(self, pos: Optional[str], err: ParseError) -> None:
        self.pos = pos
        self.err = err
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.pos is None:
            return str(self.err)
        return f"{self.pos}: {self.err}"