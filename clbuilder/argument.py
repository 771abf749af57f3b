"""Argument descriptions and the validators that check them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List, Optional

from clbuilder.arg_key import ArgKey
from clbuilder.error import ArgParseError, ParseError
from clbuilder.terminal import TerminalNodes

if TYPE_CHECKING:
    from clbuilder.parsed_arg import ParsedArg

UNBOUNDED = (1 << 64) - 1


def _fail(kind: ParseError) -> ArgParseError:
    return ArgParseError(None, kind)


class ArgValidator:
    """A check run on an argument; every hook does nothing by default."""

    def validator_id(self) -> Optional[str]:
        """An id; an argument holds at most one validator per id."""
        return None

    def help(self, nodes: TerminalNodes) -> None:
        """Append a description of this check to ``nodes``."""

    def validate(self, value: Optional[str]) -> None:
        """Check a single value; raise ArgParseError if it is unacceptable."""

    def post_validate(self, key: Optional[ArgKey], args: ParsedArg) -> None:
        """Check the parsed arguments as a whole; raise ArgParseError on failure."""


@dataclass
class ArgOption:
    """One accepted value, with optional help text."""

    value: str
    help_text: Optional[str] = None


@dataclass
class ArgOptions(ArgValidator):
    """Restricts a value to a fixed set of options."""

    options: List[ArgOption] = field(default_factory=list)

    def _find(self, value: str) -> Optional[ArgOption]:
        return next((opt for opt in self.options if opt.value == value), None)

    def add_option(self, value: str) -> ArgOptions:
        if self._find(value) is None:
            self.options.append(ArgOption(value))
        return self

    def add_option_help(self, value: str, help_text: str) -> ArgOptions:
        existing = self._find(value)
        if existing is None:
            self.options.append(ArgOption(value, help_text))
        else:
            existing.help_text = help_text
        return self

    def __iter__(self) -> Iterator[ArgOption]:
        return iter(self.options)

    def __len__(self) -> int:
        return len(self.options)

    def validator_id(self) -> Optional[str]:
        return "ArgOption"

    def help(self, nodes: TerminalNodes) -> None:
        if len(nodes) == 0:
            return
        nodes.append_node("Options: ").new_line()
        for opt in self.options:
            text = opt.help_text if opt.help_text is not None else "<no-help>"
            nodes.append_node(f"- {opt.value}: {text}").new_line()

    def validate(self, value: Optional[str]) -> None:
        if value is None:
            raise _fail(ParseError.VALUE_REQUIRED)
        if self._find(value) is None:
            raise _fail(ParseError.INVALID_VALUE)


@dataclass
class CountValidator(ArgValidator):
    """Limits how many times an argument may appear."""

    min_size: int = 1
    max_size: int = 1

    @classmethod
    def range(cls, min_size: int, max_size: int) -> CountValidator:
        return cls(min_size, max_size)

    @classmethod
    def at_least(cls, min_size: int) -> CountValidator:
        return cls(min_size, UNBOUNDED)

    @classmethod
    def at_most(cls, max_size: int) -> CountValidator:
        return cls(0, max_size)

    @classmethod
    def equal_to(cls, value: int) -> CountValidator:
        return cls(value, value)

    def _check(self, count: int) -> None:
        if not self.min_size <= count <= self.max_size:
            raise _fail(ParseError.TOO_MANY_OR_TOO_LITTLE_VALUE)

    def validator_id(self) -> Optional[str]:
        return "CountValidator"

    def help(self, nodes: TerminalNodes) -> None:
        low, high = self.min_size, self.max_size
        if low == high and low != 1:
            text = f"Arg Count: ={low}"
        elif low == 0 and high == 1:
            text = "Optional"
        elif low == 1 and high == 1:
            text = "Required"
        elif low != 1 and high == UNBOUNDED:
            text = f"Arg Count: n >= {low}"
        else:
            text = f"Arg Count: {low} <= n <= {high}"
        nodes.append_node(text).new_line()

    def post_validate(self, key: Optional[ArgKey], args: ParsedArg) -> None:
        self._check(1 if key is None else args.count(key))


@dataclass
class EmptyValidator(ArgValidator):
    """Decides whether an argument may be given without a value."""

    allow_empty: bool = False

    def validator_id(self) -> Optional[str]:
        return "EmptyValidator"

    def help(self, nodes: TerminalNodes) -> None:
        if self.allow_empty:
            nodes.append_node("Flag").new_line()

    def validate(self, value: Optional[str]) -> None:
        if not self.allow_empty and value is None:
            raise _fail(ParseError.VALUE_REQUIRED)


class Arg(ArgValidator):
    """An argument: help text plus the validators that check it."""

    def __init__(self) -> None:
        self._validators: List[ArgValidator] = []
        self.help_message: Optional[str] = None

    @classmethod
    def positional(cls) -> Arg:
        return cls().n_equal_to(1)

    @classmethod
    def flag(cls) -> Arg:
        return cls().as_flag().optional()

    @property
    def validators(self) -> tuple:
        return tuple(self._validators)

    def add_validator(self, validator: ArgValidator) -> Arg:
        """Add a validator, replacing one that has the same id."""
        vid = validator.validator_id()
        if vid is not None:
            for index, current in enumerate(self._validators):
                if current.validator_id() == vid:
                    self._validators[index] = validator
                    return self
        self._validators.append(validator)
        return self

    def help_text(self, text: str) -> Arg:
        self.help_message = text
        return self

    def n_at_least(self, min_size: int) -> Arg:
        return self.add_validator(CountValidator.at_least(min_size))

    def n_at_most(self, max_size: int) -> Arg:
        return self.add_validator(CountValidator.at_most(max_size))

    def n_equal_to(self, value: int) -> Arg:
        return self.add_validator(CountValidator.equal_to(value))

    def n_range(self, min_size: int, max_size: int) -> Arg:
        return self.add_validator(CountValidator.range(min_size, max_size))

    def not_empty(self) -> Arg:
        return self.add_validator(EmptyValidator(False))

    def required(self) -> Arg:
        return self.not_empty().n_equal_to(1)

    def optional(self) -> Arg:
        return self.n_range(0, 1)

    def as_flag(self) -> Arg:
        return self.add_validator(EmptyValidator(True))

    def help(self, nodes: TerminalNodes) -> None:
        if self.help_message is not None:
            nodes.append_node(self.help_message).new_line()
        for validator in self._validators:
            validator.help(nodes)

    def validate(self, value: Optional[str]) -> None:
        for validator in self._validators:
            validator.validate(value)

    def post_validate(self, key: Optional[ArgKey], args: ParsedArg) -> None:
        for validator in self._validators:
            validator.post_validate(key, args)

    def __repr__(self) -> str:
        return f"Arg(help_message={self.help_message!r}, validators={self._validators!r})"