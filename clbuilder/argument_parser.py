"""Parsing of command-line words against a list of argument structures."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple, Union

from clbuilder.arg_key import ArgKey
from clbuilder.argument import Arg
from clbuilder.error import ArgParseError, ParseError
from clbuilder.parsed_arg import ParsedArg

KeyLike = Union[str, ArgKey]


def _at(pos: str, error: ArgParseError) -> ArgParseError:
    return ArgParseError(pos, error.err)


def _checked_key(key: KeyLike) -> ArgKey:
    return key if isinstance(key, ArgKey) else ArgKey.checked(key)


class ArgStructure:
    """A positional argument and the keyword arguments that may follow it."""

    def __init__(self, positional: Optional[Arg] = None) -> None:
        self.positional: Arg = positional if positional is not None else Arg()
        self.parameters: List[Tuple[ArgKey, Arg]] = []

    def _find(self, key: KeyLike) -> Optional[Tuple[ArgKey, Arg]]:
        return next((entry for entry in self.parameters if entry[0] == key), None)

    def add_argument(self, key: KeyLike) -> Arg:
        """Return the argument stored under ``key``, adding a flag if there is none."""
        key = _checked_key(key)
        found = self._find(key)
        if found is not None:
            return found[1]
        arg = Arg.flag()
        self.parameters.append((key, arg))
        return arg

    def add_argument_unchecked(self, key: str) -> Arg:
        return self.add_argument(ArgKey(key))

    def _parse_param(
        self, key: ArgKey, arg: Arg, current_value: Optional[str], values: ParsedArg
    ) -> str:
        try:
            try:
                arg.validate(current_value)
                result = current_value
            except ArgParseError as error:
                if error.err is not ParseError.VALUE_REQUIRED:
                    raise
                arg.validate(values.next_arg())
                result = values.current_arg()
        except ArgParseError as error:
            raise _at(key.value, error) from error
        values.next_arg()
        return result if result is not None else ""

    def parse(self, pos_name: str, values: ParsedArg, parse_positional: bool = True) -> ParsedArg:
        """Read this structure's positional value and keyword arguments from ``values``."""
        current = values.current_arg()
        if parse_positional and current is not None:
            if ArgKey.is_arg_key(current):
                raise ArgParseError(pos_name, ParseError.NOT_POSITIONAL)
            try:
                self.positional.validate(current)
                values.add_positional(current)
                self.positional.post_validate(None, values)
            except ArgParseError as error:
                raise _at(pos_name, error) from error
            values.next_arg()

        while (current := values.current_arg()) is not None:
            try:
                parsed_key, parsed_value = ArgKey.from_cmd(current)
            except ArgParseError:
                break
            found = self._find(parsed_key)
            if found is None:
                break
            key, arg = found
            value = self._parse_param(key, arg, parsed_value, values)
            values.add_argument(key, value)

        for key, arg in self.parameters:
            try:
                arg.post_validate(key, values)
            except ArgParseError as error:
                raise _at(key.value, error) from error
        return values

    def __repr__(self) -> str:
        return f"ArgStructure(positional={self.positional!r}, parameters={self.parameters!r})"


class ArgumentParser:
    """An ordered list of argument structures, starting with the program name."""

    def __init__(self) -> None:
        self._structures: List[ArgStructure] = [ArgStructure(Arg.positional())]

    def add_positional(self) -> Arg:
        structure = ArgStructure(Arg.positional())
        self._structures.append(structure)
        return structure.positional

    @property
    def last(self) -> ArgStructure:
        return self._structures[-1]

    def add_argument(self, key: KeyLike) -> Arg:
        return self.last.add_argument(key)

    def add_argument_unchecked(self, key: str) -> Arg:
        return self.last.add_argument_unchecked(key)

    def parse_args(self, argv: Optional[Iterable[str]] = None) -> ParsedArg:
        """Parse ``argv`` (the process arguments when None) into a new ParsedArg."""
        return self.parse_into(ParsedArg(argv))

    def parse_into(self, values: ParsedArg) -> ParsedArg:
        """Continue parsing into ``values``, starting at its latest positional argument."""
        start = max(0, values.positional_argument_size() - 1)
        for index in range(start, len(self._structures)):
            self._structures[index].parse(
                str(index), values, values.positional_argument_size() <= index
            )
        return values

    def __len__(self) -> int:
        return len(self._structures)

    def __iter__(self) -> Iterator[ArgStructure]:
        return iter(self._structures)

    def __getitem__(self, index: int) -> ArgStructure:
        return self._structures[index]