"""Values collected while parsing the command line."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from clbuilder.arg_key import ArgKey

KeyLike = Union[str, ArgKey]
Parameter = Tuple[ArgKey, str]


def _as_key(key: KeyLike) -> ArgKey:
    return key if isinstance(key, ArgKey) else ArgKey(key)


@dataclass
class PositionalParsedArgs:
    """A positional value and the keyword arguments that followed it."""

    value: str
    parameters: List[Parameter] = field(default_factory=list)

    def add_argument(self, key: KeyLike, value: str) -> PositionalParsedArgs:
        self.parameters.append((_as_key(key), value))
        return self

    def first_of(self, key: KeyLike) -> Optional[Parameter]:
        """The first parameter stored under ``key``, or None."""
        return next(self.filter(key), None)

    def filter(self, key: KeyLike) -> Iterator[Parameter]:
        """Every parameter stored under ``key``, in the order given."""
        return (param for param in self.parameters if param[0] == key)

    def count(self, key: KeyLike) -> int:
        return sum(1 for _ in self.filter(key))

    def contains(self, key: KeyLike) -> bool:
        return self.first_of(key) is not None

    def __len__(self) -> int:
        return len(self.parameters)

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.parameters)


class ArgIter:
    """A cursor over command-line words that can look at the current word."""

    def __init__(self, argv: Optional[Iterable[str]] = None) -> None:
        self._it = iter(sys.argv if argv is None else argv)
        self._current: Optional[str] = next(self._it, None)

    def arg(self) -> Optional[str]:
        """The current word, or None once the words are used up."""
        return self._current

    def next_arg(self) -> Optional[str]:
        """Move to the next word and return it."""
        self._current = next(self._it, None)
        return self._current


class ParsedArg:
    """Positional arguments parsed so far, each with its keyword arguments.

    Queries about keyword arguments look at the most recent positional one.
    """

    def __init__(self, argv: Optional[Iterable[str]] = None) -> None:
        self._args: List[PositionalParsedArgs] = []
        self._it = ArgIter(argv)

    def _last(self) -> PositionalParsedArgs:
        if not self._args:
            raise IndexError("no positional argument has been parsed")
        return self._args[-1]

    def current_positional(self) -> str:
        return self._last().value

    def first_of(self, key: KeyLike) -> Optional[str]:
        found = self._last().first_of(key)
        return None if found is None else found[1]

    def filter(self, key: KeyLike) -> Iterator[str]:
        return (value for _, value in self._last().filter(key))

    def count(self, key: KeyLike) -> int:
        return self._last().count(key)

    def contains(self, key: KeyLike) -> bool:
        return self._last().contains(key)

    def positional_argument_size(self) -> int:
        return len(self._args)

    def parametric_argument_size(self) -> int:
        return len(self._last())

    def parametric_iter(self) -> Iterator[Parameter]:
        return iter(self._last())

    def add_positional(self, value: str) -> ParsedArg:
        self._args.append(PositionalParsedArgs(value))
        return self

    def add_argument(self, key: KeyLike, value: str) -> ParsedArg:
        self._last().add_argument(key, value)
        return self

    def current_arg(self) -> Optional[str]:
        return self._it.arg()

    def next_arg(self) -> Optional[str]:
        return self._it.next_arg()

    def __len__(self) -> int:
        return len(self._args)

    def __iter__(self) -> Iterator[PositionalParsedArgs]:
        return iter(self._args)