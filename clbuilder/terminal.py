"""Styled terminal output built from a sequence of nodes."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Union


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


class Color(Enum):
    """The sixteen standard terminal colours, valued by their SGR code."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    WHITE = 37
    BRIGHT_BLACK = 90
    BRIGHT_RED = 91
    BRIGHT_GREEN = 92
    BRIGHT_YELLOW = 93
    BRIGHT_BLUE = 94
    BRIGHT_MAGENTA = 95
    BRIGHT_CYAN = 96
    BRIGHT_WHITE = 97

    def __str__(self) -> str:
        return f"\x1b[{self.value}m"


@dataclass(frozen=True)
class IndexedColor:
    """A colour from the 256-colour palette."""

    index: int

    def __post_init__(self) -> None:
        _check_byte("index", self.index)

    def __str__(self) -> str:
        return f"\x1b[38;5;{self.index}m"


@dataclass(frozen=True)
class RgbColor:
    """A 24-bit colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            _check_byte(name, getattr(self, name))

    def __str__(self) -> str:
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"


AnyColor = Union[Color, IndexedColor, RgbColor]


class TextEffect(Enum):
    """Text effects, valued by their SGR code."""

    BOLD = 1
    DIM = 2
    ITALIC = 3
    UNDERLINE = 4
    SLOW_BLINK = 5
    RAPID_BLINK = 6
    REVERSE = 7
    STRIKETHROUGH = 9
    DOUBLE_UNDERLINE = 21

    def __str__(self) -> str:
        return f"\x1b[{self.value}m"


@dataclass
class TextFormat:
    """Background, foreground and effects applied to a run of text."""

    bg: Optional[AnyColor] = None
    fg: Optional[AnyColor] = None
    effects: set = field(default_factory=set)

    def with_bg(self, color: AnyColor) -> TextFormat:
        self.bg = color
        return self

    def with_fg(self, color: AnyColor) -> TextFormat:
        self.fg = color
        return self

    def effect(self, effect: TextEffect) -> TextFormat:
        self.effects.add(effect)
        return self

    def add_effects(self, effects: Iterable[TextEffect]) -> TextFormat:
        self.effects.update(effects)
        return self

    def has_effect(self, effect: TextEffect) -> bool:
        return effect in self.effects

    def len_effects(self) -> int:
        return len(self.effects)

    def copy(self) -> TextFormat:
        return TextFormat(self.bg, self.fg, set(self.effects))

    def take(self) -> TextFormat:
        """Return the current format and reset this one to the default."""
        taken = self.copy()
        self.bg = None
        self.fg = None
        self.effects = set()
        return taken

    def __str__(self) -> str:
        parts = []
        if self.bg is not None:
            parts.append(str(self.bg))
        if self.fg is not None:
            parts.append(str(self.fg))
        parts.extend(str(e) for e in sorted(self.effects, key=lambda e: e.value))
        return "".join(parts)


@dataclass(frozen=True)
class Begin:
    format: TextFormat

    def __str__(self) -> str:
        return str(self.format)


@dataclass(frozen=True)
class End:
    def __str__(self) -> str:
        return "\x1b[0m"


@dataclass(frozen=True)
class Text:
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class NewLine:
    def __str__(self) -> str:
        return "\n"


@dataclass(frozen=True)
class Indent:
    width: int

    def __str__(self) -> str:
        return " " * self.width


TerminalNode = Union[Begin, End, Text, NewLine, Indent]
_NODE_TYPES = (Begin, End, Text, NewLine, Indent)


def to_node(value) -> TerminalNode:
    """Turn a node, a text format or a string into a terminal node."""
    if isinstance(value, _NODE_TYPES):
        return value
    if isinstance(value, TextFormat):
        return Begin(value.copy())
    if isinstance(value, str):
        return Text(value)
    raise TypeError(f"cannot make a terminal node from {type(value).__name__}")


class TerminalNodes:
    """An ordered list of nodes that re-indents after every new line."""

    def __init__(self, indent: int = 0) -> None:
        if indent < 0:
            raise ValueError("indent must not be negative")
        self._indent = indent
        self._nodes: list = [Indent(indent)]

    @property
    def indent(self) -> int:
        return self._indent

    @classmethod
    def with_format(cls, fmt: TextFormat, node, indent: int = 0) -> TerminalNodes:
        return cls(indent).begin_format(fmt).append_node(node).end_format()

    def append_node(self, node) -> TerminalNodes:
        node = to_node(node)
        if self._nodes and isinstance(self._nodes[-1], NewLine):
            self._nodes.append(Indent(self._indent))
        self._nodes.append(node)
        return self

    def append_sub_node(self, sub_nodes: Iterable) -> TerminalNodes:
        for node in sub_nodes:
            self.append_node(node)
        return self

    def begin_format(self, fmt: TextFormat) -> TerminalNodes:
        if not isinstance(fmt, TextFormat):
            raise TypeError("begin_format expects a TextFormat")
        return self.append_node(fmt)

    def end_format(self) -> TerminalNodes:
        self._nodes.append(End())
        return self

    def new_line(self) -> TerminalNodes:
        return self.append_node(NewLine())

    def to_stdout(self) -> None:
        print(self)

    def to_stderr(self) -> None:
        print(self, file=sys.stderr)

    def take(self) -> TerminalNodes:
        """Return the current nodes and reset this list to the default."""
        taken = TerminalNodes(self._indent)
        taken._nodes = self._nodes
        self._indent = 0
        self._nodes = [Indent(0)]
        return taken

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[TerminalNode]:
        return iter(self._nodes)

    def __str__(self) -> str:
        return "".join(str(node) for node in self._nodes)

    def __repr__(self) -> str:
        return f"TerminalNodes(indent={self._indent}, nodes={self._nodes!r})"