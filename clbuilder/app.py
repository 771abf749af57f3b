"""An application: its identity, argument parser, parsed values and output."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from clbuilder.app_identity import AppIdentity
from clbuilder.arg_key import ArgKey
from clbuilder.argument import Arg
from clbuilder.argument_parser import ArgumentParser
from clbuilder.error import ArgParseError
from clbuilder.parsed_arg import ParsedArg
from clbuilder.terminal import Color, Indent, TerminalNodes, TextEffect, TextFormat

_HELP_TEXT = "Show the help message for the application"


def _error_format() -> TextFormat:
    return TextFormat(bg=Color.YELLOW).effect(TextEffect.BOLD)


def _help_format() -> TextFormat:
    return TextFormat(bg=Color.GREEN).effect(TextEffect.BOLD)


@dataclass
class OutputFormat:
    """Formats used for error messages and for help output."""

    error: TextFormat = field(default_factory=_error_format)
    help: TextFormat = field(default_factory=_help_format)


class App:
    """A command-line application built from positional and keyword arguments."""

    def __init__(
        self,
        identity: AppIdentity,
        argv: Optional[Iterable[str]] = None,
        format: Optional[OutputFormat] = None,
    ) -> None:
        self.identity = identity
        self.parser = ArgumentParser()
        self.args = ParsedArg(argv)
        self.format = format if format is not None else OutputFormat()
        self.add_help_args()

    def add_positional(self) -> Arg:
        arg = self.parser.add_positional()
        self.add_help_args()
        return arg

    def add_argument(self, key: Union[str, ArgKey]) -> Arg:
        return self.parser.add_argument(key)

    def add_argument_unchecked(self, key: str) -> Arg:
        return self.parser.add_argument_unchecked(key)

    def add_help_args(self) -> None:
        """Give the latest positional argument the -h and --help flags."""
        for key in ("-h", "--help"):
            self.parser.add_argument_unchecked(key).help_text(_HELP_TEXT).optional()

    def _help_requested(self) -> bool:
        if self.args.positional_argument_size() == 0:
            return False
        return self.args.count("-h") + self.args.count("--help") != 0

    def advanced_parse_args(self, auto_help: bool) -> None:
        """Parse, exiting with an error message on failure and, if asked, with help on -h."""
        try:
            self.parser.parse_into(self.args)
        except ArgParseError as error:
            if auto_help and self._help_requested():
                self.log_help(None)
            self.log_err_and_exit(error, 1)
        if auto_help and self._help_requested():
            self.log_help(None)

    def parse_args(self) -> None:
        self.advanced_parse_args(True)

    def help_nodes(self) -> TerminalNodes:
        """Build the help text for the arguments from the current position on."""
        identity = self.identity
        nodes = TerminalNodes()
        nodes.append_node(f"{identity.name} v{identity.version}").new_line()
        if identity.description:
            nodes.append_node(identity.description).new_line()
        if identity.author is not None:
            nodes.append_node(f"By {identity.author}").new_line()
        if identity.license is not None:
            nodes.append_node(f"License: {identity.license}").new_line()
        nodes.new_line()

        for parsed in self.args:
            nodes.append_node(parsed.value).append_node(Indent(1))
        if len(self.args):
            nodes.new_line()

        nodes.begin_format(self.format.help)
        start_id = max(0, len(self.args) - 1)
        skip = max(0, self.args.positional_argument_size() - 1)
        for arg_id, structure in enumerate(self.parser):
            if arg_id < skip:
                continue
            show_positional = arg_id > start_id
            sub_nodes = TerminalNodes(2 if show_positional else 0)
            if show_positional:
                nodes.append_node(f"arg{arg_id}").new_line()
                structure.positional.help(sub_nodes)
            if structure.parameters:
                sub_nodes.append_node("Keyword Arguments: ").new_line()
            for key, arg in structure.parameters:
                sub_nodes.append_node(f"{key.value}: ").new_line()
                arg_nodes = TerminalNodes(2)
                arg.help(arg_nodes)
                sub_nodes.append_sub_node(arg_nodes)
            nodes.append_sub_node(sub_nodes)
        nodes.end_format()
        return nodes

    def log_help(self, exit_code: Optional[int] = None) -> None:
        """Print the help text and exit (with 0 by default)."""
        self.help_nodes().to_stdout()
        sys.exit(0 if exit_code is None else exit_code)

    def format_err(self, node) -> TerminalNodes:
        return TerminalNodes.with_format(self.format.error, node, 0)

    def format_help(self, node) -> TerminalNodes:
        return TerminalNodes.with_format(self.format.help, node, 0)

    def log_err_and_exit(self, error, exit_code: Optional[int] = None) -> None:
        """Print ``error`` to standard error and exit (with 1 by default)."""
        self.format_err(str(error)).to_stderr()
        sys.exit(1 if exit_code is None else exit_code)