# clbuilder

A small library for building command-line interfaces. It reads a
command line as a chain of positional arguments. Each positional
argument may be followed by keyword arguments such as `--name=value`
or `--name value`. Every argument carries validators. They check how
many times the argument appears, whether it needs a value, and which
values it accepts. Help and error messages are written to the
terminal with ANSI colours and effects.

The package needs Python 3.10 or later and has no runtime
dependencies.

## Modules

- `clbuilder.app_version`: `AppVersion(major, minor, patch)` is
  ordered part by part and prints as `major.minor.patch`.
  `AppVersion.parse("1.2.3")` reads a version string. Any parts after
  the third are ignored. It raises `AppVersionParseError` (a
  `ValueError`) when there are fewer than three parts or a part is not
  a number.
- `clbuilder.app_identity`: `AppIdentity(name, description, version)`.
  Use `written_by()` and `licensed_with()` to add an author and a
  licence. These details are shown at the top of the help output.
- `clbuilder.arg_key`: `ArgKey`, a keyword key that compares equal to
  its text.
  - `ArgKey.checked()` rejects keys that do not start with `-`.
  - `ArgKey.from_cmd("--k=v")` splits a word at its first `=`.
- `clbuilder.argument`: `Arg`, built fluently:
  - `required()` and `optional()`.
  - Counts: `n_at_least()`, `n_at_most()`, `n_equal_to()` and
    `n_range()`.
  - Values: `not_empty()`, and `as_flag()` for an argument that takes
    no value.
  - `help_text()` sets the text shown for the argument.

  The validators behind these are `CountValidator` and
  `EmptyValidator`. A third, `ArgOptions`, restricts a value to a
  fixed set of choices, each with optional help text. All of them
  derive from `ArgValidator`. An `Arg` holds at most one validator of
  each kind; adding another replaces the first.
- `clbuilder.argument_parser`: `ArgumentParser` and `ArgStructure`.
  `ArgumentParser.parse_args(argv)` returns a `ParsedArg`. The first
  word of `argv` is taken as the program name. Problems are raised as
  `ArgParseError` from `clbuilder.error`.
- `clbuilder.parsed_arg`: `ParsedArg` holds the parsed values.
  - `current_positional()` gives the latest positional value.
  - `first_of(key)`, `filter(key)`, `count(key)` and `contains(key)`
    ask about the keyword arguments given after that value.
- `clbuilder.app`: `App(identity, argv=None)` ties a parser, the
  parsed values and an `OutputFormat` together. Every new positional
  slot gets `-h` and `--help`.
  - `parse_args()` parses. On an error it prints the message to
    standard error and exits with status 1. When `-h` or `--help` was
    given, it prints the help and exits with status 0.
  - `help_nodes()` builds the help text without printing it.
- `clbuilder.action_builder`: `ActionBuilder(app, help_text)` adds a
  positional argument whose value names an action.
  - `add_action(name, help_text, action)` registers an
    `ActionProvider`.
  - `run()` parses up to that argument and runs the chosen action. If
    no action was named, it prints the help and exits with status 1.
- `clbuilder.terminal`: styled output.
  - `TerminalNodes` is a list of nodes that re-indents after each new
    line. Its nodes are `Begin`, `End`, `Text`, `NewLine` and
    `Indent`.
  - `TextFormat` sets background, foreground and effects.
  - Colours are `Color`, `IndexedColor` and `RgbColor`, and effects
    are `TextEffect`.

## Example

```python
from clbuilder.action_builder import ActionBuilder, ActionProvider
from clbuilder.app import App
from clbuilder.app_identity import AppIdentity
from clbuilder.app_version import AppVersion


class Greet(ActionProvider):
    def run(self, app):
        app.add_argument_unchecked("--name").required().not_empty()
        app.add_help_args()
        app.parse_args()
        print(f"Hello, {app.args.first_of('--name')}!")


app = App(AppIdentity("Greeter", "Says hello", AppVersion(1, 0, 0)))
ActionBuilder(app, "The action to run").add_action("hey", "Greet someone", Greet()).run()
```

## Bundled demo

The package installs a small demo command:

```
clbuilder-hello hey --name=World
clbuilder-hello --help
```

The first call checks that `--name` was given once, with a value. It
prints nothing and exits with status 0. If `--name` is missing or
empty, it prints an error and exits with status 1. The second call
names no action, so it prints the help and exits with status 1.

## Styled output

```python
from clbuilder.terminal import Color, TerminalNodes, TextEffect, TextFormat

fmt = TextFormat().with_fg(Color.GREEN).effect(TextEffect.BOLD)
TerminalNodes.with_format(fmt, "done", 2).to_stdout()
```

## What it does not do

- All values stay strings. Nothing converts them to numbers or other
  types.
- A positional value may not start with `-`.
- Keyword arguments are read only until the first word that is not a
  known key of the current positional argument.
- There are no short-option clusters such as `-abc`.

## Running the tests

```
pip install clbuilder[test]
pytest
```