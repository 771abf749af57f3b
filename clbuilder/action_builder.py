"""Sub-commands chosen by a positional argument."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from clbuilder.app import App
from clbuilder.argument import ArgOptions


class ActionProvider(ABC):
    """What a sub-command does once it has been chosen."""

    @abstractmethod
    def run(self, app: App) -> None:
        """Carry out the action; it may add arguments and parse further."""


@dataclass
class AppAction:
    """A named action with its help text."""

    name: str
    action: ActionProvider
    help_text: str

    def run(self, app: App) -> None:
        self.action.run(app)


class ActionBuilder:
    """Adds a positional argument to an app whose value names the action to run."""

    def __init__(self, app: App, help_text: str) -> None:
        self.app = app
        app.add_positional().help_text(help_text)
        self.arg_id = len(app.parser)
        self.actions: List[AppAction] = []

    def _find(self, name: str) -> Optional[AppAction]:
        return next((action for action in self.actions if action.name == name), None)

    def add_action(self, name: str, help_text: str, action: ActionProvider) -> ActionBuilder:
        """Add an action, replacing one with the same name."""
        existing = self._find(name)
        if existing is None:
            self.actions.append(AppAction(name, action, help_text))
        else:
            existing.help_text = help_text
            existing.action = action
        return self

    def run(self) -> None:
        """Parse up to the action's name and run that action, exiting with help otherwise."""
        self._update_args()
        self.app.advanced_parse_args(False)
        chosen = self.app.args.current_positional()
        if self.app.args.positional_argument_size() != self.arg_id:
            self.app.log_help(1)
        action = self._find(chosen)
        if action is None:
            self.app.log_help(1)
        action.run(self.app)

    def _update_args(self) -> None:
        options = ArgOptions()
        for action in self.actions:
            options.add_option_help(action.name, action.help_text)
        self.app.parser[self.arg_id - 1].positional.add_validator(options)