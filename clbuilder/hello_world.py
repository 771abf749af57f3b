"""A small greeting command with one sub-command."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from clbuilder.action_builder import ActionBuilder, ActionProvider
from clbuilder.app import App
from clbuilder.app_identity import AppIdentity
from clbuilder.app_version import AppVersion

PROGRAM = "hello_world"


class GreetAction(ActionProvider):
    """Requires a non-empty --name."""

    def run(self, app: App) -> None:
        app.add_argument_unchecked("--name").required().not_empty()
        app.add_help_args()
        app.parse_args()


def main(argv: Optional[Sequence[str]] = None) -> int:
    words = sys.argv if argv is None else [PROGRAM, *argv]
    app = App(
        AppIdentity("Hello World", "A Hello World", AppVersion(0, 0, 0)),
        argv=words,
    )
    ActionBuilder(app, "HEYYY").add_action("hey", "HEY HEY", GreetAction()).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())