"""Build command-line interfaces with validated arguments, sub-actions and styled help."""

__version__ = "0.1.0"

__all__ = [
    "action_builder",
    "app",
    "app_identity",
    "app_version",
    "arg_key",
    "argument",
    "argument_parser",
    "error",
    "hello_world",
    "parsed_arg",
    "terminal",
]