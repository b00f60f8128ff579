"""Helper functions for CLI output formatting with Rich integration."""

from qmkwrap.cli.helpers.theme import get_themed_console


def print_success_message(message: str, use_emoji: bool = True) -> None:
    """Print a success message with a checkmark to stdout."""
    get_themed_console(use_emoji=use_emoji).print_success(message)


def print_error_message(message: str, use_emoji: bool = True) -> None:
    """Print an error message to stderr."""
    get_themed_console(use_emoji=use_emoji, stderr=True).print_error(message)


def print_critical_message(message: str) -> None:
    """Print a critical notice to stderr."""
    get_themed_console(stderr=True).print_critical(message)

