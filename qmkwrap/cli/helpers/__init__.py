"""Helpers for CLI commands."""

from qmkwrap.cli.helpers.output import (
    print_critical_message,
    print_error_message,
    print_success_message,
)


__all__ = [
    "print_critical_message",
    "print_error_message",
    "print_success_message",
]
