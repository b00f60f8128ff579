"""CLI package for qmkwrap."""

from qmkwrap.cli.app import app, main
from qmkwrap.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["app", "main"]
