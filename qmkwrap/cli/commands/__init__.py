"""CLI command modules."""

import typer

from qmkwrap.cli.commands.compile import register_commands as register_compile_commands
from qmkwrap.cli.commands.config import register_commands as register_config_commands
from qmkwrap.cli.commands.test import register_commands as register_test_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_compile_commands(app)
    register_config_commands(app)
    register_test_commands(app)
