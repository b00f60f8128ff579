"""Run QMK's keymap unit tests."""

from typing import Annotated

import typer

from qmkwrap.adapters import create_process_adapter
from qmkwrap.build.make_test import run_make_test
from qmkwrap.cli.app import AppContext
from qmkwrap.cli.decorators import handle_errors
from qmkwrap.cli.helpers import print_error_message, print_success_message


@handle_errors
def run_tests(
    ctx: typer.Context,
    target: Annotated[str, typer.Argument(help="Make target, e.g. my_keymap")],
) -> None:
    """Run ``make test:TARGET`` in the QMK directory."""
    app_ctx: AppContext = ctx.obj

    result = run_make_test(
        app_ctx.user_config.pipeline,
        create_process_adapter(),
        target,
        stdout_sink=typer.echo,
    )

    if not result.success:
        for line in result.stderr:
            typer.echo(line, err=True)
        for error in result.errors:
            print_error_message(error)
        raise typer.Exit(1)

    print_success_message(f"Tests passed for {target}")


def register_commands(app: typer.Typer) -> None:
    """Register the test command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="test")(run_tests)
