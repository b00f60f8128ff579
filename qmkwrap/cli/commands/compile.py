"""Compile command: build a keymap with secret codes injected."""

from typing import Annotated

import typer

from qmkwrap.build.orchestrator import create_build_orchestrator
from qmkwrap.cli.app import AppContext
from qmkwrap.cli.decorators import handle_errors
from qmkwrap.cli.helpers import (
    print_critical_message,
    print_error_message,
    print_success_message,
)
from qmkwrap.models.build import ArtifactSuffix, BuildRequest, BuildResult


def _resolve_codes(codes: tuple[str, str] | None) -> tuple[str, str]:
    if not codes:
        return "", ""
    code1, code2 = codes
    return code1 or "", code2 or ""


def _report_failure(result: BuildResult) -> None:
    for line in result.build_stderr:
        typer.echo(line, err=True)
    if result.primary_error:
        print_error_message(result.primary_error)
    for notice in result.critical_errors:
        print_critical_message(notice)


@handle_errors
def compile_keymap(
    ctx: typer.Context,
    keyboard: Annotated[str, typer.Argument(help="QMK keyboard, e.g. planck/rev6")],
    keymap: Annotated[str, typer.Argument(help="Keymap name within the keyboard")],
    hex_file: Annotated[
        bool,
        typer.Option("-x", "--hex-file", help="Copy the .hex artifact instead of .bin"),
    ] = False,
    use_hash: Annotated[
        bool,
        typer.Option(
            "--hash",
            help="Encode the codes with QMKWRAP_KEY1/QMKWRAP_KEY2 before embedding",
        ),
    ] = False,
    codes: Annotated[
        tuple[str, str],
        typer.Option(
            "--codes",
            help="Two codes to embed in the generated header",
            show_default=False,
        ),
    ] = (None, None),  # type: ignore[assignment]
) -> None:
    """Compile a keymap with codes embedded in the generated header.

    The header is restored to its placeholder once the build is over.

    Examples:

        \b
        qmkwrap compile planck/rev6 mine
        qmkwrap compile planck/rev6 mine --hash --codes abc xyz
        qmkwrap compile crkbd/rev1 mine -x
    """
    app_ctx: AppContext = ctx.obj
    code1, code2 = _resolve_codes(codes)

    request = BuildRequest(
        keyboard=keyboard,
        keymap=keymap,
        code1=code1,
        code2=code2,
        use_hash=use_hash,
        suffix=ArtifactSuffix.HEX if hex_file else ArtifactSuffix.BIN,
    )

    orchestrator = create_build_orchestrator(
        app_ctx.user_config.pipeline, stdout_sink=typer.echo
    )
    result = orchestrator.run(request)

    if not result.success:
        _report_failure(result)
        raise typer.Exit(1)

    for message in result.messages:
        print_success_message(message)


def register_commands(app: typer.Typer) -> None:
    """Register the compile command with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="compile")(compile_keymap)
