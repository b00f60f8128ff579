"""Configuration commands (read-only)."""

from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from qmkwrap.cli.app import AppContext
from qmkwrap.cli.decorators import handle_errors


config_app = typer.Typer(
    name="config",
    help="Configuration commands",
    no_args_is_help=True,
)


def _format_value(value: Path | str | None) -> str:
    return str(value) if value not in (None, "") else "(not set)"


@config_app.command(name="show")
@handle_errors
def show_config(ctx: typer.Context) -> None:
    """Show the configured directories and where each value comes from."""
    app_ctx: AppContext = ctx.obj
    user_config = app_ctx.user_config
    pipeline = user_config.pipeline
    console = Console()

    rows = [
        ("QMK Directory", pipeline.qmk_dir, "pipeline.qmk_dir"),
        ("Output Directory", pipeline.output_dir, "pipeline.output_dir"),
        ("Code Header", pipeline.code_header, "pipeline.code_header"),
        ("Macro Prefix", pipeline.macro_prefix, "pipeline.macro_prefix"),
    ]
    for label, value, key in rows:
        line = Text(f"{label}: ", style="bold")
        line.append(_format_value(value))
        line.append(f"  [{user_config.get_source(key)}]", style="dim")
        console.print(line, soft_wrap=True)

    loaded_from = user_config.loaded_from
    console.print(
        Text(f"Config File: {_format_value(loaded_from)}", style="dim"),
        soft_wrap=True,
    )


def register_commands(app: typer.Typer) -> None:
    """Register config commands with the main app.

    Args:
        app: The main Typer app
    """
    app.add_typer(config_app, name="config")
