"""Main CLI application for qmkwrap."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from qmkwrap.cli.decorators.error_handling import print_stack_trace_if_verbose
from qmkwrap.cli.helpers import print_error_message
from qmkwrap.config.user_config import UserConfig, create_user_config
from qmkwrap.core.errors import ConfigError
from qmkwrap.core.logging import setup_logging


__all__ = ["AppContext", "app", "main", "__version__", "setup_logging"]


__version__ = distribution("qmkwrap").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        config_file: str | None = None,
        user_config: UserConfig | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            config_file: Path to configuration file
            user_config: Preloaded configuration, read from disk when omitted
        """
        self.verbose = verbose
        self.log_file = log_file
        self.config_file = config_file
        self.user_config = user_config or create_user_config(
            cli_config_path=config_file
        )


app = typer.Typer(
    name="qmkwrap",
    help=f"""qmkwrap QMK build wrapper v{__version__}

Compiles a QMK keymap with two secret codes embedded in a generated header.
The header is wiped back to a placeholder once the build is over, whether it
succeeded or not.

Common workflows:
  • Compile:        qmkwrap compile planck/rev6 mine
  • Hashed codes:   qmkwrap compile planck/rev6 mine --hash --codes abc xyz
  • Show settings:  qmkwrap config show""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    config_file: Annotated[
        str | None,
        typer.Option("-c", "--config", help="Path to configuration file"),
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """qmkwrap QMK build wrapper."""
    if version:
        print(f"qmkwrap v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    try:
        app_context = AppContext(
            verbose=verbose, log_file=log_file, config_file=config_file
        )
    except ConfigError as e:
        print_error_message(f"Configuration error: {e}")
        raise typer.Exit(1) from e
    ctx.obj = app_context

    log_level = logging.WARNING
    if debug:
        log_level = logging.DEBUG
    elif verbose == 1:
        log_level = logging.INFO
    elif verbose >= 2:
        log_level = logging.DEBUG
    elif log_file is None:
        log_level = app_context.user_config.get_log_level_int()

    setup_logging(level=log_level, log_file=log_file)


def main() -> int:
    """Main CLI entry point."""
    try:
        app()
        exit_code = 0
    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
