"""Protocol definition for running external commands."""

from collections.abc import Callable
from pathlib import Path
from typing import Protocol, TypeAlias, runtime_checkable


CommandResult: TypeAlias = tuple[int, list[str], list[str]]  # (return_code, stdout, stderr)


@runtime_checkable
class ProcessAdapterProtocol(Protocol):
    """Protocol for external command execution."""

    def run_capture(self, command: list[str], cwd: Path | None = None) -> CommandResult:
        """Run a command and collect its output without printing it.

        Raises:
            ProcessError: If the command cannot be started
        """
        ...

    def run_streaming(
        self,
        command: list[str],
        cwd: Path | None = None,
        stdout_sink: Callable[[str], None] | None = None,
    ) -> CommandResult:
        """Run a command, forwarding stdout lines to ``stdout_sink`` as they arrive.

        Standard error is buffered and only returned.

        Raises:
            ProcessError: If the command cannot be started
        """
        ...
