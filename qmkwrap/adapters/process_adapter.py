"""Process adapter for running external commands."""

import logging
import shlex
from collections.abc import Callable
from pathlib import Path

from qmkwrap.protocols.process_adapter_protocol import (
    CommandResult,
    ProcessAdapterProtocol,
)
from qmkwrap.utils import stream_process
from qmkwrap.utils.error_utils import create_process_error
from qmkwrap.utils.stream_process import (
    CaptureOutputMiddleware,
    OutputMiddleware,
    OutputProcessingError,
)


logger = logging.getLogger(__name__)


class StreamingOutputMiddleware(OutputMiddleware[str]):
    """Forwards stdout lines to a live sink and buffers stderr silently.

    Args:
        stdout_sink: Callable receiving each stdout line as it is produced
    """

    def __init__(self, stdout_sink: Callable[[str], None]):
        self.stdout_sink = stdout_sink

    def process(self, line: str, stream_type: str) -> str:
        if stream_type == "stdout":
            self.stdout_sink(line)
        else:
            logger.debug("stderr: %s", line)
        return line


class ProcessAdapter:
    """Implementation of ProcessAdapterProtocol on top of stream_process."""

    def run_capture(self, command: list[str], cwd: Path | None = None) -> CommandResult:
        return self._run(command, cwd, CaptureOutputMiddleware())

    def run_streaming(
        self,
        command: list[str],
        cwd: Path | None = None,
        stdout_sink: Callable[[str], None] | None = None,
    ) -> CommandResult:
        sink = stdout_sink if stdout_sink is not None else print
        return self._run(command, cwd, StreamingOutputMiddleware(sink))

    def _run(
        self,
        command: list[str],
        cwd: Path | None,
        middleware: OutputMiddleware[str],
    ) -> CommandResult:
        cmd_str = " ".join(shlex.quote(arg) for arg in command)
        logger.debug("Running command: %s (cwd=%s)", cmd_str, cwd)

        try:
            return_code, stdout, stderr = stream_process.run_command(
                command, middleware, cwd=cwd
            )
        except FileNotFoundError as e:
            logger.error("Executable or directory not found: %s", e)
            raise create_process_error(command, e) from e
        except OSError as e:
            logger.error("Failed to start %s: %s", cmd_str, e)
            raise create_process_error(command, e) from e
        except OutputProcessingError as e:
            logger.error(
                "Output of %s could not be handled (exit code %d): %s",
                cmd_str,
                e.return_code,
                e.__cause__,
            )
            raise create_process_error(command, e) from e

        logger.debug("Command %s exited with code %d", cmd_str, return_code)
        return return_code, stdout, stderr


def create_process_adapter() -> ProcessAdapterProtocol:
    """Factory function to create a ProcessAdapter instance."""
    return ProcessAdapter()


__all__ = ["ProcessAdapter", "StreamingOutputMiddleware", "create_process_adapter"]
