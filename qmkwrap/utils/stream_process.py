"""Process execution and streaming output handling.

This module runs subprocesses and hands every output line to an
``OutputMiddleware`` as soon as it is produced, so long-running builds can be
shown live while their output is still collected.

Example:
    ```python
    from qmkwrap.utils.stream_process import run_command, DefaultOutputMiddleware

    return_code, stdout, stderr = run_command(
        ["qmk", "compile", "--keyboard", "planck/rev6", "--keymap", "default"],
        middleware=DefaultOutputMiddleware(),
        cwd=Path("~/qmk_firmware").expanduser(),
    )
    ```
"""

import shlex
import subprocess
from pathlib import Path
from threading import Thread
from typing import Any, Generic, TypeAlias, TypeVar, cast


T = TypeVar("T")  # Type of processed output

# Type alias for the result of run_command
ProcessResult: TypeAlias = tuple[int, list[T], list[T]]  # (return_code, stdout, stderr)


class OutputProcessingError(Exception):
    """An output middleware raised while the command was running.

    The command has already been waited for; ``return_code`` is its exit code.
    """

    def __init__(self, message: str, return_code: int):
        super().__init__(message)
        self.return_code = return_code


class OutputMiddleware(Generic[T]):
    """Base class for processing command output streams.

    Implementations can format, filter, or transform each line. Returning
    ``None`` from ``process`` drops the line from the captured output.
    """

    def process(self, line: str, stream_type: str) -> T:
        """Process a line of output from a subprocess stream.

        Args:
            line: A line of text from the process output
            stream_type: Either "stdout" or "stderr"

        Returns:
            Processed output of type T
        """
        raise NotImplementedError()


class DefaultOutputMiddleware(OutputMiddleware[str]):
    """Simple middleware that prints output with optional prefixes."""

    def __init__(self, stdout_prefix: str = "", stderr_prefix: str = "ERROR: ") -> None:
        self.stdout_prefix = stdout_prefix
        self.stderr_prefix = stderr_prefix

    def process(self, line: str, stream_type: str) -> str:
        prefix = self.stdout_prefix if stream_type == "stdout" else self.stderr_prefix
        print(f"{prefix}{line}")
        return line


class CaptureOutputMiddleware(OutputMiddleware[str]):
    """Middleware that only collects lines, printing nothing."""

    def process(self, line: str, stream_type: str) -> str:
        return line


def run_command(
    cmd: str | list[str],
    middleware: OutputMiddleware[T] | None = None,
    cwd: Path | str | None = None,
) -> ProcessResult[T]:
    """Run a command and process its output through middleware.

    Args:
        cmd: Command to run, either as a string or list of arguments
        middleware: Optional middleware for processing output (uses
            DefaultOutputMiddleware if None)
        cwd: Working directory of the child process

    Returns:
        Tuple containing:
            - Return code from the process (0 for success)
            - List of processed stdout lines
            - List of processed stderr lines

    Output is decoded as UTF-8; undecodable bytes are replaced.

    Raises:
        FileNotFoundError: If the executable does not exist
        OSError: If the process cannot be started
        OutputProcessingError: If the middleware raised on any line
    """
    if middleware is None:
        # Cast is needed because T is unbound at this point
        middleware = cast(OutputMiddleware[T], DefaultOutputMiddleware())

    if isinstance(cmd, str):
        cmd = shlex.split(cmd)

    process = subprocess.Popen(
        cmd,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        encoding="utf-8",
        errors="replace",
        bufsize=1,
        cwd=cwd,
    )

    middleware_errors: list[BaseException] = []

    def stream_output(stream: Any, stream_type: str) -> list[T]:
        captured: list[T] = []
        failed = False
        # The pipe is always read to EOF, otherwise the child blocks on a
        # full buffer and never exits.
        for line in iter(stream.readline, ""):
            if failed:
                continue
            try:
                processed = middleware.process(line.rstrip(), stream_type)
            except Exception as e:
                middleware_errors.append(e)
                failed = True
                continue
            if processed is not None:
                captured.append(processed)
        stream.close()
        return captured

    stdout_lines: list[T] = []
    stderr_lines: list[T] = []

    # Both pipes are drained concurrently so a full stderr buffer cannot block
    # the child while we wait on stdout.
    stdout_thread = Thread(
        target=lambda: stdout_lines.extend(stream_output(process.stdout, "stdout"))
    )
    stderr_thread = Thread(
        target=lambda: stderr_lines.extend(stream_output(process.stderr, "stderr"))
    )

    stdout_thread.daemon = True
    stderr_thread.daemon = True

    stdout_thread.start()
    stderr_thread.start()

    return_code = process.wait()

    stdout_thread.join()
    stderr_thread.join()

    if middleware_errors:
        error = middleware_errors[0]
        raise OutputProcessingError(
            f"Output handling failed: {error!r}", return_code=return_code
        ) from error

    return return_code, stdout_lines, stderr_lines
