"""Helpers for building consistent error objects."""

from pathlib import Path
from typing import Any

from qmkwrap.core.errors import FileSystemError, ProcessError


def create_file_error(
    path: Path | str,
    operation: str,
    original_error: Exception,
    details: dict[str, Any] | None = None,
) -> FileSystemError:
    """Create a FileSystemError describing a failed file operation.

    Args:
        path: Path the operation was applied to
        operation: Name of the operation (e.g. "read_bytes")
        original_error: Underlying exception
        details: Extra context to attach to the error

    Returns:
        FileSystemError with a standard message
    """
    reason = getattr(original_error, "strerror", None) or str(original_error)
    message = f"File operation '{operation}' failed on '{path}': {reason}"
    context = {"error_type": type(original_error).__name__}
    if details:
        context.update(details)
    return FileSystemError(message, path=path, operation=operation, context=context)


def create_process_error(
    command: list[str], original_error: Exception
) -> ProcessError:
    """Create a ProcessError for a command that could not be started."""
    message = f"Failed to run '{' '.join(command)}': {original_error}"
    return ProcessError(
        message,
        command=command,
        context={"error_type": type(original_error).__name__},
    )


__all__ = ["create_file_error", "create_process_error"]
