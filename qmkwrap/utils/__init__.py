"""Utility helpers for qmkwrap."""

from qmkwrap.utils.error_utils import create_file_error, create_process_error
from qmkwrap.utils.stream_process import (
    CaptureOutputMiddleware,
    DefaultOutputMiddleware,
    OutputMiddleware,
    OutputProcessingError,
    ProcessResult,
    run_command,
)


__all__ = [
    "CaptureOutputMiddleware",
    "DefaultOutputMiddleware",
    "OutputMiddleware",
    "OutputProcessingError",
    "ProcessResult",
    "create_file_error",
    "create_process_error",
    "run_command",
]
