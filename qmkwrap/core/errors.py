"""Exception hierarchy for qmkwrap.

Every error raised on purpose by qmkwrap derives from ``QmkWrapError`` so the
CLI can tell expected failures apart from bugs.
"""

from pathlib import Path
from typing import Any


class QmkWrapError(Exception):
    """Base class for all qmkwrap errors.

    Args:
        message: Human readable description of the failure
        context: Optional structured details, safe to log
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class ConfigError(QmkWrapError):
    """Configuration is missing or invalid."""


class FileSystemError(QmkWrapError):
    """A file operation failed."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        operation: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.path = Path(path) if path is not None else None
        self.operation = operation


class ProcessError(QmkWrapError):
    """An external process could not be started."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.command = command or []


class BuildPipelineError(QmkWrapError):
    """Base class for failures of a build pipeline step."""


class VersionResolutionError(BuildPipelineError):
    """The version-control query failed."""


class HeaderWriteError(BuildPipelineError):
    """The generated code header could not be written."""


class ExternalBuildError(BuildPipelineError):
    """``qmk compile`` could not be run or exited with a non-zero code."""

    def __init__(
        self,
        message: str,
        return_code: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context)
        self.return_code = return_code


class ArtifactIOError(BuildPipelineError):
    """The build artifact could not be copied to the output directory."""


__all__ = [
    "ArtifactIOError",
    "BuildPipelineError",
    "ConfigError",
    "ExternalBuildError",
    "FileSystemError",
    "HeaderWriteError",
    "ProcessError",
    "QmkWrapError",
    "VersionResolutionError",
]
