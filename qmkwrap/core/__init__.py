from .errors import (
    ArtifactIOError,
    BuildPipelineError,
    ConfigError,
    ExternalBuildError,
    FileSystemError,
    HeaderWriteError,
    ProcessError,
    QmkWrapError,
    VersionResolutionError,
)
from .logging import setup_logging


__all__ = [
    "setup_logging",
    "QmkWrapError",
    "ConfigError",
    "FileSystemError",
    "ProcessError",
    "BuildPipelineError",
    "VersionResolutionError",
    "HeaderWriteError",
    "ExternalBuildError",
    "ArtifactIOError",
]
