"""Protocol definition for file system operations."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileAdapterProtocol(Protocol):
    """Protocol for file system operations."""

    def read_bytes(self, path: Path) -> bytes:
        """Read binary content from a file.

        Raises:
            FileSystemError: If file cannot be read
        """
        ...

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write binary content to a file, creating parent directories.

        Raises:
            FileSystemError: If file cannot be written
        """
        ...

