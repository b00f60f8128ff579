"""File adapter for abstracting file system operations."""

import logging
from pathlib import Path

from qmkwrap.core.errors import FileSystemError
from qmkwrap.protocols.file_adapter_protocol import FileAdapterProtocol
from qmkwrap.utils.error_utils import create_file_error


logger = logging.getLogger(__name__)


class FileSystemAdapter:
    """File system adapter implementation."""

    def read_bytes(self, path: Path) -> bytes:
        """Read binary content from a file."""
        try:
            logger.debug("Reading file: %s", path)
            with path.open(mode="rb") as f:
                content = f.read()
            logger.debug("Successfully read %d bytes from %s", len(content), path)
            return content
        except FileNotFoundError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("File not found: %s", path)
            raise error from e
        except PermissionError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("Permission denied reading file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(path, "read_bytes", e)
            logger.error("Error reading file %s: %s", path, e)
            raise error from e

    def write_bytes(self, path: Path, content: bytes) -> None:
        """Write binary content to a file."""
        try:
            self.mkdir(path.parent)

            logger.debug("Writing file: %s", path)
            with path.open(mode="wb") as f:
                f.write(content)
            logger.debug("Successfully wrote %d bytes to %s", len(content), path)
        except FileSystemError:
            raise
        except PermissionError as e:
            error = create_file_error(
                path, "write_bytes", e, {"content_length": len(content)}
            )
            logger.error("Permission denied writing file: %s", path)
            raise error from e
        except OSError as e:
            error = create_file_error(
                path, "write_bytes", e, {"content_length": len(content)}
            )
            logger.error("Error writing file %s: %s", path, e)
            raise error from e

    def mkdir(self, path: Path, parents: bool = True, exist_ok: bool = True) -> None:
        """Create a directory."""
        try:
            path.mkdir(parents=parents, exist_ok=exist_ok)
        except OSError as e:
            error = create_file_error(path, "mkdir", e)
            logger.error("Error creating directory %s: %s", path, e)
            raise error from e


def create_file_adapter() -> FileAdapterProtocol:
    """Factory function to create a FileSystemAdapter instance."""
    return FileSystemAdapter()


__all__ = ["FileSystemAdapter", "create_file_adapter"]
