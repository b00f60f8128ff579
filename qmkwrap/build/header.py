"""Rendering and writing of the generated code header.

The header exposes three string macros to the keymap: a version label and two
codes. Values are wrapped in double quotes as-is; a value containing ``"``
produces an invalid header.
"""

from pathlib import Path

from qmkwrap.core.errors import FileSystemError, HeaderWriteError
from qmkwrap.core.structlog_logger import get_struct_logger
from qmkwrap.protocols import FileAdapterProtocol


logger = get_struct_logger(__name__)

PLACEHOLDER_VERSION = "auto-generated"
DEFAULT_MACRO_PREFIX = "QMKWRAP"


def render_header(
    version_label: str,
    code1: str,
    code2: str,
    macro_prefix: str = DEFAULT_MACRO_PREFIX,
) -> bytes:
    """Render the header document as UTF-8 bytes."""
    lines = [
        "#pragma once",
        f'#define {macro_prefix}_VERSION "{version_label}"',
        f'#define {macro_prefix}_CODE_1 "{code1}"',
        f'#define {macro_prefix}_CODE_2 "{code2}"',
        "",
    ]
    return "\n".join(lines).encode("utf-8")


class HeaderWriter:
    """Writes the generated header in its armed or disarmed state.

    Args:
        file_adapter: Adapter used for the actual write
        path: Location of the header
        macro_prefix: Prefix of the macro names
    """

    def __init__(
        self,
        file_adapter: FileAdapterProtocol,
        path: Path,
        macro_prefix: str = DEFAULT_MACRO_PREFIX,
    ):
        self.file_adapter = file_adapter
        self.path = path
        self.macro_prefix = macro_prefix

    def write(self, version_label: str, code1: str, code2: str) -> None:
        """Render and write the header.

        Raises:
            HeaderWriteError: If the file cannot be written
        """
        content = render_header(version_label, code1, code2, self.macro_prefix)
        try:
            self.file_adapter.write_bytes(self.path, content)
        except FileSystemError as e:
            raise HeaderWriteError(str(e), context={"path": str(self.path)}) from e

    def arm(self, version_label: str, code1: str, code2: str) -> None:
        """Write the real label and codes."""
        self.write(version_label, code1, code2)
        logger.debug("header_armed", path=str(self.path))

    def disarm(self) -> None:
        """Write the placeholder label with empty codes."""
        self.write(PLACEHOLDER_VERSION, "", "")
        logger.debug("header_disarmed", path=str(self.path))


__all__ = [
    "DEFAULT_MACRO_PREFIX",
    "HeaderWriter",
    "PLACEHOLDER_VERSION",
    "render_header",
]
