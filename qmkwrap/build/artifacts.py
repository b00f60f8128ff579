"""Locate and copy the firmware file produced by ``qmk compile``."""

import re
from pathlib import Path

from qmkwrap.core.errors import ArtifactIOError, FileSystemError
from qmkwrap.core.structlog_logger import get_struct_logger
from qmkwrap.models.build import ArtifactSuffix
from qmkwrap.protocols import FileAdapterProtocol


logger = get_struct_logger(__name__)

_SEPARATOR_RE = re.compile(r"[\\/]")


def artifact_filename(keyboard: str, keymap: str, suffix: ArtifactSuffix | str) -> str:
    """Name of the artifact qmk writes to the root of the checkout.

    Path separators in the keyboard and keymap names become underscores, so
    ``planck/rev6`` + ``default`` + ``hex`` gives ``planck_rev6_default.hex``.
    """
    extension = suffix.value if isinstance(suffix, ArtifactSuffix) else suffix
    kb = _SEPARATOR_RE.sub("_", keyboard)
    km = _SEPARATOR_RE.sub("_", keymap)
    return f"{kb}_{km}.{extension}"


def relocate_artifact(
    file_adapter: FileAdapterProtocol,
    filename: str,
    source_dir: Path,
    destination_dir: Path,
) -> Path:
    """Copy ``filename`` from ``source_dir`` to ``destination_dir``.

    Returns:
        Path of the copy

    Raises:
        ArtifactIOError: Naming the side (read or write) that failed
    """
    source = source_dir / filename
    destination = destination_dir / filename

    try:
        data = file_adapter.read_bytes(source)
    except FileSystemError as e:
        raise ArtifactIOError(
            f"failed to read input file: {e}", context={"path": str(source)}
        ) from e

    try:
        file_adapter.write_bytes(destination, data)
    except FileSystemError as e:
        raise ArtifactIOError(
            f"failed to write to output file: {e}",
            context={"path": str(destination)},
        ) from e

    logger.info("artifact_copied", source=str(source), destination=str(destination))
    return destination


__all__ = ["artifact_filename", "relocate_artifact"]
