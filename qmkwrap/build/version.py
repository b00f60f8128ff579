"""Resolve a short identifier for the state of the QMK checkout."""

from pathlib import Path

from qmkwrap.core.errors import ProcessError, VersionResolutionError
from qmkwrap.core.structlog_logger import get_struct_logger
from qmkwrap.protocols import ProcessAdapterProtocol


logger = get_struct_logger(__name__)

VERSION_COMMAND = ["git", "rev-parse", "HEAD"]
VERSION_LENGTH = 6


class VersionResolver:
    """Runs the version-control query and truncates its answer."""

    def __init__(
        self,
        process_adapter: ProcessAdapterProtocol,
        command: list[str] | None = None,
        length: int = VERSION_LENGTH,
    ):
        self.process_adapter = process_adapter
        self.command = command or list(VERSION_COMMAND)
        self.length = length

    def resolve(self, qmk_dir: Path) -> str:
        """Return the first ``length`` characters of the query output.

        Raises:
            VersionResolutionError: If the command cannot run or exits non-zero
        """
        try:
            return_code, stdout, stderr = self.process_adapter.run_capture(
                self.command, cwd=qmk_dir
            )
        except ProcessError as e:
            raise VersionResolutionError(f"failed to resolve version: {e}") from e

        if return_code != 0:
            detail = "\n".join(stderr).strip() or f"exit code {return_code}"
            logger.warning(
                "version_query_failed", return_code=return_code, qmk_dir=str(qmk_dir)
            )
            raise VersionResolutionError(
                f"failed to resolve version: {' '.join(self.command)}: {detail}",
                context={"return_code": return_code},
            )

        version = "".join(stdout).strip()
        return version[: self.length]


__all__ = ["VERSION_COMMAND", "VERSION_LENGTH", "VersionResolver"]
