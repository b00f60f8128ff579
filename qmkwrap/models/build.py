"""Models describing a single compile request and its outcome."""

from enum import Enum
from pathlib import Path

from pydantic import ConfigDict, Field

from qmkwrap.models.base import QmkWrapBaseModel
from qmkwrap.models.results import BaseResult


class ArtifactSuffix(str, Enum):
    """File extension of the artifact produced by ``qmk compile``."""

    HEX = "hex"
    BIN = "bin"


class BuildRequest(QmkWrapBaseModel):
    """Inputs of one compile run, resolved by the CLI layer.

    Codes are secret material: the model hides them from ``repr``.
    """

    model_config = ConfigDict(frozen=True, use_enum_values=False)

    keyboard: str
    keymap: str
    code1: str = Field(default="", repr=False)
    code2: str = Field(default="", repr=False)
    use_hash: bool = False
    suffix: ArtifactSuffix = ArtifactSuffix.BIN


class BuildResult(BaseResult):
    """Outcome of a compile run.

    ``errors`` holds the primary failure. ``critical_errors`` holds notices that
    must reach the user on top of it, such as a header that could not be wiped.
    """

    version_label: str | None = None
    artifact_path: Path | None = None
    error_kind: str | None = None
    critical_errors: list[str] = Field(default_factory=list)
    build_stderr: list[str] = Field(default_factory=list)

    def add_critical(self, message: str) -> None:
        """Record a critical notice and mark the result as failed."""
        self.critical_errors.append(message)
        self.success = False

    @property
    def primary_error(self) -> str | None:
        """The first error recorded, if any."""
        return self.errors[0] if self.errors else None


__all__ = ["ArtifactSuffix", "BuildRequest", "BuildResult"]
