"""Core models for qmkwrap."""

from .base import QmkWrapBaseModel
from .build import ArtifactSuffix, BuildRequest, BuildResult
from .results import BaseResult


__all__ = [
    "ArtifactSuffix",
    "BaseResult",
    "BuildRequest",
    "BuildResult",
    "QmkWrapBaseModel",
]
