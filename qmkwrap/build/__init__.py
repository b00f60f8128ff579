"""Secret-injecting compile pipeline."""

from .artifacts import artifact_filename, relocate_artifact
from .cipher import decode, encode, rotate
from .header import PLACEHOLDER_VERSION, HeaderWriter, render_header
from .make_test import MakeTestResult, run_make_test
from .orchestrator import BuildOrchestrator, create_build_orchestrator
from .version import VersionResolver


__all__ = [
    "BuildOrchestrator",
    "HeaderWriter",
    "MakeTestResult",
    "PLACEHOLDER_VERSION",
    "VersionResolver",
    "artifact_filename",
    "create_build_orchestrator",
    "decode",
    "encode",
    "relocate_artifact",
    "render_header",
    "rotate",
    "run_make_test",
]
