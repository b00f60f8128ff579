"""Tests for VersionResolver."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from qmkwrap.build.version import VERSION_COMMAND, VersionResolver
from qmkwrap.core.errors import ProcessError, VersionResolutionError
from qmkwrap.protocols import ProcessAdapterProtocol


@pytest.fixture
def process_adapter() -> Mock:
    return Mock(spec=ProcessAdapterProtocol)


class TestVersionResolver:
    """Test VersionResolver.resolve()."""

    def test_truncates_to_six_characters(self, process_adapter):
        process_adapter.run_capture.return_value = (
            0,
            ["0123456789abcdef0123456789abcdef01234567"],
            [],
        )

        version = VersionResolver(process_adapter).resolve(Path("/qmk"))

        assert version == "012345"

    def test_runs_git_in_qmk_dir(self, process_adapter):
        process_adapter.run_capture.return_value = (0, ["abcdef123"], [])

        VersionResolver(process_adapter).resolve(Path("/qmk"))

        process_adapter.run_capture.assert_called_once_with(
            VERSION_COMMAND, cwd=Path("/qmk")
        )

    def test_short_output_returned_whole(self, process_adapter):
        process_adapter.run_capture.return_value = (0, ["abc"], [])

        assert VersionResolver(process_adapter).resolve(Path("/qmk")) == "abc"

    def test_strips_whitespace(self, process_adapter):
        process_adapter.run_capture.return_value = (0, ["  fedcba9876  "], [])

        assert VersionResolver(process_adapter).resolve(Path("/qmk")) == "fedcba"

    def test_non_zero_exit_raises(self, process_adapter):
        process_adapter.run_capture.return_value = (
            128,
            [],
            ["fatal: not a git repository"],
        )

        with pytest.raises(VersionResolutionError, match="not a git repository"):
            VersionResolver(process_adapter).resolve(Path("/qmk"))

    def test_launch_failure_raises(self, process_adapter):
        process_adapter.run_capture.side_effect = ProcessError(
            "Failed to run 'git rev-parse HEAD': not found"
        )

        with pytest.raises(VersionResolutionError, match="failed to resolve version"):
            VersionResolver(process_adapter).resolve(Path("/qmk"))

    def test_custom_command_and_length(self, process_adapter):
        process_adapter.run_capture.return_value = (0, ["v1.2.3-4-gabc"], [])
        resolver = VersionResolver(
            process_adapter, command=["git", "describe"], length=6
        )

        assert resolver.resolve(Path("/qmk")) == "v1.2.3"
        process_adapter.run_capture.assert_called_once_with(
            ["git", "describe"], cwd=Path("/qmk")
        )
