"""Core test fixtures for the qmkwrap project."""

import logging
import os
from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
import structlog
import yaml
from typer.testing import CliRunner

from qmkwrap.adapters.file_adapter import FileSystemAdapter
from qmkwrap.config.models import CipherKeys, PipelineConfig
from qmkwrap.protocols import ProcessAdapterProtocol


FIXED_NOW = datetime(2024, 1, 2, 3, 4, 5)
FAKE_COMMIT = "abcdef0123456789abcdef0123456789abcdef01"


# ---- Base Fixtures ----


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def fixed_clock() -> Callable[[], datetime]:
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


# ---- Test Isolation Fixtures ----


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[None, None, None]:
    """Keep user configuration and QMKWRAP_ variables out of every test.

    Runs each test from an empty working directory with XDG_CONFIG_HOME
    pointing into tmp_path, and resets logging afterwards.
    """
    for key in list(os.environ):
        if key.upper().startswith("QMKWRAP_"):
            monkeypatch.delenv(key)

    work_dir = tmp_path / "cwd"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    yield

    logging.getLogger().handlers = []
    structlog.reset_defaults()


# ---- Pipeline Fixtures ----


@pytest.fixture
def qmk_dir(tmp_path: Path) -> Path:
    """Empty QMK checkout directory."""
    path = tmp_path / "qmk_firmware"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Empty output directory."""
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def pipeline_config(qmk_dir: Path, output_dir: Path) -> PipelineConfig:
    """Complete pipeline configuration rooted in tmp_path."""
    return PipelineConfig(qmk_dir=qmk_dir, output_dir=output_dir)


@pytest.fixture
def cipher_keys() -> CipherKeys:
    return CipherKeys(key1="abcd", key2="1234")


@pytest.fixture
def recording_file_adapter() -> Mock:
    """Real file adapter whose calls are recorded."""
    return Mock(wraps=FileSystemAdapter())


@pytest.fixture
def mock_process_adapter() -> Mock:
    """Process adapter reporting a git hash and a successful qmk compile.

    ``run_streaming`` pushes one line through the stdout sink, like a real build.
    """
    adapter = Mock(spec=ProcessAdapterProtocol)
    adapter.run_capture.return_value = (0, [FAKE_COMMIT], [])

    def run_streaming(
        command: list[str],
        cwd: Path | None = None,
        stdout_sink: Callable[[str], None] | None = None,
    ) -> tuple[int, list[str], list[str]]:
        if stdout_sink is not None:
            stdout_sink("Compiling keymap")
        return 0, ["Compiling keymap"], []

    adapter.run_streaming.side_effect = run_streaming
    return adapter


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[dict[str, Any]], Path]:
    """Write a YAML configuration file and return its path."""

    def _write(data: dict[str, Any], name: str = "qmkwrap.yaml") -> Path:
        path = tmp_path / name
        with path.open("w") as f:
            yaml.dump(data, f)
        return path

    return _write
