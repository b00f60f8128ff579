"""Tests for header rendering and HeaderWriter."""

from pathlib import Path
from unittest.mock import Mock

import pytest

from qmkwrap.adapters.file_adapter import FileSystemAdapter
from qmkwrap.build.header import PLACEHOLDER_VERSION, HeaderWriter, render_header
from qmkwrap.core.errors import FileSystemError, HeaderWriteError
from qmkwrap.protocols import FileAdapterProtocol


class TestRenderHeader:
    """Test render_header()."""

    def test_armed_content(self):
        content = render_header("2024-01-02 03:04:05 abcdef", "bdfe", "2345")

        assert content == (
            b"#pragma once\n"
            b'#define QMKWRAP_VERSION "2024-01-02 03:04:05 abcdef"\n'
            b'#define QMKWRAP_CODE_1 "bdfe"\n'
            b'#define QMKWRAP_CODE_2 "2345"\n'
        )

    def test_placeholder_content(self):
        content = render_header(PLACEHOLDER_VERSION, "", "").decode("utf-8")

        assert content.splitlines() == [
            "#pragma once",
            '#define QMKWRAP_VERSION "auto-generated"',
            '#define QMKWRAP_CODE_1 ""',
            '#define QMKWRAP_CODE_2 ""',
        ]
        assert content.endswith("\n")

    def test_custom_prefix(self):
        content = render_header("v", "a", "b", macro_prefix="LEEP").decode("utf-8")

        assert '#define LEEP_VERSION "v"' in content
        assert '#define LEEP_CODE_1 "a"' in content
        assert '#define LEEP_CODE_2 "b"' in content

    def test_values_are_not_escaped(self):
        content = render_header("v", 'a"b', "c\\d").decode("utf-8")

        assert '#define QMKWRAP_CODE_1 "a"b"' in content
        assert '#define QMKWRAP_CODE_2 "c\\d"' in content


class TestHeaderWriter:
    """Test HeaderWriter arm/disarm."""

    def test_arm_writes_real_values(self, tmp_path):
        path = tmp_path / "users" / "me" / "codes.h"
        writer = HeaderWriter(FileSystemAdapter(), path)

        writer.arm("label", "one", "two")

        assert path.read_bytes() == render_header("label", "one", "two")

    def test_disarm_writes_placeholder(self, tmp_path):
        path = tmp_path / "codes.h"
        writer = HeaderWriter(FileSystemAdapter(), path)
        writer.arm("label", "one", "two")

        writer.disarm()

        assert path.read_bytes() == render_header(PLACEHOLDER_VERSION, "", "")

    def test_write_failure_raises_header_write_error(self):
        adapter = Mock(spec=FileAdapterProtocol)
        adapter.write_bytes.side_effect = FileSystemError(
            "File operation 'write_bytes' failed on '/x/codes.h': Permission denied",
            path="/x/codes.h",
            operation="write_bytes",
        )
        writer = HeaderWriter(adapter, Path("/x/codes.h"))

        with pytest.raises(HeaderWriteError, match="Permission denied"):
            writer.disarm()

    def test_uses_macro_prefix(self):
        adapter = Mock(spec=FileAdapterProtocol)
        writer = HeaderWriter(adapter, Path("/x/codes.h"), macro_prefix="LEEP")

        writer.arm("v", "a", "b")

        adapter.write_bytes.assert_called_once_with(
            Path("/x/codes.h"), render_header("v", "a", "b", "LEEP")
        )
