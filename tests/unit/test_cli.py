"""
Unit tests for the command-line entry point and the search driver.

Runs the typer application end to end over temporary trees and checks
output, exit codes and repeatability.
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from findit.cli import app
from findit.config.parser import USAGE
from findit.models.config import SearchConfig
from findit.search import run


runner = CliRunner()
PLAIN_ENV = {"NO_COLOR": "1", "FORCE_COLOR": None}


def invoke(*args):
    return runner.invoke(app, list(args), env=PLAIN_ENV)


class TestCli:
    """End-to-end test cases for the findit command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_root = Path(self.temp_dir)

        (self.test_root / "a.txt").write_text("hello world\nnothing here\nWorld map\n")
        (self.test_root / "b.bin").write_bytes(b"world\x00\x01")
        (self.test_root / "x.md").write_text("world of markdown\n")
        (self.test_root / "node_modules").mkdir()
        (self.test_root / "node_modules" / "dep.txt").write_text("world in a dependency\n")
        (self.test_root / "sub").mkdir()
        (self.test_root / "sub" / "quiet.txt").write_text("no match in here\n")

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _path(self, name):
        return str((self.test_root / name).absolute()).replace("\\", "/")

    def test_missing_query(self):
        """Test usage error and exit status without a query."""
        result = invoke("-i")

        assert result.exit_code == 1
        assert "Problem parsing argument:" in result.output
        assert "Usage: findit [opts] [startdir] string" in result.output
        assert USAGE.strip() in result.output

    def test_basic_search(self):
        """Test matches are printed per file with padded line numbers."""
        result = invoke(str(self.test_root), "world")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        header = lines.index(self._path("a.txt"))
        assert lines[header + 1] == "    1: hello world"
        assert lines[header + 2] == self._path("x.md")
        assert lines[header + 3] == "    1: world of markdown"
        assert "b.bin" not in result.output
        assert "node_modules" not in result.output
        assert "quiet.txt" not in result.output

    def test_summary_printed(self):
        result = invoke(str(self.test_root), "world")

        assert "---- search for 'world' ----------------------------" in result.output
        # root and sub; node_modules is ignored
        assert "2 directories, 3 files, 5 lines scanned; 2 matches in 2 files" in result.output

    def test_ignore_case(self):
        result = invoke("-i", str(self.test_root), "WORLD")

        assert result.exit_code == 0
        assert "    1: hello world" in result.output
        assert "    3: World map" in result.output
        assert ", nocase" in result.output

    def test_extension_filter(self):
        """Test -x restricts the search to one extension."""
        result = invoke(str(self.test_root), "-x", "md", "world")

        assert result.exit_code == 0
        assert self._path("x.md") in result.output
        assert self._path("a.txt") not in result.output
        assert ", ext: md" in result.output

    def test_invert_match(self):
        """Test -L lists only files without any match."""
        result = invoke("-L", str(self.test_root), "world")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert self._path("sub/quiet.txt") in lines
        assert self._path("a.txt") not in lines
        assert "    1: hello world" not in lines

    def test_skipped_file_reported_once(self):
        """Test an undecodable file is reported as skipped exactly once."""
        (self.test_root / "bad.txt").write_bytes(b"world \xff\xfe\n")

        result = invoke(str(self.test_root), "world")

        assert result.exit_code == 0
        assert result.output.count(f"{self._path('bad.txt')} skipped") == 1
        assert result.output.count(self._path("bad.txt")) == 1

    def test_debug_tracing(self):
        result = invoke("-d", str(self.test_root), "world")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == f"rootdir: {self.test_root}, query: world"
        assert "ignoring node_modules" in lines
        assert "reading a.txt" in lines
        assert any(line.startswith("visiting ") for line in lines)

    def test_no_debug_tracing_by_default(self):
        result = invoke(str(self.test_root), "world")

        assert "rootdir:" not in result.output
        assert "ignoring node_modules" not in result.output

    def test_missing_root_is_application_error(self):
        """Test an unreadable root is reported once, without walker noise."""
        result = invoke(str(self.test_root / "missing"), "world")

        assert result.exit_code == 1
        assert result.output.count("Application error") == 1
        assert "Error walking directory" not in result.output

    def test_undecodable_file_name(self):
        """Test a file whose name is not valid UTF-8 is searched and printed."""
        try:
            (self.test_root / os.fsdecode(b"bad\xff.txt")).write_text("world\n")
        except (OSError, UnicodeEncodeError):
            pytest.skip("filesystem rejects non-UTF-8 file names")

        result = invoke(str(self.test_root), "world")

        assert result.exit_code == 0
        lines = result.output.splitlines()
        header = lines.index(self._path("bad\ufffd.txt"))
        assert lines[header + 1] == "    1: world"

    def test_tabs_and_control_characters_printed_verbatim(self):
        """Test matching lines reach the output exactly as stored."""
        (self.test_root / "a.go").write_text("\tworld\tx\na\x0cworld\x07b\n")

        result = invoke(str(self.test_root), "-x", "go", "world")

        assert result.exit_code == 0
        lines = result.output.split("\n")
        header = lines.index(self._path("a.go"))
        assert lines[header + 1] == "    1: \tworld\tx"
        assert lines[header + 2] == "    2: a\x0cworld\x07b"

    def test_repeatable_output(self):
        """Test two runs over an unmodified tree print identical output."""
        first = invoke(str(self.test_root), "world")
        second = invoke(str(self.test_root), "world")

        assert first.output == second.output


class TestRun:
    """Test cases for the search driver."""

    def setup_method(self):
        """Set up test fixtures."""
        self.temp_dir = tempfile.mkdtemp()
        self.test_root = Path(self.temp_dir)

    def teardown_method(self):
        """Clean up test fixtures."""
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def test_run_returns_stats(self, capsys):
        (self.test_root / "a.txt").write_text("hello world")
        (self.test_root / "b.bin").write_bytes(b"world")

        stats = run(SearchConfig(query="world", root_dir=str(self.test_root)))

        assert stats.directories == 1
        assert stats.files == 1
        assert stats.lines_matched == 1
        assert "hello world" in capsys.readouterr().out
