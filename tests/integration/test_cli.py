"""
Integration tests for the CLI commands via Typer's CliRunner.

CliRunner invokes commands programmatically without spawning subprocesses.
Puzzles are real files in pytest's tmp directory, so these tests run the
loader and the engine end to end and check exit codes and printed lines.
"""

import logging

import pytest
from typer.testing import CliRunner

import alphabet_soup.core.logging as log_module
from alphabet_soup.cli.main import app
from tests.helpers import write_puzzle

runner = CliRunner()

IMPOSSIBLE_PUZZLE = "5x5\nH E L L O\nQ O R B D\nE E Y L O\nX E R Z O\nY E O J G\nHELLO\nBURGERS\nBYE\n"


@pytest.fixture(autouse=True)
def restore_log_level():
    """--verbose lowers the package log level; put it back afterwards."""
    logger = logging.getLogger(log_module.LOGGER_NAME)
    level = logger.level
    yield
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


# -----------------------------------------------------------------------
# Root app and version
# -----------------------------------------------------------------------


class TestRootApp:
    """The root app should show help and version."""

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Usage" in result.output or "alphabet-soup" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "solve" in result.output

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "alphabet-soup" in result.output


# -----------------------------------------------------------------------
# solve
# -----------------------------------------------------------------------


class TestSolve:
    """solve prints one line per word, in file order."""

    def test_prints_each_word(self, puzzle_file):
        result = runner.invoke(app, ["solve", str(puzzle_file)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "HELLO 0:0 0:4",
            "GOOD 4:4 1:4",
            "BYE 1:3 3:1",
        ]

    def test_not_found_line(self, tmp_path):
        path = write_puzzle(tmp_path, "1x3\nC A T\nCAT\nDOG\n")
        result = runner.invoke(app, ["solve", str(path)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "CAT 0:0 0:2",
            "DOG doesn't exist in the grid",
        ]

    def test_right_to_left(self, tmp_path):
        path = write_puzzle(tmp_path, "1x10\nO L L E H Y E S I R\nHELLO\n")
        result = runner.invoke(app, ["solve", str(path)])
        assert result.output.splitlines() == ["HELLO 0:4 0:0"]

    def test_default_path_from_settings(self, puzzle_file, monkeypatch):
        monkeypatch.setenv("PUZZLE_PATH", str(puzzle_file))
        result = runner.invoke(app, ["solve"])
        assert result.exit_code == 0
        assert "HELLO 0:0 0:4" in result.output

    def test_verbose_flag(self, puzzle_file):
        result = runner.invoke(app, ["--verbose", "solve", str(puzzle_file)])
        assert result.exit_code == 0
        assert "GOOD 4:4 1:4" in result.output

    def test_table_output(self, puzzle_file):
        result = runner.invoke(app, ["solve", str(puzzle_file), "--table"])
        assert result.exit_code == 0
        assert "Word" in result.output
        assert "HELLO" in result.output
        assert "up" in result.output


class TestSolveErrors:
    """Load errors end the run; impossible words are per-word by default."""

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["solve", str(tmp_path / "nonexistent_file.txt")])
        assert result.exit_code == 1
        assert "Failed to load puzzle" in result.output

    def test_no_words(self, tmp_path):
        path = write_puzzle(tmp_path, "1x3\nC A T\n")
        result = runner.invoke(app, ["solve", str(path)])
        assert result.exit_code == 1
        assert "no hidden words" in result.output

    def test_invalid_dimensions(self, tmp_path):
        path = write_puzzle(tmp_path, "fivexfive\nA\nA\n")
        result = runner.invoke(app, ["solve", str(path)])
        assert result.exit_code == 1
        assert "Failed to load puzzle" in result.output

    def test_impossible_word_continues(self, tmp_path):
        path = write_puzzle(tmp_path, IMPOSSIBLE_PUZZLE)
        result = runner.invoke(app, ["solve", str(path)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "HELLO 0:0 0:4",
            "BURGERS is too long to fit in the grid",
            "BYE 1:3 3:1",
        ]

    def test_abort_on_impossible_flag(self, tmp_path):
        path = write_puzzle(tmp_path, IMPOSSIBLE_PUZZLE)
        result = runner.invoke(app, ["solve", str(path), "--abort-on-impossible"])
        assert result.exit_code == 1
        assert "HELLO 0:0 0:4" in result.output
        assert "Search aborted" in result.output
        assert "BYE" not in result.output

    def test_abort_on_impossible_setting(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SEARCH_ABORT_ON_IMPOSSIBLE", "1")
        path = write_puzzle(tmp_path, IMPOSSIBLE_PUZZLE)
        result = runner.invoke(app, ["solve", str(path)])
        assert result.exit_code == 1
        assert "Search aborted" in result.output

    def test_continue_flag_overrides_abort_setting(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SEARCH_ABORT_ON_IMPOSSIBLE", "true")
        path = write_puzzle(tmp_path, IMPOSSIBLE_PUZZLE)
        result = runner.invoke(app, ["solve", str(path), "--continue-on-impossible"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "HELLO 0:0 0:4",
            "BURGERS is too long to fit in the grid",
            "BYE 1:3 3:1",
        ]

    def test_unknown_encoding_setting(self, puzzle_file, monkeypatch):
        monkeypatch.setenv("PUZZLE_ENCODING", "no-such-codec")
        result = runner.invoke(app, ["solve", str(puzzle_file)])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert "no-such-codec" in result.output

    def test_table_marks_missing_placement_with_hyphen(self, tmp_path):
        path = write_puzzle(tmp_path, "1x3\nC A T\nDOG\n")
        result = runner.invoke(app, ["solve", str(path), "--table"])
        assert result.exit_code == 0
        assert "not found" in result.output
        assert "—" not in result.output
