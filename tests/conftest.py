"""
Shared pytest fixtures for alphabet-soup tests.

This module provides reusable puzzles and temporary files used across
both unit and integration tests:

    - hello_grid: 5x5 grid with HELLO, GOOD and BYE laid out separately
    - overlap_grid: 5x5 grid where the three words share letters
    - sample_puzzle_text: hello_grid in the file format, plus its words
    - puzzle_file: sample_puzzle_text written to a temporary file
    - isolated_settings: settings singleton rebuilt from a clean environment
"""

import textwrap

import pytest

import alphabet_soup.config.settings as settings_module
from alphabet_soup.core.types import Grid


# ---------------------------------------------------------------------------
# Grids
# ---------------------------------------------------------------------------


@pytest.fixture
def hello_grid() -> Grid:
    """
    HELLO across the top row, GOOD up the last column, BYE on a diagonal.
    """
    return Grid.from_strings(["HELLO", "QORBD", "EEYLO", "XERZO", "YEOJG"])


@pytest.fixture
def overlap_grid() -> Grid:
    """
    HELLO on the up-right diagonal, GOOD down the first column, BYE leftward.
    """
    return Grid.from_strings(["GUSLO", "OORLA", "OELLO", "DEYBF", "HEOJG"])


# ---------------------------------------------------------------------------
# Puzzle text and files
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_puzzle_text() -> str:
    return textwrap.dedent(
        """\
        5x5
        H E L L O
        Q O R B D
        E E Y L O
        X E R Z O
        Y E O J G
        HELLO
        GOOD
        BYE
        """
    )


@pytest.fixture
def puzzle_file(tmp_path, sample_puzzle_text):
    """
    The sample puzzle written inside pytest's tmp directory.
    """
    path = tmp_path / "puzzle.txt"
    path.write_text(sample_puzzle_text, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Settings isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Clear alphabet-soup env vars and drop the cached Settings singleton.

    A developer's .env or shell exports must not change test outcomes.
    """
    for name in ("PUZZLE_PATH", "PUZZLE_ENCODING", "SEARCH_ABORT_ON_IMPOSSIBLE"):
        monkeypatch.delenv(name, raising=False)
    settings_module._settings_instance = None
    yield
    settings_module._settings_instance = None
