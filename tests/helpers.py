"""
Shared test helper utilities for alphabet-soup tests.

Plain functions (not pytest fixtures) that can be imported directly
by test modules.
"""

from alphabet_soup.core.types import Grid, Placement


def spell(grid: Grid, placement: Placement) -> str:
    """Read the letters a placement covers, start to end."""
    return "".join(grid.letter_at(cell) for cell in placement.cells())


def write_puzzle(tmp_path, text: str, name: str = "puzzle.txt"):
    """Write puzzle text to a file under ``tmp_path`` and return its path."""
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path
