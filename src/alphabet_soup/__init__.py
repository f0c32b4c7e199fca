"""alphabet-soup — find hidden words in a letter grid.

This package loads a word-search puzzle (a grid of letters plus a word
list) and reports where each word starts and ends, searching all eight
straight directions.

Usage:
    from alphabet_soup import __version__
    from alphabet_soup.loader import PuzzleLoader
    from alphabet_soup.search import WordSearchEngine, find_word
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("alphabet-soup")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Re-export core types for convenience.
from alphabet_soup.core import (
    AlphabetSoupError,
    Direction,
    Grid,
    Placement,
    Puzzle,
    SearchStatus,
    WordResult,
)

__all__ = [
    "__version__",
    # Core types
    "Direction",
    "Grid",
    "Placement",
    "Puzzle",
    "SearchStatus",
    "WordResult",
    # Base exception
    "AlphabetSoupError",
]
