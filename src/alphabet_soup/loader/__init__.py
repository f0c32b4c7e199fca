"""Loader module — read puzzle files into Grid and word list.

Usage:
    from alphabet_soup.loader import PuzzleLoader

    puzzle = PuzzleLoader().load("puzzle.txt")
"""

from alphabet_soup.loader.parse import PuzzleLoader

__all__ = [
    "PuzzleLoader",
]
