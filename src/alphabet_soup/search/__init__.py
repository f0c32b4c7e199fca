"""Search module — locate words in a letter grid.

This module provides:
    - find_word: Core scan returning the first Placement or None
    - WordSearchEngine: Batch facade producing one WordResult per word

Usage:
    from alphabet_soup.search import WordSearchEngine

    results = WordSearchEngine().solve(puzzle)
"""

from alphabet_soup.search.engine import WordSearchEngine, find_word

__all__ = [
    "WordSearchEngine",
    "find_word",
]
