"""
Custom exception hierarchy for alphabet-soup.

All exceptions inherit from AlphabetSoupError, allowing callers to catch
all project-specific errors with a single except clause when desired.

Exception hierarchy:
    AlphabetSoupError (base)
    ├── ConfigurationError — Invalid or missing configuration
    ├── PuzzleLoadError — Malformed puzzle input (aborts the run)
    └── SearchError — Search operation failures
        └── ImpossibleWordError — Word longer than both grid dimensions
"""

from typing import Optional


class AlphabetSoupError(Exception):
    """
    Base exception for all alphabet-soup errors.

    Args:
        message: Human-readable error description.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.details:
            return f"{self.message} — {self.details}"
        return self.message


class ConfigurationError(AlphabetSoupError):
    """
    Raised when configuration is invalid or missing.

    Examples:
        - PUZZLE_ENCODING naming a codec Python does not know
    """

    pass


class PuzzleLoadError(AlphabetSoupError):
    """
    Raised when the puzzle input cannot be turned into a grid and word list.

    These errors are fatal to the run: the search engine is never invoked.

    Examples:
        - Malformed or non-numeric dimension line ("5by5", "ax5")
        - Non-positive dimensions
        - Grid cells that are not single letters
        - No words to search for
        - Missing or unreadable input file
    """

    pass


class SearchError(AlphabetSoupError):
    """
    Raised when a search operation fails.

    Examples:
        - Empty word
    """

    pass


class ImpossibleWordError(SearchError):
    """
    Raised when a word is longer than both grid dimensions.

    No straight line in the grid can hold the word, so the engine rejects
    it before scanning. The error is scoped to a single word.
    """

    def __init__(
        self,
        word: str,
        rows: int,
        columns: int,
        details: Optional[str] = None,
    ) -> None:
        self.word = word
        self.length = len(word)
        self.rows = rows
        self.columns = columns
        message = (
            f"Not possible for {word} to exist in grid: "
            f"length {self.length} exceeds {rows}x{columns}"
        )
        super().__init__(message, details)
