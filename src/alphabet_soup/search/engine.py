"""
Word search over a letter grid.

``find_word`` is the core algorithm: it scans the grid row by row for
cells holding the word's first letter and, from each one, tries the
eight directions in a fixed order. The first direction that spells the whole
word wins. ``WordSearchEngine`` wraps it for a batch of words and turns
each outcome into a ``WordResult``.

Usage:
    from alphabet_soup.search import WordSearchEngine, find_word

    placement = find_word(grid, "HELLO")
    results = WordSearchEngine().solve(puzzle)
"""

from typing import Callable, Optional

from alphabet_soup.config import get_settings
from alphabet_soup.core import (
    Coordinate,
    Direction,
    Grid,
    ImpossibleWordError,
    Placement,
    Puzzle,
    SearchError,
    SearchStatus,
    WordResult,
    get_logger,
)

logger = get_logger(__name__)


def _fits(grid: Grid, origin: Coordinate, direction: Direction, length: int) -> bool:
    """Return True if ``length`` cells from ``origin`` stay inside the grid."""
    row, column = origin
    if direction.d_col < 0 and length > column + 1:
        return False
    if direction.d_col > 0 and length > grid.columns - column:
        return False
    if direction.d_row < 0 and length > row + 1:
        return False
    if direction.d_row > 0 and length > grid.rows - row:
        return False
    return True


def _spells_from(grid: Grid, word: str, origin: Coordinate, direction: Direction) -> bool:
    """Walk from ``origin`` along ``direction`` comparing each letter."""
    cell = origin
    for letter in word:
        if not grid.contains(cell) or grid.letter_at(cell) != letter:
            return False
        cell = direction.step(cell)
    return True


def find_word(grid: Grid, word: str) -> Optional[Placement]:
    """
    Find the first placement of ``word`` in ``grid``.

    Cells are visited in row-major order; from each cell that holds the
    word's first letter the directions are tried in ``Direction`` order
    (left, right, up, down, up-left, up-right, down-left, down-right).
    Matching ignores case.

    Args:
        grid: The letter grid. Never modified.
        word: Word to look for.

    Returns:
        The first matching Placement, or None if the word is absent.

    Raises:
        SearchError: If the word is empty.
        ImpossibleWordError: If the word is longer than both grid
            dimensions and so cannot lie on any straight line.
    """
    if not word:
        raise SearchError("Empty word", details="Cannot search for an empty word.")

    length = len(word)
    if length > grid.rows and length > grid.columns:
        raise ImpossibleWordError(word, grid.rows, grid.columns)

    target = word.upper()
    if len(target) != length:
        # A letter like "ß" uppercases to two; no single-letter cell matches it
        logger.debug("%s: uppercases to %s, which no grid line can spell", word, target)
        return None
    first = target[0]

    for row in range(grid.rows):
        for column in range(grid.columns):
            if grid[row][column] != first:
                continue
            origin = (row, column)
            for direction in Direction:
                if not _fits(grid, origin, direction, length):
                    continue
                if _spells_from(grid, target, origin, direction):
                    return Placement.from_origin(origin, direction, length)

    return None


class WordSearchEngine:
    """
    Resolves words against a grid, one WordResult per word.

    Words too long for the grid become IMPOSSIBLE results so the rest of
    the batch still runs. With ``abort_on_impossible`` the
    ``ImpossibleWordError`` propagates instead and ends the batch.

    Example:
        >>> engine = WordSearchEngine()
        >>> for result in engine.solve(puzzle):
        ...     print(result.to_output())
    """

    def __init__(self, abort_on_impossible: Optional[bool] = None) -> None:
        """
        Initialise the engine.

        Args:
            abort_on_impossible: Re-raise ``ImpossibleWordError`` instead of
                reporting it per word. Defaults to
                ``SEARCH_ABORT_ON_IMPOSSIBLE`` from settings.
        """
        if abort_on_impossible is None:
            abort_on_impossible = get_settings().search.abort_on_impossible
        self._abort_on_impossible = abort_on_impossible

        logger.debug(
            "WordSearchEngine initialised: abort_on_impossible=%s",
            self._abort_on_impossible,
        )

    @property
    def abort_on_impossible(self) -> bool:
        return self._abort_on_impossible

    def search(self, grid: Grid, word: str) -> WordResult:
        """
        Search the grid for a single word.

        Args:
            grid: The letter grid.
            word: Word to look for; its casing is kept in the result.

        Returns:
            FOUND with a placement, NOT_FOUND, or IMPOSSIBLE.

        Raises:
            SearchError: If the word is empty.
            ImpossibleWordError: If the word cannot fit and the engine
                aborts on impossible words.
        """
        try:
            placement = find_word(grid, word)
        except ImpossibleWordError as e:
            if self._abort_on_impossible:
                raise
            logger.info("%s", e.message)
            return WordResult(
                word=word,
                status=SearchStatus.IMPOSSIBLE,
                details=e.message,
            )

        if placement is None:
            logger.debug("%s: not found", word)
            return WordResult(word=word, status=SearchStatus.NOT_FOUND)

        logger.debug(
            "%s: found %s going %s",
            word,
            placement.to_output(),
            placement.direction.name,
        )
        return WordResult(word=word, status=SearchStatus.FOUND, placement=placement)

    def solve(
        self,
        puzzle: Puzzle,
        on_result: Optional[Callable[[WordResult], None]] = None,
    ) -> list[WordResult]:
        """
        Search for every word of the puzzle, in word-list order.

        Args:
            puzzle: Loaded grid and words.
            on_result: Called with each result as soon as it is ready, so
                callers can print progressively.

        Returns:
            One WordResult per word, in the puzzle's word order.

        Raises:
            ImpossibleWordError: If a word cannot fit and the engine aborts
                on impossible words. Results already passed to
                ``on_result`` stay delivered.
        """
        results: list[WordResult] = []
        for word in puzzle.words:
            result = self.search(puzzle.grid, word)
            results.append(result)
            if on_result is not None:
                on_result(result)

        found = sum(1 for r in results if r.found)
        logger.info(
            "Solved %dx%d grid: %d/%d word(s) found",
            puzzle.grid.rows,
            puzzle.grid.columns,
            found,
            len(results),
        )
        return results
