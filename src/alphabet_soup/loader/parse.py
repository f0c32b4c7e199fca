"""Puzzle file parser.

This module turns the plain-text puzzle format into a validated Puzzle:

    5x5
    H E L L O
    Q O R B D
    E E Y L O
    X E R Z O
    Y E O J G
    HELLO
    GOOD

The first line gives ``<rows>x<columns>``, the next ``rows`` lines hold
space-separated letters, and every remaining non-blank line is a word.

Usage:
    from alphabet_soup.loader import PuzzleLoader

    loader = PuzzleLoader()
    puzzle = loader.load("puzzle.txt")
"""

import codecs
from pathlib import Path
from typing import Iterable, Optional, Union

from alphabet_soup.config import get_settings, parse_dimensions
from alphabet_soup.core import ConfigurationError, Grid, Puzzle, PuzzleLoadError, get_logger

logger = get_logger(__name__)


class PuzzleLoader:
    """Parses puzzle text into a Grid and an ordered, unique word list.

    Every structural problem raises ``PuzzleLoadError``; a returned
    ``Puzzle`` always has a valid grid and at least one word.

    Example:
        >>> loader = PuzzleLoader()
        >>> puzzle = loader.parse("1x3\\nC A T\\ncat\\n")
        >>> puzzle.words
        ('cat',)
    """

    def __init__(self, encoding: Optional[str] = None) -> None:
        """
        Initialise the loader.

        Args:
            encoding: Text encoding for ``load()``. Defaults to
                      ``PUZZLE_ENCODING`` from settings.

        Raises:
            ConfigurationError: If the encoding is not a known codec.
        """
        encoding = encoding or get_settings().puzzle.encoding
        try:
            codecs.lookup(encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"Unknown puzzle encoding {encoding!r}",
                details=str(e),
            ) from e
        self._encoding = encoding

    def load(self, path: Union[str, Path]) -> Puzzle:
        """Read and parse a puzzle file.

        Args:
            path: Location of the puzzle file.

        Returns:
            The parsed Puzzle.

        Raises:
            PuzzleLoadError: If the file cannot be read or is malformed.
        """
        path = Path(path)
        logger.info("Loading puzzle from %s", path)

        try:
            text = path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise PuzzleLoadError(
                f"Cannot read puzzle file {path}",
                details=str(e),
            ) from e

        return self.parse(text)

    def parse(self, text: str) -> Puzzle:
        """Parse puzzle text.

        Args:
            text: Full puzzle contents.

        Returns:
            The parsed Puzzle.

        Raises:
            PuzzleLoadError: If the dimensions, grid rows, or word list
                are invalid.
        """
        lines = text.splitlines()
        if not lines or not lines[0].strip():
            raise PuzzleLoadError(
                "Empty puzzle input",
                details="The first line must give the grid size, e.g. '5x5'.",
            )

        try:
            rows, columns = parse_dimensions(lines[0])
        except ValueError as e:
            raise PuzzleLoadError(
                "The input contains invalid row and column dimensions",
                details=str(e),
            ) from e

        grid = self._parse_grid(lines[1 : 1 + rows], rows, columns)
        words = self._collect_words(lines[1 + rows :])

        if not words:
            raise PuzzleLoadError("There are no hidden words to search for")

        logger.info(
            "Loaded %dx%d grid with %d word(s)", rows, columns, len(words)
        )
        return Puzzle(grid=grid, words=words)

    def _parse_grid(self, lines: list[str], rows: int, columns: int) -> Grid:
        """Split each grid line into cells and build the Grid."""
        if len(lines) < rows:
            raise PuzzleLoadError(
                f"Puzzle declares {rows} rows but provides {len(lines)}"
            )

        cells: list[list[str]] = []
        for index, line in enumerate(lines):
            row = line.split()
            if len(row) != columns:
                raise PuzzleLoadError(
                    f"Grid row {index} has {len(row)} cells; expected {columns}",
                    details=f"Raw line: {line!r}",
                )
            cells.append(row)

        try:
            return Grid.from_rows(cells)
        except ValueError as e:
            raise PuzzleLoadError(
                "The grid inputs should only contain alphabetical characters",
                details=str(e),
            ) from e

    @staticmethod
    def _collect_words(lines: Iterable[str]) -> tuple[str, ...]:
        """Strip, drop blanks, and deduplicate keeping first-seen order."""
        stripped = (line.strip() for line in lines)
        return tuple(dict.fromkeys(word for word in stripped if word))
