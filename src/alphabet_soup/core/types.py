"""Core data types for alphabet-soup.

This module defines the domain objects shared by the loader, the search
engine, and the CLI:
    - Direction: One of the eight straight lines through a cell
    - Grid: Immutable rectangular matrix of uppercase letters
    - Placement: Start/end coordinates of a word along one direction
    - SearchStatus / WordResult: Outcome of searching for one word
    - Puzzle: A grid together with the words to find

Design notes:
    - Dataclasses are frozen: nothing is mutated after loading
    - Coordinates are (row, column) tuples, zero-based, row-major
    - Direction declaration order is the search tie-break order
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from alphabet_soup.config.constants import (
    IMPOSSIBLE_TEMPLATE,
    NOT_FOUND_TEMPLATE,
)

Coordinate = tuple[int, int]


class Direction(Enum):
    """Unit step (row delta, column delta) for each search direction.

    Iterating the enum yields the canonical search order:
    left, right, up, down, up-left, up-right, down-left, down-right.
    """

    LEFT = (0, -1)
    RIGHT = (0, 1)
    UP = (-1, 0)
    DOWN = (1, 0)
    UP_LEFT = (-1, -1)
    UP_RIGHT = (-1, 1)
    DOWN_LEFT = (1, -1)
    DOWN_RIGHT = (1, 1)

    @property
    def d_row(self) -> int:
        return self.value[0]

    @property
    def d_col(self) -> int:
        return self.value[1]

    def step(self, cell: Coordinate, count: int = 1) -> Coordinate:
        """Return the cell ``count`` steps away from ``cell``."""
        row, column = cell
        return row + self.d_row * count, column + self.d_col * count


@dataclass(frozen=True)
class Grid:
    """Rectangular matrix of single uppercase letters.

    Cells are uppercased on construction. Rows must be non-empty, all of
    the same length, and contain only single alphabetic characters.

    Attributes:
        cells: Rows of letters, indexed ``cells[row][column]``

    Example:
        >>> grid = Grid.from_strings(["HELLO", "QORBD"])
        >>> grid.rows, grid.columns
        (2, 5)
        >>> grid[0][4]
        'O'
    """

    cells: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        """Validate shape and normalise letters to uppercase."""
        if not self.cells or not self.cells[0]:
            raise ValueError("Grid must have at least one row and one column")

        width = len(self.cells[0])
        normalised = []
        for index, row in enumerate(self.cells):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has {len(row)} cells; expected {width}"
                )
            upper = tuple(letter.upper() for letter in row)
            for letter, folded in zip(row, upper):
                # upper() can expand a letter, e.g. "ß" becomes "SS"
                if len(letter) != 1 or not letter.isalpha() or len(folded) != 1:
                    raise ValueError(
                        f"Row {index} contains {letter!r}; cells must be single letters"
                    )
            normalised.append(upper)

        # Use object.__setattr__ because the dataclass is frozen
        object.__setattr__(self, "cells", tuple(normalised))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> "Grid":
        """Build a grid from any sequence of letter sequences."""
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from one string per row (``"HELLO"``)."""
        return cls.from_rows([list(row) for row in rows])

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def columns(self) -> int:
        return len(self.cells[0])

    def __getitem__(self, row: int) -> tuple[str, ...]:
        return self.cells[row]

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self.cells)

    def contains(self, cell: Coordinate) -> bool:
        """Return True if ``cell`` lies within the grid bounds."""
        row, column = cell
        return 0 <= row < self.rows and 0 <= column < self.columns

    def letter_at(self, cell: Coordinate) -> str:
        row, column = cell
        return self.cells[row][column]


@dataclass(frozen=True)
class Placement:
    """Where a word sits in the grid.

    ``start`` is the cell holding the word's first letter and ``end`` the
    cell holding its last letter, so ``end`` can be numerically smaller
    than ``start`` for leftward or upward directions.

    Attributes:
        start: (row, column) of the first letter
        end: (row, column) of the last letter
        direction: Direction walked from start to end
    """

    start: Coordinate
    end: Coordinate
    direction: Direction

    @classmethod
    def from_origin(
        cls, origin: Coordinate, direction: Direction, length: int
    ) -> "Placement":
        return cls(origin, direction.step(origin, length - 1), direction)

    @property
    def length(self) -> int:
        """Number of cells covered, start and end included."""
        return max(
            abs(self.end[0] - self.start[0]),
            abs(self.end[1] - self.start[1]),
        ) + 1

    def cells(self) -> Iterator[Coordinate]:
        """Yield every covered cell from start to end."""
        for index in range(self.length):
            yield self.direction.step(self.start, index)

    def to_output(self) -> str:
        """Format as ``startRow:startCol endRow:endCol``."""
        return (
            f"{self.start[0]}:{self.start[1]} "
            f"{self.end[0]}:{self.end[1]}"
        )


class SearchStatus(Enum):
    """Outcome of searching the grid for a single word."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    IMPOSSIBLE = "impossible"


@dataclass(frozen=True)
class WordResult:
    """The result of searching for one word.

    Attributes:
        word: The word exactly as supplied (casing preserved)
        status: FOUND, NOT_FOUND, or IMPOSSIBLE
        placement: Set only when status is FOUND
        details: Optional human-readable context (e.g. why it is impossible)
    """

    word: str
    status: SearchStatus
    placement: Optional[Placement] = None
    details: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    def to_output(self) -> str:
        """Render the single output line for this word."""
        if self.placement is not None:
            return f"{self.word} {self.placement.to_output()}"
        if self.status is SearchStatus.IMPOSSIBLE:
            return IMPOSSIBLE_TEMPLATE.format(word=self.word)
        return NOT_FOUND_TEMPLATE.format(word=self.word)


@dataclass(frozen=True)
class Puzzle:
    """A loaded puzzle: the grid plus the words to find, in file order.

    Attributes:
        grid: The letter grid
        words: Unique, non-empty words in first-seen order
    """

    grid: Grid
    words: tuple[str, ...]
