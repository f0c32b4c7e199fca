"""Application-wide constants."""

# Puzzle input
DEFAULT_PUZZLE_PATH = "./puzzle.txt"
DEFAULT_ENCODING = "utf-8"

# Separator between row and column counts on the first line ("5x5")
DIMENSION_SEPARATOR = "x"

# Output lines for words without a placement
NOT_FOUND_TEMPLATE = "{word} doesn't exist in the grid"
IMPOSSIBLE_TEMPLATE = "{word} is too long to fit in the grid"


def parse_dimensions(line: str) -> tuple[int, int]:
    """Parse a ``<rows>x<columns>`` dimension line.

    Accepts ``"5x5"``, ``" 10 x 3 "`` and ``"7X3"``.

    Args:
        line: First line of the puzzle input.

    Returns:
        ``(rows, columns)`` as positive integers.

    Raises:
        ValueError: If the line is malformed, non-numeric, or either
            dimension is not positive.
    """
    parts = line.strip().lower().split(DIMENSION_SEPARATOR)
    if len(parts) != 2:
        raise ValueError(
            f"Expected '<rows>{DIMENSION_SEPARATOR}<columns>', got {line.strip()!r}"
        )

    try:
        rows, columns = (int(part.strip()) for part in parts)
    except ValueError:
        raise ValueError(
            f"Grid dimensions must be whole numbers, got {line.strip()!r}"
        ) from None

    if rows <= 0 or columns <= 0:
        raise ValueError(f"Grid size {rows}x{columns} is not valid")

    return rows, columns
