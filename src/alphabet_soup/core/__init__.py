"""Core module — types, exceptions, and logging.

This module provides the foundational components used throughout the package:
    - Data types (Direction, Grid, Placement, SearchStatus, WordResult, Puzzle)
    - Exception hierarchy (AlphabetSoupError and subclasses)
    - Logging utilities (get_logger, configure_logging, set_level)

Usage:
    from alphabet_soup.core import (
        Grid,
        Placement,
        PuzzleLoadError,
        get_logger,
    )
"""

from alphabet_soup.core.exceptions import (
    AlphabetSoupError,
    ConfigurationError,
    ImpossibleWordError,
    PuzzleLoadError,
    SearchError,
)
from alphabet_soup.core.logging import (
    configure_logging,
    get_logger,
    set_level,
)
from alphabet_soup.core.types import (
    Coordinate,
    Direction,
    Grid,
    Placement,
    Puzzle,
    SearchStatus,
    WordResult,
)

__all__ = [
    # Types
    "Coordinate",
    "Direction",
    "Grid",
    "Placement",
    "Puzzle",
    "SearchStatus",
    "WordResult",
    # Exceptions
    "AlphabetSoupError",
    "ConfigurationError",
    "PuzzleLoadError",
    "SearchError",
    "ImpossibleWordError",
    # Logging
    "get_logger",
    "configure_logging",
    "set_level",
]
