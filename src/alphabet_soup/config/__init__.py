"""Configuration module — settings and constants."""

from alphabet_soup.config.constants import (
    DEFAULT_ENCODING,
    DEFAULT_PUZZLE_PATH,
    DIMENSION_SEPARATOR,
    IMPOSSIBLE_TEMPLATE,
    NOT_FOUND_TEMPLATE,
    parse_dimensions,
)
from alphabet_soup.config.settings import (
    PuzzleSettings,
    SearchSettings,
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    # Constants
    "DEFAULT_PUZZLE_PATH",
    "DEFAULT_ENCODING",
    "DIMENSION_SEPARATOR",
    "NOT_FOUND_TEMPLATE",
    "IMPOSSIBLE_TEMPLATE",
    "parse_dimensions",
    # Settings
    "PuzzleSettings",
    "SearchSettings",
    "Settings",
    "get_settings",
    "reload_settings",
]
