"""
Package logger for alphabet-soup.

Every module logs through a child of the ``alphabet_soup`` logger, which
writes to stderr only. Solved lines go to stdout, so ``alphabet-soup solve
puzzle.txt > answers.txt`` captures answers and nothing else.

``LOG_LEVEL`` (DEBUG, INFO, WARNING, ERROR, CRITICAL) picks the starting
level; unset or unknown values mean WARNING. ``--verbose`` switches to
DEBUG through ``set_level``.

Usage:
    from alphabet_soup.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Loaded %dx%d grid", rows, columns)
"""

import logging
import os
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "alphabet_soup"

# Used when stderr is not a terminal (pipes, CI, CliRunner)
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_configured = False


def _get_log_level() -> int:
    """Level named by ``LOG_LEVEL``, or WARNING."""
    level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
    return getattr(logging, level_name, logging.WARNING)


def configure_logging(
    level: Optional[int] = None,
    use_rich: bool = True,
) -> None:
    """
    Attach a single stderr handler to the ``alphabet_soup`` logger.

    Only the first call has any effect; ``get_logger`` makes that call
    implicitly, so modules never need to.

    Args:
        level: Starting level; ``LOG_LEVEL`` when None.
        use_rich: Allow the Rich handler. It is only used when stderr is a
            terminal as well.
    """
    global _logging_configured

    if _logging_configured:
        return

    log_level = level if level is not None else _get_log_level()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.handlers.clear()

    if use_rich and sys.stderr.isatty():
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=True,
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(DEFAULT_FORMAT, datefmt=DEFAULT_DATE_FORMAT)
        )

    handler.setLevel(log_level)
    logger.addHandler(handler)
    logger.propagate = False

    _logging_configured = True


def set_level(level: int) -> None:
    """Move the package logger and its handler to ``level``."""
    if not _logging_configured:
        configure_logging(level=level)
        return

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    """
    Return ``alphabet_soup.<name>``, configuring logging on first use.

    Names already under ``alphabet_soup`` (the usual ``__name__``) are
    returned as they are.

    Example:
        >>> get_logger("alphabet_soup.search.engine").name
        'alphabet_soup.search.engine'
        >>> get_logger("scratch").name
        'alphabet_soup.scratch'
    """
    if not _logging_configured:
        configure_logging()

    if not name.startswith(LOGGER_NAME):
        name = f"{LOGGER_NAME}.{name}"

    return logging.getLogger(name)
