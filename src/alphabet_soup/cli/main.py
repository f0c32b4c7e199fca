"""Typer application root for the alphabet-soup CLI."""

import logging
from importlib.metadata import version

import typer
from rich.console import Console

from alphabet_soup.cli.solve import solve
from alphabet_soup.core.logging import set_level

# Shared console instance for consistent output across all CLI modules.
console = Console()

app = typer.Typer(
    name="alphabet-soup",
    help="Find hidden words in a letter grid.",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"alphabet-soup {version('alphabet-soup')}")
        raise typer.Exit()


def _verbose_callback(value: bool) -> None:
    """Enable DEBUG-level logging when --verbose is passed."""
    if value:
        set_level(logging.DEBUG)


@app.callback()
def main(
    _version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
    _verbose: bool = typer.Option(
        False,
        "--verbose",
        "-V",
        help="Enable detailed debug output.",
        callback=_verbose_callback,
        is_eager=True,
    ),
) -> None:
    """Find hidden words in a letter grid."""


app.command(name="solve")(solve)
