"""Solve command: load a puzzle file and report every word."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from alphabet_soup.config import get_settings
from alphabet_soup.core import (
    ConfigurationError,
    ImpossibleWordError,
    PuzzleLoadError,
    SearchStatus,
    WordResult,
)
from alphabet_soup.loader import PuzzleLoader
from alphabet_soup.search import WordSearchEngine

console = Console()

_STATUS_STYLES = {
    SearchStatus.FOUND: "bold green",
    SearchStatus.NOT_FOUND: "yellow",
    SearchStatus.IMPOSSIBLE: "red",
}


def _print_line(result: WordResult) -> None:
    """Print the plain output line, with no markup or wrapping."""
    console.print(result.to_output(), markup=False, highlight=False, soft_wrap=True)


def _print_table(results: list[WordResult]) -> None:
    table = Table(border_style="dim")
    table.add_column("Word", style="bold")
    table.add_column("Status")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Direction", style="cyan")

    for result in results:
        status = Text(result.status.value.replace("_", " "), style=_STATUS_STYLES[result.status])
        if result.placement is not None:
            start = "{}:{}".format(*result.placement.start)
            end = "{}:{}".format(*result.placement.end)
            direction = result.placement.direction.name.lower().replace("_", "-")
        else:
            start = end = direction = "-"
        table.add_row(Text(result.word), status, start, end, direction)

    console.print(table)


def solve(
    path: Annotated[
        Optional[Path],
        typer.Argument(help="Puzzle file. Defaults to PUZZLE_PATH."),
    ] = None,
    abort_on_impossible: Annotated[
        Optional[bool],
        typer.Option(
            "--abort-on-impossible/--continue-on-impossible",
            "-a",
            help=(
                "Stop at, or report and skip, words too long for the grid. "
                "Defaults to SEARCH_ABORT_ON_IMPOSSIBLE."
            ),
            show_default=False,
        ),
    ] = None,
    table: Annotated[
        bool,
        typer.Option("--table", "-t", help="Show results as a table."),
    ] = False,
) -> None:
    """
    Find every word of a puzzle file and print its start and end cells.

    Examples:

        alphabet-soup solve puzzle.txt

        alphabet-soup solve puzzle.txt --table

        PUZZLE_PATH=puzzle.txt alphabet-soup solve --abort-on-impossible
    """
    settings = get_settings()
    puzzle_path = path or Path(settings.puzzle.path)

    try:
        puzzle = PuzzleLoader().load(puzzle_path)
    except ConfigurationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(e.message)}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None
    except PuzzleLoadError as e:
        console.print(f"[red]Failed to load puzzle:[/red] {escape(e.message)}")
        if e.details:
            console.print(f"  [dim]{escape(e.details)}[/dim]")
        raise typer.Exit(code=1) from None

    engine = WordSearchEngine(abort_on_impossible=abort_on_impossible)

    results: list[WordResult] = []
    on_result = results.append if table else _print_line

    try:
        engine.solve(puzzle, on_result=on_result)
    except ImpossibleWordError as e:
        if table:
            _print_table(results)
        console.print(f"[red]Search aborted:[/red] {escape(e.message)}")
        raise typer.Exit(code=1) from None

    if table:
        _print_table(results)
