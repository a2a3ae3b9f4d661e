"""Sliding Puzzle command line.

Usage::

    npuzzle play                 # 3×3, clock on a timer thread
    npuzzle play -d hard         # 5×5
    npuzzle shuffle -s 4 --json  # print a solvable 4×4 arrangement
    npuzzle check 3 0 1 2 3 8 4 6 7 5
"""

import json
import logging
import random
from enum import StrEnum
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from npuzzle.config import DIFFICULTIES, PuzzleConfig
from npuzzle.engine.gamegenerator import Shuffler
from npuzzle.engine.gamesolver import count_inversions, is_solvable
from npuzzle.errors import PuzzleError
from npuzzle.models.board import (
    MAX_GRID_SIZE,
    MIN_GRID_SIZE,
    Board,
    check_sequence,
)
from npuzzle_cli.app import render_board, run

console = Console()


class Difficulty(StrEnum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]", highlight=False)
    raise typer.Exit(code=1)


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding Puzzle.")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log engine events to stderr.",
    ),
) -> None:
    """Sliding Puzzle."""
    _configure_logging(verbose)


@app.command()
def play(
    size: Optional[int] = typer.Option(
        None, "-s", "--size",
        min=MIN_GRID_SIZE, max=MAX_GRID_SIZE,
        help=f"Grid size ({MIN_GRID_SIZE}-{MAX_GRID_SIZE}). Overrides --difficulty.",
    ),
    difficulty: Difficulty = typer.Option(
        Difficulty.easy, "-d", "--difficulty",
        help="Preset grid size.",
    ),
    tick_interval: float = typer.Option(
        1.0, "--tick-interval",
        min=0.01,
        help="Seconds per clock tick.",
    ),
) -> None:
    """Play in the terminal, entering cell numbers to slide tiles."""
    if size is None:
        config = PuzzleConfig.from_difficulty(difficulty, tick_interval=tick_interval)
    else:
        config = PuzzleConfig(size=size, tick_interval=tick_interval)
        config.validate()
    run(config)


@app.command()
def shuffle(
    size: int = typer.Option(
        DIFFICULTIES["easy"], "-s", "--size",
        min=MIN_GRID_SIZE, max=MAX_GRID_SIZE,
        help=f"Grid size ({MIN_GRID_SIZE}-{MAX_GRID_SIZE}).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible arrangement.",
    ),
    as_json: bool = typer.Option(
        False, "--json",
        help="Print the arrangement as JSON.",
    ),
) -> None:
    """Print a random solvable arrangement."""
    rng = random.Random(seed) if seed is not None else None
    board = Shuffler.generate(size, rng=rng)

    if as_json:
        typer.echo(json.dumps({"size": board.size, "tiles": board.tiles}))
        return
    console.print(render_board(board))
    console.print(" ".join(str(t) for t in board.tiles), highlight=False)


@app.command()
def check(
    size: int = typer.Argument(..., help="Grid size."),
    tiles: List[int] = typer.Argument(..., help="Tile identity at each cell, row-major."),
) -> None:
    """Report the inversion count and solvability of an arrangement."""
    try:
        check_sequence(size, tiles)
    except PuzzleError as exc:
        _fail(str(exc))

    board = Board.from_flat(size, tiles)
    movable = [t for t in board.tiles if t != board.empty_tile]
    solvable = is_solvable(board.tiles, size)

    console.print(f"Inversions: {count_inversions(movable)}", highlight=False)
    console.print(
        f"Solvable: {'yes' if solvable else 'no'}",
        style="bold green" if solvable else "bold red",
        highlight=False,
    )
    if board.is_solved():
        console.print("[dim]Already solved.[/dim]")


if __name__ == "__main__":
    app()
