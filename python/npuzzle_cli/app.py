"""Rich terminal adapter: turns typed cell numbers into engine calls.

Every command is forwarded to a ``GameController``; this module only
prints what the controller reports.  The clock runs on an
``IntervalTicker`` so time keeps counting while the prompt waits.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from npuzzle.config import PuzzleConfig
from npuzzle.engine.gameplay import GameController, IntervalTicker, MoveResult
from npuzzle.errors import InvalidGridSizeError, PuzzleError
from npuzzle.models.board import Board

console = Console()

_HELP = (
    "[bold cyan]0..{last}[/bold cyan] [dim]move that cell[/dim]   "
    "[bold cyan]c[/bold cyan] [dim]check[/dim]   "
    "[bold cyan]n[/bold cyan] [dim]new game[/dim]   "
    "[bold cyan]d SIZE[/bold cyan] [dim]difficulty[/dim]   "
    "[bold cyan]b[/bold cyan] [dim]best[/dim]   "
    "[bold cyan]q[/bold cyan] [dim]quit[/dim]"
)


# -- helpers ------------------------------------------------------------------


def _format_time(seconds: int) -> str:
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


def _format_best(controller: GameController) -> str:
    best = controller.best_record()
    if best.best_time is None:
        return "[dim]No completed games yet.[/dim]"
    return (
        f"Best time: [bold yellow]{_format_time(best.best_time)}[/bold yellow]"
        f"    Best moves: [bold yellow]{best.best_moves}[/bold yellow]"
    )


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table of the grid; each cell shows tile and cell number."""
    width = len(str(board.cell_count))
    table = Table(
        show_header=False,
        show_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(justify="center")

    for r in range(board.size):
        cells: list[str] = []
        for c in range(board.size):
            pos = r * board.size + c
            tile = board.tiles[pos]
            if tile == board.empty_tile:
                label = f"[dim]{'·':>{width}}[/dim]"
            elif board.is_tile_correct(pos):
                label = f"[bold green]{tile + 1:>{width}}[/bold green]"
            else:
                label = f"[bold white]{tile + 1:>{width}}[/bold white]"
            cells.append(f"{label}\n[dim]{pos:>{width}}[/dim]")
        table.add_row(*cells)

    return table


# -- screens ------------------------------------------------------------------


def _draw_game(controller: GameController, status: str = "") -> None:
    session = controller.session
    size = session.size

    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(_format_time(session.elapsed_seconds), style="bold yellow")

    panel = Panel(
        Align.center(render_board(session.board)),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(stats))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(Text.from_markup(_HELP.format(last=size * size - 1))))


def _draw_win(controller: GameController) -> None:
    session = controller.session

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append(
        f"  You completed it in {session.elapsed_seconds} seconds "
        f"and {session.moves} moves!  ",
        style="green",
    )
    congrats.append("★\n", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(render_board(session.board)),
            Align.center(congrats),
            Align.center(Text.from_markup(_format_best(controller))),
        ),
        title=f"[bold green]Sliding Puzzle  {session.size}×{session.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Enter n to play again, q to quit.\n", style="dim"))
    )


# -- command handling ---------------------------------------------------------


def _describe_move(position: int, result: MoveResult) -> str:
    if result.accepted or result.won:
        return ""
    return f"[yellow]Cell {position} is not next to the empty slot.[/yellow]"


def handle_command(controller: GameController, raw: str) -> tuple[str, bool]:
    """Apply one line of player input.

    Returns the status line to show and whether the loop should keep going.
    """
    parts = raw.strip().lower().split()
    if not parts:
        return "", True

    cmd, args = parts[0], parts[1:]

    if cmd in ("q", "quit"):
        return "", False

    if cmd in ("c", "check"):
        if controller.check_win():
            return "[bold green]Solved![/bold green]", True
        return "[yellow]Sorry, the board is not complete, keep trying![/yellow]", True

    if cmd in ("n", "new"):
        controller.play_again()
        return "[yellow]New game![/yellow]", True

    if cmd in ("d", "difficulty"):
        if len(args) != 1 or not args[0].isdigit():
            return "[red]Usage: d SIZE[/red]", True
        try:
            controller.new_game(int(args[0]))
        except InvalidGridSizeError as exc:
            return f"[red]{escape(str(exc))}[/red]", True
        return f"[yellow]Switched to {args[0]}×{args[0]}.[/yellow]", True

    if cmd in ("b", "best"):
        return _format_best(controller), True

    if cmd.isdigit():
        position = int(cmd)
        return _describe_move(position, controller.attempt_move(position)), True

    return f"[red]Unknown command {escape(repr(raw.strip()))}.[/red]", True


# -- game loop ----------------------------------------------------------------


def _play_loop(controller: GameController) -> None:
    status = ""
    while True:
        if controller.session.is_won:
            _draw_win(controller)
        else:
            _draw_game(controller, status)
        status = ""

        raw = Prompt.ask("  Cell", console=console, default="", show_default=False)
        try:
            status, keep_going = handle_command(controller, raw)
        except PuzzleError as exc:
            status, keep_going = f"[red]{escape(str(exc))}[/red]", True
        if not keep_going:
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return


# -- public entry point -------------------------------------------------------


def run(config: PuzzleConfig) -> None:
    """Launch the Rich terminal game."""
    controller = GameController(
        config,
        ticker_factory=lambda: IntervalTicker(config.tick_interval),
    )
    controller.new_game()
    try:
        _play_loop(controller)
    finally:
        controller.close()
