"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and backend as the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import PuzzleConfig
from backend.engine.gamestate import EventLoop, GameState
from backend.models import Board, Shuffle, format_sequence
from frontend.cli.input_handler import get_key, to_event

console = Console()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.width * board.height - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.width):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val is None:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(board.index_of(r, c)):
                cells.append(f"[bold green]{board.label(val):>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{board.label(val):>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(state: GameState) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(state.moves), style="bold yellow")
    return stats


# -- screens ------------------------------------------------------------------


def _draw_game(state: GameState, status: str = "") -> None:
    console.clear()

    board = state.board
    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("R", style="bold yellow")
    controls.append("  shuffle   ", style="dim")
    controls.append("P", style="bold cyan")
    controls.append("  print   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  quit", style="dim")

    panel = Panel(
        Align.center(render_board(board)),
        title=f"[bold cyan]Sliding Tiles  {board.width}×{board.height}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_stats(state)))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _draw_win(state: GameState) -> None:
    console.clear()

    board = state.board
    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  You solved it!  ", style="green")
    congrats.append("★\n", style="bold yellow")

    group = Group(
        Align.center(render_board(board)),
        Align.center(congrats),
        Align.center(_stats(state)),
    )

    panel = Panel(
        group,
        title=f"[bold green]Sliding Tiles  {board.width}×{board.height}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  Press R to shuffle again, Q to quit.\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def run(config: PuzzleConfig) -> None:
    """Launch the Rich CLI."""
    loop = EventLoop(GameState.create(config))
    status = ""

    while True:
        state = loop.state
        if state.is_solved and state.moves:
            _draw_win(state)
        else:
            _draw_game(state, status)
        status = ""

        key = get_key()
        if key == "quit":
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        if key == "shuffle":
            loop.post(Shuffle(config.shuffle))
            status = "[yellow]Shuffled![/yellow]"
        elif key == "print":
            status = f"[cyan]start=[/cyan]{format_sequence(state.board.tiles)}"
        else:
            loop.post(to_event(key))
        loop.run_pending()
