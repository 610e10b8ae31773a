"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Also offers a scripted mode that applies a fixed move string and prints the
result, for use from shell scripts.
"""

from __future__ import annotations

import sys

from backend.config import PuzzleConfig
from backend.engine.gamestate import EventLoop, GameState, fold
from backend.models import ArrowKey, Board, Direction, Shuffle, format_sequence
from frontend.cli.input_handler import get_key, to_event


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_DIM = "\033[2m"     # dim
_R = "\033[0m"       # reset

_SCRIPT_KEYS: dict[str, Direction] = {
    "u": Direction.UP,
    "d": Direction.DOWN,
    "l": Direction.LEFT,
    "r": Direction.RIGHT,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, *, color: bool = True) -> str:
    """Return a text grid of the board, optionally ANSI-coloured."""
    g, dim, r = (_G, _DIM, _R) if color else ("", "", "")
    width = len(str(board.width * board.height - 1))  # widest number
    cell_w = width + 2  # padding
    sep = "+" + (("-" * cell_w + "+") * board.width)

    lines: list[str] = [sep]
    for row_no, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val is None:
                cells.append(f"{dim} {'·':>{width}} {r}")
            elif board.is_tile_correct(board.index_of(row_no, c)):
                cells.append(f"{g} {board.label(val):>{width}} {r}")
            else:
                cells.append(f" {board.label(val):>{width}} ")
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def parse_moves(moves: str) -> list[ArrowKey]:
    """Turn a string such as ``"llur"`` into arrow events.

    Letters other than u/d/l/r (and whitespace) are ignored.
    """
    return [
        ArrowKey(_SCRIPT_KEYS[ch]) for ch in moves.lower() if ch in _SCRIPT_KEYS
    ]


# -- scripted play ------------------------------------------------------------


def run_script(config: PuzzleConfig, moves: str) -> GameState:
    """Apply *moves* to a fresh game and print the outcome."""
    state = fold(parse_moves(moves), GameState.create(config))
    board = state.board
    print(render_board(board, color=False))
    print(f"start={format_sequence(board.tiles)}")
    print(f"moves={state.moves} solved={board.is_solved()}")
    return state


# -- interactive play ---------------------------------------------------------


def _draw(state: GameState, status: str) -> None:
    _clear()
    board = state.board
    print(f"  {_C}=== Sliding Tiles ({board.width}×{board.height}) ==={_R}")
    print()
    print(render_board(board))
    print()
    print(f"  Moves: {_Y}{state.moves}{_R}")
    if status:
        print(f"  {status}")
    print(f"  {_DIM}arrows/WASD move   R shuffle   P print   Q quit{_R}")


def run(config: PuzzleConfig) -> None:
    """Play in the terminal until solved or quit."""
    loop = EventLoop(GameState.create(config))
    status = ""

    while True:
        state = loop.state
        if state.is_solved and state.moves:
            status = f"{_G}Solved in {state.moves} moves!{_R}"
        _draw(state, status)
        status = ""

        key = get_key()
        if key == "quit":
            return
        if key == "shuffle":
            loop.post(Shuffle(config.shuffle))
        elif key == "print":
            status = f"start={format_sequence(state.board.tiles)}"
        else:
            loop.post(to_event(key))
        loop.run_pending()
