"""Core gameplay logic — the pure board transition function."""

from __future__ import annotations

from collections.abc import Callable

from backend.engine.gamegenerator import shuffle
from backend.models.actions import Action, Move, MoveTile, NoOp, Shuffle
from backend.models.board import Board, Direction

# The offset points to the tile that will slide into the blank.
# UP    → tile at (br+1, bc) moves up    → blank shifts down
# DOWN  → tile at (br-1, bc) moves down  → blank shifts up
# LEFT  → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT → tile at (br, bc-1) moves right → blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


# -- movement (direction = where the *tile* moves) ----------------------------


def move(board: Board, direction: Direction) -> Board:
    """Slide a tile in *direction* into the adjacent blank.

    E.g. ``Direction.UP`` moves the tile **below** the blank upward.
    Returns *board* itself when there is no such tile.
    """
    br, bc = board.blank_pos
    dr, dc = _OFFSETS[direction]
    tr, tc = br + dr, bc + dc

    if not board.in_bounds(tr, tc):
        return board

    return board.swap_blank(board.index_of(tr, tc))


def move_tile(board: Board, row: int, column: int) -> Board:
    """Move the tile at (row, column) into the adjacent blank.

    Off-board cells, the blank itself and tiles not orthogonally next to
    the blank leave *board* unchanged.
    """
    if not board.in_bounds(row, column):
        return board

    br, bc = board.blank_pos
    if abs(row - br) + abs(column - bc) != 1:
        return board

    return board.swap_blank(board.index_of(row, column))


# -- dispatch -----------------------------------------------------------------

_HANDLERS: dict[type, Callable[[Action, Board], Board]] = {
    Move: lambda a, b: move(b, a.direction),
    MoveTile: lambda a, b: move_tile(b, a.row, a.column),
    Shuffle: lambda a, b: shuffle(b, a.steps),
    NoOp: lambda a, b: b,
}


def update(action: Action, board: Board) -> Board:
    """Apply *action* to *board* and return the resulting board.

    Never mutates *board*.  Unknown actions return it unchanged.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        return board
    return handler(action, board)
