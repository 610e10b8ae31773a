"""Pixel layout: tile sizing and pointer-to-cell mapping."""

from __future__ import annotations

from backend.models.board import Board

PADDING = 40  # total px kept free around the board, both axes
MIN_TILE_SIZE = 5
MAX_TILE_SIZE = 200


def clamp_tile_size(size: int) -> int:
    return max(MIN_TILE_SIZE, min(MAX_TILE_SIZE, size))


def compute_tile_size(
    board_width: int,
    board_height: int,
    window_width: int,
    window_height: int,
    override: int | None = None,
) -> int:
    """Largest square tile that fits the window, or *override* if given."""
    if override is not None:
        return clamp_tile_size(override)
    by_width = (window_width - PADDING) // board_width
    by_height = (window_height - PADDING) // board_height
    return clamp_tile_size(min(by_width, by_height))


def board_origin(board: Board, window_width: int, window_height: int) -> tuple[int, int]:
    """Top-left pixel of *board* centred in the window."""
    total_w = board.width * board.tile_size
    total_h = board.height * board.tile_size
    return (window_width - total_w) // 2, (window_height - total_h) // 2


def cell_at(
    board: Board, x: int, y: int, window_width: int, window_height: int
) -> tuple[int, int] | None:
    """Return the ``(row, column)`` under pixel ``(x, y)``, or ``None``."""
    ox, oy = board_origin(board, window_width, window_height)
    dx, dy = x - ox, y - oy
    if dx < 0 or dy < 0:
        return None
    row, column = dy // board.tile_size, dx // board.tile_size
    if not board.in_bounds(row, column):
        return None
    return row, column
