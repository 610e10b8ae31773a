"""Seeded shuffling of sliding puzzle boards."""

from __future__ import annotations

import logging
import random
from dataclasses import replace

from backend.models.board import Board

logger = logging.getLogger(__name__)


def shuffle(board: Board, steps: int) -> Board:
    """Return *board* after *steps* random legal moves.

    Each move picks uniformly among the blank's neighbours, skipping the
    cell the blank just came from unless it is the only option.  The
    board's seed is threaded through every step, so the same seed and
    step count always give the same arrangement.
    """
    if steps <= 0:
        return board

    prev_index: int | None = None
    seed = board.seed

    for _ in range(steps):
        neighbors = get_neighbors(board)
        if prev_index in neighbors and len(neighbors) > 1:
            neighbors.remove(prev_index)
        target, seed = _pick(seed, neighbors)
        prev_index = board.blank_index
        board = board.swap_blank(target)

    logger.debug(f"Shuffled {steps} steps, seed {board.seed} -> {seed}")
    return replace(board, seed=seed)


def get_neighbors(board: Board) -> list[int]:
    """Flat indices orthogonally adjacent to the blank, in up/down/left/right order."""
    br, bc = board.blank_pos
    neighbors: list[int] = []
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        nr, nc = br + dr, bc + dc
        if board.in_bounds(nr, nc):
            neighbors.append(board.index_of(nr, nc))
    return neighbors


# -- helpers ------------------------------------------------------------------


def _pick(seed: int, options: list[int]) -> tuple[int, int]:
    """Choose one of *options* from *seed*; return it with the next seed."""
    rng = random.Random(seed)
    choice = rng.choice(options)
    return choice, rng.getrandbits(32)
