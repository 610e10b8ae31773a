"""Outer game model: the board plus window-dependent layout."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from backend.engine.gameplay import update
from backend.engine.gamestate.layout import cell_at, compute_tile_size
from backend.errors import ContractViolation
from backend.models.actions import Action, Move, MoveTile, NoOp, Shuffle
from backend.models.board import Board
from backend.models.events import ArrowKey, Click, Event, WindowResize
from backend.models.sequence import format_sequence, solved_sequence

if TYPE_CHECKING:
    from backend.config import PuzzleConfig

logger = logging.getLogger(__name__)

# Window assumed until the first resize arrives.
DEFAULT_WINDOW = (500, 640)


@dataclass(frozen=True)
class GameState:
    """Holds the current board, move counter and last known window size."""

    board: Board
    size_override: int | None = None
    window: tuple[int, int] | None = None
    moves: int = 0

    @classmethod
    def create(cls, config: PuzzleConfig) -> GameState:
        """Build the starting board from *config* and shuffle it."""
        tile_size = compute_tile_size(
            config.width, config.height, *DEFAULT_WINDOW, override=config.size
        )
        solved = format_sequence(solved_sequence(config.width, config.height))
        board = Board.init(
            config.seed,
            config.width,
            config.height,
            tile_size,
            config.spacing,
            solved if config.start is None else config.start,
            solved if config.goal is None else config.goal,
        )
        board = update(Shuffle(config.shuffle), board)
        logger.debug(
            f"Created {config.width}×{config.height} board, "
            f"{config.shuffle} shuffle steps, tile size {tile_size}"
        )
        return cls(board=board, size_override=config.size)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()


def step(event: Event | Action, state: GameState) -> GameState:
    """Reduce one input event (or a raw board action) into a new state.

    Returns *state* itself when nothing changed.
    """
    board = state.board

    if isinstance(event, ArrowKey):
        return _after_move(state, update(Move(event.direction), board))

    if isinstance(event, Click):
        if state.window is None and state.size_override is None:
            raise ContractViolation(
                "Click received before the first WindowResize; tile size unknown."
            )
        cell = cell_at(board, event.x, event.y, event.window_width, event.window_height)
        if cell is None:
            return state
        return _after_move(state, update(MoveTile(*cell), board))

    if isinstance(event, WindowResize):
        tile_size = compute_tile_size(
            board.width, board.height, event.width, event.height,
            override=state.size_override,
        )
        window = (event.width, event.height)
        if tile_size == board.tile_size and window == state.window:
            return state
        return replace(
            state, board=replace(board, tile_size=tile_size), window=window
        )

    if isinstance(event, (Move, MoveTile)):
        return _after_move(state, update(event, board))

    if isinstance(event, Shuffle):
        shuffled = update(event, board)
        return state if shuffled is board else replace(state, board=shuffled, moves=0)

    if not isinstance(event, NoOp):
        logger.debug(f"Ignoring unknown event {event!r}")
    return state


def _after_move(state: GameState, board: Board) -> GameState:
    if board is state.board:
        return state
    return replace(state, board=board, moves=state.moves + 1)
