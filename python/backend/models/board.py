"""Board model for the sliding puzzle game."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import StrEnum

from backend.errors import ContractViolation
from backend.models.sequence import BLANK, Tiles, parse_sequence, solved_sequence

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Board:
    """Immutable snapshot of the sliding puzzle.

    Tiles are stored as a flat row-major tuple.  Tile identifiers run
    ``0..width*height-2``; ``BLANK`` (``None``) is the empty slot and
    ``blank_index`` always points at it.
    """

    width: int
    height: int
    tile_size: int
    tile_spacing: int
    tiles: Tiles
    goal: Tiles
    seed: int
    blank_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def init(
        cls,
        seed: int,
        board_width: int,
        board_height: int,
        tile_size: int,
        tile_spacing: int,
        start: str,
        goal: str,
    ) -> Board:
        """Build a board from *start* and *goal* sequence strings.

        A sequence that does not describe a valid arrangement for this
        board is replaced by the solved sequence.
        """
        if board_width < 2 or board_height < 2:
            raise ContractViolation(
                f"Board must be at least 2×2, got {board_width}×{board_height}."
            )
        if tile_size <= 0 or tile_spacing < 0:
            raise ContractViolation(
                f"Invalid tile sizing: size={tile_size}, spacing={tile_spacing}."
            )

        count = board_width * board_height
        solved = solved_sequence(board_width, board_height)

        tiles = parse_sequence(start, count)
        if tiles is None:
            logger.warning(f"Invalid start sequence {start!r}, using solved board")
            tiles = solved

        target = parse_sequence(goal, count)
        if target is None:
            logger.warning(f"Invalid goal sequence {goal!r}, using solved board")
            target = solved

        return cls(
            width=board_width,
            height=board_height,
            tile_size=tile_size,
            tile_spacing=tile_spacing,
            tiles=tiles,
            goal=target,
            seed=seed,
            blank_index=tiles.index(BLANK),
        )

    @classmethod
    def solved(
        cls, width: int, height: int, *, seed: int = 0,
        tile_size: int = 50, tile_spacing: int = 4,
    ) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        tiles = solved_sequence(width, height)
        return cls(
            width=width,
            height=height,
            tile_size=tile_size,
            tile_spacing=tile_spacing,
            tiles=tiles,
            goal=tiles,
            seed=seed,
            blank_index=len(tiles) - 1,
        )

    # -- addressing -----------------------------------------------------------

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.height and 0 <= column < self.width

    def index_of(self, row: int, column: int) -> int:
        return row * self.width + column

    def position(self, index: int) -> tuple[int, int]:
        """Return ``(row, column)`` of a flat index."""
        return divmod(index, self.width)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.position(self.blank_index)

    def tile_at(self, row: int, column: int) -> int | None:
        """Tile at ``(row, column)``; ``None`` for the blank or off-board."""
        if not self.in_bounds(row, column):
            return None
        return self.tiles[self.index_of(row, column)]

    def rows(self) -> list[Tiles]:
        """Tiles split into rows, top to bottom."""
        w = self.width
        return [self.tiles[r * w : (r + 1) * w] for r in range(self.height)]

    @staticmethod
    def label(tile: int) -> int:
        """Number printed on a tile."""
        return tile + 1

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """Check if the tiles match the goal arrangement."""
        return self.tiles == self.goal

    def is_tile_correct(self, index: int) -> bool:
        """Check if the occupant of *index* is where the goal wants it."""
        return self.tiles[index] == self.goal[index]

    # -- transitions ----------------------------------------------------------

    def swap_blank(self, index: int) -> Board:
        """Return a copy with the blank and the tile at *index* exchanged.

        No adjacency check is done here; callers decide legality.
        """
        tiles = list(self.tiles)
        b = self.blank_index
        tiles[b], tiles[index] = tiles[index], tiles[b]
        return replace(self, tiles=tuple(tiles), blank_index=index)


def is_solved(board: Board) -> bool:
    return board.is_solved()
