"""Actions understood by :func:`backend.engine.gameplay.update`."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.board import Direction


@dataclass(frozen=True)
class Move:
    """Slide the neighbouring tile in *direction* into the blank."""

    direction: Direction


@dataclass(frozen=True)
class MoveTile:
    """Slide the tile at ``(row, column)`` into the blank, if adjacent."""

    row: int
    column: int


@dataclass(frozen=True)
class Shuffle:
    """Apply *steps* seeded random legal moves."""

    steps: int


@dataclass(frozen=True)
class NoOp:
    pass


Action = Move | MoveTile | Shuffle | NoOp
