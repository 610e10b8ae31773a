"""Raw input events produced by the frontends."""

from __future__ import annotations

from dataclasses import dataclass

from backend.models.actions import NoOp
from backend.models.board import Direction


@dataclass(frozen=True)
class ArrowKey:
    direction: Direction


@dataclass(frozen=True)
class Click:
    """Pointer press in window pixel coordinates."""

    x: int
    y: int
    window_width: int
    window_height: int


@dataclass(frozen=True)
class WindowResize:
    width: int
    height: int


Event = ArrowKey | Click | WindowResize | NoOp
