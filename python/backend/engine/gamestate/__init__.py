from backend.engine.gamestate.layout import board_origin, cell_at, compute_tile_size
from backend.engine.gamestate.loop import EventLoop, fold
from backend.engine.gamestate.state import GameState, step

__all__ = [
    "EventLoop",
    "GameState",
    "board_origin",
    "cell_at",
    "compute_tile_size",
    "fold",
    "step",
]
