from backend.engine.gameplay.game import move, move_tile, update

__all__ = ["move", "move_tile", "update"]
