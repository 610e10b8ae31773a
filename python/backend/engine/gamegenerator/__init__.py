from backend.engine.gamegenerator.generator import get_neighbors, shuffle

__all__ = ["get_neighbors", "shuffle"]
