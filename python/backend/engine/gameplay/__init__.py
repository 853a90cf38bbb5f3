from backend.engine.gameplay.game import ConnectionsGame

__all__ = ["ConnectionsGame"]
