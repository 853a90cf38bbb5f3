from backend.engine.gamestate.state import RoundState, endgame_order

__all__ = ["RoundState", "endgame_order"]
