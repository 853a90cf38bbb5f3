from backend.engine.content.provider import PUZZLES, ContentProvider

__all__ = ["PUZZLES", "ContentProvider"]
