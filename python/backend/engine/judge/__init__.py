from backend.engine.judge.judge import Judge

__all__ = ["Judge"]
