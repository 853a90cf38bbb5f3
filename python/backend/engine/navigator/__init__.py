from backend.engine.navigator.navigator import FocusNavigator

__all__ = ["FocusNavigator"]
