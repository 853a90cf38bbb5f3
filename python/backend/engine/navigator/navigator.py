"""Keyboard focus movement over the grid, wrapping at the edges."""

from __future__ import annotations

from backend.models.board import GRID_SIZE, Direction


class FocusNavigator:
    """Stateless navigator — all methods are static."""

    @staticmethod
    def target(index: int, direction: Direction, size: int = GRID_SIZE) -> int:
        """Return the index reached by moving once from *index*.

        Each row and column is a ring: stepping off one edge lands on the
        opposite edge of the same row (left/right) or column (up/down).
        """
        row, col = divmod(index, size)
        if direction is Direction.RIGHT:
            return index + 1 if col < size - 1 else index - col
        if direction is Direction.LEFT:
            return index - 1 if col > 0 else index + (size - 1 - col)
        if direction is Direction.DOWN:
            return index + size if row < size - 1 else col
        if direction is Direction.UP:
            return index - size if row > 0 else size * (size - 1) + col
        raise ValueError(f"Unknown direction: {direction!r}")
