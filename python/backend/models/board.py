"""Board model for the word-grouping puzzle."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum

GRID_SIZE = 4


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Tile:
    """A single word cell in the grid."""

    text: str
    group: int
    selected: bool = False
    solved: bool = False
    animating: bool = False
    focused: bool = False

    @property
    def label(self) -> str:
        """Accessible label: the word plus its selected / solved state."""
        label = self.text
        if self.selected:
            label += ", selected"
        if self.solved:
            label += ", solved"
        return label


@dataclass
class Board:
    """Represents the 4×4 puzzle board.

    Tiles are stored as a flat row-major list; ``index // size`` is the row
    and ``index % size`` the column.  Tiles only ever change flags or
    positions, never their text or group.
    """

    tiles: list[Tile]
    size: int = GRID_SIZE
    focus_index: int = field(default=0)

    def __post_init__(self) -> None:
        if len(self.tiles) != self.size * self.size:
            raise ValueError(
                f"Expected {self.size * self.size} tiles for a "
                f"{self.size}×{self.size} board, got {len(self.tiles)}."
            )

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.tiles)

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self.tiles)

    def get_tile(self, index: int) -> Tile | None:
        """Return the tile at *index*, or ``None`` when out of range."""
        if not self.in_bounds(index):
            return None
        return self.tiles[index]

    def row_col(self, index: int) -> tuple[int, int]:
        return divmod(index, self.size)

    def unsolved_indices(self) -> list[int]:
        return [i for i, t in enumerate(self.tiles) if not t.solved]

    def unsolved_groups(self) -> dict[int, list[int]]:
        """Map each group id with unsolved tiles to their indices.

        Keys are in ascending group order so renderers get a stable layout.
        """
        grouped: dict[int, list[int]] = {}
        for i, tile in enumerate(self.tiles):
            if not tile.solved:
                grouped.setdefault(tile.group, []).append(i)
        return dict(sorted(grouped.items()))

    def contents(self) -> Counter[tuple[str, int]]:
        """Multiset of ``(text, group)`` pairs on the board."""
        return Counter((t.text, t.group) for t in self.tiles)

    # -- mutation -------------------------------------------------------------

    def set_focus(self, index: int) -> None:
        """Move the focus flag to *index* (caller checks the target)."""
        for tile in self.tiles:
            tile.focused = False
        self.focus_index = index
        self.tiles[index].focused = True

    def clear_selected(self) -> None:
        for tile in self.tiles:
            tile.selected = False

    def place(self, positions: list[int], tiles: list[Tile]) -> None:
        """Put *tiles* at *positions*, one for one, keeping focus on its index."""
        for pos, tile in zip(positions, tiles, strict=True):
            self.tiles[pos] = tile
        self.set_focus(self.focus_index)
