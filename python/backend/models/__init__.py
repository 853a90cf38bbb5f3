from backend.models.board import GRID_SIZE, Board, Direction, Tile
from backend.models.puzzle import GROUP_COUNT, GROUP_SIZE, Group, Mode, Puzzle
from backend.models.round import (
    MAX_MISTAKES,
    Phase,
    SolveRecord,
    Timings,
    Verdict,
)

__all__ = [
    "GRID_SIZE",
    "GROUP_COUNT",
    "GROUP_SIZE",
    "MAX_MISTAKES",
    "Board",
    "Direction",
    "Group",
    "Mode",
    "Phase",
    "Puzzle",
    "SolveRecord",
    "Tile",
    "Timings",
    "Verdict",
]
