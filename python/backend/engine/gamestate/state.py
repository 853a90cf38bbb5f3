"""Tracks the mutable state of a round in progress."""

from __future__ import annotations

from backend.models.board import Board
from backend.models.puzzle import GROUP_COUNT, Mode, Puzzle
from backend.models.round import MAX_MISTAKES, TRANSITIONS, Phase, SolveRecord


def endgame_order(
    solved: list[SolveRecord], group_count: int = GROUP_COUNT
) -> list[int]:
    """Group ids in solve order, then the unsolved ones in ascending order."""
    found = [r.group for r in sorted(solved, key=lambda r: r.order)]
    return found + [g for g in range(group_count) if g not in found]


class RoundState:
    """Holds the board, selection, counters and phase of one round.

    A round is never repaired in place: a mode switch or replay builds a new
    ``RoundState`` with the next ``generation`` number.
    """

    def __init__(
        self,
        mode: Mode,
        puzzle: Puzzle,
        board: Board,
        max_mistakes: int = MAX_MISTAKES,
        generation: int = 0,
    ) -> None:
        self.mode = mode
        self.puzzle = puzzle
        self.board = board
        self.max_mistakes = max_mistakes
        self.generation = generation

        self.phase: Phase = Phase.PLAYING
        self.mistakes: int = 0
        self.gave_up: bool = False
        self.selection: list[int] = []
        self.solved_groups: list[SolveRecord] = []
        self.pending_collapse: list[int] = []
        self.shake: bool = False
        self.near_miss: bool = False
        self._next_order: int = 0

    # -- phase ----------------------------------------------------------------

    @property
    def is_playing(self) -> bool:
        return self.phase is Phase.PLAYING

    def transition(self, target: Phase) -> bool:
        """Move to *target* if allowed from the current phase."""
        if target not in TRANSITIONS[self.phase]:
            return False
        self.phase = target
        return True

    # -- progress -------------------------------------------------------------

    @property
    def focus_index(self) -> int:
        return self.board.focus_index

    @property
    def mistakes_remaining(self) -> int:
        return self.max_mistakes - self.mistakes

    @property
    def solved_group_ids(self) -> set[int]:
        return {r.group for r in self.solved_groups}

    def record_solve(self, group: int, indices: list[int]) -> SolveRecord:
        record = SolveRecord(group=group, indices=tuple(indices), order=self._next_order)
        self._next_order += 1
        self.solved_groups.append(record)
        return record

    def clear_selection(self) -> None:
        self.board.clear_selected()
        self.selection.clear()
