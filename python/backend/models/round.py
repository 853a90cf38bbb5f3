"""Round-level value types shared by the engine and the frontends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

MAX_MISTAKES = 4


class Phase(StrEnum):
    PLAYING = "playing"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not Phase.PLAYING


# Only PLAYING has exits; WON / LOST end the round until a reset.
TRANSITIONS: dict[Phase, frozenset[Phase]] = {
    Phase.PLAYING: frozenset({Phase.WON, Phase.LOST}),
    Phase.WON: frozenset(),
    Phase.LOST: frozenset(),
}


class Verdict(StrEnum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    NEAR_MISS = "near_miss"

    @property
    def is_mistake(self) -> bool:
        return self is not Verdict.CORRECT


@dataclass(frozen=True)
class SolveRecord:
    group: int
    indices: tuple[int, ...]
    order: int


@dataclass(frozen=True)
class Timings:
    """Feedback delays in milliseconds."""

    collapse: int = 700
    shake: int = 500
    near_miss: int = 3000
