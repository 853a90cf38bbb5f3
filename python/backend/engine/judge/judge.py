"""Classifies a four-tile submission against group membership."""

from __future__ import annotations

from collections import Counter
from collections.abc import Collection, Sequence

from backend.models.round import Verdict


class Judge:
    """Stateless judge — all methods are static."""

    @staticmethod
    def is_correct(groups: Sequence[int], solved: Collection[int]) -> bool:
        """All four tiles share the first tile's group, and it is unsolved."""
        first = groups[0]
        return all(g == first for g in groups) and first not in solved

    @staticmethod
    def is_near_miss(groups: Sequence[int]) -> bool:
        """Exactly three of the submitted tiles belong to one group."""
        return 3 in Counter(groups).values()

    @staticmethod
    def classify(groups: Sequence[int], solved: Collection[int]) -> Verdict:
        if Judge.is_correct(groups, solved):
            return Verdict.CORRECT
        if Judge.is_near_miss(groups):
            return Verdict.NEAR_MISS
        return Verdict.INCORRECT
