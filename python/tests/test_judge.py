"""Judge test suite — correct, near-miss and plain incorrect submissions."""

from __future__ import annotations

import pytest

from backend.engine.judge import Judge
from backend.models.round import Verdict


@pytest.mark.parametrize(
    ("groups", "solved", "expected"),
    [
        ([0, 0, 0, 0], set(), Verdict.CORRECT),
        ([3, 3, 3, 3], {0, 1}, Verdict.CORRECT),
        ([2, 2, 2, 2], {2}, Verdict.INCORRECT),
        ([0, 0, 0, 1], set(), Verdict.NEAR_MISS),
        ([1, 0, 0, 0], set(), Verdict.NEAR_MISS),
        ([0, 1, 1, 1], set(), Verdict.NEAR_MISS),
        ([0, 0, 1, 1], set(), Verdict.INCORRECT),
        ([0, 1, 2, 3], set(), Verdict.INCORRECT),
        ([0, 0, 1, 2], set(), Verdict.INCORRECT),
    ],
)
def test_classify(groups: list[int], solved: set[int], expected: Verdict) -> None:
    assert Judge.classify(groups, solved) is expected


def test_only_correct_is_not_a_mistake() -> None:
    assert not Verdict.CORRECT.is_mistake
    assert Verdict.NEAR_MISS.is_mistake
    assert Verdict.INCORRECT.is_mistake
