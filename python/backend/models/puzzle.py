"""Static puzzle content: groups, modes, and the word list for a round."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum

GROUP_COUNT = 4
GROUP_SIZE = 4


class Mode(StrEnum):
    EASY = "easy"
    HARD = "hard"


@dataclass(frozen=True)
class Group:
    name: str
    color: str
    difficulty: int  # 0 = easiest, 3 = hardest


@dataclass(frozen=True)
class Puzzle:
    """A fixed definition of four groups and the four words in each.

    ``words`` holds ``(text, group)`` pairs where ``group`` indexes into
    ``groups``.
    """

    mode: Mode
    groups: tuple[Group, ...]
    words: tuple[tuple[str, int], ...]

    def validate(self) -> None:
        """Raise ``ValueError`` unless this is a well-formed 4×4 puzzle."""
        if len(self.groups) != GROUP_COUNT:
            raise ValueError(
                f"{self.mode} puzzle has {len(self.groups)} groups, "
                f"expected {GROUP_COUNT}."
            )
        counts = Counter(group for _, group in self.words)
        for group in range(GROUP_COUNT):
            if counts.get(group, 0) != GROUP_SIZE:
                raise ValueError(
                    f"{self.mode} puzzle group {group} has "
                    f"{counts.get(group, 0)} words, expected {GROUP_SIZE}."
                )
        if len(self.words) != GROUP_COUNT * GROUP_SIZE:
            raise ValueError(f"{self.mode} puzzle has stray words.")
        texts = [text.casefold() for text, _ in self.words]
        if len(set(texts)) != len(texts):
            raise ValueError(f"{self.mode} puzzle contains duplicate words.")

    def members(self, group: int) -> list[str]:
        return [text for text, g in self.words if g == group]
