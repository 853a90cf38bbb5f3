"""Supplies the fixed word/group content for each mode."""

from __future__ import annotations

import random

from backend.models.board import Tile
from backend.models.puzzle import Group, Mode, Puzzle

EASY = Puzzle(
    mode=Mode.EASY,
    groups=(
        Group(name="Colors", color="#b5d682", difficulty=0),
        Group(name="Fruits", color="#f7e07e", difficulty=1),
        Group(name="Animals", color="#f9b5d1", difficulty=2),
        Group(name="Cities", color="#b5c7f7", difficulty=3),
    ),
    words=(
        ("Red", 0), ("Blue", 0), ("Green", 0), ("Yellow", 0),
        ("Apple", 1), ("Banana", 1), ("Lime", 1), ("Grape", 1),
        ("Dog", 2), ("Cat", 2), ("Horse", 2), ("Mouse", 2),
        ("Paris", 3), ("London", 3), ("Tokyo", 3), ("Rome", 3),
    ),
)

# Red herrings: "Bridge" is also a structure, "Key" also opens a lock,
# "Florida" also reads as a place.
HARD = Puzzle(
    mode=Mode.HARD,
    groups=(
        Group(name="Card games", color="#b5d682", difficulty=0),
        Group(name="Palindromes", color="#f7e07e", difficulty=1),
        Group(name="___ ring", color="#f9b5d1", difficulty=2),
        Group(name="Things with keys", color="#b5c7f7", difficulty=3),
    ),
    words=(
        ("Snap", 0), ("Rummy", 0), ("Hearts", 0), ("Bridge", 0),
        ("Level", 1), ("Kayak", 1), ("Radar", 1), ("Civic", 1),
        ("Boxing", 2), ("Key", 2), ("Ear", 2), ("Onion", 2),
        ("Piano", 3), ("Map", 3), ("Florida", 3), ("Cipher", 3),
    ),
)

PUZZLES: dict[Mode, Puzzle] = {Mode.EASY: EASY, Mode.HARD: HARD}


class ContentProvider:
    """Stateless content source — all methods are static."""

    @staticmethod
    def puzzle(mode: Mode) -> Puzzle:
        """Return the validated puzzle definition for *mode*."""
        puzzle = PUZZLES[Mode(mode)]
        puzzle.validate()
        return puzzle

    @staticmethod
    def deal(puzzle: Puzzle, rng: random.Random) -> list[Tile]:
        """Return fresh, unflagged tiles for *puzzle* in shuffled order."""
        words = list(puzzle.words)
        rng.shuffle(words)
        return [Tile(text=text, group=group) for text, group in words]
