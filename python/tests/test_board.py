"""Board and content test suite."""

from __future__ import annotations

import random
from collections import Counter

import pytest

from backend.engine.content import PUZZLES, ContentProvider
from backend.models.board import Board, Tile
from backend.models.puzzle import Group, Mode, Puzzle


# -- helpers ------------------------------------------------------------------


def _board(seed: int = 0) -> Board:
    puzzle = ContentProvider.puzzle(Mode.EASY)
    board = Board(tiles=ContentProvider.deal(puzzle, random.Random(seed)))
    board.set_focus(0)
    return board


def _puzzle(words: list[tuple[str, int]], groups: int = 4) -> Puzzle:
    return Puzzle(
        mode=Mode.EASY,
        groups=tuple(Group(name=f"G{g}", color="#ffffff", difficulty=g) for g in range(groups)),
        words=tuple(words),
    )


# -- content ------------------------------------------------------------------


@pytest.mark.parametrize("mode", list(Mode))
def test_shipped_puzzles_are_valid(mode: Mode) -> None:
    puzzle = ContentProvider.puzzle(mode)
    puzzle.validate()
    assert puzzle.mode is mode
    assert [g.difficulty for g in puzzle.groups] == [0, 1, 2, 3]
    for group in range(4):
        assert len(puzzle.members(group)) == 4


def test_easy_content() -> None:
    puzzle = PUZZLES[Mode.EASY]
    assert [g.name for g in puzzle.groups] == ["Colors", "Fruits", "Animals", "Cities"]
    assert puzzle.members(1) == ["Apple", "Banana", "Lime", "Grape"]


def test_puzzle_lookup_accepts_plain_strings() -> None:
    assert ContentProvider.puzzle("hard") is PUZZLES[Mode.HARD]  # type: ignore[arg-type]


def test_deal_keeps_content_and_clears_flags() -> None:
    puzzle = ContentProvider.puzzle(Mode.HARD)
    tiles = ContentProvider.deal(puzzle, random.Random(1))
    assert Counter((t.text, t.group) for t in tiles) == Counter(puzzle.words)
    assert not any(t.selected or t.solved or t.animating or t.focused for t in tiles)


@pytest.mark.parametrize(
    "words",
    [
        [(f"w{i}", i // 4) for i in range(15)],
        [(f"w{i}", i // 4) for i in range(12)] + [(f"x{i}", 2) for i in range(4)],
        [(f"w{i}", i // 4) for i in range(15)] + [("w0", 3)],
        [(f"w{i}", i // 4) for i in range(16)] + [("extra", 7)],
    ],
    ids=["short", "lopsided", "duplicate", "stray"],
)
def test_malformed_puzzle_is_rejected(words: list[tuple[str, int]]) -> None:
    with pytest.raises(ValueError):
        _puzzle(words).validate()


def test_wrong_group_count_is_rejected() -> None:
    with pytest.raises(ValueError):
        _puzzle([(f"w{i}", i // 4) for i in range(16)], groups=3).validate()


# -- board --------------------------------------------------------------------


def test_board_needs_sixteen_tiles() -> None:
    with pytest.raises(ValueError):
        Board(tiles=[Tile(text="a", group=0)] * 15)


def test_get_tile_and_row_col() -> None:
    board = _board()
    assert board.get_tile(15) is board.tiles[15]
    assert board.get_tile(16) is None
    assert board.get_tile(-1) is None
    assert board.row_col(14) == (3, 2)


def test_label_suffixes() -> None:
    tile = Tile(text="Rome", group=3)
    assert tile.label == "Rome"
    tile.selected = True
    assert tile.label == "Rome, selected"
    tile.solved = True
    assert tile.label == "Rome, selected, solved"


def test_unsolved_groups_are_sorted_by_group() -> None:
    board = _board(seed=4)
    for tile in board.tiles:
        if tile.group == 1:
            tile.solved = True

    grouped = board.unsolved_groups()
    assert list(grouped) == [0, 2, 3]
    for group, indices in grouped.items():
        assert len(indices) == 4
        assert all(board.tiles[i].group == group for i in indices)
    assert len(board.unsolved_indices()) == 12


def test_set_focus_moves_the_flag() -> None:
    board = _board()
    board.set_focus(9)
    assert board.focus_index == 9
    assert [i for i, t in enumerate(board.tiles) if t.focused] == [9]


def test_place_rearranges_and_keeps_focus_index() -> None:
    board = _board()
    board.set_focus(1)
    first, second = board.tiles[1], board.tiles[2]

    board.place([1, 2], [second, first])

    assert board.tiles[1] is second
    assert board.tiles[2] is first
    assert board.focus_index == 1
    assert second.focused and not first.focused
