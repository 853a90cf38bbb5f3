"""Key mapping and action dispatch tests for the terminal frontends."""

from __future__ import annotations

import random

import pytest

from backend.engine.gameplay import ConnectionsGame
from backend.engine.scheduler import ManualScheduler
from backend.models.puzzle import Mode
from backend.models.round import Phase
from frontend.cli.actions import apply_action, next_mode
from frontend.cli.input_handler import resolve, resolve_escape


# -- helpers ------------------------------------------------------------------


def _new_game() -> tuple[ConnectionsGame, ManualScheduler]:
    scheduler = ManualScheduler()
    return ConnectionsGame(rng=random.Random(0), scheduler=scheduler), scheduler


def _group_indices(game: ConnectionsGame, group: int) -> list[int]:
    return [i for i, t in enumerate(game.tiles) if t.group == group]


# -- key mapping --------------------------------------------------------------


@pytest.mark.parametrize(
    ("ch", "action"),
    [
        ("w", "up"),
        ("S", "down"),
        ("a", "left"),
        ("D", "right"),
        ("\r", "enter"),
        (" ", "space"),
        ("u", "submit"),
        ("x", "shuffle"),
        ("c", "clear"),
        ("G", "give_up"),
        ("m", "mode"),
        ("r", "replay"),
        ("?", "help"),
        ("q", "quit"),
        ("\x03", "quit"),
        ("z", "z"),
        ("\x07", ""),
    ],
)
def test_resolve(ch: str, action: str) -> None:
    assert resolve(ch) == action


@pytest.mark.parametrize(
    ("tail", "action"),
    [("[A", "up"), ("[B", "down"), ("[C", "right"), ("[D", "left"), ("", "quit"), ("[Z", "")],
)
def test_resolve_escape(tail: str, action: str) -> None:
    assert resolve_escape(tail) == action


# -- actions ------------------------------------------------------------------


def test_navigation_actions_reach_the_engine() -> None:
    game, _ = _new_game()
    assert apply_action(game, "right") == ""
    assert game.focus_index == 1
    apply_action(game, "space")
    assert game.selection == (1,)
    apply_action(game, "clear")
    assert game.selection == ()


def test_submit_messages() -> None:
    game, scheduler = _new_game()
    assert apply_action(game, "submit") == "Select four words first."

    for i in _group_indices(game, 2):
        game.toggle_select(i)
    assert apply_action(game, "submit") == "Correct!"
    scheduler.advance(700)

    for i in _group_indices(game, 0)[:3] + _group_indices(game, 1)[:1]:
        game.toggle_select(i)
    assert apply_action(game, "submit") == "One away!"


def test_give_up_mode_and_replay() -> None:
    game, _ = _new_game()
    assert apply_action(game, "give_up") == "You gave up."
    assert game.phase is Phase.LOST
    assert apply_action(game, "give_up") == ""
    assert apply_action(game, "submit") == ""

    assert apply_action(game, "mode") == "Switched to hard mode."
    assert game.mode is Mode.HARD
    assert game.phase is Phase.PLAYING

    assert apply_action(game, "replay") == "New round."
    assert game.mode is Mode.HARD


def test_next_mode_cycles() -> None:
    assert next_mode(Mode.EASY) is Mode.HARD
    assert next_mode(Mode.HARD) is Mode.EASY
