"""Action dispatch shared by the terminal frontends."""

from __future__ import annotations

from backend.engine.gameplay import ConnectionsGame
from backend.models.puzzle import Mode
from backend.models.round import Verdict

NAVIGATION = frozenset({"up", "down", "left", "right", "enter", "space"})

_VERDICT_MESSAGES: dict[Verdict, str] = {
    Verdict.CORRECT: "Correct!",
    Verdict.NEAR_MISS: "One away!",
    Verdict.INCORRECT: "Not quite.",
}


def next_mode(mode: Mode) -> Mode:
    modes = list(Mode)
    return modes[(modes.index(mode) + 1) % len(modes)]


def apply_action(game: ConnectionsGame, action: str) -> str:
    """Apply a key action to *game* and return a plain status message.

    ``quit`` and ``help`` are left to the caller.
    """
    if action in NAVIGATION:
        game.handle_key(action)
        return ""
    if action == "submit":
        verdict = game.submit()
        if verdict is None:
            short = not game.is_over and len(game.selection) < 4
            return "Select four words first." if short else ""
        return _VERDICT_MESSAGES[verdict]
    if action == "shuffle":
        return "Shuffled." if game.shuffle_words() else ""
    if action == "clear":
        game.deselect_all()
        return ""
    if action == "give_up":
        return "You gave up." if game.skip() else ""
    if action == "mode":
        game.set_mode(next_mode(game.mode))
        return f"Switched to {game.mode} mode."
    if action == "replay":
        game.replay()
        return "New round."
    return ""
