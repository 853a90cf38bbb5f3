"""Vanilla terminal frontend — no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
"""

from __future__ import annotations

import random
import sys

from backend.engine.gameplay import ConnectionsGame
from backend.engine.scheduler import MonotonicScheduler
from backend.models.puzzle import Mode
from backend.models.round import Phase
from frontend.cli.actions import apply_action
from frontend.cli.input_handler import read_key


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_REV = "\033[7m"     # reverse video (selected)
_R = "\033[0m"       # reset

# Terminal stand-ins for the group colour tokens, by difficulty.
_GROUP_BG = ("\033[42;30m", "\033[43;30m", "\033[45;30m", "\033[44;30m")

_TICK = 0.1


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _group_style(game: ConnectionsGame, group: int) -> str:
    return _GROUP_BG[game.groups[group].difficulty % len(_GROUP_BG)]


# -- board rendering ----------------------------------------------------------


def _render_board(game: ConnectionsGame) -> str:
    """Return an ANSI-coloured text representation of the board."""
    width = max(len(t.text) for t in game.tiles) + 2
    size = game.board.size
    sep = "+" + (("-" * width + "+") * size)
    if game.shake:
        sep = f"{_RED}{sep}{_R}"

    lines: list[str] = [sep]
    for row in range(size):
        cells: list[str] = []
        for col in range(size):
            tile = game.tiles[row * size + col]
            text = f"[{tile.text:^{width - 2}}]" if tile.focused else f"{tile.text:^{width}}"
            if tile.solved:
                cells.append(f"{_group_style(game, tile.group)}{text}{_R}")
            elif tile.animating:
                cells.append(f"{_DIM}{text}{_R}")
            elif tile.selected:
                cells.append(f"{_REV}{text}{_R}")
            elif tile.focused:
                cells.append(f"{_C}{text}{_R}")
            else:
                cells.append(text)
        lines.append("|" + "|".join(cells) + "|")
        lines.append(sep)
    return "\n".join(lines)


def _render_groups(game: ConnectionsGame, order: list[int]) -> str:
    lines = []
    for group_id in order:
        name = game.groups[group_id].name.upper()
        words = ", ".join(game.state.puzzle.members(group_id))
        lines.append(f"  {_group_style(game, group_id)} {name} {_R}  {words}")
    return "\n".join(lines)


# -- screens ------------------------------------------------------------------


def _draw_game(game: ConnectionsGame, status: str = "") -> None:
    _clear()
    print(f"  {_C}=== CONNECTIONS ({game.mode}) ==={_R}")
    print(f"  {_DIM}Create four groups of four!{_R}")
    print()
    if game.solved_groups:
        solved = [r.group for r in sorted(game.solved_groups, key=lambda r: r.order)]
        print(_render_groups(game, solved))
        print()
    print(_render_board(game))
    print()
    dots = "● " * game.mistakes_remaining + f"{_DIM}{'○ ' * game.mistakes}{_R}"
    print(f"  Mistakes remaining: {dots}")
    if game.near_miss:
        print(f"  {_Y}One away!{_R}")
    if status:
        print(f"  {status}")
    print()
    print(
        f"  {_DIM}Arrows/WASD move  Space select  U submit  X shuffle  "
        f"C clear  G give up  M mode  Q quit{_R}"
    )
    sys.stdout.flush()


def _draw_end(game: ConnectionsGame) -> None:
    _clear()
    if game.phase is Phase.WON:
        print(f"\n  {_G}*** You found every group! ***{_R}\n")
    else:
        print(f"\n  {_RED}Better luck next time.{_R}\n")
    print(_render_groups(game, game.endgame_group_order()))
    print(f"\n  Mistakes: {_Y}{game.mistakes}/{game.state.max_mistakes}{_R}")
    print(f"\n  {_DIM}R play again   M switch mode   Q quit{_R}\n")
    sys.stdout.flush()


# -- game loop ----------------------------------------------------------------


def run(mode: Mode = Mode.EASY, seed: int | None = None) -> None:
    """Launch the vanilla terminal frontend."""
    scheduler = MonotonicScheduler()
    game = ConnectionsGame(mode, rng=random.Random(seed), scheduler=scheduler)
    status = ""

    while True:
        settling = bool(game.pending_collapse) or game.shake
        if game.is_over and not settling:
            _draw_end(game)
        else:
            _draw_game(game, status)

        while True:
            key = read_key(timeout=_TICK)
            if scheduler.poll() or key is not None:
                break
        if key is None:
            continue
        if key == "quit":
            _clear()
            print("\n  Goodbye!\n")
            return
        status = apply_action(game, key)
