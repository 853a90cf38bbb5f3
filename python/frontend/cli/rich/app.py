"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same
input handler and action dispatch as the vanilla CLI.  Feedback timers are
driven by a ``MonotonicScheduler`` polled between keypresses.
"""

from __future__ import annotations

import random

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.engine.gameplay import ConnectionsGame
from backend.engine.scheduler import MonotonicScheduler
from backend.models.puzzle import Mode
from backend.models.round import Phase
from frontend.cli.actions import apply_action
from frontend.cli.input_handler import read_key

console = Console()

_TICK = 0.1  # seconds between timer polls while waiting for a key


# -- board rendering ----------------------------------------------------------


def _tile_cell(game: ConnectionsGame, index: int, width: int) -> Text:
    tile = game.tiles[index]
    text = f"{tile.text:^{width}}"
    if tile.focused:
        text = f"[{tile.text:^{width - 2}}]"

    if tile.solved:
        color = game.groups[tile.group].color
        return Text(text, style=f"bold black on {color}")
    if tile.animating:
        return Text(text, style="dim italic")
    if tile.selected:
        return Text(text, style="bold white on #5a594e")
    if tile.focused:
        return Text(text, style="bold cyan")
    return Text(text, style="bold white")


def _render_board(game: ConnectionsGame) -> Table:
    """Return a Rich Table representing the word grid."""
    width = max(len(t.text) for t in game.tiles) + 2
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=rich.box.ROUNDED,
        border_style="red" if game.shake else "bright_blue",
        padding=(0, 1),
    )
    size = game.board.size
    for _ in range(size):
        table.add_column(width=width, justify="center")
    for row in range(size):
        table.add_row(*(_tile_cell(game, row * size + col, width) for col in range(size)))
    return table


def _render_mistakes(game: ConnectionsGame) -> Text:
    text = Text("  Mistakes remaining: ", style="dim")
    text.append("● " * game.mistakes_remaining, style="bold #5a594e")
    text.append("○ " * game.mistakes, style="dim")
    return text


def _render_groups(game: ConnectionsGame, order: list[int]) -> Table:
    """One coloured row per group, in *order*."""
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(justify="left")
    table.add_column(justify="left")
    for group_id in order:
        group = game.groups[group_id]
        words = ", ".join(game.state.puzzle.members(group_id))
        style = f"bold black on {group.color}"
        table.add_row(Text(f" {group.name.upper()} ", style=style), Text(words))
    return table


# -- screens ------------------------------------------------------------------


def _controls() -> Text:
    controls = Text()
    for key, label in (
        ("↑↓←→", "move"),
        ("Space", "select"),
        ("U", "submit"),
        ("X", "shuffle"),
        ("C", "clear"),
        ("G", "give up"),
        ("M", "mode"),
        ("Q", "quit"),
    ):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")
    return controls


def _draw_game(game: ConnectionsGame, status: str = "") -> None:
    console.clear()

    parts: list = []
    if game.solved_groups:
        solved = [r.group for r in sorted(game.solved_groups, key=lambda r: r.order)]
        parts.append(Align.center(_render_groups(game, solved)))
        parts.append(Text(""))
    parts.append(Align.center(_render_board(game)))
    parts.append(Text(""))
    parts.append(Align.center(_render_mistakes(game)))
    if game.near_miss:
        parts.append(Align.center(Text("One away!", style="bold yellow")))
    if status:
        parts.append(Align.center(Text(status, style="cyan")))

    panel = Panel(
        Group(*parts),
        title=f"[bold cyan]Connections  ({game.mode})[/bold cyan]",
        subtitle="[dim]Create four groups of four![/dim]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(_controls()))


def _draw_end(game: ConnectionsGame) -> None:
    console.clear()

    if game.phase is Phase.WON:
        headline = Text("★ You found every group! ★", style="bold green")
        border = "bold green"
    else:
        headline = Text("Better luck next time.", style="bold red")
        border = "red"

    summary = Text()
    summary.append("  Mistakes: ", style="dim")
    summary.append(f"{game.mistakes}/{game.state.max_mistakes}", style="bold yellow")

    panel = Panel(
        Group(
            Align.center(headline),
            Text(""),
            Align.center(_render_groups(game, game.endgame_group_order())),
            Text(""),
            Align.center(summary),
        ),
        title=f"[bold]Connections  ({game.mode})[/bold]",
        border_style=border,
        padding=(1, 2),
    )
    console.print()
    console.print(Align.center(panel))
    console.print(
        Align.center(Text("\n  R play again   M switch mode   Q quit\n", style="dim"))
    )


# -- game loop ----------------------------------------------------------------


def _wait(scheduler: MonotonicScheduler) -> str | None:
    """Block until a key arrives or a timer fires (then ``None``)."""
    while True:
        key = read_key(timeout=_TICK)
        if scheduler.poll() or key is not None:
            return key


def run(mode: Mode = Mode.EASY, seed: int | None = None) -> None:
    """Launch the Rich frontend."""
    scheduler = MonotonicScheduler()
    game = ConnectionsGame(mode, rng=random.Random(seed), scheduler=scheduler)
    status = ""

    while True:
        # Keep showing the board while the last collapse / shake plays out.
        settling = bool(game.pending_collapse) or game.shake
        if game.is_over and not settling:
            _draw_end(game)
        else:
            _draw_game(game, status)

        key = _wait(scheduler)
        if key is None:
            continue
        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        status = apply_action(game, key)
