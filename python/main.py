#!/usr/bin/env python3
"""Connections word-grouping puzzle.

Usage::

    python main.py                    # interactive menu
    python main.py -f rich -m hard    # Rich terminal, hard words
    python main.py -f vanilla --seed 7
    python main.py -f rich --log-file logs/game.log -v
"""

import importlib
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.logging_config import setup_logging  # noqa: E402
from backend.models.puzzle import Mode  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _ask_mode(default: Mode) -> Mode:
    raw = input(f"  Mode (easy/hard, default {default}): ").strip().lower() or default
    try:
        return Mode(raw)
    except ValueError:
        print(f"  Unknown mode — using {default}.")
        return default


def _launch(frontend: Frontend, mode: Mode, seed: Optional[int]) -> None:
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(mode=mode, seed=seed)


def _menu_loop(mode: Mode, seed: Optional[int]) -> None:
    while True:
        print()
        print("  ====================================")
        print("          C O N N E C T I O N S       ")
        print("  ====================================")
        print()
        print("  1.  Play  (Vanilla Terminal)")
        print("  2.  Play  (Rich Terminal)")
        print("  0.  Quit")
        print()

        choice = input("  Select: ").strip()

        if choice == "0":
            print("\n  Goodbye!\n")
            return

        if choice in ("1", "2"):
            mode = _ask_mode(mode)
            _launch({"1": Frontend.vanilla, "2": Frontend.rich}[choice], mode, seed)
        else:
            print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive menu.",
    ),
    mode: Mode = typer.Option(
        Mode.EASY, "-m", "--mode",
        help="Word set to play.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the tile shuffle for a repeatable deal.",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Write engine logs to this file.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log ignored inputs and timer activity too.",
    ),
) -> None:
    """Connections word-grouping puzzle."""
    setup_logging("DEBUG" if verbose else "INFO", log_file)

    if frontend is None:
        _menu_loop(mode, seed)
        return

    _launch(frontend, mode, seed)


if __name__ == "__main__":
    app()
