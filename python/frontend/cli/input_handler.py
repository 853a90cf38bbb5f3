"""Single-keypress reader for the terminal frontends.

Maps arrow keys, WASD and the command letters to action names without
requiring Enter.  Works on macOS / Linux (tty+termios+select) and Windows
(msvcrt).
"""

from __future__ import annotations

import os
import sys
import time

# -- key mapping ---------------------------------------------------------------

KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "u": "submit",
    "x": "shuffle",
    "c": "clear",
    "g": "give_up",
    "m": "mode",
    "r": "replay",
    "h": "help",
    "?": "help",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map one raw character to its action name.

    Unmapped printable characters come back unchanged; anything else
    becomes ``""``.
    """
    action = KEY_MAP.get(ch) or KEY_MAP.get(ch.lower())
    if action:
        return action
    return ch if ch.isprintable() else ""


def resolve_escape(tail: str) -> str:
    """Map the bytes after ESC: ``[A``..``[D`` are arrows, nothing is quit."""
    if not tail:
        return "quit"
    if tail[0] == "[" and len(tail) > 1:
        return ARROW_MAP.get(tail[1], "")
    return ""


# -- platform readers ----------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    end = None if timeout is None else time.monotonic() + timeout
    while not msvcrt.kbhit():
        if end is not None and time.monotonic() >= end:
            return None
        time.sleep(0.02)
    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(msvcrt.getwch(), "")
    if ch == "\x1b":
        return "quit"
    return resolve(ch)


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        ch = os.read(fd, 1).decode("utf-8", errors="ignore")
        if ch != "\x1b":
            return resolve(ch)
        tail = ""
        while len(tail) < 2 and select.select([fd], [], [], 0.05)[0]:
            tail += os.read(fd, 1).decode("utf-8", errors="ignore")
        return resolve_escape(tail)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- public API ----------------------------------------------------------------


def read_key(timeout: float | None = None) -> str | None:
    """Read a single keypress and return its action name.

    Blocks until a key arrives, or for at most *timeout* seconds, in which
    case ``None`` is returned.

    Action names:
        "up", "down", "left", "right"  — move the cursor
        "enter", "space"               — toggle the focused tile
        "submit", "shuffle", "clear"   — u / x / c
        "give_up", "mode", "replay"    — g / m / r
        "help", "quit"                 — h or ? / q, Escape, Ctrl-C
        "<char>"                       — unmapped printable char
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)
