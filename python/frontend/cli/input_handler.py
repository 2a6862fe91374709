"""Single-keypress reader for the terminal game.

Arrow keys and WASD move the board cursor; Enter or Space picks up and
drops the piece. Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "v": "solve",
    "n": "hint",
    "t": "timed",
    "\r": "select",
    "\n": "select",
    " ": "select",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string (case-insensitive)."""
    if ch in _KEY_MAP:
        return _KEY_MAP[ch]
    lowered = ch.lower()
    if lowered in _KEY_MAP:
        return _KEY_MAP[lowered]
    return ch if ch.isprintable() else ""


def _decode(read: Callable[[], str | None]) -> str:
    """Decode one key from *read*, following ``ESC [ X`` arrow sequences.

    *read* returns ``None`` when no further byte arrives in time, which
    makes a lone ESC count as quit.
    """
    ch = read()
    if ch != "\x1b":
        return resolve(ch or "")
    if read() != "[":
        return "quit"
    return _ARROW_MAP.get(read() or "", "")


# -- platform readers ----------------------------------------------------------


def _get_key_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)
    raw = msvcrt.getch()
    if raw in (b"\x00", b"\xe0"):
        return {b"H": "up", b"P": "down", b"K": "left", b"M": "right"}.get(
            msvcrt.getch(), ""
        )
    return resolve(raw.decode("utf-8", errors="ignore"))


def _get_key_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        if timeout is not None:
            ready, _, _ = select.select([fd], [], [], timeout)
            if not ready:
                return None

        first = True

        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        def read() -> str | None:
            nonlocal first
            if not first:
                ready, _, _ = select.select([fd], [], [], 0.1)
                if not ready:
                    return None
            first = False
            return os.read(fd, 1).decode("utf-8", errors="ignore")

        return _decode(read)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


_get_key = _get_key_windows if os.name == "nt" else _get_key_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block for one keypress and return a normalised action string.

    Possible return values:
        "up", "down", "left", "right"  : cursor movement
        "select"                       : Enter / Space
        "quit"                         : q / Ctrl-C / Escape
        "restart"                      : r (new round)
        "hint"                         : n (play the next optimal move)
        "solve"                        : v (play out the optimal path)
        "timed"                        : t (start a timed run)
        "<char>"                       : unmapped printable char
        ""                             : unrecognised key
    """
    # Without a timeout the readers always return a key.
    return _get_key(None) or ""


def get_key_timeout(timeout: float) -> str | None:
    """Like :func:`get_key`, but return ``None`` after *timeout* seconds."""
    return _get_key(timeout)
