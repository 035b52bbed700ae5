"""Keyboard input for the Diamonds terminal view.

Keys are reported as names ("up", "down", "left", "right", "enter",
"backspace", "tab", "esc", "ctrl+c") or as a single decoded character.
"""

from __future__ import annotations

import os
import sys
from typing import Optional

CONTROL_KEYS = {
    b"\r": "enter",
    b"\n": "enter",
    b"\x7f": "backspace",
    b"\x08": "backspace",
    b"\t": "tab",
    b"\x03": "ctrl+c",
    b"\x1b": "esc",
}

ESCAPE_SEQUENCES = {
    b"[A": "up",
    b"[B": "down",
    b"[C": "right",
    b"[D": "left",
    b"OA": "up",
    b"OB": "down",
    b"OC": "right",
    b"OD": "left",
}

WINDOWS_EXTENDED_KEYS = {
    "H": "up",
    "P": "down",
    "K": "left",
    "M": "right",
}

# Seconds to wait for the rest of an escape sequence after ESC
ESCAPE_TIMEOUT = 0.03
MAX_ESCAPE_LEN = 8


def decode_key(data: bytes) -> Optional[str]:
    """
    Map one complete key sequence read from a POSIX terminal to a key name.

    Returns:
        Key name or character, or None for sequences that are not handled
    """
    if data in CONTROL_KEYS:
        return CONTROL_KEYS[data]
    if data.startswith(b"\x1b"):
        return ESCAPE_SEQUENCES.get(data[1:])
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        return None
    if len(text) != 1 or not text.isprintable():
        return None
    return text


def utf8_length(lead: int) -> int:
    """Number of bytes in a UTF-8 sequence starting with the given byte."""
    if lead < 0x80:
        return 1
    if lead >> 5 == 0b110:
        return 2
    if lead >> 4 == 0b1110:
        return 3
    if lead >> 3 == 0b11110:
        return 4
    return 1


def _escape_complete(seq: bytes) -> bool:
    # ESC [ ... final byte in 0x40-0x7E, or ESC O <letter>
    return len(seq) >= 3 and 0x40 <= seq[-1] <= 0x7E


class KeyReader:
    """Blocking key reader; use as a context manager around the UI loop."""

    def __init__(self) -> None:
        self._fd: Optional[int] = None
        self._old_settings = None

    def __enter__(self) -> "KeyReader":
        if os.name != "nt":
            import termios
            import tty

            self._fd = sys.stdin.fileno()
            self._old_settings = termios.tcgetattr(self._fd)
            # cbreak keeps output post-processing and ctrl+c as SIGINT
            tty.setcbreak(self._fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._fd is not None and self._old_settings is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
        self._fd = None
        self._old_settings = None

    def read_key(self) -> Optional[str]:
        if os.name == "nt":
            return _read_key_windows()
        return self._read_key_posix()

    def _read_key_posix(self) -> Optional[str]:
        if self._fd is None:
            raise RuntimeError("KeyReader must be entered before reading")
        first = os.read(self._fd, 1)
        if not first:
            raise EOFError("stdin closed")
        if first == b"\x1b":
            seq = first
            while len(seq) < MAX_ESCAPE_LEN and self._ready(ESCAPE_TIMEOUT):
                seq += os.read(self._fd, 1)
                if _escape_complete(seq):
                    break
            return decode_key(seq)
        data = first
        needed = utf8_length(first[0])
        while len(data) < needed:
            chunk = os.read(self._fd, needed - len(data))
            if not chunk:
                break
            data += chunk
        return decode_key(data)

    def _ready(self, timeout: float) -> bool:
        import select

        readable, _, _ = select.select([self._fd], [], [], timeout)
        return bool(readable)


def _read_key_windows() -> Optional[str]:
    import msvcrt

    ch = msvcrt.getwch()
    if ch in ("\x00", "\xe0"):
        return WINDOWS_EXTENDED_KEYS.get(msvcrt.getwch())
    if ch == "\r":
        return "enter"
    if ch == "\x08":
        return "backspace"
    if ch == "\x1b":
        return "esc"
    if ch == "\x03":
        return "ctrl+c"
    if ch == "\t":
        return "tab"
    if not ch.isprintable():
        return None
    return ch
