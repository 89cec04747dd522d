"""
Key input abstraction for arrow / WASD / Enter navigation.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional
import sys

from beastbound.world.movement import Direction

class Key(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESC = auto()
    OTHER = auto()

@dataclass
class KeyEvent:
    key: Key
    raw: str | bytes | None = None

_LETTERS = {
    "w": Key.UP, "s": Key.DOWN, "a": Key.LEFT, "d": Key.RIGHT,
    "q": Key.ESC, "\r": Key.ENTER, "\n": Key.ENTER,
}
_ANSI_ARROWS = {"A": Key.UP, "B": Key.DOWN, "C": Key.RIGHT, "D": Key.LEFT}
_WIN_ARROWS = {b"H": Key.UP, b"P": Key.DOWN, b"K": Key.LEFT, b"M": Key.RIGHT}

_DIRECTIONS = {
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
}

def classify(ch: str) -> Key:
    return _LETTERS.get(ch.lower(), Key.OTHER)

def direction_for(key: Key) -> Optional[Direction]:
    return _DIRECTIONS.get(key)

def _win_read() -> KeyEvent:
    import msvcrt
    ch = msvcrt.getch()
    if ch == b"\x1b":
        return KeyEvent(Key.ESC, ch)
    # Arrow keys: first byte is 0xe0 or 0x00 then second is code
    if ch in (b"\x00", b"\xe0"):
        nxt = msvcrt.getch()
        return KeyEvent(_WIN_ARROWS.get(nxt, Key.OTHER), ch + nxt)
    return KeyEvent(classify(ch.decode(errors="ignore")), ch)

def _unix_read() -> KeyEvent:
    import termios, tty
    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":  # possible escape sequence
            if sys.stdin.read(1) == "[":
                code = sys.stdin.read(1)
                return KeyEvent(_ANSI_ARROWS.get(code, Key.OTHER), "\x1b[" + code)
            return KeyEvent(Key.ESC, ch)
        return KeyEvent(classify(ch), ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)

def read_key() -> KeyEvent:
    if sys.platform.startswith("win"):
        return _win_read()
    if not sys.stdin.isatty():
        # Piped input: one command per line
        line = sys.stdin.readline()
        if not line:
            return KeyEvent(Key.ESC, line)
        line = line.rstrip("\n")
        return KeyEvent(classify(line[:1]) if line else Key.ENTER, line)
    return _unix_read()
