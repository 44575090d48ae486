"""PS/2 keyboard: scancode translation and line input."""

from __future__ import annotations

from collections import deque
from enum import IntEnum
from typing import Any, Callable, Iterable, Optional, Union

from vmdos.screen import Screen

__all__ = ["Key", "translate", "scancode_to_ascii", "Keyboard"]


class Key(IntEnum):
    """Key codes for keys without a printable character."""

    ESC = 0x1B
    BACKSPACE = 0x08
    F1 = 0x80
    F2 = 0x81
    F3 = 0x82
    F4 = 0x83
    F5 = 0x84
    F6 = 0x85
    F7 = 0x86
    F8 = 0x87
    F9 = 0x88
    F10 = 0x89
    F11 = 0x8A
    F12 = 0x8B


_ASCII_MAP = (
    "\x00\x1b1234567890-=\b\t\r\x00qwertyuiop[]\n\x00asdfghjkl;'`\x00\\zxcvbnm,./\x00*\x00 "
).ljust(128, "\x00")

_SPECIAL = {
    0x01: Key.ESC,
    0x0E: Key.BACKSPACE,
    0x3B: Key.F1,
    0x3C: Key.F2,
    0x3D: Key.F3,
    0x3E: Key.F4,
    0x3F: Key.F5,
    0x40: Key.F6,
    0x41: Key.F7,
    0x42: Key.F8,
    0x43: Key.F9,
    0x44: Key.F10,
    0x57: Key.F11,
    0x58: Key.F12,
}

_LETTERS = {
    **{0x10 + i: c for i, c in enumerate("qwertyuiop")},
    **{0x1E + i: c for i, c in enumerate("asdfghjkl")},
    **{0x2C + i: c for i, c in enumerate("zxcvbnm")},
}

_ENTER = 0x1C
_BACKSPACE_SC = 0x0E


def _check_scancode(scancode: int) -> None:
    if not 0 <= scancode <= 0xFF:
        raise ValueError(f"scancode {scancode} out of range")


def translate(scancode: int) -> int:
    """Map a set-1 scancode to a key code; 0 means no key."""
    _check_scancode(scancode)
    if scancode in _SPECIAL:
        return int(_SPECIAL[scancode])
    if scancode < len(_ASCII_MAP):
        return ord(_ASCII_MAP[scancode])
    return 0


def scancode_to_ascii(sc: int) -> Optional[int]:
    """Translate a make code to a character code; None for releases and unmapped keys."""
    _check_scancode(sc)
    if sc & 0x80:
        return None
    if sc == _ENTER:
        return ord("\n")
    if sc == _BACKSPACE_SC:
        return 8
    if 0x02 <= sc <= 0x0B:
        return ord("1234567890"[sc - 0x02])
    letter = _LETTERS.get(sc)
    return ord(letter) if letter is not None else None


Scancodes = Union[int, bytes, bytearray, Iterable[int]]


class Keyboard:
    """A polled keyboard controller fed with scancodes.

    ``on_wait`` is called before each character is awaited, so pending
    timed work such as notification expiry can run.
    """

    def __init__(self, screen: Screen | None = None, on_wait: Callable[[], Any] | None = None) -> None:
        self.screen = screen
        self.on_wait = on_wait
        self._queue: deque[int] = deque()

    def feed(self, *args: Scancodes) -> None:
        """Queue scancodes; each argument is one code or a sequence of codes."""
        for arg in args:
            codes = [arg] if isinstance(arg, int) else list(arg)
            for code in codes:
                _check_scancode(code)
                self._queue.append(code)

    def poll(self) -> Optional[int]:
        """Consume one scancode if any is pending and translate it."""
        if not self._queue:
            return None
        return scancode_to_ascii(self._queue.popleft())

    def getchar(self) -> int:
        """Return the next character code; EOFError when no scancodes remain."""
        while self._queue:
            c = self.poll()
            if c is not None:
                return c
        raise EOFError("no more keyboard input")

    def _echo(self, text: str) -> None:
        if self.screen is not None:
            self.screen.write(text)

    def readline(self, max_len: int) -> str:
        """Read a line of at most ``max_len - 1`` printable characters, echoing it."""
        chars: list[str] = []
        while True:
            if self.on_wait is not None:
                self.on_wait()
            c = self.getchar()
            if c in (ord("\r"), ord("\n")):
                self._echo("\n")
                return "".join(chars)
            if c == 8:
                if chars:
                    chars.pop()
                    self._echo("\b \b")
                continue
            if len(chars) < max_len - 1 and 32 <= c <= 126:
                chars.append(chr(c))
                self._echo(chr(c))