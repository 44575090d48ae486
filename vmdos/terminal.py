"""A simple scrolling-free text console with a hardware-style cursor."""

from __future__ import annotations

from typing import Union

from vmdos.screen import Screen

__all__ = ["TextConsole"]


def _to_bytes(s: Union[str, bytes, bytearray]) -> bytes:
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    return s.encode("utf-8")


class TextConsole:
    """Writes text to a screen using one packed attribute byte."""

    def __init__(self, screen: Screen | None = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.color = 0x07
        self.x = 0
        self.y = 0
        self.hardware_cursor = 0
        self.clear()
        self._update_cursor()

    def _update_cursor(self) -> None:
        self.hardware_cursor = self.y * self.screen.width + self.x

    def clear(self) -> None:
        """Blank the screen in the current colour and home the cursor."""
        blank = (self.color << 8) | ord(" ")
        for y in range(self.screen.height):
            for x in range(self.screen.width):
                self.screen.set(x, y, blank)
        self.x = 0
        self.y = 0

    def set_color(self, fg: int, bg: int) -> None:
        self.color = ((bg << 4) | (fg & 0x0F)) & 0xFF

    def _newline(self) -> None:
        self.x = 0
        self.y = min(self.y + 1, self.screen.height - 1)

    def _put_byte(self, byte: int) -> None:
        if byte == 0x0A:
            self._newline()
            self._update_cursor()
            return
        self.screen.set(self.x, self.y, (self.color << 8) | byte)
        self.x += 1
        if self.x >= self.screen.width:
            self._newline()
        self._update_cursor()

    def putc(self, c: Union[str, bytes, int]) -> None:
        """Write one character at the cursor."""
        if isinstance(c, int):
            self._put_byte(c & 0xFF)
            return
        for byte in _to_bytes(c):
            self._put_byte(byte)

    def write(self, s: Union[str, bytes, bytearray]) -> None:
        for byte in _to_bytes(s):
            self._put_byte(byte)

    def write_hex(self, v: int) -> None:
        """Write a 32-bit value as 0x followed by eight upper-case hex digits."""
        self.write(f"0x{v & 0xFFFFFFFF:08X}")

    def write_dec(self, v: int) -> None:
        """Write a 32-bit unsigned value in decimal."""
        self.write(str(v & 0xFFFFFFFF))

    def row_text(self, y: int) -> str:
        return self.screen.row_text(y)