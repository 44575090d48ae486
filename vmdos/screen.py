"""An 80x25 VGA text-mode screen with positioned drawing helpers."""

from __future__ import annotations

from typing import Union

__all__ = ["VGA_WIDTH", "VGA_HEIGHT", "vga_entry", "Screen"]

VGA_WIDTH = 80
VGA_HEIGHT = 25

Text = Union[str, bytes, bytearray]

_NEWLINE = 0x0A


def _to_bytes(s: Text) -> bytes:
    if isinstance(s, (bytes, bytearray)):
        return bytes(s)
    return s.encode("utf-8")


def _char_code(c: Union[str, bytes, int]) -> int:
    if isinstance(c, int):
        return c & 0xFF
    encoded = _to_bytes(c)
    if len(encoded) != 1:
        raise ValueError(f"expected a single-byte character, got {c!r}")
    return encoded[0]


def _c_div(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def vga_entry(c: Union[str, bytes, int], fg: int, bg: int) -> int:
    """Build a 16-bit VGA cell: attribute in the high byte, character in the low."""
    attr = ((bg & 0x0F) << 4) | (fg & 0x0F)
    return (attr << 8) | _char_code(c)


class Screen:
    """A grid of VGA text cells with a write cursor and current colours."""

    def __init__(self, width: int = VGA_WIDTH, height: int = VGA_HEIGHT) -> None:
        self.width = width
        self.height = height
        self.fg = 0x0F
        self.bg = 0x00
        self._cx = 0
        self._cy = 0
        self._cells = [vga_entry(" ", self.fg, self.bg)] * (width * height)

    @property
    def cursor(self) -> tuple[int, int]:
        """Current (x, y) position used by :meth:`write`."""
        return self._cx, self._cy

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the screen")
        return y * self.width + x

    def get(self, x: int, y: int) -> int:
        """Return the raw 16-bit cell value at (x, y)."""
        return self._cells[self._index(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        """Store a raw 16-bit cell value at (x, y)."""
        self._cells[self._index(x, y)] = value & 0xFFFF

    def char_at(self, x: int, y: int) -> str:
        """Return the character byte at (x, y) as a one-character string."""
        return chr(self.get(x, y) & 0xFF)

    def row_text(self, y: int) -> str:
        """Return the characters of row y, one per cell."""
        return "".join(self.char_at(x, y) for x in range(self.width))

    def putc_at(self, x: int, y: int, c: Union[str, bytes, int], fg: int, bg: int) -> None:
        """Draw one character; positions off the screen are ignored."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return
        self._cells[y * self.width + x] = vga_entry(c, fg, bg)

    def set_color(self, fg: int, bg: int) -> None:
        self.fg = fg
        self.bg = bg

    def clear(self, bg: int) -> None:
        """Fill the screen with blanks on the given background and home the cursor."""
        self.bg = bg
        blank = vga_entry(" ", self.fg, bg)
        self._cells = [blank] * (self.width * self.height)
        self._cx = 0
        self._cy = 0

    def _next_line(self) -> None:
        self._cx = 0
        self._cy = min(self._cy + 1, self.height - 1)

    def write(self, s: Text) -> None:
        """Write text at the cursor, wrapping at the right edge."""
        for byte in _to_bytes(s):
            if byte == _NEWLINE:
                self._next_line()
                continue
            self.putc_at(self._cx, self._cy, byte, self.fg, self.bg)
            self._cx += 1
            if self._cx >= self.width:
                self._next_line()

    def write_at(self, col: int, row: int, s: Text) -> None:
        """Write text starting at (col, row) without moving the cursor."""
        x, y = col, row
        for byte in _to_bytes(s):
            if not 0 <= y < self.height:
                break
            if byte == _NEWLINE:
                x = col
                y += 1
            else:
                if 0 <= x < self.width:
                    self.putc_at(x, y, byte, self.fg, self.bg)
                x += 1

    def right_at(self, row: int, s: Text) -> None:
        """Write text right-aligned on a row, leaving one blank column at the edge."""
        data = _to_bytes(s)
        x = max(0, self.width - (len(data) + 1))
        self.write_at(x, row, data)

    def box(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        fg: int,
        bg: int,
        title: Text | None = None,
    ) -> None:
        """Draw a filled, framed box with an optional centred title."""
        x1 = max(x1, 0)
        y1 = max(y1, 0)
        x2 = min(x2, self.width - 1)
        y2 = min(y2, self.height - 1)
        if x2 < x1 or y2 < y1:
            return

        for y in range(y1, y2 + 1):
            for x in range(x1, x2 + 1):
                self.putc_at(x, y, " ", fg, bg)

        for x in range(x1, x2 + 1):
            self.putc_at(x, y1, "=", fg, bg)
            self.putc_at(x, y2, "=", fg, bg)
        for y in range(y1, y2 + 1):
            self.putc_at(x1, y, "|", fg, bg)
            self.putc_at(x2, y, "|", fg, bg)
        self.putc_at(x1, y1, "[", fg, bg)
        self.putc_at(x2, y1, "]", fg, bg)
        self.putc_at(x1, y2, "[", fg, bg)
        self.putc_at(x2, y2, "]", fg, bg)

        if title:
            data = _to_bytes(title)
            start = max(x1 + _c_div((x2 - x1 + 1) - len(data), 2), x1 + 1)
            for offset, byte in enumerate(data):
                if start + offset >= x2:
                    break
                self.putc_at(start + offset, y1, byte, fg, bg)

    def write_hex(self, v: int) -> None:
        """Write a 32-bit value as 0x followed by eight upper-case hex digits."""
        self.write(f"0x{v & 0xFFFFFFFF:08X}")

    def write_dec(self, v: int) -> None:
        """Write a 32-bit unsigned value in decimal."""
        self.write(str(v & 0xFFFFFFFF))