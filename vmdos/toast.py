"""Short-lived notifications on the row above the status bar."""

from __future__ import annotations

from typing import Callable, Optional

from vmdos.screen import Screen
from vmdos.theme import Theme, theme_get

__all__ = ["TOAST_ROW", "Toaster"]

TOAST_ROW = 23
_BLANK = " " * 16


class Toaster:
    """Shows one message at a time and erases it once its time is up."""

    def __init__(self, screen: Screen, clock: Callable[[], int], theme: Theme | None = None) -> None:
        self.screen = screen
        self.clock = clock
        self.theme = theme if theme is not None else theme_get()
        self.message: Optional[str] = None
        self.until = 0

    def show(self, msg: str, duration: int) -> None:
        """Display ``msg`` for ``duration`` ticks."""
        t = self.theme
        self.message = msg
        self.until = (self.clock() + duration) & 0xFFFFFFFF
        self.screen.set_color(t.ok, t.bg)
        self.screen.right_at(TOAST_ROW, msg)
        self.screen.set_color(t.fg, t.bg)

    def tick(self, tick: int) -> bool:
        """Erase the message if it has expired; return True when it was erased."""
        if not self.message or tick < self.until:
            return False
        t = self.theme
        self.message = None
        self.screen.set_color(t.dim, t.bg)
        self.screen.right_at(TOAST_ROW, _BLANK)
        self.screen.set_color(t.fg, t.bg)
        return True