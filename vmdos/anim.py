"""Per-tick animation callbacks: a spinner and a wall clock."""

from __future__ import annotations

from typing import Any, Callable

from vmdos.screen import Screen

__all__ = ["MAX_ANIMS", "SPINNER_FRAMES", "ANIM_ROW", "format_clock", "Animator"]

MAX_ANIMS = 8
SPINNER_FRAMES = "|/-\\"
ANIM_ROW = 24

FrameFn = Callable[[int], Any]


def format_clock(tick: int) -> str:
    """Format a 100 Hz tick count as HH:MM:SS, hours wrapping at 24."""
    secs = (tick & 0xFFFFFFFF) // 100
    h = (secs // 3600) % 24
    m = (secs // 60) % 60
    s = secs % 60
    return f"{h:02d}:{m:02d}:{s:02d}"


class Animator:
    """Holds up to MAX_ANIMS frame callbacks, run on every tick."""

    def __init__(self, screen: Screen) -> None:
        self.screen = screen
        self.frames: list[FrameFn] = []
        self.spin_index = 0

    def register(self, fn: FrameFn) -> bool:
        """Add a callback; returns False when the table is already full."""
        if len(self.frames) >= MAX_ANIMS:
            return False
        self.frames.append(fn)
        return True

    def tick(self, tick: int) -> None:
        for fn in self.frames:
            fn(tick)

    def _spinner(self, tick: int) -> None:
        if tick % 5:
            return
        self.spin_index = (self.spin_index + 1) & 3
        self.screen.right_at(ANIM_ROW, SPINNER_FRAMES[self.spin_index])

    def _clock(self, tick: int) -> None:
        if tick % 100:
            return
        self.screen.right_at(ANIM_ROW, format_clock(tick))

    def install_defaults(self) -> None:
        """Register the spinner and the clock."""
        self.register(self._spinner)
        self.register(self._clock)