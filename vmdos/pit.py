"""Programmable interval timer: rate programming and a tick counter."""

from __future__ import annotations

from typing import Any, Callable, Iterable

__all__ = ["PIT_BASE_HZ", "PIT_COMMAND_PORT", "PIT_CHANNEL0_PORT", "pit_divisor", "Pit"]

PIT_BASE_HZ = 1193180
PIT_COMMAND_PORT = 0x43
PIT_CHANNEL0_PORT = 0x40
_MODE_SQUARE_WAVE = 0x36
_U32 = 0xFFFFFFFF

TickListener = Callable[[int], Any]


def pit_divisor(hz: int) -> int:
    """Return the 16-bit reload value that programs channel 0 for ``hz``."""
    divisor = PIT_BASE_HZ // hz if hz > 0 else PIT_BASE_HZ
    return divisor & 0xFFFF


class Pit:
    """A timer whose counter advances once per interrupt.

    Listeners are called with the new tick count after every tick.
    """

    def __init__(self, listeners: Iterable[TickListener] = ()) -> None:
        self.ticks = 0
        self.hz = 0
        self.port_writes: list[tuple[int, int]] = []
        self.listeners: list[TickListener] = list(listeners)

    def init(self, hz: int) -> None:
        """Program channel 0 in square-wave mode at ``hz``."""
        divisor = pit_divisor(hz)
        self.hz = hz
        self.port_writes.extend(
            [
                (PIT_COMMAND_PORT, _MODE_SQUARE_WAVE),
                (PIT_CHANNEL0_PORT, divisor & 0xFF),
                (PIT_CHANNEL0_PORT, (divisor >> 8) & 0xFF),
            ]
        )

    def tick(self) -> int:
        """Advance the counter by one interrupt and notify listeners."""
        self.ticks = (self.ticks + 1) & _U32
        for listener in self.listeners:
            listener(self.ticks)
        return self.ticks

    def sleep(self, ticks: int) -> None:
        """Wait until ``ticks`` interrupts have elapsed."""
        start = self.ticks
        while ((self.ticks - start) & _U32) < ticks:
            self.tick()