"""Interrupt dispatch with per-vector handlers and exception reporting."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Callable, Optional

__all__ = ["Registers", "EXCEPTION_NAMES", "exception_name", "InterruptTable"]

EXCEPTION_NAMES = (
    "Divide-by-zero", "Debug", "NMI", "Breakpoint", "Overflow", "BOUND Range",
    "Invalid opcode", "Device not available", "Double fault", "Coprocessor segment overrun",
    "Invalid TSS", "Segment not present", "Stack fault", "General protection", "Page fault",
    "Reserved", "x87 FPU", "Alignment check", "Machine check", "SIMD Floating-Point",
    "Virtualization", "Control Protection",
) + ("Reserved",) * 10

Log = Callable[[str], Any]


@dataclass
class Registers:
    """CPU state saved by an interrupt stub."""

    ds: int = 0
    edi: int = 0
    esi: int = 0
    ebp: int = 0
    esp: int = 0
    ebx: int = 0
    edx: int = 0
    ecx: int = 0
    eax: int = 0
    int_no: int = 0
    err_code: int = 0
    eip: int = 0
    cs: int = 0
    eflags: int = 0
    useresp: int = 0
    ss: int = 0


Handler = Callable[[Registers], Any]


def exception_name(n: int) -> str:
    """Name of CPU exception vector ``n``, or "Unknown" past the first 32."""
    return EXCEPTION_NAMES[n] if 0 <= n < len(EXCEPTION_NAMES) else "Unknown"


def _hex32(v: int) -> str:
    return f"0x{v & 0xFFFFFFFF:08X}"


class InterruptTable:
    """Maps the 256 vectors to handlers and reports unhandled ones."""

    def __init__(self, log: Log | None = None) -> None:
        self.log: Log = log if log is not None else sys.stdout.write
        self._handlers: list[Optional[Handler]] = [None] * 256

    def register(self, n: int, handler: Handler) -> None:
        if not 0 <= n < len(self._handlers):
            raise IndexError(f"interrupt vector {n} out of range")
        self._handlers[n] = handler

    def _report(self, label: str, value: int) -> None:
        self.log(f"{label}{_hex32(value)}\n")

    def dispatch(self, regs: Registers) -> None:
        """Run the handler for ``regs.int_no`` or report it as unhandled."""
        handler = self._handlers[regs.int_no] if 0 <= regs.int_no < 256 else None
        if handler is not None:
            handler(regs)
            return
        self.log(f"Unhandled interrupt: {regs.int_no & 0xFFFFFFFF}\n")
        self._report("EIP: ", regs.eip)
        self._report("CS:  ", regs.cs)
        self._report("EFLAGS: ", regs.eflags)

    def default_handler(self, regs: Registers) -> None:
        """Report a CPU exception with its saved state."""
        self.log(f"Exception: {exception_name(regs.int_no)}\n")
        self._report("Error code: ", regs.err_code)
        self._report("EIP: ", regs.eip)
        self._report("CS:  ", regs.cs)
        self._report("EFLAGS: ", regs.eflags)

    def set_defaults(self) -> None:
        """Install the default handler on the 32 exception vectors."""
        for n in range(32):
            self.register(n, self.default_handler)