"""A line-oriented user-mode shell talking through plain text streams."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO

__all__ = [
    "HELP_TEXT",
    "PROMPT",
    "LINE_MAX",
    "CLEAR_LINES",
    "format_number",
    "UserShell",
    "user_init_start",
]

HELP_TEXT = "Commands: help, time, echo <text>, clear\n"
PROMPT = "\n» "
LINE_MAX = 128
CLEAR_LINES = 30

_START = time.monotonic()


def _uptime_ticks() -> int:
    return int((time.monotonic() - _START) * 100)


def format_number(v: int) -> str:
    """Format a non-negative integer in decimal."""
    if v < 0:
        raise ValueError("value must not be negative")
    return str(v)


class UserShell:
    """Reads commands from ``stdin`` and answers on ``stdout``."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        ticks: Optional[Callable[[], int]] = None,
    ) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.ticks = ticks if ticks is not None else _uptime_ticks

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def prompt(self) -> None:
        self._write(PROMPT)

    def execute(self, cmd: str) -> None:
        """Run one command line."""
        if not cmd:
            return
        if cmd == "help":
            self._write(HELP_TEXT)
        elif cmd == "time":
            self._write("ticks: " + format_number(self.ticks()) + "\n")
        elif cmd.startswith("echo") and (len(cmd) == 4 or cmd[4] == " "):
            self._write(cmd[5:] + "\n")
        elif cmd == "clear":
            self._write("\n" * CLEAR_LINES)
        else:
            self._write(f"Unknown: {cmd}\n")

    def read_line(self) -> str:
        """Read and echo up to LINE_MAX - 1 characters, stopping at a newline.

        Raises EOFError when the input ends before any character is read.
        """
        chars: list[str] = []
        while len(chars) < LINE_MAX - 1:
            ch = self.stdin.read(1)
            if not ch:
                if chars:
                    break
                raise EOFError("no more input")
            if ch == "\n":
                break
            self._write(ch)
            chars.append(ch)
        return "".join(chars)

    def run(self) -> None:
        """Greet, then prompt and execute until the input ends."""
        self._write("Welcome to vm_dos\n")
        self._write("Type 'help' to begin.\n")
        while True:
            self.prompt()
            try:
                line = self.read_line()
            except EOFError:
                return
            self.execute(line)


def user_init_start(shell: UserShell) -> None:
    """Announce the userland and hand control to the shell."""
    shell.stdout.write("\nvm_dos userland online\n")
    shell.stdout.write("Launching shell...\n")
    shell.run()