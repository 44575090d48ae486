"""The kernel's interactive shell drawn inside the text-mode UI."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from vmdos.commands import Command, default_commands
from vmdos.keyboard import Keyboard
from vmdos.layout import Layout
from vmdos.pit import Pit
from vmdos.screen import Screen
from vmdos.theme import Theme, theme_get
from vmdos.toast import Toaster
from vmdos.vfs import Vfs

__all__ = ["MAX_ARGS", "LINE_MAX", "PROMPT", "split_args", "Shell"]

MAX_ARGS = 16
LINE_MAX = 256
PROMPT = "$ > "
_NORMAL_FIRST_LINE = 8
_FULLSCREEN_FIRST_LINE = 2
_ERROR_LIMIT = 49
_PROMPT_CLEAR_WIDTH = 30
_SEPARATORS = re.compile(r"[ \t]+")


def split_args(line: str, max_args: int = MAX_ARGS) -> list[str]:
    """Split on spaces and tabs, keeping at most ``max_args`` words."""
    return [word for word in _SEPARATORS.split(line) if word][:max_args]


class Shell:
    """Reads lines from the keyboard, runs commands and prints their output."""

    def __init__(
        self,
        screen: Screen,
        layout: Layout,
        toaster: Toaster,
        keyboard: Keyboard,
        vfs: Vfs,
        pit: Pit,
        theme: Theme | None = None,
        commands: Iterable[Command] | None = None,
    ) -> None:
        self.screen = screen
        self.layout = layout
        self.toaster = toaster
        self.keyboard = keyboard
        self.vfs = vfs
        self.pit = pit
        self.theme = theme if theme is not None else theme_get()
        self.commands: dict[str, Command] = {}
        for command in commands if commands is not None else default_commands():
            self.commands.setdefault(command.name, command)
        self.output_line = _NORMAL_FIRST_LINE
        self.fullscreen = False

    def _scroll(self, top: int, bottom: int, left: int, right: int) -> None:
        for y in range(top, bottom):
            for x in range(left, right):
                self.screen.set(x, y - 1, self.screen.get(x, y))

    def print(self, text: str) -> None:
        """Print a line in the shell area, scrolling it when full."""
        t = self.theme
        if self.layout.is_fullscreen():
            top, bottom, left, right, col = 2, 23, 1, 79, 1
        else:
            top, bottom, left, right, col = 4, 21, 24, 57, 25
        if self.output_line >= bottom:
            self._scroll(top, bottom, left, right)
            for x in range(left, right):
                self.screen.putc_at(x, bottom - 1, " ", t.fg, t.bg)
            self.output_line = bottom - 1
        self.screen.write_at(col, self.output_line, text)
        self.output_line += 1

    def toggle_fullscreen(self) -> None:
        """Switch between the panelled layout and the fullscreen shell."""
        self.fullscreen = not self.fullscreen
        if self.fullscreen:
            self.layout.draw_fullscreen_shell()
            self.output_line = _FULLSCREEN_FIRST_LINE
            self.print(" Entered Fullscreen Shell Mode.")
        else:
            self.layout.draw_chrome()
            self.output_line = _NORMAL_FIRST_LINE
            self.print("Returned to normal mode")

    def execute(self, line: str) -> Optional[int]:
        """Run one input line; an empty line toggles fullscreen.

        Returns the command's exit status, or None when no command ran.
        """
        if not line:
            self.toggle_fullscreen()
            return None
        argv = split_args(line, MAX_ARGS)
        if not argv:
            return None
        command = self.commands.get(argv[0])
        if command is None:
            t = self.theme
            self.screen.set_color(t.err, t.bg)
            self.print(("ERR: Unknown: " + argv[0])[:_ERROR_LIMIT])
            self.screen.set_color(t.fg, t.bg)
            return None
        return command.fn(self, argv)

    def _draw_prompt(self) -> None:
        t = self.theme
        row, col = (23, 1) if self.fullscreen else (5, 25)
        for i in range(_PROMPT_CLEAR_WIDTH):
            self.screen.putc_at(col + i, row, " ", t.fg, t.bg)
        self.screen.write_at(col, row, PROMPT)

    def run(self) -> None:
        """Prompt and execute lines until keyboard input runs out."""
        t = self.theme
        self.screen.set_color(t.fg, t.bg)
        self.print("Press ENTER for fullscreen")
        self.print("Type 'help' to begin.")
        while True:
            self._draw_prompt()
            try:
                line = self.keyboard.readline(LINE_MAX)
            except EOFError:
                return
            self.execute(line)