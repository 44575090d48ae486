"""Screen layout: top bar, panels, shell box and status bar."""

from __future__ import annotations

from vmdos.screen import Screen
from vmdos.theme import Theme, theme_get

__all__ = ["VERSION", "Layout"]

VERSION = "v1.0.1 - alpha"
_TITLE = " vm_dos v1.0.1 - alpha "


class Layout:
    """Draws the normal three-panel chrome or the fullscreen shell frame."""

    def __init__(self, screen: Screen, theme: Theme | None = None) -> None:
        self.screen = screen
        self.theme = theme if theme is not None else theme_get()
        self.fullscreen = False

    def _bar(self, row: int, fg: int, bg: int) -> None:
        for x in range(self.screen.width):
            self.screen.putc_at(x, row, " ", fg, bg)

    def write_keyboard_input(self, text: str) -> None:
        """Show text on the right part of the status bar."""
        t = self.theme
        for x in range(30, self.screen.width):
            self.screen.putc_at(x, 24, " ", t.dim, t.accent)
        self.screen.write_at(30, 24, text)

    def draw_fullscreen_shell(self) -> None:
        t = self.theme
        self.screen.set_color(t.fg, t.bg)
        self.screen.clear(t.bg)
        self._bar(0, t.fg, t.accent)
        self.screen.write_at(56, 0, _TITLE)
        self._bar(24, t.dim, t.accent)
        self.screen.write_at(2, 24, " • Enter: exit fullscreen shell. • help: commands. ")
        self.screen.box(0, 1, 79, 22, t.fg, t.bg, " SYSTEM: vm_dos Shell ")
        self.fullscreen = True

    def draw_file_browser(self) -> None:
        t = self.theme
        self.screen.box(0, 1, 22, 22, t.fg, t.bg, " Files ")
        self.screen.set_color(t.fg, t.bg)
        self.screen.write_at(2, 2, "Root directory")
        self.screen.write_at(2, 4, "~/ /root")

    def update_info_panel(self) -> None:
        t = self.theme
        self.screen.set_color(t.fg, t.bg)
        for y in range(2, 22):
            for x in range(60, 78):
                self.screen.putc_at(x, y, " ", t.fg, t.bg)
        self.screen.write_at(60, 2, VERSION)
        self.screen.write_at(60, 4, "Status: Running")
        self.screen.write_at(60, 6, "Shell: Active")
        self.screen.write_at(60, 8, "Mem: OK")
        self.screen.write_at(60, 10, "Disk: OK")

    def draw_chrome(self) -> None:
        t = self.theme
        self.screen.set_color(t.fg, t.bg)
        self.screen.clear(t.bg)
        self._bar(0, t.fg, t.accent)
        self.screen.write_at(56, 0, _TITLE)
        self.draw_file_browser()
        self.screen.box(23, 1, 57, 22, t.fg, t.bg, " vm_dos Shell ")
        self.screen.box(58, 1, 79, 22, t.fg, t.bg, " Info ")
        self.update_info_panel()
        self._bar(24, t.dim, t.accent)
        self.screen.write_at(2, 24, " • Enter: fullscreen shell. • help: commands. ")
        self.fullscreen = False

    def is_fullscreen(self) -> bool:
        return self.fullscreen