"""System start-up: hardware tables, timer, file system, UI and shell."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from vmdos.anim import Animator
from vmdos.descriptors import InterruptDescriptorTable, default_gdt
from vmdos.interrupts import InterruptTable
from vmdos.keyboard import Keyboard, scancode_to_ascii
from vmdos.layout import Layout
from vmdos.pit import Pit
from vmdos.screen import Screen
from vmdos.shell import Shell
from vmdos.theme import Theme, theme_get
from vmdos.toast import Toaster
from vmdos.vfs import HELLO_PATH, Vfs, mount_initrd

__all__ = ["BANNER", "BOOT_TOAST", "TIMER_HZ", "Kernel", "main"]

BANNER = "\n[vm_dos v1.0.1 - alpha] UI init...\n"
BOOT_TOAST = "vm_dos: System Boot Successful."
TIMER_HZ = 100
_BOOT_TOAST_TICKS = 300
_INIT_READ_LIMIT = 63

_KEYMAP = {
    chr(code): sc
    for sc in range(0x80)
    if (code := scancode_to_ascii(sc)) is not None
}


class Kernel:
    """Owns every subsystem and brings them up in order."""

    def __init__(self, screen: Screen | None = None, theme: Theme | None = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.theme = theme if theme is not None else theme_get()
        self.gdt = default_gdt()
        self.idt = InterruptDescriptorTable()
        self.interrupts = InterruptTable(log=self.screen.write)
        self.pit = Pit()
        self.layout = Layout(self.screen, self.theme)
        self.toaster = Toaster(self.screen, lambda: self.pit.ticks, self.theme)
        self.animator = Animator(self.screen)
        self.pit.listeners.append(self.animator.tick)
        self.keyboard = Keyboard(self.screen, on_wait=lambda: self.toaster.tick(self.pit.ticks))
        self.vfs = Vfs()
        self.shell = Shell(
            self.screen, self.layout, self.toaster, self.keyboard, self.vfs, self.pit, self.theme
        )
        self.interrupts_enabled = False

    def boot(self) -> None:
        """Initialise the system, draw the UI and run the shell until input ends."""
        s = self.screen
        s.set_color(0x0A, 0x00)
        s.write(BANNER)

        self.gdt = default_gdt()
        self.idt.reset()
        s.write("[pmm] init\n")
        s.write("[paging] init\n")
        self.pit.init(TIMER_HZ)
        s.write("[kbd] init\n")

        s.write("[vfs] init\n")
        mount_initrd(self.vfs, s.write)

        s.write("[syscalls] init\n")
        self.run_init()

        self.interrupts_enabled = True

        t = self.theme
        s.set_color(t.fg, t.bg)
        s.clear(t.bg)
        self.layout.draw_chrome()

        self.animator.install_defaults()
        self.toaster.show(BOOT_TOAST, _BOOT_TOAST_TICKS)

        self.shell.run()

    def run_init(self) -> Optional[bytes]:
        """Read /hello.txt as the first user program does; return its bytes or None."""
        s = self.screen
        s.write("\n[user] reading /hello.txt -> ")
        try:
            data = self.vfs.read(HELLO_PATH, _INIT_READ_LIMIT, 0)
        except FileNotFoundError:
            data = b""
        if data:
            s.write(data)
        else:
            s.write("(not found)\n")
        s.write("\n[user] ready.\n")
        return data or None


def _scancodes(text: str) -> list[int]:
    return [_KEYMAP[ch] for ch in text if ch in _KEYMAP]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="vmdos",
        description="Boot the text-mode system, type the given lines into its shell "
        "and print the final screen.",
    )
    parser.add_argument(
        "lines", nargs="*", help="shell input lines; read from standard input when omitted"
    )
    args = parser.parse_args(argv)
    lines = args.lines if args.lines else sys.stdin.read().splitlines()

    kernel = Kernel()
    for line in lines:
        kernel.keyboard.feed(_scancodes(line + "\n"))
    kernel.boot()

    for y in range(kernel.screen.height):
        row = kernel.screen.row_text(y).encode("latin-1").decode("utf-8", "replace")
        print(row.rstrip())
    return 0


if __name__ == "__main__":
    sys.exit(main())