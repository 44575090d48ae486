"""Built-in commands of the kernel shell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol, Sequence

from vmdos.layout import Layout
from vmdos.pit import Pit
from vmdos.screen import Screen
from vmdos.theme import Theme
from vmdos.toast import Toaster
from vmdos.vfs import Vfs

__all__ = [
    "CommandContext",
    "Command",
    "ECHO_LIMIT",
    "UPTIME_LIMIT",
    "join_echo",
    "format_uptime",
    "default_commands",
]

ECHO_LIMIT = 78
UPTIME_LIMIT = 39
_TICKS_PER_SECOND = 100
_CAT_CHUNK = 256


class CommandContext(Protocol):
    """What a command needs from the shell that runs it."""

    screen: Screen
    layout: Layout
    toaster: Toaster
    vfs: Vfs
    pit: Pit
    theme: Theme

    def print(self, text: str) -> None: ...


CommandFn = Callable[[CommandContext, Sequence[str]], int]


@dataclass(frozen=True)
class Command:
    """A named shell command; ``fn(ctx, argv)`` returns an exit status."""

    name: str
    help: str
    fn: CommandFn


def join_echo(args: Sequence[str]) -> str:
    """Join arguments with single spaces, cut to ECHO_LIMIT characters."""
    return " ".join(args)[:ECHO_LIMIT]


def _digits_low_first(n: int) -> str:
    # The uptime line emits each number's digits least significant first.
    return str(n)[::-1]


def format_uptime(ticks: int) -> str:
    """Build the status command's uptime line from a 100 Hz tick count."""
    seconds = (ticks & 0xFFFFFFFF) // _TICKS_PER_SECOND
    mins, secs = divmod(seconds, 60)
    text = "Uptime: "
    if mins > 0:
        text += _digits_low_first(mins) + "m "
    if secs > 0 or mins == 0:
        text += _digits_low_first(secs) + "s"
    return text[:UPTIME_LIMIT]


def _cmd_help(ctx: CommandContext, argv: Sequence[str]) -> int:
    for line in (
        "Available commands:",
        "  help    - Show this message",
        "  clear   - Clear screen",
        "  echo    - Print text",
        "  ls      - List files",
        "  cat     - Show file contents",
        "  toast   - Show notification",
        "  status  - Show system status",
    ):
        ctx.print(line)
    return 0


def _cmd_clear(ctx: CommandContext, argv: Sequence[str]) -> int:
    ctx.screen.clear(ctx.theme.bg)
    ctx.layout.draw_chrome()
    return 0


def _cmd_echo(ctx: CommandContext, argv: Sequence[str]) -> int:
    ctx.print(join_echo(argv[1:]))
    return 0


def _cmd_panel(ctx: CommandContext, argv: Sequence[str]) -> int:
    ctx.print("System panel refreshed.")
    return 0


def _cmd_progress(ctx: CommandContext, argv: Sequence[str]) -> int:
    t = ctx.theme
    for i in range(41):
        ctx.screen.putc_at(25 + i, 24, "#", t.ok, t.bg)
        ctx.pit.sleep(3)
    ctx.toaster.show("Done", 200)
    return 0


def _cmd_ls(ctx: CommandContext, argv: Sequence[str]) -> int:
    prefix = argv[1] if len(argv) > 1 else "/"
    for node in ctx.vfs:
        if node.name.startswith(prefix):
            ctx.print(node.name)
    return 0


def _cmd_cat(ctx: CommandContext, argv: Sequence[str]) -> int:
    if len(argv) < 2:
        ctx.print("Usage: cat <path>")
        return 1
    path = argv[1]
    chunks: list[bytes] = []
    offset = 0
    try:
        while chunk := ctx.vfs.read(path, _CAT_CHUNK, offset):
            chunks.append(chunk)
            offset += len(chunk)
    except FileNotFoundError:
        ctx.print(f"cat: {path}: not found")
        return 1
    for line in b"".join(chunks).decode("utf-8", "replace").splitlines():
        ctx.print(line)
    return 0


def _cmd_toast(ctx: CommandContext, argv: Sequence[str]) -> int:
    ctx.toaster.show(argv[1] if len(argv) > 1 else "Toast!", 300)
    return 0


def _cmd_status(ctx: CommandContext, argv: Sequence[str]) -> int:
    ctx.print("-- System Status --")
    ctx.print("Status: Running OK")
    ctx.print(format_uptime(ctx.pit.ticks))
    ctx.print("Kernel: v1.0.1")
    ctx.print("Shell: Active")
    return 0


def default_commands() -> list[Command]:
    """Return the shell's command table in lookup order."""
    return [
        Command("help", "Show commands", _cmd_help),
        Command("clear", "Clear screen", _cmd_clear),
        Command("echo", "Print text", _cmd_echo),
        Command("panel", "Redraw panel", _cmd_panel),
        Command("progress", "Animate progress bar", _cmd_progress),
        Command("ls", "List files", _cmd_ls),
        Command("cat", "Show file contents", _cmd_cat),
        Command("toast", "Show toast", _cmd_toast),
        Command("status", "Show system status", _cmd_status),
    ]