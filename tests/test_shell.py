import pytest

from vmdos.keyboard import Keyboard, scancode_to_ascii
from vmdos.layout import Layout
from vmdos.pit import Pit
from vmdos.screen import Screen
from vmdos.shell import PROMPT, Shell, split_args
from vmdos.theme import theme_get
from vmdos.toast import Toaster
from vmdos.vfs import Vfs, mount_initrd

_KEYMAP = {
    chr(code): sc
    for sc in range(0x80)
    if (code := scancode_to_ascii(sc)) is not None
}


def keys(text):
    return [_KEYMAP[ch] for ch in text]


@pytest.fixture
def shell():
    screen = Screen()
    theme = theme_get()
    pit = Pit()
    layout = Layout(screen, theme)
    toaster = Toaster(screen, lambda: pit.ticks, theme)
    vfs = Vfs()
    mount_initrd(vfs)
    layout.draw_chrome()
    return Shell(screen, layout, toaster, Keyboard(screen), vfs, pit, theme)


def test_split_args_spaces_and_tabs():
    assert split_args("  ls \t /  ", 16) == ["ls", "/"]


def test_split_args_limit():
    assert split_args("a b c", 2) == ["a", "b"]


def test_split_args_empty():
    assert split_args("", 16) == []
    assert split_args(" \t ", 16) == []


def test_print_in_shell_box(shell):
    shell.print("hello")
    assert shell.screen.row_text(8)[25:30] == "hello"
    assert shell.output_line == 9


def test_print_scrolls(shell):
    for i in range(14):
        shell.print(f"L{i:02d}")
    assert shell.screen.row_text(20)[25:28] == "L13"
    assert shell.screen.row_text(19)[25:28] == "L12"
    assert shell.output_line == 21


def test_empty_line_toggles_fullscreen(shell):
    shell.execute("")
    assert shell.fullscreen
    assert shell.layout.is_fullscreen()
    assert shell.screen.row_text(2)[1:].startswith(" Entered Fullscreen Shell Mode.")
    assert shell.output_line == 3
    shell.execute("")
    assert not shell.fullscreen
    assert not shell.layout.is_fullscreen()
    assert shell.screen.row_text(8)[25:].startswith("Returned to normal mode")


def test_unknown_command(shell):
    assert shell.execute("bogus") is None
    assert "ERR: Unknown: bogus" in shell.screen.row_text(8)
    assert shell.screen.fg == shell.theme.fg


def test_unknown_command_truncated(shell):
    name = "z" * 40
    shell.execute(name)
    row = shell.screen.row_text(8)
    assert row[25:74] == ("ERR: Unknown: " + name)[:49]
    assert row[74] == " "


def test_execute_returns_status(shell):
    assert shell.execute("echo a b") == 0
    assert shell.screen.row_text(8)[25:28] == "a b"
    assert shell.execute("cat") == 1


def test_whitespace_line_runs_nothing(shell):
    assert shell.execute("   ") is None
    assert shell.output_line == 8
    assert not shell.fullscreen


def test_run_reads_keyboard(shell):
    shell.keyboard.feed(keys("help\n"))
    shell.run()
    screen = shell.screen
    assert screen.row_text(8)[25:].startswith("Press ENTER for fullscreen")
    assert screen.row_text(9)[25:].startswith("Type 'help' to begin.")
    assert screen.row_text(10)[25:].startswith("Available commands:")
    assert screen.row_text(5)[25:29] == PROMPT


def test_run_enter_goes_fullscreen(shell):
    shell.keyboard.feed(0x1C)
    shell.run()
    assert shell.fullscreen
    assert shell.screen.row_text(23)[1:5] == PROMPT