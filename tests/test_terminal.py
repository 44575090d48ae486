from vmdos.screen import VGA_HEIGHT, VGA_WIDTH, Screen
from vmdos.terminal import TextConsole


def test_default_colour_is_light_grey_on_black():
    t = TextConsole()
    t.putc("A")
    assert t.screen.get(0, 0) >> 8 == 0x07
    assert t.screen.char_at(0, 0) == "A"


def test_set_color_packs_attribute():
    t = TextConsole()
    t.set_color(0x0E, 0x01)
    t.putc("B")
    value = t.screen.get(0, 0)
    assert (value >> 8) & 0x0F == 0x0E
    assert value >> 12 == 0x01


def test_clear_blanks_screen_and_homes():
    t = TextConsole()
    t.write("some text\nmore")
    t.clear()
    assert (t.x, t.y) == (0, 0)
    assert all(t.row_text(y) == " " * VGA_WIDTH for y in range(VGA_HEIGHT))


def test_wrap_moves_to_next_row():
    t = TextConsole()
    t.write("B" * VGA_WIDTH)
    assert t.row_text(0) == "B" * VGA_WIDTH
    assert (t.x, t.y) == (0, 1)
    assert t.hardware_cursor == t.y * VGA_WIDTH + t.x


def test_newline_clamps_at_bottom():
    t = TextConsole()
    t.write("\n" * 50)
    assert t.y == VGA_HEIGHT - 1
    t.write("z")
    assert t.screen.char_at(0, VGA_HEIGHT - 1) == "z"


def test_hardware_cursor_tracks_position():
    t = TextConsole()
    t.write("ab\ncde")
    assert (t.x, t.y) == (3, 1)
    assert t.hardware_cursor == t.y * VGA_WIDTH + t.x


def test_write_hex():
    t = TextConsole()
    t.write_hex(0x1234ABCD)
    assert t.row_text(0).startswith("0x1234ABCD ")


def test_write_dec():
    t = TextConsole()
    t.write_dec(0)
    t.putc(" ")
    t.write_dec(4294967295)
    assert t.row_text(0).startswith("0 4294967295 ")


def test_write_dec_wraps_to_32_bits():
    t = TextConsole()
    t.write_dec(2**32 + 5)
    assert t.row_text(0).startswith("5 ")


def test_uses_given_screen():
    screen = Screen()
    t = TextConsole(screen)
    t.write("shared")
    assert screen.row_text(0).startswith("shared")