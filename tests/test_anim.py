from vmdos.anim import MAX_ANIMS, Animator, format_clock
from vmdos.screen import Screen


def test_clock_zero():
    assert format_clock(0) == "00:00:00"


def test_clock_hours_minutes_seconds():
    assert format_clock(100 * (3600 + 60 + 1)) == "01:01:01"


def test_clock_wraps_each_day():
    assert format_clock(100 * 86400 + 500) == format_clock(500)


def test_register_caps_at_max():
    anim = Animator(Screen())
    calls = []
    results = [anim.register(lambda t, i=i: calls.append(i)) for i in range(MAX_ANIMS + 2)]
    assert results.count(True) == MAX_ANIMS
    anim.tick(1)
    assert calls == list(range(MAX_ANIMS))


def test_tick_passes_tick_value():
    anim = Animator(Screen())
    seen = []
    anim.register(seen.append)
    anim.tick(42)
    assert seen == [42]


def test_spinner_advances_every_fifth_tick():
    screen = Screen()
    anim = Animator(screen)
    anim.install_defaults()
    anim.tick(3)
    assert screen.char_at(78, 24) == " "
    anim.tick(5)
    assert screen.char_at(78, 24) == "/"
    anim.tick(10)
    assert screen.char_at(78, 24) == "-"


def test_clock_drawn_each_second():
    screen = Screen()
    anim = Animator(screen)
    anim.install_defaults()
    anim.tick(100)
    assert screen.row_text(24).endswith(format_clock(100) + " ")