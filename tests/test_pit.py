import pytest

from vmdos.pit import PIT_BASE_HZ, Pit, pit_divisor


@pytest.mark.parametrize("hz", [100, 1000, 50])
def test_divisor_brackets_rate(hz):
    d = pit_divisor(hz)
    assert d * hz <= PIT_BASE_HZ < (d + 1) * hz


@pytest.mark.parametrize("hz", [0, -5])
def test_divisor_fits_sixteen_bits_for_invalid_rate(hz):
    assert 0 <= pit_divisor(hz) <= 0xFFFF
    assert pit_divisor(hz) == pit_divisor(0)


def test_init_writes_command_then_divisor_bytes():
    pit = Pit()
    pit.init(100)
    assert pit.port_writes[0] == (0x43, 0x36)
    (p1, lo), (p2, hi) = pit.port_writes[1:]
    assert p1 == p2 == 0x40
    assert lo | (hi << 8) == pit_divisor(100)
    assert pit.hz == 100


def test_tick_notifies_listeners():
    seen = []
    pit = Pit([seen.append])
    pit.tick()
    pit.tick()
    assert seen == [1, 2]
    assert pit.ticks == 2


def test_sleep_advances_exactly():
    pit = Pit()
    pit.ticks = 40
    pit.sleep(7)
    assert pit.ticks == 47
    pit.sleep(0)
    assert pit.ticks == 47


def test_counter_wraps():
    pit = Pit()
    pit.ticks = 0xFFFFFFFF
    assert pit.tick() == 0


def test_sleep_across_wrap():
    pit = Pit()
    pit.ticks = 0xFFFFFFFE
    pit.sleep(3)
    assert pit.ticks == 1