import pytest

from vmdos.vfs import (
    HELLO_PATH,
    INITRD_MESSAGE,
    RAMFS_CAPACITY,
    VNode,
    Vfs,
    mount_initrd,
    ramfs_add,
)


def test_init_logs():
    messages = []
    Vfs(messages.append)
    assert messages == ["[vfs] init\n"]


def test_initrd_read_whole_file():
    messages = []
    vfs = Vfs()
    mount_initrd(vfs, messages.append)
    assert vfs.read("/hello.txt", 63, 0) == b"Hello from initrd!\n"
    assert messages == ["[initrd] mounted /hello.txt\n"]


def test_initrd_read_with_offset_and_length():
    vfs = Vfs()
    mount_initrd(vfs)
    assert vfs.read(HELLO_PATH, 5, 6) == INITRD_MESSAGE[6:11]
    assert vfs.read(HELLO_PATH, 10, len(INITRD_MESSAGE)) == b""


def test_lookup_is_exact():
    vfs = Vfs()
    mount_initrd(vfs)
    assert vfs.lookup("/hello") is None
    assert vfs.lookup(HELLO_PATH).name == HELLO_PATH


def test_missing_file_raises():
    vfs = Vfs()
    with pytest.raises(FileNotFoundError):
        vfs.read("/nope", 10, 0)


def test_node_without_reader_raises():
    vfs = Vfs()
    vfs.add(VNode("/dev/null"))
    with pytest.raises(FileNotFoundError):
        vfs.read("/dev/null", 1, 0)


def test_newest_node_shadows_older():
    vfs = Vfs()
    ramfs_add(vfs, "/a", b"old")
    ramfs_add(vfs, "/a", b"new")
    assert vfs.read("/a", 10, 0) == b"new"
    assert len(vfs) == 2


def test_ramfs_round_trip():
    vfs = Vfs()
    data = bytes(range(100))
    ramfs_add(vfs, "/blob", data)
    assert vfs.read("/blob", 100, 0) == data
    assert vfs.read("/blob", 10, 95) == data[95:]
    assert vfs.read("/blob", 10, 100) == b""


def test_ramfs_capacity():
    vfs = Vfs()
    for i in range(RAMFS_CAPACITY):
        ramfs_add(vfs, f"/f{i}", b"x")
    with pytest.raises(OverflowError):
        ramfs_add(vfs, "/overflow", b"x")


def test_negative_offset_rejected():
    vfs = Vfs()
    mount_initrd(vfs)
    with pytest.raises(ValueError):
        vfs.read(HELLO_PATH, 4, -1)


def test_custom_reader_receives_arguments():
    calls = []

    def reader(node, length, offset):
        calls.append((node.name, length, offset))
        return node.data[offset:offset + length]

    vfs = Vfs()
    vfs.add(VNode("/c", reader, b"abcdef"))
    assert vfs.read("/c", 2, 3) == b"de"
    assert calls == [("/c", 2, 3)]