"""A minimal virtual file system with an initial ramdisk and blob files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

__all__ = [
    "VNode",
    "Vfs",
    "HELLO_PATH",
    "INITRD_MESSAGE",
    "RAMFS_CAPACITY",
    "mount_initrd",
    "ramfs_add",
]

HELLO_PATH = "/hello.txt"
INITRD_MESSAGE = b"Hello from initrd!\n"
RAMFS_CAPACITY = 32

Log = Callable[[str], Any]


@dataclass
class VNode:
    """A named file; ``read(node, length, offset)`` returns its bytes."""

    name: str
    read: Optional[Callable[["VNode", int, int], bytes]] = None
    data: Any = None


class Vfs:
    """A flat namespace of vnodes; newer entries shadow older ones."""

    def __init__(self, log: Log | None = None) -> None:
        self._nodes: list[VNode] = []
        if log is not None:
            log("[vfs] init\n")

    def __iter__(self) -> Iterator[VNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, vnode: VNode) -> None:
        self._nodes.insert(0, vnode)

    def lookup(self, path: str) -> VNode | None:
        """Return the most recently added node with exactly this name, or None."""
        return next((node for node in self._nodes if node.name == path), None)

    def read(self, path: str, length: int, offset: int = 0) -> bytes:
        """Read up to ``length`` bytes of ``path`` starting at ``offset``."""
        if length < 0 or offset < 0:
            raise ValueError("length and offset must not be negative")
        node = self.lookup(path)
        if node is None or node.read is None:
            raise FileNotFoundError(path)
        return node.read(node, length, offset)


def _initrd_read(vnode: VNode, length: int, offset: int) -> bytes:
    text = vnode.data[offset:]
    end = text.find(b"\0")
    if end >= 0:
        text = text[:end]
    return bytes(text[:length])


def mount_initrd(vfs: Vfs, log: Log | None = None) -> VNode:
    """Add the built-in /hello.txt file."""
    node = VNode(HELLO_PATH, _initrd_read, INITRD_MESSAGE)
    vfs.add(node)
    if log is not None:
        log("[initrd] mounted /hello.txt\n")
    return node


def _ramfs_read(vnode: VNode, length: int, offset: int) -> bytes:
    blob: bytes = vnode.data
    if offset >= len(blob):
        return b""
    return blob[offset:offset + length]


def ramfs_add(vfs: Vfs, name: str, data: bytes) -> VNode:
    """Add an in-memory file; at most RAMFS_CAPACITY such files per file system."""
    used = sum(1 for node in vfs if node.read is _ramfs_read)
    if used >= RAMFS_CAPACITY:
        raise OverflowError(f"ramfs holds at most {RAMFS_CAPACITY} files")
    node = VNode(name, _ramfs_read, bytes(data))
    vfs.add(node)
    return node