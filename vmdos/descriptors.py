"""Encoders for x86 global and interrupt descriptor tables."""

from __future__ import annotations

import struct

__all__ = [
    "ENTRY_SIZE",
    "KERNEL_CODE_SELECTOR",
    "KERNEL_DATA_SELECTOR",
    "INTERRUPT_GATE",
    "encode_gdt_entry",
    "encode_idt_entry",
    "GlobalDescriptorTable",
    "default_gdt",
    "InterruptDescriptorTable",
]

ENTRY_SIZE = 8
KERNEL_CODE_SELECTOR = 0x08
KERNEL_DATA_SELECTOR = 0x10
INTERRUPT_GATE = 0x8E
IDT_ENTRIES = 256

_GDT_ENTRY = struct.Struct("<HHBBBB")
_IDT_ENTRY = struct.Struct("<HHBBH")
_EMPTY = bytes(ENTRY_SIZE)


def encode_gdt_entry(base: int, limit: int, access: int, gran: int) -> bytes:
    """Encode one 8-byte segment descriptor."""
    return _GDT_ENTRY.pack(
        limit & 0xFFFF,
        base & 0xFFFF,
        (base >> 16) & 0xFF,
        access & 0xFF,
        ((limit >> 16) & 0x0F) | (gran & 0xF0),
        (base >> 24) & 0xFF,
    )


def encode_idt_entry(base: int, sel: int, flags: int) -> bytes:
    """Encode one 8-byte interrupt gate."""
    return _IDT_ENTRY.pack(
        base & 0xFFFF,
        sel & 0xFFFF,
        0,
        flags & 0xFF,
        (base >> 16) & 0xFFFF,
    )


class GlobalDescriptorTable:
    """A fixed-size table of segment descriptors."""

    def __init__(self, size: int = 3) -> None:
        self._entries = [_EMPTY] * size

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def limit(self) -> int:
        """Table size in bytes minus one, as loaded into the GDTR."""
        return len(self._entries) * ENTRY_SIZE - 1

    def set(self, index: int, base: int, limit: int, access: int, gran: int) -> None:
        if not 0 <= index < len(self._entries):
            raise IndexError(f"GDT index {index} out of range")
        self._entries[index] = encode_gdt_entry(base, limit, access, gran)

    def pack(self) -> bytes:
        return b"".join(self._entries)


def default_gdt() -> GlobalDescriptorTable:
    """Build the flat null / kernel code / kernel data table."""
    gdt = GlobalDescriptorTable(3)
    gdt.set(0, 0, 0, 0, 0)
    gdt.set(1, 0, 0xFFFFF, 0x9A, 0xCF)
    gdt.set(2, 0, 0xFFFFF, 0x92, 0xCF)
    return gdt


class InterruptDescriptorTable:
    """The 256-gate interrupt descriptor table."""

    def __init__(self) -> None:
        self._entries = [_EMPTY] * IDT_ENTRIES

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def limit(self) -> int:
        """Table size in bytes minus one, as loaded into the IDTR."""
        return len(self._entries) * ENTRY_SIZE - 1

    def set_gate(self, num: int, base: int, sel: int, flags: int) -> None:
        if not 0 <= num < len(self._entries):
            raise IndexError(f"IDT vector {num} out of range")
        self._entries[num] = encode_idt_entry(base, sel, flags)

    def reset(self) -> None:
        """Zero every gate."""
        self._entries = [_EMPTY] * IDT_ENTRIES

    def pack(self) -> bytes:
        return b"".join(self._entries)