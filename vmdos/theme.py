"""Colour theme used by the text-mode user interface."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Theme", "THEME_DEFAULT", "theme_get"]


@dataclass(frozen=True)
class Theme:
    """Colour roles of the UI, each a 4-bit VGA colour index."""

    fg: int
    bg: int
    accent: int
    dim: int
    ok: int
    warn: int
    err: int


THEME_DEFAULT = Theme(
    fg=0x0F,
    bg=0x00,
    accent=0x0B,
    dim=0x08,
    ok=0x0A,
    warn=0x0E,
    err=0x0C,
)


def theme_get() -> Theme:
    """Return the active theme."""
    return THEME_DEFAULT