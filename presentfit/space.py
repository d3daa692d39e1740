"""Cells of a present or tree grid."""

from __future__ import annotations

from enum import Enum


class Space(Enum):
    """State of a single grid cell, valued by its text symbol."""

    OCCUPIED = "#"
    POCKET = "o"
    FREE = "."

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


def parse_space(char: str) -> Space:
    """Return the Space for a one-character symbol; raise ValueError if unknown."""
    try:
        return Space(char)
    except ValueError:
        raise ValueError(f"cannot parse {char!r} as a space") from None