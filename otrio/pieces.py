"""Piece colours, sizes and the pieces themselves."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Color(IntEnum):
    """Colour of a player's pieces."""

    RED = 0
    GREEN = 1
    BLUE = 2
    YELLOW = 3


class Size(IntEnum):
    """Size of a piece; larger sizes compare greater."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2


@dataclass(frozen=True)
class Piece:
    """A single ring of a given colour and size."""

    color: Color
    size: Size