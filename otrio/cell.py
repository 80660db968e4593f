"""A board cell holding up to one piece of each size."""

from __future__ import annotations

from otrio.pieces import Piece, Size


def _as_size(size: object) -> Size | None:
    try:
        return Size(size)
    except ValueError:
        return None


class Cell:
    """One square of the board, with a slot per piece size."""

    def __init__(self) -> None:
        self._slots: dict[Size, Piece | None] = {size: None for size in Size}

    def place(self, piece: Piece | None) -> bool:
        """Put a piece in the slot of its size; False if missing or occupied."""
        if piece is None:
            return False
        size = _as_size(piece.size)
        if size is None or self._slots[size] is not None:
            return False
        self._slots[size] = piece
        return True

    def remove(self, size: Size) -> Piece | None:
        """Take out and return the piece of the given size, if any."""
        key = _as_size(size)
        if key is None:
            return None
        piece = self._slots[key]
        self._slots[key] = None
        return piece

    def get(self, size: Size) -> Piece | None:
        """Return the piece of the given size, or None if the slot is empty."""
        key = _as_size(size)
        if key is None:
            return None
        return self._slots[key]

    def is_empty(self, size: Size) -> bool:
        """Tell whether the slot of the given size is free."""
        key = _as_size(size)
        if key is None:
            raise IndexError(f"invalid piece size: {size!r}")
        return self._slots[key] is None