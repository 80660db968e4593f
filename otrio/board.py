"""The 3x3 board and its win detection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from otrio.cell import Cell
from otrio.pieces import Color, Piece, Size

BOARD_SIZE = 3

_DIAGONALS: tuple[tuple[tuple[int, int], ...], ...] = (
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


def _sizes_win(sizes: Sequence[Size]) -> bool:
    first, second, third = sizes
    return (
        first == second == third
        or first < second < third
        or first > second > third
    )


class Board:
    """A square grid of cells, indexed as (x, y) with y selecting the row."""

    def __init__(self) -> None:
        self._grid = [[Cell() for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

    def place(self, x: int, y: int, piece: Piece | None) -> bool:
        """Place a piece at (x, y); False if off the board or the slot is taken."""
        if not self._in_bounds(x, y):
            return False
        return self._grid[y][x].place(piece)

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at (x, y)."""
        if not self._in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) is off the board")
        return self._grid[y][x]

    def has_won(self, color: Color) -> bool:
        """Tell whether the given colour has a winning line or stack."""
        return any(self._line_wins(line, color) for line in self._lines()) or self._has_stack(color)

    def _lines(self) -> Iterable[list[Cell]]:
        yield from (list(row) for row in self._grid)
        yield from ([self._grid[k][col] for k in range(BOARD_SIZE)] for col in range(BOARD_SIZE))
        for diagonal in _DIAGONALS:
            yield [self._grid[a][b] for a, b in diagonal]

    @staticmethod
    def _first_of_color(cell: Cell, color: Color) -> Piece | None:
        return next(
            (
                piece
                for piece in map(cell.get, Size)
                if piece is not None and piece.color == color
            ),
            None,
        )

    def _line_wins(self, line: list[Cell], color: Color) -> bool:
        sizes = []
        for cell in line:
            piece = self._first_of_color(cell, color)
            if piece is None:
                return False
            sizes.append(piece.size)
        return _sizes_win(sizes)

    def _has_stack(self, color: Color) -> bool:
        for row in self._grid:
            for cell in row:
                pieces = [cell.get(size) for size in Size]
                if all(p is not None and p.color == color for p in pieces):
                    return True
        return False