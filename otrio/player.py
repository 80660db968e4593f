"""Players and their hands of pieces."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import TextIO

from otrio.board import Board
from otrio.pieces import Color, Piece, Size

PIECES_PER_SIZE = 3
PIECE_GROUPS = 3


class _InputTokens:
    """Whitespace-separated tokens read lazily from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    @classmethod
    def wrap(cls, reader: TextIO | _InputTokens | None) -> _InputTokens:
        if isinstance(reader, cls):
            return reader
        return cls(reader if reader is not None else sys.stdin)

    def next_token(self) -> str:
        while not self._pending:
            line = self._stream.readline()
            if line == "":
                raise EOFError("no more input")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def next_int(self) -> int:
        token = self.next_token()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None


class Player(ABC):
    """A player of a given colour with a hand of pieces of that colour."""

    def __init__(self, name: str, color: Color) -> None:
        self.name = name
        self.color = Color(color)
        self._hand: list[Piece] = [
            Piece(self.color, Size(size))
            for _ in range(PIECE_GROUPS)
            for size in range(PIECES_PER_SIZE)
        ]

    @property
    def hand(self) -> list[Piece]:
        """A copy of the pieces still in hand."""
        return list(self._hand)

    def remove_from_hand(self, piece: Piece) -> None:
        """Drop one matching piece from the hand; do nothing if there is none."""
        try:
            self._hand.remove(piece)
        except ValueError:
            pass

    @abstractmethod
    def play_turn(self, board: Board) -> bool:
        """Play one move on the board; True if a piece was placed."""


class HumanPlayer(Player):
    """A player whose moves are read from a text stream."""

    def __init__(
        self,
        name: str,
        color: Color,
        reader: TextIO | _InputTokens | None = None,
        writer: TextIO | None = None,
    ) -> None:
        super().__init__(name, color)
        self._input = _InputTokens.wrap(reader)
        self._out = writer if writer is not None else sys.stdout

    def _say(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)

    def play_turn(self, board: Board) -> bool:
        """Ask for a piece and a position, then place it.

        Raises ValueError on a bad size, colour or a piece not in hand,
        and returns False (keeping the piece) if it cannot be placed.
        """
        self._say(f"It is {self.name}'s turn to play.")
        for piece in self._hand:
            self._say(f"Available piece: {int(piece.size)}; {int(piece.color)}")

        self._say("Select a piece to play.")
        self._say("Give the size and colour of the piece.")
        self._say("Size (0: SMALL, 1: MEDIUM, 2: LARGE): ", end="")
        size_input = self._input.next_int()
        self._say("Colour (0: RED, 1: GREEN, 2: BLUE, 3: YELLOW): ", end="")
        color_input = self._input.next_int()

        if not 0 <= size_input <= 2:
            self._say("Invalid size.")
            raise ValueError("invalid size input")
        if not 0 <= color_input <= 3:
            self._say("Invalid colour.")
            raise ValueError("invalid colour input")

        wanted = Piece(Color(color_input), Size(size_input))
        if wanted not in self._hand:
            self._say("Piece not available in hand.")
            raise ValueError("piece not available in hand")

        self.remove_from_hand(wanted)
        self._say(f"Chosen piece: size {int(wanted.size)}, colour {int(wanted.color)}")

        self._say("Give the coordinates (x y) to place the piece: ", end="")
        x = self._input.next_int()
        y = self._input.next_int()

        if board.place(x, y, wanted):
            self._say(f"Piece placed at ({x}, {y}).")
            return True
        self._say("Placing the piece failed. Try again.")
        self._hand.append(wanted)
        return False