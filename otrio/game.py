"""The four-player game loop."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from otrio.board import Board
from otrio.pieces import Color
from otrio.player import HumanPlayer, _InputTokens

_DEFAULT_PLAYERS = (
    ("Player1", Color.RED),
    ("Player2", Color.BLUE),
    ("Player3", Color.GREEN),
    ("Player4", Color.YELLOW),
)


class Game:
    """A game of four human players taking turns on one board."""

    def __init__(self, reader: TextIO | None = None, writer: TextIO | None = None) -> None:
        self._input = _InputTokens.wrap(reader)
        self._out = writer if writer is not None else sys.stdout
        self.board = Board()
        self.players = [
            HumanPlayer(name, color, self._input, self._out) for name, color in _DEFAULT_PLAYERS
        ]
        self.current_index = 0

    @property
    def current_player(self) -> HumanPlayer:
        return self.players[self.current_index]

    def _say(self, text: str = "", end: str = "\n") -> None:
        self._out.write(text + end)

    def setup(self) -> None:
        """Reset the board and turn order and ask for the players' names."""
        self.board = Board()
        self.current_index = 0
        self._say("Setting up an Otrio game with 4 players.")
        self._say("Please choose the names of the 4 players:")
        renamed = []
        for player in self.players:
            self._say(f"Name of the {player.color.name} player : ", end="")
            name = self._input.next_token()
            renamed.append(HumanPlayer(name, player.color, self._input, self._out))
        self.players = renamed
        self._say("The game can start!")

    def run(self) -> HumanPlayer | None:
        """Play turns until someone wins; return the winner."""
        while not self.is_over():
            self.show_state()
            player = self.current_player
            self._say(f"It is the turn of {player.name} ({player.color.name}).")
            remaining = " ".join(
                f"({piece.color.name}, {piece.size.name})" for piece in player.hand
            )
            self._say(f"Pieces left: {remaining}")
            self._say(f"{player.name} can play a move...")

            if not player.hand:
                self._say("No pieces left for this player.")
                self.next_player()
                continue

            if not player.play_turn(self.board):
                self._say("Invalid move. Please try again.")
                continue

            self.next_player()

        self.show_state()
        self._say("The game is over!")
        return self._winner()

    def show_state(self) -> None:
        """Print each player's remaining piece count."""
        self._say("Current board state:")
        self._say("Players:")
        for player in self.players:
            self._say(
                f"- {player.name} ({player.color.name}) has {len(player.hand)} pieces left."
            )

    def next_player(self) -> bool:
        """Hand the turn to the next player."""
        self.current_index = (self.current_index + 1) % len(self.players)
        return True

    def _winner(self) -> HumanPlayer | None:
        return next((p for p in self.players if self.board.has_won(p.color)), None)

    def is_over(self) -> bool:
        """Tell whether a player has won, announcing the winner."""
        winner = self._winner()
        if winner is None:
            return False
        self._say(f"Player {winner.name} has won the game!")
        return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="otrio", description="Play Otrio in the terminal.")
    parser.parse_args(argv)
    game = Game()
    try:
        game.setup()
        game.run()
    except (ValueError, EOFError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())