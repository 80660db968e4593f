# otrio

Otrio played in the terminal, for four players at one keyboard.

Each player owns one colour and starts with nine pieces of that colour:
three small, three medium and three large rings. The board has 3x3 cells,
and each cell holds at most one piece of each size.

## Winning

A player wins with any of these:

- a row, column or diagonal where each cell holds a piece of their colour,
  and the sizes are all the same, strictly increasing or strictly
  decreasing along the line (where a cell holds several of their pieces,
  the smallest one counts);
- a small, a medium and a large piece of their colour stacked in one cell.

## Installing

```
pip install .
```

## Playing

```
otrio
```

The game first asks for the four players' names, one word each, in this
order of colours: RED, BLUE, GREEN, YELLOW. Then, on each turn, the current
player is asked for:

1. the size of the piece (`0` small, `1` medium, `2` large);
2. the colour of the piece (`0` red, `1` green, `2` blue, `3` yellow);
3. the coordinates `x y` of the cell, each from `0` to `2`.

If the coordinates are off the board, or the cell already holds a piece of
that size, the piece goes back to the player's hand and the same player
tries again. A size or colour out of range, a piece that is not in the
player's hand, a non-numeric answer or the end of input stops the game: the
command prints `error: ...` to standard error and exits with status 1.
The game ends as soon as one player has a winning pattern, and the winner is
announced.

## Using the library

```python
from otrio.board import Board
from otrio.pieces import Color, Piece, Size

board = Board()
for size in Size:
    board.place(1, 1, Piece(Color.RED, size))

assert board.has_won(Color.RED)
```

- `otrio.pieces` holds the `Color` and `Size` enumerations and the frozen
  `Piece` dataclass.
- `otrio.cell.Cell` has one slot per size: `place`, `remove`, `get` and
  `is_empty`.
- `otrio.board.Board` places pieces with `place(x, y, piece)`, returns cells
  with `cell(x, y)` and checks a colour with `has_won(color)`.
- `otrio.player.HumanPlayer` reads its moves from a text stream and keeps
  its remaining pieces in `hand`.
- `otrio.game.Game` takes a `reader` and a `writer`, so a whole game can be
  driven from scripted input; `setup()` asks for the names and `run()` plays
  until someone wins and returns the winning player.

## What it does not do

The game does not draw the board: between turns it prints only how many
pieces each player has left. There is no computer opponent, and the number
of players is fixed at four.

## Running the tests

```
pip install .[test]
pytest
```