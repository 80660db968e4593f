import pytest

from otrio.board import Board
from otrio.pieces import Color, Piece, Size


def put(board, color, placements):
    for x, y, size in placements:
        assert board.place(x, y, Piece(color, size)) is True


def test_empty_board_has_no_winner():
    board = Board()
    assert not any(board.has_won(color) for color in Color)


def test_place_and_read_back():
    board = Board()
    piece = Piece(Color.RED, Size.MEDIUM)
    assert board.place(2, 1, piece) is True
    assert board.cell(2, 1).get(Size.MEDIUM) is piece
    assert board.cell(1, 2).get(Size.MEDIUM) is None


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
def test_place_off_board_fails(x, y):
    board = Board()
    assert board.place(x, y, Piece(Color.RED, Size.SMALL)) is False


def test_cell_off_board_raises():
    board = Board()
    with pytest.raises(IndexError):
        board.cell(3, 3)


def test_place_on_occupied_slot_fails():
    board = Board()
    assert board.place(1, 1, Piece(Color.RED, Size.LARGE)) is True
    assert board.place(1, 1, Piece(Color.BLUE, Size.LARGE)) is False
    assert board.cell(1, 1).get(Size.LARGE).color == Color.RED


def test_row_of_same_size_wins():
    board = Board()
    put(board, Color.BLUE, [(0, 1, Size.SMALL), (1, 1, Size.SMALL), (2, 1, Size.SMALL)])
    assert board.has_won(Color.BLUE) is True
    assert board.has_won(Color.RED) is False


def test_column_of_increasing_sizes_wins():
    board = Board()
    put(board, Color.GREEN, [(2, 0, Size.SMALL), (2, 1, Size.MEDIUM), (2, 2, Size.LARGE)])
    assert board.has_won(Color.GREEN) is True


def test_diagonal_of_decreasing_sizes_wins():
    board = Board()
    put(board, Color.YELLOW, [(0, 0, Size.LARGE), (1, 1, Size.MEDIUM), (2, 2, Size.SMALL)])
    assert board.has_won(Color.YELLOW) is True


def test_anti_diagonal_wins():
    board = Board()
    put(board, Color.RED, [(2, 0, Size.MEDIUM), (1, 1, Size.MEDIUM), (0, 2, Size.MEDIUM)])
    assert board.has_won(Color.RED) is True


def test_stack_of_one_color_wins():
    board = Board()
    put(board, Color.RED, [(1, 0, Size.SMALL), (1, 0, Size.MEDIUM), (1, 0, Size.LARGE)])
    assert board.has_won(Color.RED) is True


def test_mixed_stack_does_not_win():
    board = Board()
    put(board, Color.RED, [(0, 0, Size.SMALL), (0, 0, Size.MEDIUM)])
    put(board, Color.BLUE, [(0, 0, Size.LARGE)])
    assert board.has_won(Color.RED) is False
    assert board.has_won(Color.BLUE) is False


def test_unordered_sizes_do_not_win():
    board = Board()
    put(board, Color.BLUE, [(0, 0, Size.SMALL), (1, 0, Size.LARGE), (2, 0, Size.MEDIUM)])
    assert board.has_won(Color.BLUE) is False


def test_line_interrupted_by_other_color_does_not_win():
    board = Board()
    put(board, Color.GREEN, [(0, 2, Size.LARGE), (2, 2, Size.LARGE)])
    put(board, Color.RED, [(1, 2, Size.LARGE)])
    assert board.has_won(Color.GREEN) is False


def test_two_cells_are_not_enough():
    board = Board()
    put(board, Color.YELLOW, [(0, 0, Size.SMALL), (0, 1, Size.SMALL)])
    assert board.has_won(Color.YELLOW) is False