"""Unit tests for the board: placement, bounds, fullness, rendering."""

import pytest

from tictactoe.board import Board
from tictactoe.models import GameError, Mark


class TestPlace:
    def test_place_every_cell_once(self):
        board = Board(4)
        for row in range(4):
            for col in range(4):
                assert board.place(row, col, Mark.X) is None
                assert board.place(row, col, Mark.O) is GameError.CELL_OCCUPIED
                assert board.cell_at(row, col) is Mark.X

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 0), (0, -1), (10, 10)])
    def test_out_of_range_leaves_board_unchanged(self, row, col):
        board = Board(3)
        assert board.place(row, col, Mark.X) is GameError.OUT_OF_RANGE
        assert all(cell is Mark.EMPTY for line in board.cells for cell in line)

    def test_empty_mark_rejected(self):
        board = Board(3)
        with pytest.raises(ValueError):
            board.place(0, 0, Mark.EMPTY)

    def test_cell_at_out_of_range(self):
        with pytest.raises(IndexError):
            Board(3).cell_at(3, 0)

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            Board(0)


class TestIsFull:
    def test_empty_board(self):
        assert Board(3).is_full() is False

    def test_one_cell_left(self):
        board = Board(2)
        board.place(0, 0, Mark.X)
        board.place(0, 1, Mark.O)
        board.place(1, 0, Mark.X)
        assert board.is_full() is False
        board.place(1, 1, Mark.O)
        assert board.is_full() is True


class TestRender:
    def test_empty_board(self):
        assert Board(3).render() == "| | | |\n| | | |\n| | | |"

    def test_marks(self):
        board = Board(2)
        board.place(0, 0, Mark.X)
        board.place(1, 1, Mark.O)
        assert board.render() == "|X| |\n| |O|"
