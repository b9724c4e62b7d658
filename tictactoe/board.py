"""Board state: a fixed N x N grid of marks."""

from __future__ import annotations

from tictactoe.config import DEFAULT_BOARD_SIZE
from tictactoe.models import GameError, Mark


class Board:
    def __init__(self, size: int = DEFAULT_BOARD_SIZE):
        if size < 1:
            raise ValueError(f"Board size must be positive, got {size}")
        self.size = size
        self.cells: list[list[Mark]] = [[Mark.EMPTY] * size for _ in range(size)]

    def in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, row: int, col: int) -> Mark:
        if not self.in_range(row, col):
            raise IndexError(f"({row}, {col}) is outside a {self.size}x{self.size} board")
        return self.cells[row][col]

    def validate_place(self, row: int, col: int) -> GameError | None:
        """Return the error kind if a mark cannot go at (row, col), or None."""
        if not self.in_range(row, col):
            return GameError.OUT_OF_RANGE
        if self.cells[row][col] is not Mark.EMPTY:
            return GameError.CELL_OCCUPIED
        return None

    def place(self, row: int, col: int, mark: Mark) -> GameError | None:
        """Write ``mark`` at (row, col). Nothing is changed when an error is returned."""
        if mark is Mark.EMPTY:
            raise ValueError("Cannot place an empty mark")
        error = self.validate_place(row, col)
        if error is not None:
            return error
        self.cells[row][col] = mark
        return None

    def is_full(self) -> bool:
        return all(cell is not Mark.EMPTY for row in self.cells for cell in row)

    def render(self) -> str:
        return "\n".join(
            "|" + "|".join(cell.value for cell in row) + "|" for row in self.cells
        )
