"""Win detection: candidate winning lines and the checker that evaluates them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from tictactoe.board import Board
from tictactoe.config import WIN_LENGTH
from tictactoe.models import Mark, Player


class RuleKind(str, Enum):
    ROW = "row"
    COLUMN = "column"
    MAIN_DIAGONAL = "main_diagonal"
    ANTI_DIAGONAL = "anti_diagonal"


# Step from one cell of a line to the next: horizontal, vertical, diagonal ↘, diagonal ↙
DIRECTIONS: dict[RuleKind, tuple[int, int]] = {
    RuleKind.ROW: (0, 1),
    RuleKind.COLUMN: (1, 0),
    RuleKind.MAIN_DIAGONAL: (1, 1),
    RuleKind.ANTI_DIAGONAL: (1, -1),
}


@dataclass(frozen=True)
class WinRule:
    """A line of ``length`` cells starting at (row, col) in the direction of ``kind``."""

    kind: RuleKind
    row: int
    col: int
    length: int

    def cells(self) -> list[tuple[int, int]]:
        dr, dc = DIRECTIONS[self.kind]
        return [(self.row + dr * i, self.col + dc * i) for i in range(self.length)]


def win_length_for(size: int) -> int:
    return min(size, WIN_LENGTH)


def is_satisfied(rule: WinRule, board: Board, mark: Mark) -> bool:
    """True iff every cell of the rule's line holds ``mark``."""
    return all(board.cell_at(r, c) == mark for r, c in rule.cells())


def build_rule_set(size: int, sliding: bool = False) -> tuple[WinRule, ...]:
    """Build the winning lines for a ``size`` x ``size`` board.

    The default set has one rule per row and column, anchored at the first
    cell of the line, plus the two corner-anchored diagonals (2 * size + 2
    rules). With ``sliding`` every run of the win length along every row,
    column and diagonal gets its own rule.
    """
    k = win_length_for(size)
    rules: list[WinRule] = []

    if not sliding:
        for i in range(size):
            rules.append(WinRule(RuleKind.ROW, i, 0, k))
            rules.append(WinRule(RuleKind.COLUMN, 0, i, k))
        rules.append(WinRule(RuleKind.MAIN_DIAGONAL, 0, 0, k))
        rules.append(WinRule(RuleKind.ANTI_DIAGONAL, 0, size - 1, k))
        return tuple(rules)

    span = size - k + 1
    for r in range(size):
        for c in range(span):
            rules.append(WinRule(RuleKind.ROW, r, c, k))
    for r in range(span):
        for c in range(size):
            rules.append(WinRule(RuleKind.COLUMN, r, c, k))
    for r in range(span):
        for c in range(span):
            rules.append(WinRule(RuleKind.MAIN_DIAGONAL, r, c, k))
        for c in range(k - 1, size):
            rules.append(WinRule(RuleKind.ANTI_DIAGONAL, r, c, k))
    return tuple(rules)


class WinChecker:
    def __init__(self, size: int, rules: Iterable[WinRule]):
        self.size = size
        self.rules: tuple[WinRule, ...] = tuple(rules)

    @classmethod
    def for_board(cls, size: int, sliding: bool = False) -> WinChecker:
        return cls(size, build_rule_set(size, sliding=sliding))

    def winning_rule(self, board: Board, player: Player) -> WinRule | None:
        """Return the first rule ``player`` satisfies on ``board``, or None."""
        if board.size != self.size:
            raise ValueError(
                f"Rule set is for a {self.size}x{self.size} board, got {board.size}x{board.size}"
            )
        for rule in self.rules:
            if is_satisfied(rule, board, player.mark):
                return rule
        return None

    def evaluate(self, board: Board, player: Player) -> bool:
        """Check if ``player`` holds any complete winning line."""
        return self.winning_rule(board, player) is not None
