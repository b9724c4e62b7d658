"""Game logic: turn order, move validation, and win/draw detection."""

from __future__ import annotations

import logging

from tictactoe.board import Board
from tictactoe.config import DEFAULT_BOARD_SIZE
from tictactoe.models import GameError, GameStatus, Mark, MoveResult, Player, Position
from tictactoe.rules import WinChecker

logger = logging.getLogger(__name__)

PLAYER_ONE = Player(1, Mark.X)
PLAYER_TWO = Player(2, Mark.O)

TERMINAL_STATUSES = (GameStatus.WON, GameStatus.DRAW)


class GameState:
    def __init__(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        checker: WinChecker | None = None,
        sliding: bool = False,
    ):
        self.board = Board(size)
        self.checker = checker if checker is not None else WinChecker.for_board(size, sliding)
        if self.checker.size != size:
            raise ValueError(f"Win checker is for size {self.checker.size}, board is {size}")
        self.players: tuple[Player, Player] = (PLAYER_ONE, PLAYER_TWO)
        self.current_player: Player = PLAYER_ONE
        self.status: GameStatus = GameStatus.NOT_STARTED
        self.winner: Player | None = None
        self.move_count: int = 0

    @property
    def started(self) -> bool:
        return self.status is not GameStatus.NOT_STARTED

    @property
    def ended(self) -> bool:
        return self.status is GameStatus.ENDED

    @property
    def is_game_over(self) -> bool:
        return self.status in TERMINAL_STATUSES or self.ended

    def other_player(self) -> Player:
        first, second = self.players
        return second if self.current_player == first else first

    def start(self) -> GameError | None:
        if self.status is not GameStatus.NOT_STARTED:
            return GameError.ALREADY_STARTED
        self.status = GameStatus.IN_PROGRESS
        self.current_player = PLAYER_ONE
        logger.info("Game started on a %dx%d board", self.board.size, self.board.size)
        return None

    def validate_move(self, row: int, col: int) -> GameError | None:
        """Return the error kind if the move is invalid, or None if valid."""
        if self.status is not GameStatus.IN_PROGRESS:
            return GameError.NOT_IN_PROGRESS
        return self.board.validate_place(row, col)

    def move(self, row: int, col: int) -> MoveResult:
        """Place the current player's mark and advance the game.

        A rejected move carries its error and leaves the board, the status
        and the turn untouched.
        """
        player = self.current_player
        error = self.validate_move(row, col)
        if error is not None:
            logger.debug("Rejected move by player %d at (%d, %d): %s",
                         player.ordinal, row, col, error.value)
            return MoveResult(
                player=player.ordinal, row=row, col=col, status=self.status, error=error,
                next_player=player.ordinal if self.status is GameStatus.IN_PROGRESS else None,
            )

        self.board.place(row, col, player.mark)
        self.move_count += 1
        logger.debug("Player %d placed %s at (%d, %d)", player.ordinal, player.mark.value, row, col)

        if self.checker.evaluate(self.board, player):
            self.status = GameStatus.WON
            self.winner = player
            logger.info("Player %d won after %d moves", player.ordinal, self.move_count)
            return MoveResult(
                player=player.ordinal, row=row, col=col, status=self.status, winner=player.ordinal
            )

        if self.board.is_full():
            self.status = GameStatus.DRAW
            logger.info("Game drawn after %d moves", self.move_count)
            return MoveResult(player=player.ordinal, row=row, col=col, status=self.status)

        # Switch turn
        self.current_player = self.other_player()
        return MoveResult(
            player=player.ordinal, row=row, col=col, status=self.status,
            next_player=self.current_player.ordinal,
        )

    def play(self, position: Position) -> MoveResult:
        return self.move(position.row, position.col)

    def acknowledge(self) -> GameError | None:
        """Close a won or drawn game."""
        if self.status not in TERMINAL_STATUSES:
            return GameError.NOT_OVER
        self.status = GameStatus.ENDED
        return None
