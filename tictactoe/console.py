"""Console session: command loop, prompts and board rendering."""

from __future__ import annotations

import logging
from typing import Callable

from tictactoe.config import Settings
from tictactoe.game import GameState
from tictactoe.models import Command, GameError, GameStatus, MoveResult, parse_command, parse_point

logger = logging.getLogger(__name__)

GAME_NOT_STARTED = "Game not started"

WELCOME_LINES = (
    "Welcome to TicTacToe!",
    "Input 'm' to move.",
    "Input 's' to start game.",
    "Input 'e' or 'q' to exit game.",
)


class ConsoleSession:
    def __init__(
        self,
        settings: Settings | None = None,
        read: Callable[[], str] | None = None,
        write: Callable[[str], object] | None = None,
    ):
        self.settings = settings or Settings()
        self._read_fn = read or input
        self._write_fn = write or print
        self.game: GameState | None = None
        self.running = False
        self._handlers: dict[Command, Callable[[], None]] = {
            Command.START: self.start_game,
            Command.MOVE: self.move,
            Command.END: self.exit,
            Command.INVALID: self.invalid,
        }

    def write_line(self, text: str) -> None:
        self._write_fn(text)

    def read_line(self) -> str | None:
        """Read one line of input; None means the input is exhausted."""
        try:
            return self._read_fn()
        except EOFError:
            return None

    def run(self) -> None:
        for line in WELCOME_LINES:
            self.write_line(line)

        self.running = True
        while self.running:
            self.write_line("Input command:")
            text = self.read_line()
            if text is None:
                self.exit()
                break
            self.dispatch(parse_command(text))

    def dispatch(self, command: Command) -> None:
        self._handlers[command]()

    def start_game(self) -> None:
        if self.game is not None and self.game.status is GameStatus.IN_PROGRESS:
            self.write_line(GameError.ALREADY_STARTED.value)
            return
        self.game = GameState(self.settings.board_size, sliding=self.settings.sliding_window)
        self.game.start()
        self.write_line("Game start!")

    def move(self) -> None:
        game = self.game
        if game is None or game.status is not GameStatus.IN_PROGRESS:
            self.write_line(GAME_NOT_STARTED)
            return

        self.write_line(game.board.render())
        self.write_line(f"Player {game.current_player.ordinal}'s turn")
        self.write_line("Input point (x,y):")

        while True:
            text = self.read_line()
            if text is None:
                self.exit()
                return
            point = parse_point(text, game.board.size)
            if isinstance(point, GameError):
                error: GameError | None = point
            else:
                result = game.play(point)
                error = result.error
            if error is None:
                break
            self.write_line(error.value)
            self.write_line("Please input again:")

        self._report(result)

    def _report(self, result: MoveResult) -> None:
        if result.status is GameStatus.WON:
            self.write_line(self.game.board.render())
            self.write_line(f"Player {result.winner} win!")
            self._finish()
        elif result.status is GameStatus.DRAW:
            self.write_line(self.game.board.render())
            self.write_line("Draw!")
            self._finish()

    def _finish(self) -> None:
        self.game.acknowledge()
        self.game = None
        self.write_line("Game over! Input 's' to play again or 'q' to exit.")

    def exit(self) -> None:
        self.write_line("Game exit!")
        self.running = False

    def invalid(self) -> None:
        logger.debug("Unrecognized command")
        self.write_line(GameError.INVALID_INPUT.value)
