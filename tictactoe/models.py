"""Pydantic models and enums shared by the engine and the console."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from tictactoe.config import DEFAULT_BOARD_SIZE


# ---------------------------------------------------------------------------
# Board and players
# ---------------------------------------------------------------------------

class Mark(str, Enum):
    EMPTY = " "
    X = "X"
    O = "O"


@dataclass(frozen=True)
class Player:
    ordinal: int  # 1 | 2
    mark: Mark = field(compare=False)


class GameStatus(str, Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"
    ENDED = "ended"


class GameError(str, Enum):
    """Recoverable error kinds. The value is the message shown to players."""

    OUT_OF_RANGE = "Board position out of range"
    CELL_OCCUPIED = "Board position is not empty"
    INVALID_INPUT = "Invalid input"
    NOT_IN_PROGRESS = "Game is not in progress"
    ALREADY_STARTED = "Game already started"
    NOT_OVER = "Game is not over"


class Position(BaseModel):
    """A cell coordinate, bounds-checked against the board size at construction."""

    model_config = ConfigDict(frozen=True)

    row: int
    col: int
    size: int = Field(default=DEFAULT_BOARD_SIZE, gt=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> Position:
        if not (0 <= self.row < self.size and 0 <= self.col < self.size):
            raise ValueError(GameError.OUT_OF_RANGE.value)
        return self


class MoveResult(BaseModel):
    player: int
    row: int
    col: int
    status: GameStatus
    error: GameError | None = None
    winner: int | None = None
    next_player: int | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Console input
# ---------------------------------------------------------------------------

class Command(str, Enum):
    START = "start"
    MOVE = "move"
    END = "end"
    INVALID = "invalid"


DIGITS = "0123456789"

COMMANDS: dict[str, Command] = {
    "s": Command.START,
    "m": Command.MOVE,
    "e": Command.END,
    "q": Command.END,
}


def parse_command(text: str) -> Command:
    """Map a raw input token to a Command; unknown tokens are INVALID."""
    return COMMANDS.get(text.strip(), Command.INVALID)


def parse_point(text: str, size: int) -> Position | GameError:
    """Parse ``"x,y"`` into a Position, or return the error kind that rejects it."""
    text = text.strip()
    if len(text) != 3 or text[1] != "," or not (text[0] in DIGITS and text[2] in DIGITS):
        return GameError.INVALID_INPUT
    try:
        return Position(row=int(text[0]), col=int(text[2]), size=size)
    except ValidationError:
        return GameError.OUT_OF_RANGE
