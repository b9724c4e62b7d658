"""Unit tests for positions, players and input parsing."""

import pytest
from pydantic import ValidationError

from tictactoe.models import Command, GameError, Mark, Player, Position, parse_command, parse_point


class TestPosition:
    def test_valid(self):
        pos = Position(row=2, col=0, size=3)
        assert (pos.row, pos.col) == (2, 0)

    @pytest.mark.parametrize("row,col", [(3, 0), (0, 3), (-1, 1), (1, -1)])
    def test_out_of_range(self, row, col):
        with pytest.raises(ValidationError, match="out of range"):
            Position(row=row, col=col, size=3)

    def test_immutable(self):
        pos = Position(row=0, col=0, size=3)
        with pytest.raises(ValidationError):
            pos.row = 1


class TestPlayer:
    def test_equality_by_ordinal(self):
        assert Player(1, Mark.X) == Player(1, Mark.O)
        assert Player(1, Mark.X) != Player(2, Mark.X)


class TestParseCommand:
    @pytest.mark.parametrize("text,expected", [
        ("s", Command.START),
        ("m", Command.MOVE),
        ("e", Command.END),
        ("q", Command.END),
        (" m\n", Command.MOVE),
        ("start", Command.INVALID),
        ("", Command.INVALID),
        ("x", Command.INVALID),
    ])
    def test_tokens(self, text, expected):
        assert parse_command(text) is expected


class TestParsePoint:
    def test_valid(self):
        assert parse_point("1,2", 3) == Position(row=1, col=2, size=3)

    def test_surrounding_whitespace(self):
        assert parse_point(" 0,0 ", 3) == Position(row=0, col=0, size=3)

    @pytest.mark.parametrize("text", ["1, 2", "12", "1;2", "a,b", "", "1,2,3", "-1,0", "²,1", "1,٣"])
    def test_malformed(self, text):
        assert parse_point(text, 3) is GameError.INVALID_INPUT

    def test_out_of_range(self):
        assert parse_point("3,0", 3) is GameError.OUT_OF_RANGE
        assert parse_point("9,9", 5) is GameError.OUT_OF_RANGE
