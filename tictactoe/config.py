"""Game settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

WIN_LENGTH = 5
DEFAULT_BOARD_SIZE = 3
# Coordinates are typed as single digits
MAX_BOARD_SIZE = 10

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class Settings:
    board_size: int = DEFAULT_BOARD_SIZE
    sliding_window: bool = False
    log_level: str = "WARNING"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings() -> Settings:
    """Build Settings from TICTACTOE_* environment variables."""
    raw_size = os.getenv("TICTACTOE_BOARD_SIZE", str(DEFAULT_BOARD_SIZE))
    try:
        board_size = int(raw_size)
    except ValueError:
        raise ValueError(f"TICTACTOE_BOARD_SIZE must be an integer, got {raw_size!r}") from None
    if not 1 <= board_size <= MAX_BOARD_SIZE:
        raise ValueError(
            f"TICTACTOE_BOARD_SIZE must be between 1 and {MAX_BOARD_SIZE}, got {board_size}"
        )

    sliding_window = _parse_bool(
        "TICTACTOE_SLIDING_WINDOW", os.getenv("TICTACTOE_SLIDING_WINDOW", "0")
    )

    log_level = os.getenv("TICTACTOE_LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        raise ValueError(f"TICTACTOE_LOG_LEVEL is not a logging level: {log_level!r}")

    return Settings(board_size=board_size, sliding_window=sliding_window, log_level=log_level)
