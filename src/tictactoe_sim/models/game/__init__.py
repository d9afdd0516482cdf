"""Game models for the Tic-Tac-Toe game area."""

from .player import Player
from .game_state import (
    BOARD_SIZE,
    GameResult,
    GameStatus,
    Mark,
    Move,
    TicTacToeGameState,
)

__all__ = [
    "BOARD_SIZE",
    "GameResult",
    "GameStatus",
    "Mark",
    "Move",
    "Player",
    "TicTacToeGameState",
]
