"""Game state components package."""

from .game_state_checker import GameStateCheckerComponent, WINNING_LINES
from .turn_management import TurnManagementComponent

__all__ = [
    'GameStateCheckerComponent',
    'TurnManagementComponent',
    'WINNING_LINES'
]
