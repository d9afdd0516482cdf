"""Test helper utilities for Tic-Tac-Toe tests."""

from .player_helpers import create_test_player, create_test_players, play_moves
from .game_engine_test_base import GameEngineTestBase

__all__ = [
    'GameEngineTestBase',
    'create_test_player',
    'create_test_players',
    'play_moves'
]
