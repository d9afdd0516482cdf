"""Move envelope passed from the game area into the engine."""

from dataclasses import dataclass

from ..models.game.game_state import Move


@dataclass(frozen=True)
class GameMove:
    """A move submitted by a participant for a specific game."""
    player_id: str
    game_id: str
    move: Move
