"""Command types accepted by a game area and parsing of their wire shapes."""

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from ..models.game.game_state import Move
from .errors import INVALID_COMMAND_MESSAGE, INVALID_MOVE_MESSAGE, InvalidParametersError
from .state_serializer import GameStateSerializer, SerializationError


@dataclass(frozen=True)
class JoinGameCommand:
    """Join the area's game, creating one if needed."""
    type: ClassVar[str] = "JoinGame"


@dataclass(frozen=True)
class LeaveGameCommand:
    """Leave the game with the given id."""
    game_id: str
    type: ClassVar[str] = "LeaveGame"


@dataclass(frozen=True)
class GameMoveCommand:
    """Place a mark in the game with the given id."""
    game_id: str
    move: Move
    type: ClassVar[str] = "GameMove"


GameCommand = Union[JoinGameCommand, LeaveGameCommand, GameMoveCommand]


def parse_command(payload: Dict[str, Any]) -> GameCommand:
    """Build a command from its transport-agnostic dictionary form.

    Shapes::

        {"type": "JoinGame"}
        {"type": "LeaveGame", "gameID": "..."}
        {"type": "GameMove", "gameID": "...", "move": {"row": 0, "col": 2}}

    Raises:
        InvalidParametersError: INVALID_COMMAND_MESSAGE for an unknown type or
            missing game id, INVALID_MOVE_MESSAGE for a malformed move.
    """
    if not isinstance(payload, dict):
        raise InvalidParametersError(INVALID_COMMAND_MESSAGE)

    command_type = payload.get('type')
    if command_type == JoinGameCommand.type:
        return JoinGameCommand()

    if command_type not in (LeaveGameCommand.type, GameMoveCommand.type):
        raise InvalidParametersError(INVALID_COMMAND_MESSAGE)

    game_id = payload.get('gameID')
    if not isinstance(game_id, str) or not game_id:
        raise InvalidParametersError(INVALID_COMMAND_MESSAGE)

    if command_type == LeaveGameCommand.type:
        return LeaveGameCommand(game_id=game_id)

    try:
        move = GameStateSerializer().deserialize_move(payload.get('move'))
    except SerializationError as e:
        raise InvalidParametersError(INVALID_MOVE_MESSAGE) from e
    return GameMoveCommand(game_id=game_id, move=move)
