"""State serialization for game snapshots sent to observers."""

from typing import Any, Dict, Optional

from ..models.game.game_state import GameResult, Move, TicTacToeGameState
from ..models.game.player import Player
from .game_engine import TicTacToeGame


class SerializationError(Exception):
    """Raised when serialization fails."""
    pass


class GameStateSerializer:
    """Serializer for game objects into plain dictionaries."""

    def serialize(self, obj: Any) -> Dict[str, Any]:
        """Serialize a game object to dictionary."""
        if isinstance(obj, TicTacToeGame):
            return self._serialize_game(obj)
        elif isinstance(obj, TicTacToeGameState):
            return self._serialize_game_state(obj)
        elif isinstance(obj, Move):
            return self._serialize_move(obj)
        elif isinstance(obj, GameResult):
            return self._serialize_result(obj)
        elif isinstance(obj, Player):
            return self._serialize_player(obj)
        raise SerializationError(f"Cannot serialize object of type {type(obj).__name__}")

    def deserialize_move(self, data: Any) -> Move:
        """Build a move from a ``{row, col}`` payload; any mark is dropped."""
        if not isinstance(data, dict):
            raise SerializationError("Move payload must be a mapping")
        row = data.get('row')
        col = data.get('col')
        # bool is an int subclass but never a coordinate
        for value in (row, col):
            if not isinstance(value, int) or isinstance(value, bool):
                raise SerializationError("Move row and col must be integers")
        try:
            return Move(row=row, col=col)
        except ValueError as e:
            raise SerializationError(str(e)) from e

    def _serialize_game(self, game: TicTacToeGame) -> Dict[str, Any]:
        return {
            'id': game.id,
            'kind': game.kind,
            'players': [player.id for player in game.players],
            'state': self._serialize_game_state(game.state),
        }

    def _serialize_game_state(self, game_state: TicTacToeGameState) -> Dict[str, Any]:
        state: Dict[str, Any] = {
            'moves': [self._serialize_move(move) for move in game_state.moves],
            'status': game_state.status.value,
        }
        # Unset participants and winner are omitted, as on the wire
        self._put_optional(state, 'x', game_state.x)
        self._put_optional(state, 'o', game_state.o)
        self._put_optional(state, 'winner', game_state.winner)
        return state

    def _serialize_move(self, move: Move) -> Dict[str, Any]:
        return {
            'row': move.row,
            'col': move.col,
            'gamePiece': move.mark.value if move.mark else None,
        }

    def _serialize_result(self, result: GameResult) -> Dict[str, Any]:
        return {
            'gameID': result.game_id,
            'scores': dict(result.scores),
        }

    def _serialize_player(self, player: Player) -> Dict[str, Any]:
        return {
            'id': player.id,
            'userName': player.user_name,
        }

    @staticmethod
    def _put_optional(target: Dict[str, Any], key: str, value: Optional[str]) -> None:
        if value is not None:
            target[key] = value
