"""Game area hosting a Tic-Tac-Toe game and routing participant commands to it."""

import uuid
from typing import Any, Dict, List, Optional, Tuple

from ..models.game.game_state import GameResult, GameStatus
from ..models.game.player import Player
from ..utils.logging_config import get_game_logger
from .action_result import CommandResult, CommandResultType
from .commands import (
    GameCommand,
    GameMoveCommand,
    JoinGameCommand,
    LeaveGameCommand,
    parse_command,
)
from .errors import (
    GAME_ID_MISSMATCH_MESSAGE,
    GAME_NOT_IN_PROGRESS_MESSAGE,
    INVALID_COMMAND_MESSAGE,
    InvalidParametersError,
)
from .event_system import AreaEventManager, AreaEventType
from .game_engine import TICTACTOE_GAME_KIND, TicTacToeGame, create_game
from .game_moves import GameMove
from .state_serializer import GameStateSerializer

logger = get_game_logger(__name__)

AREA_TYPE = "TicTacToeArea"


class TicTacToeGameArea:
    """Hosts at most one current game and keeps the ledger of finished ones.

    Supported commands:

    - ``JoinGameCommand``: joins the current game, or starts a new one if
      there is none or the current one is over
    - ``GameMoveCommand``: applies a move to the current game
    - ``LeaveGameCommand``: leaves the current game

    A command that ends the game appends one ``GameResult`` to the history.
    Every successful command notifies observers; a rejected command raises
    ``InvalidParametersError`` and notifies nobody.
    """

    def __init__(self, area_id: Optional[str] = None,
                 event_manager: Optional[AreaEventManager] = None):
        self.id = area_id or uuid.uuid4().hex
        self.event_manager = event_manager or AreaEventManager(self.id)
        self.serializer = GameStateSerializer()
        self._game: Optional[TicTacToeGame] = None
        self._history: List[GameResult] = []
        # Everyone who has joined a game here, for looking up user names
        self._roster: Dict[str, Player] = {}

    @property
    def game(self) -> Optional[TicTacToeGame]:
        return self._game

    @property
    def history(self) -> Tuple[GameResult, ...]:
        """Outcome ledger, oldest first."""
        return tuple(self._history)

    @property
    def is_active(self) -> bool:
        """Whether a game is currently waiting for players or being played."""
        return self._game is not None and self._game.state.status is not GameStatus.OVER

    def handle_command(self, command: GameCommand, player: Player) -> Optional[Dict[str, str]]:
        """Handle a command from a player in this area.

        Returns:
            ``{"game_id": ...}`` for a join, ``None`` otherwise.

        Raises:
            InvalidParametersError: GAME_NOT_IN_PROGRESS_MESSAGE or
                GAME_ID_MISSMATCH_MESSAGE for a leave or move that does not
                target the current game, INVALID_COMMAND_MESSAGE for any other
                command, or whatever the game rejected the command with.
        """
        if isinstance(command, JoinGameCommand):
            return self._handle_join_command(player)
        if isinstance(command, LeaveGameCommand):
            self._handle_leave_command(command, player)
            return None
        if isinstance(command, GameMoveCommand):
            self._handle_move_command(command, player)
            return None
        raise InvalidParametersError(INVALID_COMMAND_MESSAGE)

    def dispatch(self, payload: Dict[str, Any], player: Player) -> CommandResult:
        """Parse and handle a raw command, folding rejections into the result."""
        command_type = payload.get('type', '') if isinstance(payload, dict) else ''
        try:
            command = parse_command(payload)
            response = self.handle_command(command, player)
        except InvalidParametersError as e:
            logger.debug("Area %s rejected %s from %s: %s", self.id, command_type, player.id, e.message)
            return CommandResult.failure_result(command_type, e.message)

        if isinstance(command, JoinGameCommand):
            return CommandResult.success_result(command_type, CommandResultType.GAME_JOINED, **response)
        if isinstance(command, LeaveGameCommand):
            return CommandResult.success_result(command_type, CommandResultType.GAME_LEFT)
        return CommandResult.success_result(command_type, CommandResultType.MOVE_APPLIED)

    def to_model(self) -> Dict[str, Any]:
        """Snapshot of the area for observers."""
        return {
            'id': self.id,
            'type': AREA_TYPE,
            'game': self.serializer.serialize(self._game) if self._game else None,
            'history': [self.serializer.serialize(result) for result in self._history],
            'occupants': [self.serializer.serialize(player) for player in self._roster.values()],
        }

    def _handle_join_command(self, player: Player) -> Dict[str, str]:
        game = self._game
        if game is None or game.state.status is GameStatus.OVER:
            game = create_game(TICTACTOE_GAME_KIND)
        game.join(player)

        if game is not self._game:
            logger.info("Area %s started game %s", self.id, game.id)
            self._game = game
        self._roster[player.id] = player
        self._emit_area_changed()
        return {'game_id': game.id}

    def _handle_leave_command(self, command: LeaveGameCommand, player: Player) -> None:
        game = self._current_game(command.game_id)
        was_over = game.state.is_game_over()
        game.leave(player)
        if not was_over and game.state.is_game_over():
            self._record_outcome(game)
        self._emit_area_changed()

    def _handle_move_command(self, command: GameMoveCommand, player: Player) -> None:
        game = self._current_game(command.game_id)
        was_over = game.state.is_game_over()
        game.apply_move(GameMove(player_id=player.id, game_id=command.game_id, move=command.move))
        if not was_over and game.state.is_game_over():
            self._record_outcome(game)
        self._emit_area_changed()

    def _current_game(self, game_id: str) -> TicTacToeGame:
        if self._game is None:
            raise InvalidParametersError(GAME_NOT_IN_PROGRESS_MESSAGE)
        if game_id != self._game.id:
            raise InvalidParametersError(GAME_ID_MISSMATCH_MESSAGE)
        return self._game

    def _record_outcome(self, game: TicTacToeGame) -> None:
        """Append the result of a game that has just ended to the history."""
        winner = game.state.winner
        scores = {}
        for participant_id in game.state.participants:
            scores[self._user_name(participant_id)] = 1 if participant_id == winner else 0
        result = GameResult(game_id=game.id, scores=scores)
        self._history.append(result)
        logger.info("Area %s recorded result for game %s: %s", self.id, game.id, scores)

    def _user_name(self, player_id: str) -> str:
        player = self._roster.get(player_id)
        return player.user_name if player else player_id

    def _emit_area_changed(self) -> None:
        self.event_manager.emit(AreaEventType.AREA_CHANGED, model=self.to_model())
