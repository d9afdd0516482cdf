"""Move validation system for Tic-Tac-Toe gameplay."""

from typing import List

from ..models.game.game_state import GameStatus, Mark, Move, TicTacToeGameState
from ..utils.logging_config import get_game_logger
from .errors import (
    BOARD_POSITION_NOT_EMPTY_MESSAGE,
    GAME_NOT_IN_PROGRESS_MESSAGE,
    MOVE_NOT_YOUR_TURN_MESSAGE,
    PLAYER_NOT_IN_GAME_MESSAGE,
    InvalidParametersError,
)

logger = get_game_logger(__name__)


class MoveValidator:
    """Validates moves against the current game state."""

    def __init__(self, game_state: TicTacToeGameState):
        self.game_state = game_state

    def validate_move(self, player_id: str, move: Move) -> Move:
        """Check a move and return it stamped with the mover's mark.

        Checks run in a fixed order so that callers always see the same
        rejection for the same situation:

        1. the game must be in progress
        2. the mover must hold a mark in this game
        3. the target cell must be empty
        4. it must be the mover's turn

        Raises:
            InvalidParametersError: with the message of the first failed check
        """
        if self.game_state.status is not GameStatus.IN_PROGRESS:
            self._reject(player_id, move, GAME_NOT_IN_PROGRESS_MESSAGE)

        # The mark on the incoming move is ignored; seating decides it
        mark = self.game_state.mark_of(player_id)
        if mark is None:
            self._reject(player_id, move, PLAYER_NOT_IN_GAME_MESSAGE)

        if self.game_state.is_occupied(move.row, move.col):
            self._reject(player_id, move, BOARD_POSITION_NOT_EMPTY_MESSAGE)

        if not self.is_turn_of(mark):
            self._reject(player_id, move, MOVE_NOT_YOUR_TURN_MESSAGE)

        return move.with_mark(mark)

    def is_turn_of(self, mark: Mark) -> bool:
        return self.game_state.next_mark() is mark

    def get_legal_moves(self) -> List[Move]:
        """Get every move the participant to act may make."""
        if self.game_state.status is not GameStatus.IN_PROGRESS:
            return []

        mark = self.game_state.next_mark()
        return [Move(row, col, mark) for row, col in self.game_state.empty_cells()]

    def _reject(self, player_id: str, move: Move, message: str) -> None:
        logger.debug("Rejected move (%d, %d) by %s: %s", move.row, move.col, player_id, message)
        raise InvalidParametersError(message)
