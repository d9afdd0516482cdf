"""Game engine for Tic-Tac-Toe: seating, move application and terminal detection."""

import uuid
from typing import Callable, Dict, List, Optional

from ..models.game.game_state import GameStatus, Mark, Move, TicTacToeGameState
from ..models.game.player import Player
from ..utils.logging_config import get_game_logger
from .errors import (
    GAME_FULL_MESSAGE,
    PLAYER_ALREADY_IN_GAME_MESSAGE,
    PLAYER_NOT_IN_GAME_MESSAGE,
    InvalidParametersError,
)
from .game_moves import GameMove
from .move_validator import MoveValidator

logger = get_game_logger(__name__)

TICTACTOE_GAME_KIND = "TicTacToe"


def _new_game_id() -> str:
    return uuid.uuid4().hex


class TicTacToeGame:
    """Implements the rules of Tic-Tac-Toe for exactly two participants.

    The first participant to join plays X, the second plays O. X always moves
    first and marks alternate from there. The game ends as soon as one mark
    fills a row, column or diagonal, when all nine cells are filled, or when a
    participant leaves a game in progress.
    """

    kind = TICTACTOE_GAME_KIND

    def __init__(self, game_id: Optional[str] = None):
        self.id = game_id or _new_game_id()
        self.state = TicTacToeGameState()
        self.validator = MoveValidator(self.state)
        self._players: Dict[str, Player] = {}

    @property
    def players(self) -> List[Player]:
        """Participants currently seated, X first."""
        return [self._players[pid] for pid in self.state.participants if pid in self._players]

    @property
    def current_turn(self) -> Mark:
        return self.state.next_mark()

    def join(self, player: Player) -> None:
        """Seat a participant.

        Raises:
            InvalidParametersError: PLAYER_ALREADY_IN_GAME_MESSAGE if the player
                already holds a mark, GAME_FULL_MESSAGE if both marks are taken.
        """
        if self.state.mark_of(player.id) is not None:
            raise InvalidParametersError(PLAYER_ALREADY_IN_GAME_MESSAGE)
        if self.state.x is not None and self.state.o is not None:
            raise InvalidParametersError(GAME_FULL_MESSAGE)

        if self.state.x is None:
            self.state.x = player.id
        else:
            self.state.o = player.id
        self._players[player.id] = player

        if self.state.x is not None and self.state.o is not None:
            self.state.status = GameStatus.IN_PROGRESS
            logger.info("Game %s started: %s (X) vs %s (O)", self.id, self.state.x, self.state.o)
        else:
            self.state.status = GameStatus.WAITING_TO_START
            logger.debug("Player %s joined game %s, waiting for an opponent", player.id, self.id)

    def leave(self, player: Player) -> None:
        """Remove a participant.

        Leaving a game in progress forfeits it to the other participant. Leaving
        before the game started frees the seat. Leaving a finished game changes
        nothing.

        Raises:
            InvalidParametersError: PLAYER_NOT_IN_GAME_MESSAGE if the player
                holds no mark.
        """
        mark = self.state.mark_of(player.id)
        if mark is None:
            raise InvalidParametersError(PLAYER_NOT_IN_GAME_MESSAGE)

        if self.state.status is GameStatus.IN_PROGRESS:
            self.state.status = GameStatus.OVER
            self.state.winner = self.state.participant_for(mark.opponent())
            logger.info("Player %s forfeited game %s, winner %s", player.id, self.id, self.state.winner)
        elif self.state.status is GameStatus.WAITING_TO_START:
            if mark is Mark.X:
                self.state.x = None
            else:
                self.state.o = None
            self._players.pop(player.id, None)
            logger.debug("Player %s left game %s before it started", player.id, self.id)

    def apply_move(self, game_move: GameMove) -> None:
        """Validate and apply a participant's move, then check for a win or tie.

        Raises:
            InvalidParametersError: if the move is rejected; the state is left
                unchanged.
        """
        move = self.validator.validate_move(game_move.player_id, game_move.move)
        self.state.moves = self.state.moves + (move,)
        logger.debug("Game %s: %s played (%d, %d)", self.id, move.mark.value, move.row, move.col)
        self.state.check_game_state(game_move.player_id)

    def legal_moves(self) -> List[Move]:
        return self.validator.get_legal_moves()

    def __str__(self) -> str:
        return f"TicTacToeGame {self.id} ({self.state.status.value})"


GAME_FACTORIES: Dict[str, Callable[[], TicTacToeGame]] = {
    TICTACTOE_GAME_KIND: TicTacToeGame,
}


def create_game(kind: str = TICTACTOE_GAME_KIND) -> TicTacToeGame:
    """Create a new game engine for the given game kind."""
    factory = GAME_FACTORIES.get(kind)
    if factory is None:
        raise ValueError(f"Unknown game kind: {kind}")
    return factory()
