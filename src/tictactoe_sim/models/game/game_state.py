"""Game state model for Tic-Tac-Toe."""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, Optional, Tuple

from .components import (
    GameStateCheckerComponent,
    TurnManagementComponent
)

BOARD_SIZE = 3


class Mark(Enum):
    """The two symbols a participant can place."""
    X = "X"   # First joiner, always moves first
    O = "O"   # Second joiner

    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class GameStatus(Enum):
    """Lifecycle of a single game."""
    WAITING_TO_START = "WAITING_TO_START"
    IN_PROGRESS = "IN_PROGRESS"
    OVER = "OVER"


@dataclass(frozen=True)
class Move:
    """A single placement on the board."""
    row: int
    col: int
    mark: Optional[Mark] = None

    def __post_init__(self) -> None:
        """Validate move coordinates after creation."""
        if not 0 <= self.row < BOARD_SIZE:
            raise ValueError(f"Move row must be between 0 and {BOARD_SIZE - 1}, got {self.row}")
        if not 0 <= self.col < BOARD_SIZE:
            raise ValueError(f"Move col must be between 0 and {BOARD_SIZE - 1}, got {self.col}")

    @property
    def cell(self) -> Tuple[int, int]:
        return self.row, self.col

    def with_mark(self, mark: Mark) -> "Move":
        """Return a copy of this move carrying the given mark."""
        return replace(self, mark=mark)


@dataclass(frozen=True)
class GameResult:
    """Outcome ledger entry for a finished game."""
    game_id: str
    scores: Dict[str, int] = field(default_factory=dict)


@dataclass
class TicTacToeGameState:
    """Tracks the complete state of a Tic-Tac-Toe game."""
    moves: Tuple[Move, ...] = ()
    status: GameStatus = GameStatus.WAITING_TO_START

    # Participant ids holding each mark
    x: Optional[str] = None
    o: Optional[str] = None

    # Set when the game ends with a winner, left unset on a tie
    winner: Optional[str] = None

    # Component instances for delegated functionality
    _game_state_checker: GameStateCheckerComponent = field(
        default_factory=GameStateCheckerComponent, repr=False, compare=False)
    _turn_management: TurnManagementComponent = field(
        default_factory=TurnManagementComponent, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate game state after creation."""
        if len(self.moves) > BOARD_SIZE * BOARD_SIZE:
            raise ValueError("A game cannot hold more than nine moves")
        if self.x is not None and self.x == self.o:
            raise ValueError("The same participant cannot hold both marks")

    @property
    def participants(self) -> List[str]:
        """Ids of the participants currently holding a mark, X first."""
        return [pid for pid in (self.x, self.o) if pid is not None]

    def mark_of(self, player_id: str) -> Optional[Mark]:
        """Get the mark assigned to a participant, if any."""
        return self._turn_management.mark_of(player_id, self)

    def participant_for(self, mark: Mark) -> Optional[str]:
        """Get the participant id holding a mark."""
        return self.x if mark is Mark.X else self.o

    def next_mark(self) -> Mark:
        """Get the mark whose turn it is."""
        return self._turn_management.next_mark(self)

    def mark_at(self, row: int, col: int) -> Optional[Mark]:
        """Get the mark occupying a cell, if any."""
        return self._turn_management.mark_at(row, col, self)

    def is_occupied(self, row: int, col: int) -> bool:
        return self._turn_management.is_occupied(row, col, self)

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Get all unoccupied cells in row-major order."""
        return self._turn_management.empty_cells(self)

    def winning_mark(self) -> Optional[Mark]:
        """Get the mark that completed a line, if any."""
        return self._game_state_checker.winning_mark(self)

    def is_board_full(self) -> bool:
        return self._game_state_checker.is_board_full(self)

    def check_game_state(self, mover_id: str) -> None:
        """Check and update the game state for win/tie after a move by ``mover_id``."""
        self._game_state_checker.check_game_state(self, mover_id)

    def is_game_over(self) -> bool:
        return self.status is GameStatus.OVER

    def board(self) -> List[List[Optional[Mark]]]:
        """Get a row-major grid view of the board."""
        grid: List[List[Optional[Mark]]] = [[None] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for move in self.moves:
            grid[move.row][move.col] = move.mark
        return grid

    def __str__(self) -> str:
        """String representation of the game state."""
        rows = []
        for row in self.board():
            rows.append("|".join(mark.value if mark else " " for mark in row))
        return "\n-+-+-\n".join(rows)
