"""Game state checking component for TicTacToeGameState."""

from typing import Dict, Optional, Tuple, TYPE_CHECKING

from ....utils.logging_config import get_game_logger

if TYPE_CHECKING:
    from ..game_state import TicTacToeGameState, Mark

logger = get_game_logger(__name__)

Cell = Tuple[int, int]

# Every line that wins the game: three rows, three columns, two diagonals
WINNING_LINES: Tuple[Tuple[Cell, Cell, Cell], ...] = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)


class GameStateCheckerComponent:
    """Handles terminal-condition checks for the game state."""

    def check_game_state(self, game_state: "TicTacToeGameState", mover_id: str) -> None:
        """Check and update game state for win/tie conditions after a move."""
        from ..game_state import GameStatus

        if game_state.status is not GameStatus.IN_PROGRESS:
            return  # Game not running

        mark = self.winning_mark(game_state)
        if mark is not None:
            game_state.status = GameStatus.OVER
            game_state.winner = mover_id
            logger.info("Line completed for %s, winner %s", mark.value, mover_id)
            return

        if self.is_board_full(game_state):
            game_state.status = GameStatus.OVER
            game_state.winner = None
            logger.info("Board full with no line, game tied")

    def winning_mark(self, game_state: "TicTacToeGameState") -> Optional["Mark"]:
        """Get the mark holding all three cells of any winning line."""
        cells: Dict[Cell, "Mark"] = {move.cell: move.mark for move in game_state.moves}
        for line in WINNING_LINES:
            marks = {cells.get(cell) for cell in line}
            if len(marks) == 1:
                mark = marks.pop()
                if mark is not None:
                    return mark
        return None

    def is_board_full(self, game_state: "TicTacToeGameState") -> bool:
        from ..game_state import BOARD_SIZE
        return len(game_state.moves) >= BOARD_SIZE * BOARD_SIZE
