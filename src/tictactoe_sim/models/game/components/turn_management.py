"""Turn management component for TicTacToeGameState."""

from typing import List, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from ..game_state import TicTacToeGameState, Mark


class TurnManagementComponent:
    """Handles turn order and board occupancy for the game state."""

    def next_mark(self, game_state: "TicTacToeGameState") -> "Mark":
        """X opens; afterwards the turn passes to the mark opposite the last move."""
        from ..game_state import Mark

        if not game_state.moves:
            return Mark.X
        return game_state.moves[-1].mark.opponent()

    def mark_of(self, player_id: str, game_state: "TicTacToeGameState") -> Optional["Mark"]:
        from ..game_state import Mark

        if player_id is None:
            return None
        if player_id == game_state.x:
            return Mark.X
        if player_id == game_state.o:
            return Mark.O
        return None

    def mark_at(self, row: int, col: int, game_state: "TicTacToeGameState") -> Optional["Mark"]:
        for move in game_state.moves:
            if move.row == row and move.col == col:
                return move.mark
        return None

    def is_occupied(self, row: int, col: int, game_state: "TicTacToeGameState") -> bool:
        return any(move.row == row and move.col == col for move in game_state.moves)

    def empty_cells(self, game_state: "TicTacToeGameState") -> List[Tuple[int, int]]:
        from ..game_state import BOARD_SIZE

        occupied = {move.cell for move in game_state.moves}
        return [
            (row, col)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if (row, col) not in occupied
        ]
