"""Typed failures raised when a command or move is rejected."""

PLAYER_ALREADY_IN_GAME_MESSAGE = "Player is already in this game"
GAME_FULL_MESSAGE = "Game is full"
PLAYER_NOT_IN_GAME_MESSAGE = "Player is not in this game"
GAME_NOT_IN_PROGRESS_MESSAGE = "Game is not in progress"
GAME_ID_MISSMATCH_MESSAGE = "Game ID does not match the game in this area"
BOARD_POSITION_NOT_EMPTY_MESSAGE = "Board position is not empty"
MOVE_NOT_YOUR_TURN_MESSAGE = "Not your turn"
INVALID_COMMAND_MESSAGE = "Invalid command"
INVALID_MOVE_MESSAGE = "Invalid move"


class InvalidParametersError(Exception):
    """Raised when a request is rejected because of its inputs.

    These are validation failures, not faults: the rejected request left the
    game untouched and retrying it unchanged will fail the same way.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
