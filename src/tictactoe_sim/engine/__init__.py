"""Engine package for game rules and area command handling."""

from .errors import InvalidParametersError
from .move_validator import MoveValidator
from .game_engine import TicTacToeGame, create_game
from .event_system import AreaEventManager, AreaEvent, AreaEventType
from .game_area import TicTacToeGameArea
__all__ = ['InvalidParametersError', 'MoveValidator', 'TicTacToeGame', 'create_game',
           'AreaEventManager', 'AreaEvent', 'AreaEventType', 'TicTacToeGameArea']
