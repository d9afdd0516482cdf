"""Tic-Tac-Toe game area package."""

__version__ = "0.1.0"

# Set up logging configuration on import
import os
from .utils.logging_config import setup_logging

# Default to INFO level, but allow override via environment variable
log_level = os.getenv('TICTACTOE_LOG_LEVEL', 'INFO')
setup_logging(level=log_level)

from . import models
from . import utils
from . import engine

__all__ = ["models", "utils", "engine"]
