"""Utility helpers for the Tic-Tac-Toe package."""

from .logging_config import setup_logging, get_logger, get_game_logger

__all__ = ["setup_logging", "get_logger", "get_game_logger"]
