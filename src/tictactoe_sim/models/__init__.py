"""Tic-Tac-Toe data models."""

from . import game

__all__ = ["game"]
