"""Exceptions raised by the game engine."""
from __future__ import annotations

from typing import Any


class TicTacToeError(Exception):
    """Base class for engine errors."""


class InvalidMove(TicTacToeError, ValueError):
    """A placement targeted a position outside 1-9, an occupied cell, or used a foreign marker."""

    def __init__(self, message: str, position: Any = None) -> None:
        super().__init__(message)
        self.position = position


class InvalidBoard(TicTacToeError, ValueError):
    """A board string could not be parsed."""
