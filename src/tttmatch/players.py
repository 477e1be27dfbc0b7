"""
Players and how they decide their next move.

There is one Player record; the human and the computer differ only in the
strategy attached to it.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

import numpy as np

from .console import InputSource
from .game_basics import Board, Marker, Position
from .tactics import select_move


class Side(Enum):
    HUMAN = "human"
    COMPUTER = "computer"

    def other(self) -> "Side":
        return Side.COMPUTER if self is Side.HUMAN else Side.HUMAN


class MoveStrategy(Protocol):
    def decide(self, board: Board, own_marker: Marker, opponent_marker: Marker) -> Optional[Position]: ...


class InteractiveStrategy:
    """Asks the input source for a square among the empty ones."""

    def __init__(self, input_source: InputSource) -> None:
        self.input_source = input_source

    def decide(self, board: Board, own_marker: Marker, opponent_marker: Marker) -> Optional[Position]:
        return self.input_source.request_square(board.empty_positions())


class HeuristicStrategy:
    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng if rng is not None else np.random.default_rng()

    def decide(self, board: Board, own_marker: Marker, opponent_marker: Marker) -> Optional[Position]:
        return select_move(board, own_marker, opponent_marker, self.rng)


@dataclass
class Player:
    name: str
    side: Side
    marker: Marker
    strategy: MoveStrategy
    score: int = 0

    @property
    def is_human(self) -> bool:
        return self.side is Side.HUMAN


def other_marker(marker: Marker) -> Marker:
    return "O" if marker == "X" else "X"
