"""
Tactics for the automated player: immediate wins, blocks, centre, random.
Notes:
- Lines are always scanned in WINNING_LINES order, so the first qualifying
  line decides when several do.
- The random step is the only nondeterminism; pass an rng to pin it down.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .game_basics import CENTER, WINNING_LINES, Board, Marker, Position


def completing_positions(board: Board, marker: Marker) -> List[Position]:
    """Empty positions that would complete a line for ``marker``, in line order.

    A position may appear twice when it completes two lines.
    """
    moves: List[Position] = []
    for line in WINNING_LINES:
        values = [board[p] for p in line]
        if values.count(marker) != 2:
            continue
        empties = [p for p in line if board[p] is None]
        if len(empties) == 1:
            moves.append(empties[0])
    return moves


def _first_completing(board: Board, marker: Marker) -> Optional[Position]:
    moves = completing_positions(board, marker)
    return moves[0] if moves else None


def random_move(board: Board, rng: Optional[np.random.Generator] = None) -> Optional[Position]:
    empty = board.empty_positions()
    if not empty:
        return None
    if rng is None:
        rng = np.random.default_rng()
    return int(rng.choice(empty))


def choose_move(
    board: Board,
    own_marker: Marker,
    opponent_marker: Marker,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[Optional[Position], Optional[str]]:
    """Pick a move by priority win > block > center > random.

    Returns ``(position, rule)``; ``(None, None)`` when the board is full.
    """
    if board.is_full():
        return None, None
    move = _first_completing(board, own_marker)
    if move is not None:
        return move, "win"
    move = _first_completing(board, opponent_marker)
    if move is not None:
        return move, "block"
    if board[CENTER] is None:
        return CENTER, "center"
    return random_move(board, rng), "random"


def select_move(
    board: Board,
    own_marker: Marker,
    opponent_marker: Marker,
    rng: Optional[np.random.Generator] = None,
) -> Optional[Position]:
    move, rule = choose_move(board, own_marker, opponent_marker, rng)
    logging.debug("select_move %s -> %s (%s)", own_marker, move, rule)
    return move
