"""
Game basics: board representation, serialization, winner/draw checks.
Notes:
- Positions are 1..9, row-major: 1-2-3 / 4-5-6 / 7-8-9.
- A cell is either None (empty) or one of exactly two markers, e.g. "X"/"O".
- WINNING_LINES order matters: the first qualifying line wins every scan.
"""
from __future__ import annotations

import operator
from typing import Dict, List, Optional, Tuple

from .errors import InvalidBoard, InvalidMove

Marker = str
Position = int

POSITIONS: Tuple[int, ...] = tuple(range(1, 10))
CENTER = 5
EMPTY_CHAR = "."

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),  # rows
    (1, 4, 7), (2, 5, 8), (3, 6, 9),  # cols
    (1, 5, 9), (3, 5, 7),             # diagonals
)


class Board:
    """Nine cells keyed by position.

    When ``markers`` is given, only those two markers may be placed.
    Otherwise the first two distinct markers placed become the active pair.
    """

    def __init__(self, markers: Optional[Tuple[Marker, Marker]] = None) -> None:
        if markers is not None:
            if len(markers) != 2 or markers[0] == markers[1]:
                raise ValueError(f"Board needs two distinct markers, got {markers!r}")
            markers = (markers[0], markers[1])
        self.markers = markers
        self._squares: Dict[int, Optional[Marker]] = {}
        self.reset()

    def reset(self) -> None:
        for pos in POSITIONS:
            self._squares[pos] = None

    def __getitem__(self, position: Position) -> Optional[Marker]:
        return self._squares[position]

    def __repr__(self) -> str:
        return f"Board({serialize_board(self)!r})"

    def cells(self) -> Dict[int, Optional[Marker]]:
        return dict(self._squares)

    def copy(self) -> "Board":
        other = Board(self.markers)
        other._squares.update(self._squares)
        return other

    def _active_markers(self) -> List[Marker]:
        if self.markers is not None:
            return list(self.markers)
        seen: List[Marker] = []
        for v in self._squares.values():
            if v is not None and v not in seen:
                seen.append(v)
        return seen

    def place(self, position: Position, marker: Marker) -> Position:
        # any integer type (numpy included) is accepted; bools are not
        try:
            pos = None if isinstance(position, bool) else operator.index(position)
        except TypeError:
            pos = None
        if pos is None or pos not in self._squares:
            raise InvalidMove(f"Position must be 1-9, got {position!r}", position)
        position = pos
        if self._squares[position] is not None:
            raise InvalidMove(f"Square {position} is already taken", position)
        if marker is None or marker in (EMPTY_CHAR, " ", ""):
            raise InvalidMove(f"Not a marker: {marker!r}", position)
        active = self._active_markers()
        if marker not in active and (self.markers is not None or len(active) >= 2):
            raise InvalidMove(f"Marker {marker!r} is not in play (active: {active})", position)
        self._squares[position] = marker
        return position

    def empty_positions(self) -> List[Position]:
        return [pos for pos in POSITIONS if self._squares[pos] is None]

    def is_full(self) -> bool:
        return not self.empty_positions()

    def positions_with_marker(self, marker: Marker) -> List[Position]:
        return [pos for pos in POSITIONS if self._squares[pos] == marker]


def serialize_board(board: Board) -> str:
    return ''.join(EMPTY_CHAR if board[pos] is None else str(board[pos]) for pos in POSITIONS)


def parse_board(text: str, markers: Optional[Tuple[Marker, Marker]] = None) -> Board:
    """Build a board from 9 characters, '.' for an empty cell.

    Spaces also count as empty so strings copied from a rendered row work.
    """
    raw = text.strip("\n")
    if len(raw) != 9:
        raise InvalidBoard(f"Board string must have 9 characters, got {len(raw)}")
    found = sorted({c for c in raw if c not in (EMPTY_CHAR, " ")})
    if len(found) > 2:
        raise InvalidBoard(f"Board holds more than two markers: {found}")
    board = Board(markers)
    for pos, c in zip(POSITIONS, raw):
        if c in (EMPTY_CHAR, " "):
            continue
        try:
            board.place(pos, c)
        except InvalidMove as e:
            raise InvalidBoard(str(e)) from e
    return board


def winning_marker(board: Board) -> Optional[Marker]:
    """Marker owning the first complete line in WINNING_LINES order, or None.

    A board with completed lines for both markers cannot arise in legal
    play; the scan order decides which one is reported.
    """
    for a, b, c in WINNING_LINES:
        v = board[a]
        if v is not None and v == board[b] and v == board[c]:
            return v
    return None


def someone_won(board: Board) -> bool:
    return winning_marker(board) is not None


def is_draw(board: Board) -> bool:
    return board.is_full() and winning_marker(board) is None
