import numpy as np
import pytest

from tttmatch.errors import InvalidBoard, InvalidMove
from tttmatch.game_basics import (
    WINNING_LINES,
    Board,
    is_draw,
    parse_board,
    serialize_board,
    someone_won,
    winning_marker,
)


def test_new_board_is_empty():
    b = Board(("X", "O"))
    assert b.empty_positions() == list(range(1, 10))
    assert not b.is_full()
    assert winning_marker(b) is None


def test_place_mutates_only_target_cell():
    b = Board(("X", "O"))
    b.place(5, "X")
    assert b[5] == "X"
    assert b.empty_positions() == [1, 2, 3, 4, 6, 7, 8, 9]
    assert b.positions_with_marker("X") == [5]
    assert b.positions_with_marker("O") == []


@pytest.mark.parametrize("bad", [0, 10, -1, "5", 5.0, np.float64(5), None, True])
def test_place_out_of_range(bad):
    b = Board(("X", "O"))
    with pytest.raises(InvalidMove) as ei:
        b.place(bad, "X")
    assert ei.value.position == bad
    assert b.empty_positions() == list(range(1, 10))


def test_place_accepts_numpy_integers():
    b = Board(("X", "O"))
    assert b.place(np.int64(5), "X") == 5
    assert b[5] == "X"
    assert type(b.place(np.int32(1), "O")) is int
    assert list(b.cells()) == list(range(1, 10))


def test_place_occupied():
    b = Board(("X", "O"))
    b.place(1, "X")
    with pytest.raises(InvalidMove):
        b.place(1, "O")
    assert b[1] == "X"


def test_invalid_move_is_a_value_error():
    b = Board(("X", "O"))
    with pytest.raises(ValueError):
        b.place(11, "X")


def test_third_marker_rejected():
    b = Board(("X", "O"))
    with pytest.raises(InvalidMove):
        b.place(1, "Z")
    free = Board()
    free.place(1, "A")
    free.place(2, "B")
    with pytest.raises(InvalidMove):
        free.place(3, "C")


def test_board_requires_distinct_markers():
    with pytest.raises(ValueError):
        Board(("X", "X"))


def test_is_full_and_positions_with_marker():
    b = parse_board("XOXOXOOXO")
    assert b.is_full()
    assert b.empty_positions() == []
    assert b.positions_with_marker("X") == [1, 3, 5, 8]
    assert b.positions_with_marker("O") == [2, 4, 6, 7, 9]


def test_reset_keeps_identity():
    b = parse_board("XX.O.....")
    same = b
    b.reset()
    assert b is same
    assert b.empty_positions() == list(range(1, 10))


def test_winning_lines_fixed_order():
    assert WINNING_LINES[:3] == ((1, 2, 3), (4, 5, 6), (7, 8, 9))
    assert WINNING_LINES[3:6] == ((1, 4, 7), (2, 5, 8), (3, 6, 9))
    assert WINNING_LINES[6:] == ((1, 5, 9), (3, 5, 7))


@pytest.mark.parametrize("board,expected", [
    ("XXX......", "X"),       # row, rest empty
    ("O..O..O..", "O"),       # column
    ("..X.X.X..", "X"),       # anti-diagonal
    ("O...O...O", "O"),       # diagonal
    (".........", None),
    ("XOXOXOOXO", None),      # full, no line
    ("XO.XO....", None),
])
def test_winning_marker(board, expected):
    assert winning_marker(parse_board(board)) == expected


def test_winning_marker_first_line_in_order():
    # both markers complete a line; not reachable in play
    assert winning_marker(parse_board("XXX...OOO")) == "X"
    assert winning_marker(parse_board("OOO...XXX")) == "O"


def test_draw_detection():
    full = parse_board("XOXOXOOXO")
    assert is_draw(full)
    assert not someone_won(full)
    won_full = parse_board("XXXOOXOXO")
    assert someone_won(won_full)
    assert not is_draw(won_full)
    assert not is_draw(parse_board("XO......."))


def test_parse_and_serialize():
    b = parse_board("X.O .X...")
    assert b[1] == "X" and b[3] == "O" and b[4] is None and b[6] == "X"
    assert serialize_board(b) == "X.O..X..."


@pytest.mark.parametrize("bad", ["", "XX", "XXXXXXXXXX", "XOZ......"])
def test_parse_board_rejects(bad):
    with pytest.raises(InvalidBoard):
        parse_board(bad)


def test_copy_is_independent():
    b = parse_board("X........")
    c = b.copy()
    c.place(2, "O")
    assert b[2] is None
    assert c.cells()[2] == "O"
