from typing import List, Optional

import numpy as np
import pytest
try:
    from hypothesis import given, strategies as st  # type: ignore
    HAS_HYP = True
except ModuleNotFoundError:  # pragma: no cover - test infra
    HAS_HYP = False
    import pytest as _pytest  # type: ignore
    _pytest.skip("Hypothesis not installed", allow_module_level=True)

from tttmatch.game_basics import WINNING_LINES, Board, winning_marker
from tttmatch.tactics import completing_positions, select_move

cells = st.lists(st.sampled_from([None, "X", "O"]), min_size=9, max_size=9)


def _board(values: List[Optional[str]]) -> Board:
    b = Board(("X", "O"))
    for pos, v in enumerate(values, start=1):
        if v is not None:
            b.place(pos, v)
    return b


@given(cells, st.integers(min_value=0, max_value=2**32 - 1))
def test_select_move_never_returns_occupied(values, seed):
    b = _board(values)
    move = select_move(b, "X", "O", np.random.default_rng(seed))
    if b.is_full():
        assert move is None
    else:
        assert move in b.empty_positions()


@given(cells)
def test_win_then_block_then_center_priority(values):
    b = _board(values)
    if b.is_full():
        return
    rng = np.random.default_rng(0)
    move = select_move(b, "O", "X", rng)
    own = completing_positions(b, "O")
    opp = completing_positions(b, "X")
    if own:
        assert move == own[0]
    elif opp:
        assert move == opp[0]
    elif b[5] is None:
        assert move == 5


@given(cells)
def test_winning_marker_matches_first_complete_line(values):
    b = _board(values)
    expected = None
    for line in WINNING_LINES:
        marks = {values[p - 1] for p in line}
        if len(marks) == 1 and None not in marks:
            expected = marks.pop()
            break
    assert winning_marker(b) == expected


@given(cells)
def test_empty_positions_partition_board(values):
    b = _board(values)
    empties = b.empty_positions()
    assert empties == sorted(empties)
    assert sorted(empties + b.positions_with_marker("X") + b.positions_with_marker("O")) == list(range(1, 10))
    assert b.is_full() == (len(empties) == 0)
