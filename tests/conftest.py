from typing import List, Optional, Sequence

import pytest

from tttmatch.game_basics import Board, serialize_board


class ScriptedInput:
    """InputSource answering from fixed lists; records the choices it was offered."""

    def __init__(self, squares=(), yes_no=(), name="Ann", marker="X"):
        self.squares = list(squares)
        self.yes_no = list(yes_no)
        self.name = name
        self.marker = marker
        self.offered: List[List[int]] = []

    def request_square(self, valid_choices: Sequence[int]) -> int:
        self.offered.append(list(valid_choices))
        return self.squares.pop(0)

    def request_yes_no(self, prompt: str, invalid: Optional[str] = None) -> bool:
        return self.yes_no.pop(0)

    def request_name(self) -> str:
        return self.name

    def request_marker_choice(self) -> str:
        return self.marker


class ScriptedStrategy:
    """Plays a fixed list of positions across rounds."""

    def __init__(self, moves):
        self.moves = list(moves)
        self.calls = 0

    def decide(self, board: Board, own_marker: str, opponent_marker: str) -> Optional[int]:
        self.calls += 1
        return self.moves.pop(0)


class RecordingOutput:
    def __init__(self):
        self.boards: List[str] = []
        self.messages: List[str] = []
        self.scores: List[tuple] = []
        self.names: Optional[tuple] = None

    def render_board(self, board: Board) -> None:
        self.boards.append(serialize_board(board))

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def show_score(self, human_score: int, computer_score: int) -> None:
        self.scores.append((human_score, computer_score))

    def set_names(self, human_name: str, computer_name: str) -> None:
        self.names = (human_name, computer_name)


class FirstChoice:
    """Stand-in rng: always picks the first candidate."""

    def __init__(self):
        self.seen: List[list] = []

    def choice(self, seq):
        seq = list(seq)
        self.seen.append(seq)
        return seq[0]


@pytest.fixture
def output():
    return RecordingOutput()


@pytest.fixture
def first_choice():
    return FirstChoice()
