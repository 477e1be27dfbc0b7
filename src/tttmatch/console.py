"""
Terminal input/output for a match.

The match loop only talks to an InputSource and an OutputSink; the console
classes below are the default implementations. ``read``/``write`` are
injectable so tests can script a whole session.
"""
from __future__ import annotations

import os
from typing import Callable, List, Optional, Protocol, Sequence

from .game_basics import Board, Position

MARKER_CHOICES = ("X", "O")


class InputSource(Protocol):
    def request_square(self, valid_choices: Sequence[Position]) -> Position: ...

    def request_yes_no(self, prompt: str, invalid: Optional[str] = None) -> bool: ...

    def request_name(self) -> str: ...

    def request_marker_choice(self) -> str: ...


class OutputSink(Protocol):
    def render_board(self, board: Board) -> None: ...

    def show_message(self, text: str) -> None: ...

    def show_score(self, human_score: int, computer_score: int) -> None: ...

    def set_names(self, human_name: str, computer_name: str) -> None: ...


def joinor(items: Sequence[object], sep: str = ", ", last: str = "or") -> str:
    """'1, 2, or 3' style listing of choices."""
    words = [str(i) for i in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        return f"{words[0]} {last} {words[1]}"
    return f"{sep.join(words[:-1])}{sep}{last} {words[-1]}"


def board_lines(board: Board) -> List[str]:
    def cell(pos: int) -> str:
        v = board[pos]
        return " " if v is None else str(v)

    lines: List[str] = []
    for row, start in enumerate((1, 4, 7)):
        if row:
            lines.append("-----+-----+-----")
        lines.append("     |     |")
        lines.append(f"  {cell(start)}  |  {cell(start + 1)}  |  {cell(start + 2)}")
        lines.append("     |     |")
    return lines


class ConsoleInput:
    """Prompts on the terminal and keeps asking until the answer is usable."""

    def __init__(
        self,
        read: Optional[Callable[[str], str]] = None,
        write: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.read = read if read is not None else input
        self.write = write if write is not None else print

    def _ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.read("").strip()

    def request_square(self, valid_choices: Sequence[Position]) -> Position:
        choices = list(valid_choices)
        prompt = f"Choose a square ({joinor(choices)}): "
        while True:
            answer = self._ask(prompt)
            try:
                square = int(answer)
            except ValueError:
                square = None
            if square in choices:
                return square
            self.write("Sorry, that's not a valid choice.")

    def request_yes_no(self, prompt: str, invalid: Optional[str] = None) -> bool:
        while True:
            answer = self._ask(prompt).lower()
            if answer in ("y", "n"):
                return answer == "y"
            self.write(invalid or "Invalid, y or n only.")

    def request_name(self) -> str:
        while True:
            name = self._ask("What's your name?")
            if name:
                return name
            self.write("Sorry, must enter a name.")

    def request_marker_choice(self) -> str:
        while True:
            answer = self._ask("Would you like to be (X) or (O)?").upper()
            if answer in MARKER_CHOICES:
                return answer
            self.write("Invalid marker - X or O only.")


class ConsoleOutput:
    def __init__(
        self,
        write: Optional[Callable[[str], None]] = None,
        clear_screen: bool = False,
    ) -> None:
        self.write = write if write is not None else print
        self.clear_screen = clear_screen
        self.human_name = "You"
        self.computer_name = "Computer"

    def clear(self) -> None:
        if self.clear_screen:
            os.system("cls" if os.name == "nt" else "clear")

    def render_board(self, board: Board) -> None:
        self.clear()
        self.write("")
        for line in board_lines(board):
            self.write(line)
        self.write("")

    def show_message(self, text: str) -> None:
        self.write(text)

    def show_score(self, human_score: int, computer_score: int) -> None:
        self.write(f"{self.human_name}: {human_score}, {self.computer_name}: {computer_score}")

    def set_names(self, human_name: str, computer_name: str) -> None:
        self.human_name = human_name
        self.computer_name = computer_name
