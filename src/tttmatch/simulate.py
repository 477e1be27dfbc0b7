"""
Baseline: the heuristic against a uniformly random opponent.

RandomInput stands in for the human, so simulated matches run through the
same play_match loop as interactive ones.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .game_basics import Board, Position
from .match import TARGET_SCORE, MatchState, play_match
from .players import HeuristicStrategy, InteractiveStrategy, Player, Side


class RandomInput:
    """An InputSource that answers every request at random."""

    def __init__(self, rng: Optional[np.random.Generator] = None, name: str = "Random") -> None:
        self.rng = rng if rng is not None else np.random.default_rng()
        self.name = name

    def request_square(self, valid_choices: Sequence[Position]) -> Position:
        return int(self.rng.choice(list(valid_choices)))

    def request_yes_no(self, prompt: str, invalid: Optional[str] = None) -> bool:
        return bool(self.rng.integers(2))

    def request_name(self) -> str:
        return self.name

    def request_marker_choice(self) -> str:
        return "X" if self.rng.integers(2) == 0 else "O"


class NullOutput:
    def render_board(self, board: Board) -> None:
        pass

    def show_message(self, text: str) -> None:
        pass

    def show_score(self, human_score: int, computer_score: int) -> None:
        pass

    def set_names(self, human_name: str, computer_name: str) -> None:
        pass


@dataclass
class SimulationSummary:
    matches: int
    computer_wins: int
    random_wins: int
    rounds: int
    draws: int

    @property
    def mean_rounds(self) -> float:
        return self.rounds / self.matches if self.matches else 0.0

    @property
    def computer_win_rate(self) -> float:
        return self.computer_wins / self.matches if self.matches else 0.0


def simulate_matches(
    n: int,
    seed: Optional[int] = None,
    target_score: int = TARGET_SCORE,
    human_first: bool = True,
) -> SimulationSummary:
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    ss = np.random.SeedSequence(seed)
    random_rng, heuristic_rng = (np.random.default_rng(s) for s in ss.spawn(2))
    human = Player("Random", Side.HUMAN, "X", InteractiveStrategy(RandomInput(random_rng)))
    computer = Player("Heuristic", Side.COMPUTER, "O", HeuristicStrategy(heuristic_rng))
    state = MatchState(
        human=human,
        computer=computer,
        first_mover=Side.HUMAN if human_first else Side.COMPUTER,
        target_score=target_score,
    )
    out = NullOutput()
    summary = SimulationSummary(matches=n, computer_wins=0, random_wins=0, rounds=0, draws=0)
    for _ in range(n):
        result = play_match(state, out)
        if result.winner is computer:
            summary.computer_wins += 1
        else:
            summary.random_wins += 1
        summary.rounds += len(result.rounds)
        summary.draws += result.draws
    logging.info(
        "simulated %d matches: heuristic %d, random %d, mean rounds %.2f",
        n,
        summary.computer_wins,
        summary.random_wins,
        summary.mean_rounds,
    )
    return summary
