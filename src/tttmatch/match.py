"""
Round and match sequencing.

All mutable state of a match lives in MatchState: the two players, the one
board they share, the first-mover setting and whose turn it is. play_round
and play_match drive it; ScoreTracker owns the scoring rules.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .console import OutputSink
from .errors import InvalidMove
from .game_basics import Board, Marker, Position, winning_marker
from .players import Player, Side

TARGET_SCORE = 5


@dataclass
class MatchState:
    human: Player
    computer: Player
    first_mover: Side
    target_score: int = TARGET_SCORE
    board: Board = field(init=False)
    current_turn: Side = field(init=False)
    round_number: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.human.marker == self.computer.marker:
            raise ValueError(f"Players need different markers, both have {self.human.marker!r}")
        if self.target_score < 1:
            raise ValueError(f"target_score must be >= 1, got {self.target_score}")
        self.board = Board((self.human.marker, self.computer.marker))
        self.current_turn = self.first_mover

    def player(self, side: Side) -> Player:
        return self.human if side is Side.HUMAN else self.computer

    @property
    def current_player(self) -> Player:
        return self.player(self.current_turn)

    def opponent_of(self, player: Player) -> Player:
        return self.player(player.side.other())

    def player_with_marker(self, marker: Marker) -> Optional[Player]:
        for p in (self.human, self.computer):
            if p.marker == marker:
                return p
        return None

    def start_round(self) -> None:
        self.board.reset()
        self.current_turn = self.first_mover
        self.round_number += 1

    def toggle_turn(self) -> None:
        self.current_turn = self.current_turn.other()


@dataclass
class RoundResult:
    round_number: int
    winner_marker: Optional[Marker]
    winner_side: Optional[Side]
    moves: int

    @property
    def is_draw(self) -> bool:
        return self.winner_marker is None


@dataclass
class MatchResult:
    winner: Player
    human_score: int
    computer_score: int
    rounds: List[RoundResult]

    @property
    def draws(self) -> int:
        return sum(1 for r in self.rounds if r.is_draw)


class ScoreTracker:
    """Per-round scoring and the first-to-target stop rule."""

    def __init__(self, human: Player, computer: Player, target_score: int = TARGET_SCORE) -> None:
        self.human = human
        self.computer = computer
        self.target_score = target_score
        self.draws = 0

    def reset(self) -> None:
        self.human.score = 0
        self.computer.score = 0
        self.draws = 0

    def record(self, result: RoundResult) -> Optional[Player]:
        if result.winner_marker is None:
            self.draws += 1
            return None
        for p in (self.human, self.computer):
            if p.marker == result.winner_marker:
                p.score += 1
                return p
        raise ValueError(f"Winning marker {result.winner_marker!r} belongs to no player")

    def is_over(self) -> bool:
        return self.human.score >= self.target_score or self.computer.score >= self.target_score

    def leader(self) -> Optional[Player]:
        if self.human.score == self.computer.score:
            return None
        return self.human if self.human.score > self.computer.score else self.computer

    def champion(self) -> Player:
        """The player whose score reached the target."""
        for p in (self.human, self.computer):
            if p.score >= self.target_score:
                return p
        raise ValueError(
            f"No player has reached {self.target_score} yet ({self.human.score}-{self.computer.score})"
        )


def _take_turn(state: MatchState, player: Player, output: OutputSink) -> Position:
    opponent = state.opponent_of(player)
    while True:
        move = player.strategy.decide(state.board, player.marker, opponent.marker)
        if move is None:
            raise InvalidMove(f"{player.name} has no move on a full board")
        try:
            return state.board.place(move, player.marker)
        except InvalidMove as e:
            if not player.is_human:
                raise
            output.show_message(f"Sorry, that's not a valid choice: {e}")


def play_round(state: MatchState, output: OutputSink) -> RoundResult:
    """Play one round on a freshly reset board until a win or a full board."""
    state.start_round()
    board = state.board
    output.render_board(board)
    moves = 0
    while True:
        player = state.current_player
        pos = _take_turn(state, player, output)
        moves += 1
        logging.debug("round %d: %s (%s) -> %d", state.round_number, player.name, player.marker, pos)
        state.toggle_turn()
        winner = winning_marker(board)
        if winner is not None or board.is_full():
            break
        if state.current_turn is Side.HUMAN:
            output.render_board(board)

    owner = state.player_with_marker(winner) if winner is not None else None
    result = RoundResult(
        round_number=state.round_number,
        winner_marker=winner,
        winner_side=owner.side if owner is not None else None,
        moves=moves,
    )
    logging.debug(
        "round %d over after %d moves: %s",
        result.round_number,
        moves,
        owner.name if owner is not None else "draw",
    )
    return result


def play_match(state: MatchState, output: OutputSink) -> MatchResult:
    """Play rounds until either score reaches the target; scores start from zero."""
    tracker = ScoreTracker(state.human, state.computer, state.target_score)
    tracker.reset()
    state.round_number = 0
    rounds: List[RoundResult] = []
    while True:
        result = play_round(state, output)
        round_winner = tracker.record(result)
        rounds.append(result)
        output.render_board(state.board)
        if round_winner is not None:
            output.show_message(f"{round_winner.name} won the round!")
        else:
            output.show_message("It's a tie!")
        output.show_score(state.human.score, state.computer.score)
        if tracker.is_over():
            break

    winner = tracker.champion()
    logging.debug(
        "match over: %s wins %d-%d after %d rounds",
        winner.name,
        max(state.human.score, state.computer.score),
        min(state.human.score, state.computer.score),
        len(rounds),
    )
    return MatchResult(
        winner=winner,
        human_score=state.human.score,
        computer_score=state.computer.score,
        rounds=rounds,
    )
