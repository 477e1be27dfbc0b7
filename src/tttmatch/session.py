"""
A full interactive session: setup, one or more matches, goodbye.
"""
from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from .config import GameConfig
from .console import InputSource, OutputSink
from .match import MatchResult, MatchState, play_match
from .players import HeuristicStrategy, InteractiveStrategy, Player, Side, other_marker
from .tracking import log_metrics, log_params, maybe_mlflow_run


def setup_match(
    config: GameConfig,
    input_source: InputSource,
    rng: Optional[np.random.Generator] = None,
) -> MatchState:
    """Create both players and the match state, asking for anything not preset."""
    if rng is None:
        rng = np.random.default_rng(config.seed)
    name = config.human_name or input_source.request_name()
    human_first = config.human_first
    if human_first is None:
        human_first = input_source.request_yes_no("Would you like to go first these games (y/n)?")
    marker = config.human_marker or input_source.request_marker_choice()
    marker = marker.upper()

    human = Player(name=name, side=Side.HUMAN, marker=marker, strategy=InteractiveStrategy(input_source))
    computer = Player(
        name=str(rng.choice(list(config.computer_names))),
        side=Side.COMPUTER,
        marker=other_marker(marker),
        strategy=HeuristicStrategy(rng),
    )
    return MatchState(
        human=human,
        computer=computer,
        first_mover=Side.HUMAN if human_first else Side.COMPUTER,
        target_score=config.target_score,
    )


def _track_match(state: MatchState, result: MatchResult, index: int) -> None:
    log_params({
        "human_marker": state.human.marker,
        "computer_marker": state.computer.marker,
        "first_mover": state.first_mover.value,
        "target_score": state.target_score,
    })
    log_metrics({
        "human_score": float(result.human_score),
        "computer_score": float(result.computer_score),
        "rounds": float(len(result.rounds)),
        "draws": float(result.draws),
    }, step=index)


def play_session(
    config: GameConfig,
    input_source: InputSource,
    output: OutputSink,
    rng: Optional[np.random.Generator] = None,
) -> List[MatchResult]:
    config.validate()
    output.show_message(f"Welcome to Tic Tac Toe! First to {config.target_score} wins.")
    output.show_message("")
    state = setup_match(config, input_source, rng)
    output.set_names(state.human.name, state.computer.name)
    output.show_message(
        f"You're {state.human.marker}. {state.computer.name} is {state.computer.marker}."
    )

    results: List[MatchResult] = []
    with maybe_mlflow_run(config.tracking == "mlflow", run_name="session", log_dir=config.log_dir) as tracking:
        while True:
            result = play_match(state, output)
            results.append(result)
            if tracking:
                _track_match(state, result, len(results))
            output.render_board(state.board)
            output.show_score(result.human_score, result.computer_score)
            output.show_message(f"{result.winner.name} won!")
            if not input_source.request_yes_no(
                "Would you like to play again? (y/n)", invalid="Sorry, must be y or n"
            ):
                break
            output.show_message("Let's play again!")
            output.show_message("")

    output.show_message("Thanks for playing! Goodbye")
    logging.info("session over after %d match(es)", len(results))
    return results
