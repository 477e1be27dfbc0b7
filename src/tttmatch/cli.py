from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import numpy as np

from .config import TRACKING_BACKENDS, GameConfig
from .console import ConsoleInput, ConsoleOutput
from .errors import TicTacToeError
from .game_basics import parse_board, winning_marker
from .players import other_marker
from .session import play_session
from .simulate import simulate_matches
from .tactics import choose_move
from .tracking import log_metrics, log_params, maybe_mlflow_run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt", description="Tic-tac-toe against the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random moves")

    # play
    p_play = sub.add_parser("play", help="Play a match against the computer (first to 5 by default)")
    p_play.add_argument("--name", help="Your name (asked interactively when omitted)")
    p_play.add_argument("--marker", choices=["X", "O", "x", "o"], help="Your marker")
    p_play.add_argument(
        "--first", choices=["human", "computer"], help="Who moves first in every round"
    )
    p_play.add_argument("--target", type=int, default=None, help="Score that wins the match")
    p_play.add_argument("--no-clear", action="store_true", help="Do not clear the screen between moves")
    _add_tracking_args(p_play)

    # demo: move
    p_move = sub.add_parser("move", help="Show the computer's move for a board")
    p_move.add_argument("--board", required=True, help="Board string, 9 chars, '.' = empty, e.g. XX..O....")
    p_move.add_argument("--marker", required=True, help="Marker the computer plays")
    p_move.add_argument("--opponent", default=None, help="Opponent marker (default: the other one on the board, else X/O)")

    # demo: winner
    p_win = sub.add_parser("winner", help="Report the winner of a board")
    p_win.add_argument("--board", required=True, help="Board string, 9 chars, '.' = empty")

    # simulate
    p_sim = sub.add_parser("simulate", help="Play the computer against a random opponent")
    p_sim.add_argument("--matches", type=int, default=100, help="Number of matches (default: 100)")
    p_sim.add_argument(
        "--first", choices=["human", "computer"], default="human",
        help="Who moves first; 'human' is the random opponent (default: human)",
    )
    p_sim.add_argument("--target", type=int, default=None, help="Score that wins a match")
    _add_tracking_args(p_sim)

    return p


def _add_tracking_args(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--tracking",
        choices=list(TRACKING_BACKENDS),
        default=None,
        help="Experiment tracking backend",
    )
    p.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Directory for tracking logs (for mlflow local backend)",
    )


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "mlflow"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _config_from_args(ns: argparse.Namespace) -> GameConfig:
    cfg = GameConfig.from_env()
    if ns.seed is not None:
        cfg.seed = ns.seed
    if getattr(ns, "target", None) is not None:
        cfg.target_score = ns.target
    if getattr(ns, "tracking", None) is not None:
        cfg.tracking = ns.tracking
    if getattr(ns, "log_dir", None) is not None:
        cfg.log_dir = ns.log_dir
    if getattr(ns, "no_clear", False):
        cfg.clear_screen = False
    if getattr(ns, "name", None) is not None:
        cfg.human_name = ns.name
    if getattr(ns, "marker", None) is not None:
        cfg.human_marker = ns.marker
    if getattr(ns, "first", None) is not None:
        cfg.human_first = ns.first == "human"
    return cfg.validate()


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tttmatch"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd in ("play", "simulate"):
        try:
            cfg = _config_from_args(ns)
        except ValueError as e:
            logging.error("%s", e)
            return 2

    if ns.cmd == "play":
        rng = np.random.default_rng(cfg.seed)
        try:
            play_session(cfg, ConsoleInput(), ConsoleOutput(clear_screen=cfg.clear_screen), rng)
        except (KeyboardInterrupt, EOFError):
            print()
            logging.info("Game interrupted.")
            return 130
        return 0

    if ns.cmd == "simulate":
        if ns.matches < 0:
            logging.error("--matches must be >= 0, got %d", ns.matches)
            return 2
        with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="simulate", log_dir=cfg.log_dir) as tracking:
            summary = simulate_matches(
                ns.matches,
                seed=cfg.seed,
                target_score=cfg.target_score,
                human_first=cfg.human_first if cfg.human_first is not None else True,
            )
            if tracking:
                log_params({"matches": ns.matches, "target_score": cfg.target_score, "first": ns.first})
                log_metrics({
                    "computer_win_rate": summary.computer_win_rate,
                    "mean_rounds": summary.mean_rounds,
                    "draws": float(summary.draws),
                })
        logging.info(
            "matches=%d computer_wins=%d random_wins=%d draws=%d mean_rounds=%.2f",
            summary.matches,
            summary.computer_wins,
            summary.random_wins,
            summary.draws,
            summary.mean_rounds,
        )
        return 0

    if ns.cmd == "move":
        own = ns.marker
        try:
            board = parse_board(ns.board)
        except TicTacToeError as e:
            logging.error("Invalid board: %s", e)
            return 2
        on_board = {board[p] for p in range(1, 10)} - {None}
        if ns.opponent is not None:
            opp = ns.opponent
        else:
            others = sorted(on_board - {own})
            opp = others[0] if others else other_marker(own)
        if len(own) != 1 or len(opp) != 1 or own == opp or not on_board <= {own, opp}:
            logging.error("Markers %r/%r do not match the board %r.", own, opp, ns.board)
            return 2
        seed = ns.seed
        if seed is None:
            try:
                seed = GameConfig.from_env().seed
            except ValueError as e:
                logging.error("%s", e)
                return 2
        rng = np.random.default_rng(seed)
        move, rule = choose_move(board, own, opp, rng)
        logging.info("move=%s rule=%s", move if move is not None else "none", rule or "none")
        return 0

    if ns.cmd == "winner":
        try:
            board = parse_board(ns.board)
        except TicTacToeError as e:
            logging.error("Invalid board: %s", e)
            return 2
        w = winning_marker(board)
        logging.info("winner=%s full=%s", w if w is not None else "none", board.is_full())
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
