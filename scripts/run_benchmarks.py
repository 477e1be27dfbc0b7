#!/usr/bin/env python3
from __future__ import annotations

import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

import numpy as np

from tttmatch.game_basics import parse_board
from tttmatch.simulate import simulate_matches
from tttmatch.tactics import select_move
from tttmatch.tracking import log_metrics, log_params, maybe_mlflow_run

BOARDS = [".........", "XX.......", "OO.......", "X...O...X", "XOXOXO..."]


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 10
    moves_per_seed: int = 2000
    matches_per_seed: int = 20
    tracking: str = "none"  # or "mlflow"
    log_dir: Path = Path("runs")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    boards = [parse_board(b) for b in BOARDS]
    with maybe_mlflow_run(cfg.tracking == "mlflow", run_name="benchmarks", log_dir=cfg.log_dir) as tracking:
        if tracking:
            log_params({"seeds": cfg.seeds, "moves_per_seed": cfg.moves_per_seed})
        move_times: List[float] = []
        match_times: List[float] = []
        win_rates: List[float] = []
        for s in range(cfg.seeds):
            rng = np.random.default_rng(s)
            t0 = time.perf_counter()
            for i in range(cfg.moves_per_seed):
                select_move(boards[i % len(boards)], "O", "X", rng)
            t1 = time.perf_counter()
            move_times.append((t1 - t0) / cfg.moves_per_seed)
            t2 = time.perf_counter()
            summary = simulate_matches(cfg.matches_per_seed, seed=s)
            t3 = time.perf_counter()
            match_times.append((t3 - t2) / max(cfg.matches_per_seed, 1))
            win_rates.append(summary.computer_win_rate)
        m_move, h_move = ci95(move_times)
        m_match, h_match = ci95(match_times)
        m_win, h_win = ci95(win_rates)
        if tracking:
            log_metrics({
                "select_move_mean_s": m_move,
                "select_move_ci95_half_s": h_move,
                "match_mean_s": m_match,
                "match_ci95_half_s": h_match,
                "computer_win_rate": m_win,
            })
    logging.info("select_move: mean=%.2fus +/- %.2fus (95%% CI)", m_move * 1e6, h_move * 1e6)
    logging.info("simulated match: mean=%.4fs +/- %.4fs (95%% CI)", m_match, h_match)
    logging.info("heuristic win rate vs random: %.3f +/- %.3f", m_win, h_win)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
