"""Game settings.

Environment-first (TTT_* variables), then overridden by CLI flags.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from .match import TARGET_SCORE

TRACKING_BACKENDS = ("none", "mlflow")
COMPUTER_NAMES = ("R2D2", "Watson", "Hal")


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


def _env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class GameConfig:
    target_score: int = TARGET_SCORE
    computer_names: Tuple[str, ...] = field(default_factory=lambda: COMPUTER_NAMES)
    seed: Optional[int] = None
    clear_screen: bool = True
    tracking: str = "none"  # one of: "none", "mlflow"
    log_dir: Path = Path("runs")
    # preset answers; None means ask the player
    human_name: Optional[str] = None
    human_marker: Optional[str] = None
    human_first: Optional[bool] = None

    @classmethod
    def from_env(cls) -> "GameConfig":
        cfg = cls()
        target = _env_int("TTT_TARGET_SCORE")
        if target is not None:
            cfg.target_score = target
        cfg.seed = _env_int("TTT_SEED")
        cfg.clear_screen = _env_bool("TTT_CLEAR_SCREEN", cfg.clear_screen)
        cfg.tracking = os.getenv("TTT_TRACKING", cfg.tracking) or cfg.tracking
        log_dir = os.getenv("TTT_LOG_DIR")
        if log_dir:
            cfg.log_dir = Path(log_dir)
        return cfg

    def validate(self) -> "GameConfig":
        if self.target_score < 1:
            raise ValueError(f"target_score must be >= 1, got {self.target_score}")
        if not self.computer_names:
            raise ValueError("computer_names must not be empty")
        if self.tracking not in TRACKING_BACKENDS:
            raise ValueError(f"Unknown tracking backend {self.tracking!r}; expected one of {TRACKING_BACKENDS}")
        if self.human_marker is not None:
            self.human_marker = self.human_marker.upper()
            if self.human_marker not in ("X", "O"):
                raise ValueError(f"Marker must be X or O, got {self.human_marker!r}")
        if self.human_name is not None and not self.human_name.strip():
            raise ValueError("human_name must not be blank")
        return self
