"""
Match tracking helpers (optional MLflow backend).

MLflow is only imported when tracking is requested so it stays an
optional dependency.
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional


@contextmanager
def maybe_mlflow_run(enabled: bool, run_name: str, log_dir: Optional[Path] = None) -> Iterator[bool]:
    """Yield True inside an active MLflow run, False when tracking is off or unavailable."""
    if not enabled:
        yield False
        return
    try:
        import mlflow  # type: ignore

        if log_dir is not None:
            mlflow.set_tracking_uri(Path(log_dir).resolve().joinpath("mlruns").as_uri())
        run = mlflow.start_run(run_name=run_name)
    except Exception as e:
        # Soft-fail: continue without tracking
        logging.warning("mlflow tracking unavailable (%s); continuing without it", e)
        yield False
        return
    with run:
        yield True


def log_params(params: Dict[str, object]) -> None:
    try:
        import mlflow  # type: ignore

        mlflow.log_params(params)
    except Exception as e:
        logging.debug("log_params skipped: %s", e)


def log_metrics(metrics: Dict[str, float], step: Optional[int] = None) -> None:
    try:
        import mlflow  # type: ignore

        mlflow.log_metrics(metrics, step=step)
    except Exception as e:
        logging.debug("log_metrics skipped: %s", e)
