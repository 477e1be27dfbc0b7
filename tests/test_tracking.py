import sys

from tttmatch.tracking import log_metrics, log_params, maybe_mlflow_run


def test_disabled_tracking_yields_false(tmp_path):
    with maybe_mlflow_run(False, run_name="t", log_dir=tmp_path) as active:
        assert active is False


def test_missing_mlflow_soft_fails(monkeypatch, tmp_path):
    # a None entry makes `import mlflow` raise ImportError
    monkeypatch.setitem(sys.modules, "mlflow", None)
    with maybe_mlflow_run(True, run_name="t", log_dir=tmp_path) as active:
        assert active is False
    log_params({"a": 1})
    log_metrics({"b": 1.0})
