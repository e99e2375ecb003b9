import json

import pytest

from xfb.app.timing import StageTimer


def test_stage_timer_records_in_order():
    timer = StageTimer()
    with timer.measure("env_setup"):
        pass
    with timer.measure("config_ready"):
        pass
    assert timer.names == ["env_setup", "config_ready"]
    assert all(t.duration >= 0 for t in timer.timings)
    assert timer.total_duration >= 0


def test_stage_timer_records_failed_stage():
    timer = StageTimer()
    with pytest.raises(ValueError):
        with timer.measure("boom"):
            raise ValueError("x")
    assert timer.names == ["boom"]


def test_nested_stage_rejected():
    timer = StageTimer()
    with timer.measure("outer"):
        with pytest.raises(RuntimeError):
            with timer.measure("inner"):
                pass


def test_export_json(tmp_path):
    timer = StageTimer()
    with timer.measure("splash_shown"):
        pass
    path = tmp_path / "timings.json"
    assert timer.export(path) is True
    loaded = json.loads(path.read_text(encoding="utf-8"))
    assert loaded["stages"][0]["name"] == "splash_shown"


def test_export_failure_is_reported_not_raised(tmp_path):
    timer = StageTimer()
    assert timer.export(tmp_path / "missing" / "timings.json") is False
