from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from typer.testing import CliRunner

from scenecam.cli import app, parse_viewport, parse_world
from scenecam.debug_log import camera_debug_enabled, camera_debug_log_path
from scenecam.geom import Rect
from scenecam.node import ViewportSize


def _write_script(tmp_path: Path) -> Path:
    payload = {
        "world": {"x": 0, "y": 0, "w": 1000, "h": 1000},
        "viewport": {"width": 100, "height": 100},
        "position": {"x": 500, "y": 500},
        "events": [
            {"kind": "drag", "phase": "began", "location": {"x": 10, "y": 10}},
            {"kind": "drag", "phase": "changed", "location": {"x": 15, "y": 12}},
        ],
    }
    path = tmp_path / "script.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_parse_world_and_viewport() -> None:
    assert parse_world("0, 0, 1000, 500") == Rect(0.0, 0.0, 1000.0, 500.0)
    assert parse_viewport("320X240") == ViewportSize(320.0, 240.0)


def test_bounds_command_prints_ranges_and_clamped_point() -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["bounds", "--world", "0,0,1000,1000", "--viewport", "100x100", "--position", "2000,2000"],
    )

    assert result.exit_code == 0, result.output
    assert "x: [50, 950]" in result.output
    assert "y: [50, 950]" in result.output
    assert "clamped: (950, 950)" in result.output


def test_bounds_command_rejects_bad_viewport() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["bounds", "--world", "0,0,10,10", "--viewport", "100"])

    assert result.exit_code == 1


def test_trace_command_prints_json_frames(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["trace", str(_write_script(tmp_path)), "--json"])

    assert result.exit_code == 0, result.output
    frames = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    assert [frame["position"] for frame in frames] == [
        {"x": 500.0, "y": 500.0},
        {"x": 495.0, "y": 502.0},
    ]


def test_trace_command_with_debug_writes_log(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["trace", str(_write_script(tmp_path)), "--debug", "--log-dir", str(tmp_path / "out")],
    )

    assert result.exit_code == 0, result.output
    logs = list((tmp_path / "out" / "logs").glob("trace-*.log"))
    assert len(logs) == 1
    assert "event=drag_begin" in logs[0].read_text(encoding="utf-8")


def test_trace_command_releases_debug_state_after_run(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(
        app,
        ["trace", str(_write_script(tmp_path)), "--debug", "--log-dir", str(tmp_path / "out")],
    )

    assert result.exit_code == 0, result.output
    assert camera_debug_log_path() is None
    assert camera_debug_enabled() is False


def test_trace_command_without_debug_writes_no_log(tmp_path: Path) -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["trace", str(_write_script(tmp_path)), "--log-dir", str(tmp_path / "out")])

    assert result.exit_code == 0, result.output
    assert not (tmp_path / "out").exists()


def test_trace_command_reports_bad_script(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    path.write_text("{}", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["trace", str(path)])

    assert result.exit_code == 1


def test_view_command_builds_camera_view(monkeypatch, tmp_path: Path) -> None:
    captured: dict[str, Any] = {}

    def _fake_run_view(view, **kwargs):  # noqa: ANN001, ANN003
        captured["view"] = view
        captured["kwargs"] = kwargs

    monkeypatch.setattr("scenecam.app.run_view", _fake_run_view)
    config_path = tmp_path / "camera.toml"
    config_path.write_text("scale_max = 3.0\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(
        app,
        ["view", "--width", "640", "--height", "480", "--world-size", "1024", "--config", str(config_path)],
    )

    assert result.exit_code == 0, result.output
    view = captured["view"]
    assert view.camera.scale_range == (1.0, 3.0)
    assert view.camera.viewport_size == ViewportSize(640.0, 480.0)
    assert view.camera.position.x == 512.0
    assert captured["kwargs"]["width"] == 640


def test_view_command_reports_bad_config(tmp_path: Path) -> None:
    config_path = tmp_path / "camera.toml"
    config_path.write_text("scale_min = 5.0\nscale_max = 1.0\n", encoding="utf-8")

    runner = CliRunner()
    result = runner.invoke(app, ["view", "--config", str(config_path)])

    assert result.exit_code == 1
