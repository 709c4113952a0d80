"""
Minimal smoke tests for lift-tracker CLI.

Tests basic functionality:
- App runs without errors
- History file creates
- Sets can be logged, listed, exported, renamed and deleted
- Plan, next-session advice and 1RM estimates are shown
"""

import json

import pytest
from typer.testing import CliRunner

from lift_tracker.cli.main import app


runner = CliRunner()


@pytest.fixture
def history_path(tmp_path, monkeypatch):
    """Initialised history file; HOME redirected so no user config is read."""
    monkeypatch.setenv("HOME", str(tmp_path))
    path = tmp_path / "history.jsonl"
    result = runner.invoke(app, ["init", "--history-path", str(path)])
    assert result.exit_code == 0
    return path


def _log(history_path, exercise, sets, timestamp, *extra):
    return runner.invoke(app, [
        "log", exercise,
        "--sets", sets,
        "--timestamp", timestamp,
        "--history-path", str(history_path),
        *extra,
    ])


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "plan" in result.output

    def test_init_creates_history(self, history_path):
        assert history_path.exists()

    def test_log_adds_numbered_sets(self, history_path):
        result = _log(history_path, "Squats", "80x8,80x8", "2026-03-02T10:00:00")
        assert result.exit_code == 0
        assert "Logged" in result.output

        # next free set number on the same day
        result = _log(history_path, "Squats", "80x7", "2026-03-02T10:05:00")
        assert result.exit_code == 0

        rows = [json.loads(line) for line in history_path.read_text().splitlines()]
        assert [r["set_number"] for r in rows] == [1, 2, 3]

    def test_log_invalid_sets(self, history_path):
        result = _log(history_path, "Squats", "eighty", "2026-03-02T10:00:00")
        assert result.exit_code == 1
        assert "Invalid set" in result.output

    def test_log_rejects_blank_exercise(self, history_path):
        result = _log(history_path, "  ", "80x8", "2026-03-02T10:00:00")
        assert result.exit_code == 1
        assert history_path.read_text() == ""

    @pytest.mark.parametrize("bodyweight", ["nan", "inf", "0"])
    def test_log_rejects_bad_bodyweight(self, history_path, bodyweight):
        result = _log(history_path, "Chin Up", "5x8", "2026-03-02T10:00:00", "-w", bodyweight)
        assert result.exit_code == 1
        assert history_path.read_text() == ""

        result = runner.invoke(app, [
            "plan", "--date", "2026-03-03", "--history-path", str(history_path),
        ])
        assert result.exit_code == 0

    def test_log_strips_exercise_name(self, history_path):
        _log(history_path, "Squats", "80x8", "2026-03-02T10:00:00")
        result = _log(history_path, " Squats ", "80x8", "2026-03-02T10:05:00")
        assert result.exit_code == 0

        rows = [json.loads(line) for line in history_path.read_text().splitlines()]
        assert [(r["exercise"], r["set_number"]) for r in rows] == [("Squats", 1), ("Squats", 2)]

    def test_log_without_init_fails(self, tmp_path):
        result = _log(tmp_path / "nope.jsonl", "Squats", "80x8", "2026-03-02T10:00:00")
        assert result.exit_code == 1

    def test_plan_shows_progression(self, history_path):
        _log(history_path, "Squats", "80x8,80x8,80x8", "2026-03-02T10:00:00")

        result = runner.invoke(app, [
            "plan", "--date", "2026-03-03", "--history-path", str(history_path),
        ])
        assert result.exit_code == 0
        assert "Squats" in result.output
        assert "82.0 kg" in result.output
        assert "increase" in result.output
        assert "Rest 90s between sets" in result.output

    def test_next_previews_tomorrow(self, history_path):
        _log(history_path, "Squats", "80x8,80x8,80x8", "2026-03-02T10:00:00")

        result = runner.invoke(app, [
            "next", "--date", "2026-03-02", "--history-path", str(history_path),
        ])
        assert result.exit_code == 0
        assert "increase" in result.output

    def test_show_history_json(self, history_path):
        _log(history_path, "Chin Up", "5x8", "2026-03-02T10:00:00", "--bodyweight-kg", "80")

        result = runner.invoke(app, ["show-history", "--json", "--history-path", str(history_path)])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0]["exercise"] == "Chin Up"
        assert data[0]["bodyweight_kg"] == 80.0

    def test_export_csv(self, history_path, tmp_path):
        _log(history_path, "Squats", "80x8", "2026-03-02T10:00:00")
        out = tmp_path / "history.csv"

        result = runner.invoke(app, [
            "export-csv", "--output", str(out), "--history-path", str(history_path),
        ])
        assert result.exit_code == 0
        assert out.read_text().splitlines()[1] == "Squats,1,80.0,,8,2026-03-02T10:00:00"

    def test_mark_day(self, history_path):
        result = runner.invoke(app, [
            "mark-day", "sick", "--date", "2026-03-04", "--history-path", str(history_path),
        ])
        assert result.exit_code == 0
        row = json.loads(history_path.read_text().splitlines()[0])
        assert row["type"] == "sick"

    def test_mark_day_rejects_unknown_kind(self, history_path):
        result = runner.invoke(app, ["mark-day", "holiday", "--history-path", str(history_path)])
        assert result.exit_code == 1

    def test_rename_updates_plan(self, history_path):
        _log(history_path, "Squats", "80x8", "2026-03-02T10:00:00")

        result = runner.invoke(app, [
            "rename", "Squats", "Back Squat", "--history-path", str(history_path),
        ])
        assert result.exit_code == 0

        result = runner.invoke(app, [
            "plan", "--date", "2026-03-03", "--history-path", str(history_path),
        ])
        assert "Back Squat" in result.output

    def test_delete_entry(self, history_path):
        _log(history_path, "Squats", "80x8", "2026-03-02T10:00:00")

        result = runner.invoke(app, [
            "delete-entry", "Squats", "1", "2026-03-02T10:00:00", "--force",
            "--history-path", str(history_path),
        ])
        assert result.exit_code == 0
        assert history_path.read_text().strip() == ""

    def test_estimate_1rm(self, history_path):
        for day in ("2026-03-02", "2026-03-04", "2026-03-06"):
            _log(history_path, "Bench Press", "60x8,60x8,60x8", f"{day}T10:00:00")

        result = runner.invoke(app, ["estimate-1rm", "Bench Press", "--history-path", str(history_path)])
        assert result.exit_code == 0
        assert "73.9" in result.output

    def test_estimate_1rm_unknown_exercise(self, history_path):
        result = runner.invoke(app, ["estimate-1rm", "Farmers Carry", "--history-path", str(history_path)])
        assert result.exit_code == 0
        assert "n/a" in result.output
