"""Tests for the ironpath command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ironpath.cli import main
from ironpath.serialization.log_export import CSV_COLUMNS

_ENV_KEYS = (
    "IRONPATH_UNITS",
    "IRONPATH_ROUNDING_STEP",
    "IRONPATH_TM_PERCENT",
    "IRONPATH_LOWER_INCREMENT",
    "IRONPATH_UPPER_INCREMENT",
    "IRONPATH_CALENDAR",
    "IRONPATH_LOG_MAX_ENTRIES",
    "IRONPATH_LOG_LEVEL",
)


@pytest.fixture
def log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate the CLI from the caller's environment and home directory."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    path = tmp_path / "top_set_log.json"
    monkeypatch.setenv("IRONPATH_LOG_FILE", str(path))
    return path


class TestWave:
    def test_week_one(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["wave", "--week", "1"]) == 0
        out = capsys.readouterr().out
        assert "Week 1 • Cycle 1 • 5s" in out
        assert "Day 4: Squat (TM 153.0 kg)" in out
        assert "S3: 130.0 kg @ 85% × 5+" in out

    def test_imperial_override(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["wave", "--units", "lb", "--orm", "squat=375"]) == 0
        out = capsys.readouterr().out
        assert "Squat (TM 337.5 lb)" in out
        assert "S3: 285.0 lb @ 85% × 5+" in out

    def test_unit_switch_uses_unit_increments(
        self, log_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["wave", "--units", "lb", "--orm", "squat=375", "--week", "5"]) == 0
        assert "Squat (TM 347.5 lb)" in capsys.readouterr().out

    def test_week_clamped_to_taper(
        self, log_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["wave", "--week", "30"]) == 0
        out = capsys.readouterr().out
        assert "Week 12 • Cycle 3 • Taper" in out
        assert "S3:" not in out

    def test_repeating_calendar(
        self,
        log_file: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("IRONPATH_CALENDAR", "4")
        assert main(["wave", "--cycle", "5", "--week-in-cycle", "4"]) == 0
        assert "Week 20 • Cycle 5 • Deload" in capsys.readouterr().out

    def test_bad_configuration_exits_2(
        self, log_file: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("IRONPATH_CALENDAR", "99")
        assert main(["wave"]) == 2

    def test_bad_training_max_exits_2(self, log_file: Path) -> None:
        assert main(["wave", "--tm", "1.5"]) == 2


class TestPaceAndEstimate:
    def test_pace_from_5k(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["pace", "--5k", "25:00"]) == 0
        out = capsys.readouterr().out
        assert "Race pace" in out
        assert "4:46/km" in out
        assert "Intervals" in out

    def test_pace_without_trials_exits_2(self, log_file: Path) -> None:
        assert main(["pace", "--5k", "soon"]) == 2

    def test_e1rm(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["e1rm", "100", "8"]) == 0
        assert capsys.readouterr().out.strip() == "126.7"

    def test_e1rm_unavailable(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["e1rm", "0", "5"]) == 0
        assert capsys.readouterr().out.strip() == "--"


class TestLogCommands:
    def test_log_then_export_csv(
        self, log_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["log", "squat", "8", "--week", "1"]) == 0
        out = capsys.readouterr().out
        assert "squat W1/C1: 130.0 kg @ 85% × 5 → 8 reps" in out
        assert "e1RM 164.7 kg" in out
        assert log_file.exists()

        assert main(["export", "--format", "csv"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines[0] == ",".join(CSV_COLUMNS)
        assert len(lines) == 2
        assert ",squat,kg,153.0,0.85,130.0,5,8,164.7" in lines[1]

    def test_export_to_file(self, log_file: Path, tmp_path: Path) -> None:
        assert main(["log", "bench", "6", "--week", "2"]) == 0
        output = tmp_path / "export.json"
        assert main(["export", "--output", str(output)]) == 0
        raw = json.loads(output.read_text(encoding="utf-8"))
        assert raw[0]["lift_name"] == "bench"
        assert raw[0]["absolute_week"] == 2

    def test_clear(self, log_file: Path) -> None:
        assert main(["log", "press", "5"]) == 0
        assert main(["clear"]) == 0
        assert json.loads(log_file.read_text(encoding="utf-8")) == []

    def test_clear_recovers_corrupt_log(self, log_file: Path) -> None:
        log_file.write_text("{truncated", encoding="utf-8")
        assert main(["export"]) == 2
        assert main(["clear"]) == 0
        assert json.loads(log_file.read_text(encoding="utf-8")) == []

    def test_unknown_lift_exits_2(self, log_file: Path) -> None:
        assert main(["log", "snatch", "5"]) == 2
        assert not log_file.exists()


class TestHistory:
    @pytest.fixture
    def two_entries(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["log", "squat", "8", "--week", "1"]) == 0
        assert main(["log", "bench", "6", "--week", "2"]) == 0
        capsys.readouterr()

    def test_newest_first_with_best_estimates(
        self, two_entries: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["history"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("bench")
        assert "W2/C1  92.5 kg × 3 → 6*  e1RM 111.0 kg" in lines[0]
        assert lines[1].startswith("squat")
        assert "W1/C1  130.0 kg × 5 → 8*  e1RM 164.7 kg" in lines[1]
        assert lines[2] == "Best e1RM:"
        assert "squat     164.7 kg" in lines[4]

    def test_unmarked_when_target_not_beaten(
        self, log_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["log", "press", "5", "--week", "1"]) == 0
        capsys.readouterr()
        assert main(["history"]) == 0
        assert "→ 5  e1RM" in capsys.readouterr().out

    def test_limit(self, two_entries: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["history", "--limit", "1"]) == 0
        out = capsys.readouterr().out
        assert "W2/C1" in out
        assert "W1/C1" not in out

    def test_filter_by_lift(self, two_entries: None, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["history", "--lift", "Squat"]) == 0
        out = capsys.readouterr().out
        assert "squat" in out
        assert "bench" not in out

    def test_empty_log(self, log_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["history"]) == 0
        assert capsys.readouterr().out.strip() == "No top sets logged"

    def test_unknown_lift_exits_2(self, two_entries: None) -> None:
        assert main(["history", "--lift", "snatch"]) == 2
