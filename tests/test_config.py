"""Tests for environment-variable configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from ironpath.config import Settings, load_settings
from ironpath.exceptions import InvalidConfiguration
from ironpath.models.enums import CalendarMode, UnitSystem


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings({})
        assert settings == Settings()
        assert settings.unit_system == UnitSystem.METRIC
        assert settings.rounding_step == 2.5
        assert settings.calendar_mode == CalendarMode.MACROCYCLE
        assert settings.calendar_weeks == 12
        assert settings.log_max_entries == 200
        assert settings.log_level == "INFO"

    def test_imperial_step_default(self) -> None:
        settings = load_settings({"IRONPATH_UNITS": "lb"})
        assert settings.unit_system == UnitSystem.IMPERIAL
        assert settings.rounding_step == 5.0
        assert settings.lower_increment == 10.0
        assert settings.upper_increment == 5.0

    def test_overrides(self, tmp_path: Path) -> None:
        settings = load_settings(
            {
                "IRONPATH_ROUNDING_STEP": "1.25",
                "IRONPATH_TM_PERCENT": "0.85",
                "IRONPATH_LOWER_INCREMENT": "10",
                "IRONPATH_UPPER_INCREMENT": "5",
                "IRONPATH_LOG_MAX_ENTRIES": "500",
                "IRONPATH_LOG_FILE": str(tmp_path / "log.json"),
                "IRONPATH_LOG_LEVEL": "debug",
            }
        )
        assert settings.rounding_step == 1.25
        assert settings.training_max_percent == 0.85
        assert settings.lower_increment == 10.0
        assert settings.upper_increment == 5.0
        assert settings.log_max_entries == 500
        assert settings.log_file == tmp_path / "log.json"
        assert settings.log_level == "DEBUG"

    def test_repeating_calendar(self) -> None:
        settings = load_settings({"IRONPATH_CALENDAR": "4"})
        assert settings.calendar_mode == CalendarMode.MESOCYCLE

    def test_short_calendar(self) -> None:
        settings = load_settings({"IRONPATH_CALENDAR": "8"})
        assert settings.calendar_mode == CalendarMode.MACROCYCLE
        assert settings.calendar_weeks == 8

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("IRONPATH_TM_PERCENT", "0.8")
        assert load_settings().training_max_percent == 0.8

    def test_blank_value_uses_default(self) -> None:
        assert load_settings({"IRONPATH_TM_PERCENT": " "}).training_max_percent == 0.9

    @pytest.mark.parametrize(
        "environ",
        [
            {"IRONPATH_UNITS": "stone"},
            {"IRONPATH_CALENDAR": "13"},
            {"IRONPATH_CALENDAR": "0"},
            {"IRONPATH_CALENDAR": "twelve"},
            {"IRONPATH_TM_PERCENT": "ninety"},
            {"IRONPATH_LOG_MAX_ENTRIES": "0"},
        ],
    )
    def test_invalid_raises(self, environ: dict[str, str]) -> None:
        with pytest.raises(InvalidConfiguration):
            load_settings(environ)

    def test_profile_defaults(self) -> None:
        profile = load_settings({"IRONPATH_UNITS": "lb"}).profile_defaults()
        assert profile["units"] == UnitSystem.IMPERIAL
        assert profile["rounding_step"] == 5.0
