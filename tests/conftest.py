"""Shared test fixtures: training inputs, engines, log entries."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from ironpath.engine import WaveEngine
from ironpath.math.wave_table import macrocycle_table, mesocycle_table
from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import UnitSystem
from ironpath.models.top_set_log import TopSet, TopSetLog, TopSetLogEntry
from ironpath.models.training import TrainingInputs


@pytest.fixture
def metric_inputs() -> TrainingInputs:
    """Default profile: squat 170, deadlift 190, bench 115, press 70 kg; TM 90%; week 1."""
    return TrainingInputs(
        one_rep_max={"squat": 170.0, "deadlift": 190.0, "bench": 115.0, "press": 70.0},
        training_max_percent=0.9,
        lower_increment=5.0,
        upper_increment=2.5,
        rounding_step=2.5,
        unit_system=UnitSystem.METRIC,
        position=CalendarPosition(cycle=1, week_in_cycle=1),
    )


@pytest.fixture
def imperial_inputs() -> TrainingInputs:
    """Same lifter in pounds: squat 375, deadlift 420, bench 255, press 155 lb; 5 lb plates."""
    return TrainingInputs(
        one_rep_max={"squat": 375.0, "deadlift": 420.0, "bench": 255.0, "press": 155.0},
        training_max_percent=0.9,
        lower_increment=10.0,
        upper_increment=5.0,
        rounding_step=5.0,
        unit_system=UnitSystem.IMPERIAL,
        position=CalendarPosition(cycle=1, week_in_cycle=1),
    )


@pytest.fixture
def engine() -> WaveEngine:
    """Engine on the 12-week race calendar."""
    return WaveEngine(macrocycle_table())


@pytest.fixture
def mesocycle_engine() -> WaveEngine:
    """Engine on the repeating 4-week wave."""
    return WaveEngine(mesocycle_table())


@pytest.fixture
def fixed_timestamp() -> datetime:
    return datetime(2026, 3, 2, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def entry_factory(fixed_timestamp: datetime) -> Callable[..., TopSetLogEntry]:
    """Factory fixture for log entries.

    Usage:
        entry = entry_factory(lift_name="bench", actual_reps=7)
    """

    def factory(
        lift_name: str = "squat",
        absolute_week: int = 1,
        load_display: float = 130.0,
        target_reps: int = 5,
        actual_reps: int = 8,
        unit_system: UnitSystem = UnitSystem.METRIC,
    ) -> TopSetLogEntry:
        position = CalendarPosition.from_absolute_week(absolute_week)
        return TopSetLogEntry(
            timestamp=fixed_timestamp,
            cycle=position.cycle,
            week_in_cycle=position.week_in_cycle,
            absolute_week=absolute_week,
            lift_name=lift_name,
            training_max_display=153.0,
            unit_system=unit_system,
            top_set=TopSet(
                percent_of_tm=0.85,
                load_display=load_display,
                target_reps=target_reps,
                actual_reps=actual_reps,
                estimated_one_rep_max=round(load_display * (1 + actual_reps / 30), 1),
            ),
        )

    return factory


@pytest.fixture
def sample_log(entry_factory: Callable[..., TopSetLogEntry]) -> TopSetLog:
    """Three entries, newest first: squat wk3, bench wk2, press wk1."""
    log = TopSetLog()
    log = log.append(entry_factory(lift_name="press", absolute_week=1, load_display=52.5))
    log = log.append(entry_factory(lift_name="bench", absolute_week=2, load_display=92.5))
    log = log.append(entry_factory(lift_name="squat", absolute_week=3, load_display=145.0))
    return log
