"""Input boundary — turns loosely-typed caller data into validated models.

This is the only place values are coerced or clamped. The engine itself
rejects bad values instead of silently fixing them, so anything clamped
here is visible in the inputs the engine receives.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional

from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import (
    DEFAULT_LOWER_INCREMENT,
    DEFAULT_ONE_REP_MAX,
    DEFAULT_ROUNDING_STEP,
    DEFAULT_TRAINING_MAX_PERCENT,
    DEFAULT_UPPER_INCREMENT,
    MACROCYCLE_WEEKS,
    MULTI_STATION_RUN_DISTANCE_KM,
    UnitSystem,
)
from ironpath.models.lifts import LIFT_NAMES
from ironpath.models.pace import PaceInputs
from ironpath.models.training import TrainingInputs

logger = logging.getLogger(__name__)

_CLOCK_RE = re.compile(r"^\d+(?::\d{1,2}){0,1}:\d{1,2}(?:\.\d+)?$")


def parse_clock(text: Any) -> Optional[float]:
    """Parse ``mm:ss`` or ``hh:mm:ss`` into seconds.

    Seconds may be fractional (``4:05.5``). Minutes and seconds after the
    leading field must be below 60. Returns None for anything malformed;
    never raises.
    """
    if not isinstance(text, str):
        return None
    cleaned = text.strip()
    if not _CLOCK_RE.match(cleaned):
        return None

    parts = cleaned.split(":")
    try:
        *leading, last = parts
        seconds = float(last)
        fields = [int(p) for p in leading]
    except ValueError:
        return None

    if seconds >= 60:
        return None
    if len(fields) == 2 and fields[1] >= 60:
        return None

    total = seconds
    multiplier = 60
    for field_value in reversed(fields):
        total += field_value * multiplier
        multiplier *= 60
    return total


def coerce_number(value: Any, default: float = 0.0) -> float:
    """Best-effort float conversion; non-numeric or non-finite gives *default*."""
    if isinstance(value, bool) or value is None:
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def clamp_week(value: Any, total_weeks: int = MACROCYCLE_WEEKS) -> int:
    """Integer week clamped to ``[1, total_weeks]``; junk becomes week 1."""
    week = int(coerce_number(value, default=1.0)) or 1
    clamped = min(total_weeks, max(1, week))
    if clamped != week:
        logger.info("Clamped week %d to %d", week, clamped)
    return clamped


def build_training_inputs(
    profile: dict,
    total_weeks: int | None = MACROCYCLE_WEEKS,
) -> TrainingInputs:
    """Build TrainingInputs from a profile dict (file, form or CLI values).

    Recognised keys: ``units``, ``one_rep_max`` (lift → value),
    ``training_max_percent``, ``lower_increment``, ``upper_increment``,
    ``rounding_step``, and either ``week`` (absolute) or ``cycle`` +
    ``week_in_cycle``. Missing keys fall back to defaults; values that are
    present but unparseable become 0 and are left for the engine to judge.
    The rounding step and increment defaults depend on ``units``.
    ``total_weeks`` of None means no upper bound on the cycle (repeating
    mesocycle).
    """
    units = profile.get("units", UnitSystem.METRIC)
    unit_system = units if isinstance(units, UnitSystem) else UnitSystem.from_symbol(str(units))

    def number(source: dict, key: str, default: float) -> float:
        value = source.get(key)
        if value is None:
            return default
        return coerce_number(value)

    raw_orm = profile.get("one_rep_max") or {}
    one_rep_max = {
        name: number(raw_orm, name, DEFAULT_ONE_REP_MAX[name]) for name in LIFT_NAMES
    }

    if "cycle" in profile or "week_in_cycle" in profile:
        cycle = max(1, int(coerce_number(profile.get("cycle"), default=1.0)))
        week_in_cycle = clamp_week(profile.get("week_in_cycle"), total_weeks=4)
        position = CalendarPosition(cycle=cycle, week_in_cycle=week_in_cycle)
        if total_weeks is not None and position.absolute_week > total_weeks:
            position = CalendarPosition.from_absolute_week(total_weeks)
    else:
        upper = total_weeks if total_weeks is not None else 10**6
        position = CalendarPosition.from_absolute_week(clamp_week(profile.get("week"), upper))

    return TrainingInputs(
        one_rep_max=one_rep_max,
        training_max_percent=number(
            profile, "training_max_percent", DEFAULT_TRAINING_MAX_PERCENT
        ),
        lower_increment=number(
            profile, "lower_increment", DEFAULT_LOWER_INCREMENT[unit_system]
        ),
        upper_increment=number(
            profile, "upper_increment", DEFAULT_UPPER_INCREMENT[unit_system]
        ),
        rounding_step=number(profile, "rounding_step", DEFAULT_ROUNDING_STEP[unit_system]),
        unit_system=unit_system,
        position=position,
    )


def build_pace_inputs(raw: dict) -> PaceInputs:
    """Build PaceInputs from clock strings or seconds.

    Keys: ``one_km``, ``five_km``, ``multi_station_total``,
    ``station_overhead`` (each ``mm:ss``/``hh:mm:ss`` text or seconds) and
    ``running_distance_km``. Malformed clocks become unavailable trials;
    a malformed overhead counts as zero.
    """

    def trial(key: str) -> Optional[float]:
        value = raw.get(key)
        if value is None or value == "":
            return None
        if isinstance(value, str):
            return parse_clock(value)
        number = coerce_number(value, default=0.0)
        return number if number > 0 else None

    overhead = trial("station_overhead") or 0.0
    return PaceInputs(
        one_km_trial_s=trial("one_km"),
        five_km_trial_s=trial("five_km"),
        multi_station_total_s=trial("multi_station_total"),
        station_overhead_s=overhead,
        running_distance_km=coerce_number(
            raw.get("running_distance_km"), MULTI_STATION_RUN_DISTANCE_KM
        ),
    )
