"""Presentation helpers: clock strings, speeds, splits and set lines.

Every function here is total: ``None``, non-finite or non-positive input
gives the ``UNAVAILABLE`` sentinel (or ``None`` for numeric helpers)
instead of raising, so one missing trial never blanks a whole report.
"""

from __future__ import annotations

import math

from ironpath.models.enums import SPLIT_DISTANCE_KM, UnitSystem
from ironpath.models.pace import PaceTargets
from ironpath.models.wave_plan import WaveSet

UNAVAILABLE = "--"


def _positive(value: float | None) -> float | None:
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    return float(value)


def seconds_to_clock(seconds: float | None) -> str:
    """Format seconds as ``M:SS`` or ``H:MM:SS``. e.g. 1500 -> '25:00'."""
    s = _positive(seconds)
    if s is None:
        return UNAVAILABLE
    total = int(math.floor(s + 0.5))
    h, rem = divmod(total, 3600)
    m, sec = divmod(rem, 60)
    if h > 0:
        return f"{h}:{m:02d}:{sec:02d}"
    return f"{m}:{sec:02d}"


def format_pace(s_per_km: float | None) -> str:
    """Convert seconds-per-km to 'M:SS/km'. e.g. 300.0 -> '5:00/km'."""
    clock = seconds_to_clock(s_per_km)
    if clock == UNAVAILABLE:
        return UNAVAILABLE
    return f"{clock}/km"


def pace_to_speed_kph(s_per_km: float | None) -> float | None:
    """Speed in km/h for a pace in s/km, or None when unavailable."""
    pace = _positive(s_per_km)
    if pace is None:
        return None
    return 3600.0 / pace


def split_for_400m(s_per_km: float | None) -> float | None:
    """Seconds per 400 m at a given pace, or None when unavailable."""
    pace = _positive(s_per_km)
    if pace is None:
        return None
    return pace * SPLIT_DISTANCE_KM


def format_speed_kph(s_per_km: float | None) -> str:
    speed = pace_to_speed_kph(s_per_km)
    if speed is None:
        return UNAVAILABLE
    return f"{speed:.1f} km/h"


def format_split_400m(s_per_km: float | None) -> str:
    return seconds_to_clock(split_for_400m(s_per_km))


def format_pace_targets(targets: PaceTargets) -> dict[str, dict[str, str]]:
    """Pace, speed and 400 m split strings for each displayed target."""
    return {
        name: {
            "pace": format_pace(value),
            "kph": format_speed_kph(value),
            "split_400m": format_split_400m(value),
        }
        for name, value in targets.training_targets().items()
    }


def format_load(value: float | None, unit_system: UnitSystem) -> str:
    """e.g. 100.0 -> '100.0 kg'."""
    if value is None or not math.isfinite(value):
        return UNAVAILABLE
    return f"{value:.1f} {unit_system.symbol}"


def format_set(index: int, wave_set: WaveSet, unit_system: UnitSystem) -> str:
    """e.g. ``S3: 130.0 kg @ 85% × 5+`` (``+`` marks the AMRAP set)."""
    reps = f"{wave_set.target_reps}+" if wave_set.is_amrap else str(wave_set.target_reps)
    return (
        f"S{index}: {format_load(wave_set.load_display, unit_system)} "
        f"@ {wave_set.percent_of_tm * 100:.0f}% × {reps}"
    )
