"""Training-max and working-set arithmetic for the 5/3/1 wave.

Training max (kg):
    TM = 1RM_kg * tm_percent + (cycle - 1) * increment_kg

Working set (kg):
    load = round_to_step(TM * percent, step_kg)

The training max keeps full precision; only set loads are rounded to the
plate increment. Display values are rounded to one decimal.
"""

from __future__ import annotations

import math

import numpy as np

from ironpath.exceptions import InvalidConfiguration, InvalidInput
from ironpath.math.units import from_canonical_kg, round_display, round_to_step, to_canonical_kg
from ironpath.models.enums import UnitSystem
from ironpath.models.wave_plan import WaveScheme, WaveSet


def validate_training_max_percent(tm_percent: float) -> float:
    """Reject training-max percents outside (0, 1]. Never clamps."""
    if not math.isfinite(tm_percent) or not 0.0 < tm_percent <= 1.0:
        raise InvalidConfiguration(
            f"Training max percent must be in (0, 1], got {tm_percent!r}"
        )
    return float(tm_percent)


def training_max_kg(
    one_rep_max: float,
    tm_percent: float,
    cycle: int,
    increment: float,
    unit_system: UnitSystem,
) -> float:
    """Calculate a lift's training max in kilograms.

    Each completed 4-week cycle adds one increment to the training max
    before any set percentage is applied.

    Args:
        one_rep_max: 1RM in the display unit.
        tm_percent: Training max as a fraction of 1RM, in (0, 1].
        cycle: 1-indexed mesocycle number.
        increment: Per-cycle increment in the display unit.
        unit_system: Display unit of *one_rep_max* and *increment*.

    Returns:
        Training max in kg, unrounded.

    Raises:
        InvalidInput: If a mass is non-finite or the increment is negative.
        InvalidConfiguration: If *tm_percent* is outside (0, 1].
    """
    tm_percent = validate_training_max_percent(tm_percent)
    if cycle < 1:
        raise InvalidInput(f"cycle must be >= 1, got {cycle}")
    orm_kg = to_canonical_kg(one_rep_max, unit_system)
    increment_kg = to_canonical_kg(increment, unit_system)
    if increment_kg < 0:
        raise InvalidConfiguration(f"Increment must be non-negative, got {increment}")
    return orm_kg * tm_percent + (cycle - 1) * increment_kg


def build_sets(
    tm_kg: float,
    scheme: WaveScheme,
    step_kg: float,
    unit_system: UnitSystem,
) -> tuple[WaveSet, ...]:
    """Build the rounded working sets for one scheme row.

    Args:
        tm_kg: Training max in kg.
        scheme: Percentage/rep row for the week.
        step_kg: Rounding increment in kg.
        unit_system: Unit used for the display loads.

    Returns:
        One WaveSet per scheme entry, in order. Only the last set of an
        AMRAP row is flagged ``is_amrap``.
    """
    percentages = np.asarray(scheme.percentages, dtype=np.float64)
    loads_kg = round_to_step(tm_kg * percentages, step_kg)

    last = scheme.set_count - 1
    sets: list[WaveSet] = []
    for i, (pct, reps) in enumerate(zip(scheme.percentages, scheme.reps)):
        load_kg = float(loads_kg[i])
        sets.append(
            WaveSet(
                percent_of_tm=pct,
                target_reps=reps,
                load_kg=load_kg,
                load_display=round_display(from_canonical_kg(load_kg, unit_system)),
                is_amrap=scheme.amrap and i == last,
            )
        )
    return tuple(sets)
