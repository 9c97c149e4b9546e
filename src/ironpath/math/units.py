"""Mass-unit conversion and load rounding.

Internal computation is always in kilograms; conversion happens only at the
edges. Rounding is half-away-from-zero (not banker's rounding) so that a
load exactly between two plate increments always goes up.
"""

from __future__ import annotations

import math

import numpy as np

from ironpath.exceptions import InvalidConfiguration, InvalidInput
from ironpath.models.enums import DISPLAY_DECIMALS, KG_PER_LB, UnitSystem


def _require_finite(value: float, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
        raise InvalidInput(f"{what} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidInput(f"{what} must be finite, got {value!r}")
    return float(value)


def to_canonical_kg(value: float, unit_system: UnitSystem) -> float:
    """Convert a display-unit mass to kilograms.

    Args:
        value: Mass in the display unit.
        unit_system: The display unit system.

    Returns:
        Mass in kilograms (identity for metric).

    Raises:
        InvalidInput: If *value* is not a finite number.
    """
    v = _require_finite(value, "value")
    if unit_system == UnitSystem.IMPERIAL:
        return v * KG_PER_LB
    return v


def from_canonical_kg(kg: float, unit_system: UnitSystem) -> float:
    """Convert kilograms to the display unit. Inverse of to_canonical_kg()."""
    v = _require_finite(kg, "kg")
    if unit_system == UnitSystem.IMPERIAL:
        return v / KG_PER_LB
    return v


def round_to_step(value, step: float):
    """Round *value* to the nearest multiple of *step*, halves away from zero.

    Accepts a scalar or an array-like; a scalar in gives a float out, an
    array-like in gives a numpy array out.

    Args:
        value: Load(s) to round.
        step: Rounding increment, same unit as *value*.

    Returns:
        The rounded load(s).

    Raises:
        InvalidConfiguration: If *step* is not a positive finite number.
        InvalidInput: If any value is non-finite.
    """
    if (
        isinstance(step, bool)
        or not isinstance(step, (int, float, np.number))
        or not math.isfinite(step)
        or step <= 0
    ):
        raise InvalidConfiguration(f"Rounding step must be positive, got {step!r}")

    arr = np.asarray(value, dtype=np.float64)
    if not np.all(np.isfinite(arr)):
        raise InvalidInput(f"Cannot round non-finite load {value!r}")

    multiples = np.floor(np.abs(arr) / step + 0.5)
    rounded = np.sign(arr) * multiples * step
    if rounded.ndim == 0:
        return float(rounded)
    return rounded


def round_display(value: float, decimals: int = DISPLAY_DECIMALS) -> float:
    """Round a value for presentation (one decimal by default), halves away from zero."""
    v = _require_finite(value, "value")
    scale = 10**decimals
    return math.copysign(math.floor(abs(v) * scale + 0.5) / scale, v)
