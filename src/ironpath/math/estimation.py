"""One-rep-max estimation from a submaximal set.

Reference:
    Epley (1985). Poundage Chart. Boyd Epley Workout. Lincoln, NE.
    1RM = load * (1 + reps / 30)
"""

from __future__ import annotations

import math

from ironpath.models.enums import EPLEY_DIVISOR, EPLEY_MIN_REPS


def epley(load: float, reps: float) -> float:
    """Estimate a one-rep max with the Epley formula.

    Reps below 1 count as 1, so the estimate is never below the load lifted.
    Non-positive or non-finite loads give 0.0, never a negative or NaN.

    Args:
        load: Weight lifted, any unit (the result is in the same unit).
        reps: Repetitions completed.

    Returns:
        Estimated 1RM in the unit of *load*.
    """
    if not math.isfinite(load) or load <= 0:
        return 0.0
    effective_reps = reps if math.isfinite(reps) else EPLEY_MIN_REPS
    effective_reps = max(EPLEY_MIN_REPS, effective_reps)
    if effective_reps == EPLEY_MIN_REPS:
        # A single is the 1RM itself
        return float(load)
    return load * (1.0 + effective_reps / EPLEY_DIVISOR)
