"""Enumerations and numeric constants for the IronPath engine.

Training constants cite their published source where one exists.
"""

from enum import Enum, IntEnum, auto

from ironpath.exceptions import InvalidInput


class UnitSystem(Enum):
    """Mass unit used for display. Internal computation is always in kg."""

    METRIC = "kg"
    IMPERIAL = "lb"

    @property
    def symbol(self) -> str:
        return self.value

    @classmethod
    def from_symbol(cls, symbol: str) -> "UnitSystem":
        """Resolve ``kg``/``lb`` (or ``metric``/``imperial``) to a UnitSystem."""
        key = symbol.strip().lower()
        for unit in cls:
            if key in (unit.value, unit.name.lower()):
                return unit
        raise InvalidInput(f"Unknown unit system: {symbol!r}")


class LiftCategory(IntEnum):
    """Lift category — selects which per-cycle increment applies."""

    UPPER = auto()
    LOWER = auto()


class CalendarMode(IntEnum):
    """How scheme rows are keyed.

    MESOCYCLE: a repeating 4-week block keyed by week-in-cycle.
    MACROCYCLE: a fixed table keyed by absolute week (12 weeks by default).
    """

    MESOCYCLE = auto()
    MACROCYCLE = auto()


# ---------------------------------------------------------------------------
# Unit conversion
# ---------------------------------------------------------------------------
# International yard and pound agreement (1959): 1 lb = 0.45359237 kg exactly
KG_PER_LB = 0.45359237

# Display values (loads, training max) are shown to one decimal place
DISPLAY_DECIMALS = 1

# Default rounding increments for working-set loads (smallest plate pair)
DEFAULT_ROUNDING_STEP = {
    UnitSystem.METRIC: 2.5,
    UnitSystem.IMPERIAL: 5.0,
}

# ---------------------------------------------------------------------------
# Wave calendar: Wendler (2009), 5/3/1: The Simplest and Most Effective
# Training System for Raw Strength
# ---------------------------------------------------------------------------
WEEKS_PER_CYCLE = 4
MACROCYCLE_WEEKS = 12

# Training max as a fraction of the 1RM
DEFAULT_TRAINING_MAX_PERCENT = 0.9

# Below this the training max is allowed but logged as unusually conservative
TRAINING_MAX_SANE_FLOOR = 0.5

# Per-cycle training-max increments: upper body 2.5 kg / 5 lb, lower body 5 kg / 10 lb
DEFAULT_LOWER_INCREMENT = {
    UnitSystem.METRIC: 5.0,
    UnitSystem.IMPERIAL: 10.0,
}
DEFAULT_UPPER_INCREMENT = {
    UnitSystem.METRIC: 2.5,
    UnitSystem.IMPERIAL: 5.0,
}

# Starting 1RMs for a fresh profile (kg)
DEFAULT_ONE_REP_MAX = {
    "squat": 170.0,
    "deadlift": 190.0,
    "bench": 115.0,
    "press": 70.0,
}

# Index of the top set within a scheme row (third set, or last of a shorter row)
TOP_SET_INDEX = 2

# ---------------------------------------------------------------------------
# 1RM estimation: Epley (1985), Poundage Chart. Boyd Epley Workout.
# ---------------------------------------------------------------------------
EPLEY_DIVISOR = 30.0
EPLEY_MIN_REPS = 1

# ---------------------------------------------------------------------------
# Pace estimation: Riegel (1981), Athletic records and human endurance.
# Am Sci 69(3):285-290
# ---------------------------------------------------------------------------
RIEGEL_EXPONENT = 1.06

TRIAL_1K_KM = 1.0
TRIAL_5K_KM = 5.0
TEMPO_DISTANCE_KM = 10.0

# Multi-station race (HYROX format): 8 x 1 km running segments
MULTI_STATION_RUN_DISTANCE_KM = 8.0

# Zone 2 band as offsets from race pace (s/km, slower)
ZONE2_SLOW_OFFSET_S = 90.0
ZONE2_FAST_OFFSET_S = 60.0

# Tempo fallback when no 5 km trial exists: race pace minus 20 s/km
TEMPO_FALLBACK_OFFSET_S = 20.0

# Interval pace blend weights
INTERVAL_WEIGHT_1K = 0.6
INTERVAL_WEIGHT_5K = 0.4

# Track split distance
SPLIT_DISTANCE_KM = 0.4

# ---------------------------------------------------------------------------
# Top-set log
# ---------------------------------------------------------------------------
DEFAULT_LOG_MAX_ENTRIES = 200

# Number of recent entries shown by the history view
HISTORY_LIMIT = 20
