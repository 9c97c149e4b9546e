"""Frozen training inputs — the sole input to WaveEngine.plan()."""

from __future__ import annotations

from dataclasses import dataclass, field

from ironpath.exceptions import InvalidInput
from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import (
    DEFAULT_LOWER_INCREMENT,
    DEFAULT_ONE_REP_MAX,
    DEFAULT_ROUNDING_STEP,
    DEFAULT_TRAINING_MAX_PERCENT,
    DEFAULT_UPPER_INCREMENT,
    LiftCategory,
    UnitSystem,
)


@dataclass(frozen=True)
class TrainingInputs:
    """Immutable snapshot of everything the wave engine needs.

    All mass values (1RMs, increments, rounding step) are in the display
    unit given by ``unit_system``. The engine converts to kg internally.
    The caller owns this object and rebuilds it on every input change.
    """

    one_rep_max: dict[str, float] = field(
        default_factory=lambda: dict(DEFAULT_ONE_REP_MAX)
    )
    training_max_percent: float = DEFAULT_TRAINING_MAX_PERCENT
    lower_increment: float = DEFAULT_LOWER_INCREMENT[UnitSystem.METRIC]
    upper_increment: float = DEFAULT_UPPER_INCREMENT[UnitSystem.METRIC]
    rounding_step: float = DEFAULT_ROUNDING_STEP[UnitSystem.METRIC]
    unit_system: UnitSystem = UnitSystem.METRIC
    position: CalendarPosition = field(default_factory=CalendarPosition)

    def one_rep_max_for(self, lift_name: str) -> float:
        try:
            return self.one_rep_max[lift_name]
        except KeyError:
            raise InvalidInput(f"No one-rep max supplied for {lift_name!r}") from None

    def increment_for(self, category: LiftCategory) -> float:
        """Per-cycle increment (display unit) for a lift category."""
        if category == LiftCategory.LOWER:
            return self.lower_increment
        return self.upper_increment
