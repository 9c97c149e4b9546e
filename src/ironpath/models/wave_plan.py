"""Wave plan models: scheme rows and the computed per-lift plan."""

from __future__ import annotations

from dataclasses import dataclass, field

from ironpath.exceptions import InvalidConfiguration, InvalidInput
from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import TOP_SET_INDEX, UnitSystem
from ironpath.models.lifts import LiftProfile


@dataclass(frozen=True)
class WaveScheme:
    """One row of the percentage/rep table.

    ``amrap`` marks the last set's target reps as a floor, not a ceiling.
    """

    label: str
    percentages: tuple[float, ...]
    reps: tuple[int, ...]
    amrap: bool = False

    def __post_init__(self) -> None:
        if len(self.percentages) != len(self.reps):
            raise InvalidConfiguration(
                f"Scheme {self.label!r} has {len(self.percentages)} percentages "
                f"but {len(self.reps)} rep targets"
            )
        if not self.percentages:
            raise InvalidConfiguration(f"Scheme {self.label!r} has no sets")

    @property
    def set_count(self) -> int:
        return len(self.percentages)


@dataclass(frozen=True)
class WaveSet:
    """A single prescribed working set."""

    percent_of_tm: float
    target_reps: int
    load_kg: float
    load_display: float
    is_amrap: bool = False


@dataclass(frozen=True)
class LiftPlan:
    """Training max and working sets for one lift in one week."""

    lift: LiftProfile
    training_max_kg: float
    training_max_display: float
    sets: tuple[WaveSet, ...] = field(default_factory=tuple)

    @property
    def top_set(self) -> WaveSet:
        """The logged set: the third, or the last of a shorter (taper) row."""
        return self.sets[min(len(self.sets) - 1, TOP_SET_INDEX)]


@dataclass(frozen=True)
class WavePlan:
    """Output of WaveEngine.plan(): every lift for one calendar position.

    Recomputed from scratch on every input change; never mutated.
    """

    position: CalendarPosition
    scheme: WaveScheme
    unit_system: UnitSystem
    lifts: tuple[LiftPlan, ...] = field(default_factory=tuple)

    def for_lift(self, name: str) -> LiftPlan:
        for lift_plan in self.lifts:
            if lift_plan.lift.name == name:
                return lift_plan
        raise InvalidInput(f"Lift {name!r} is not part of this plan")

    @property
    def header(self) -> str:
        """e.g. ``Week 5 • Cycle 2 • 5s``."""
        return (
            f"Week {self.position.absolute_week} • Cycle {self.position.cycle} "
            f"• {self.scheme.label}"
        )
