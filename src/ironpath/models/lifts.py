"""Lift catalog — the four main lifts in training-day order."""

from __future__ import annotations

from dataclasses import dataclass

from ironpath.exceptions import InvalidInput
from ironpath.models.enums import LiftCategory


@dataclass(frozen=True)
class LiftProfile:
    """A main lift and the category that selects its increment."""

    name: str
    label: str
    category: LiftCategory


# Day 1 press, Day 2 deadlift, Day 3 bench, Day 4 squat
LIFT_CATALOG: tuple[LiftProfile, ...] = (
    LiftProfile(name="press", label="Press", category=LiftCategory.UPPER),
    LiftProfile(name="deadlift", label="Deadlift", category=LiftCategory.LOWER),
    LiftProfile(name="bench", label="Bench", category=LiftCategory.UPPER),
    LiftProfile(name="squat", label="Squat", category=LiftCategory.LOWER),
)

LIFT_NAMES: tuple[str, ...] = tuple(lift.name for lift in LIFT_CATALOG)


def get_lift(name: str) -> LiftProfile:
    """Look up a lift by name or label (case-insensitive)."""
    key = name.strip().lower()
    for lift in LIFT_CATALOG:
        if key in (lift.name, lift.label.lower()):
            return lift
    raise InvalidInput(f"Unknown lift {name!r}; expected one of {', '.join(LIFT_NAMES)}")
