"""Calendar position — a week within the periodization calendar.

A position is stored as (cycle, week_in_cycle) and can be built from or
converted to an absolute week number:

    absolute_week = (cycle - 1) * WEEKS_PER_CYCLE + week_in_cycle
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ironpath.exceptions import InvalidInput
from ironpath.models.enums import WEEKS_PER_CYCLE


@dataclass(frozen=True)
class CalendarPosition:
    """A (cycle, week-in-cycle) pair, both 1-indexed."""

    cycle: int = 1
    week_in_cycle: int = 1

    def __post_init__(self) -> None:
        if isinstance(self.cycle, bool) or not isinstance(self.cycle, int):
            raise InvalidInput(f"cycle must be an integer, got {self.cycle!r}")
        if isinstance(self.week_in_cycle, bool) or not isinstance(self.week_in_cycle, int):
            raise InvalidInput(
                f"week_in_cycle must be an integer, got {self.week_in_cycle!r}"
            )
        if self.cycle < 1:
            raise InvalidInput(f"cycle must be >= 1, got {self.cycle}")
        if not 1 <= self.week_in_cycle <= WEEKS_PER_CYCLE:
            raise InvalidInput(
                f"week_in_cycle must be in [1, {WEEKS_PER_CYCLE}], "
                f"got {self.week_in_cycle}"
            )

    @classmethod
    def from_absolute_week(cls, week: int) -> CalendarPosition:
        """Build a position from a 1-indexed absolute week.

        Weeks 1-4 fall in cycle 1, 5-8 in cycle 2, 9-12 in cycle 3.
        """
        if isinstance(week, bool) or not isinstance(week, int):
            raise InvalidInput(f"week must be an integer, got {week!r}")
        if week < 1:
            raise InvalidInput(f"week must be >= 1, got {week}")
        cycle = math.ceil(week / WEEKS_PER_CYCLE)
        return cls(cycle=cycle, week_in_cycle=week - (cycle - 1) * WEEKS_PER_CYCLE)

    @property
    def absolute_week(self) -> int:
        return (self.cycle - 1) * WEEKS_PER_CYCLE + self.week_in_cycle

