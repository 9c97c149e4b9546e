"""Percentage/rep scheme tables for the 5/3/1 wave.

The table is data, not branching logic: a 4-week mesocycle table keyed by
week-in-cycle, and a 12-week macrocycle table keyed by absolute week that
ends with a race-prep week and a two-set taper. Shorter calendar variants
are the macrocycle table truncated.

Reference:
    Wendler (2009), 5/3/1: The Simplest and Most Effective Training System
    for Raw Strength, 2nd ed.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ironpath.exceptions import InvalidConfiguration, InvalidInput
from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import MACROCYCLE_WEEKS, WEEKS_PER_CYCLE, CalendarMode
from ironpath.models.wave_plan import WaveScheme

FIVES = WaveScheme(label="5s", percentages=(0.65, 0.75, 0.85), reps=(5, 5, 5), amrap=True)
THREES = WaveScheme(label="3s", percentages=(0.70, 0.80, 0.90), reps=(3, 3, 3), amrap=True)
FIVE_THREE_ONE = WaveScheme(
    label="5/3/1", percentages=(0.75, 0.85, 0.95), reps=(5, 3, 1), amrap=True
)
DELOAD = WaveScheme(label="Deload", percentages=(0.40, 0.50, 0.60), reps=(5, 5, 5))
RACE_PREP = WaveScheme(label="Race-prep", percentages=(0.70, 0.80, 0.90), reps=(3, 3, 3))
TAPER = WaveScheme(label="Taper", percentages=(0.40, 0.50), reps=(3, 3))

_MESOCYCLE_ROWS: dict[int, WaveScheme] = {
    1: FIVES,
    2: THREES,
    3: FIVE_THREE_ONE,
    4: DELOAD,
}

# Weeks 1-10 follow the mesocycle wave; 11 is race-prep, 12 is taper.
_MACROCYCLE_ROWS: dict[int, WaveScheme] = {
    1: FIVES, 2: THREES, 3: FIVE_THREE_ONE, 4: DELOAD,
    5: FIVES, 6: THREES, 7: FIVE_THREE_ONE, 8: DELOAD,
    9: FIVES, 10: THREES,
    11: RACE_PREP,
    12: TAPER,
}


@dataclass(frozen=True)
class WaveTable:
    """A calendar-position → scheme lookup.

    In MESOCYCLE mode rows are keyed by week-in-cycle and the table repeats
    for any cycle. In MACROCYCLE mode rows are keyed by absolute week and
    positions past the last row are rejected.
    """

    mode: CalendarMode
    rows: Mapping[int, WaveScheme]

    def __post_init__(self) -> None:
        if not self.rows:
            raise InvalidConfiguration("A wave table needs at least one row")
        expected = list(range(1, len(self.rows) + 1))
        if sorted(self.rows) != expected:
            raise InvalidConfiguration(
                f"Wave table rows must be keyed 1..{len(self.rows)}, got {sorted(self.rows)}"
            )
        if self.mode == CalendarMode.MESOCYCLE and len(self.rows) != WEEKS_PER_CYCLE:
            raise InvalidConfiguration(
                f"A mesocycle table needs exactly {WEEKS_PER_CYCLE} rows, got {len(self.rows)}"
            )

    @property
    def total_weeks(self) -> int | None:
        """Calendar length in weeks, or None for a repeating mesocycle."""
        if self.mode == CalendarMode.MESOCYCLE:
            return None
        return len(self.rows)

    def scheme_for(self, position: CalendarPosition) -> WaveScheme:
        """Return the scheme row for a calendar position.

        Raises:
            InvalidInput: If the position lies beyond a macrocycle table.
        """
        if self.mode == CalendarMode.MESOCYCLE:
            return self.rows[position.week_in_cycle]
        week = position.absolute_week
        if week not in self.rows:
            raise InvalidInput(
                f"Week {week} is outside the {len(self.rows)}-week calendar"
            )
        return self.rows[week]


def mesocycle_table() -> WaveTable:
    """The repeating 4-week 5s / 3s / 5-3-1 / deload wave."""
    return WaveTable(mode=CalendarMode.MESOCYCLE, rows=MappingProxyType(dict(_MESOCYCLE_ROWS)))


def macrocycle_table(total_weeks: int = MACROCYCLE_WEEKS) -> WaveTable:
    """The 12-week calendar, optionally truncated to its first *total_weeks* rows.

    Raises:
        InvalidConfiguration: If *total_weeks* is outside [1, 12].
    """
    if not 1 <= total_weeks <= MACROCYCLE_WEEKS:
        raise InvalidConfiguration(
            f"total_weeks must be in [1, {MACROCYCLE_WEEKS}], got {total_weeks}"
        )
    rows = {week: _MACROCYCLE_ROWS[week] for week in range(1, total_weeks + 1)}
    return WaveTable(mode=CalendarMode.MACROCYCLE, rows=MappingProxyType(rows))


def table_for_mode(mode: CalendarMode, total_weeks: int = MACROCYCLE_WEEKS) -> WaveTable:
    if mode == CalendarMode.MESOCYCLE:
        return mesocycle_table()
    return macrocycle_table(total_weeks)
