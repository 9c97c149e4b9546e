"""Top-set log — entries produced by the engine, persisted by the caller.

The log is ordered newest first and capped: appending past ``max_entries``
drops the oldest entries. The engine never stores a log itself; the
application layer keeps one between calls and hands it back in.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from ironpath.exceptions import InvalidConfiguration
from ironpath.models.enums import DEFAULT_LOG_MAX_ENTRIES, UnitSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TopSet:
    """The logged top set. Loads and estimates are in the entry's display unit."""

    percent_of_tm: float
    load_display: float
    target_reps: int
    actual_reps: int
    estimated_one_rep_max: float


@dataclass(frozen=True)
class TopSetLogEntry:
    """A single logged top set."""

    timestamp: datetime
    cycle: int
    week_in_cycle: int
    absolute_week: int
    lift_name: str
    training_max_display: float
    unit_system: UnitSystem
    top_set: TopSet

    @property
    def beat_target(self) -> bool:
        """True when more reps were completed than prescribed."""
        return self.top_set.actual_reps > self.top_set.target_reps


@dataclass(frozen=True)
class TopSetLog:
    """Frozen, capped, newest-first collection of log entries."""

    entries: tuple[TopSetLogEntry, ...] = field(default_factory=tuple)
    max_entries: int = DEFAULT_LOG_MAX_ENTRIES

    def __post_init__(self) -> None:
        if self.max_entries < 1:
            raise InvalidConfiguration(
                f"max_entries must be >= 1, got {self.max_entries}"
            )

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def is_empty(self) -> bool:
        return len(self.entries) == 0

    def append(self, entry: TopSetLogEntry) -> TopSetLog:
        """Return a new log with *entry* first, trimmed to ``max_entries``."""
        combined = (entry,) + self.entries
        if len(combined) > self.max_entries:
            logger.info(
                "Trimming %d oldest log entries (cap %d)",
                len(combined) - self.max_entries,
                self.max_entries,
            )
        return TopSetLog(entries=combined[: self.max_entries], max_entries=self.max_entries)

    def clear(self) -> TopSetLog:
        return TopSetLog(max_entries=self.max_entries)

    def for_lift(self, lift_name: str) -> tuple[TopSetLogEntry, ...]:
        """Entries for one lift, newest first."""
        return tuple(e for e in self.entries if e.lift_name == lift_name)

    def best_estimate(self, lift_name: str) -> float | None:
        """Highest estimated 1RM logged for *lift_name*, or None."""
        estimates = [e.top_set.estimated_one_rep_max for e in self.for_lift(lift_name)]
        return max(estimates) if estimates else None
