"""Environment-variable-based configuration.

Every setting has a default taken from a fresh athlete profile; any of
them can be overridden with an ``IRONPATH_*`` environment variable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from ironpath.exceptions import InvalidConfiguration, InvalidInput
from ironpath.models.enums import (
    DEFAULT_LOG_MAX_ENTRIES,
    DEFAULT_LOWER_INCREMENT,
    DEFAULT_ROUNDING_STEP,
    DEFAULT_TRAINING_MAX_PERCENT,
    DEFAULT_UPPER_INCREMENT,
    MACROCYCLE_WEEKS,
    WEEKS_PER_CYCLE,
    CalendarMode,
    UnitSystem,
)

DEFAULT_LOG_FILE = "~/.ironpath/top_set_log.json"


@dataclass(frozen=True)
class Settings:
    """Immutable settings resolved from the environment."""

    unit_system: UnitSystem = UnitSystem.METRIC
    rounding_step: float = DEFAULT_ROUNDING_STEP[UnitSystem.METRIC]
    training_max_percent: float = DEFAULT_TRAINING_MAX_PERCENT
    lower_increment: float = DEFAULT_LOWER_INCREMENT[UnitSystem.METRIC]
    upper_increment: float = DEFAULT_UPPER_INCREMENT[UnitSystem.METRIC]
    calendar_mode: CalendarMode = CalendarMode.MACROCYCLE
    calendar_weeks: int = MACROCYCLE_WEEKS
    log_max_entries: int = DEFAULT_LOG_MAX_ENTRIES
    log_file: Path = Path(DEFAULT_LOG_FILE).expanduser()
    log_level: str = "INFO"

    def profile_defaults(self) -> dict:
        """Settings as a profile dict for ironpath.boundary.build_training_inputs()."""
        return {
            "units": self.unit_system,
            "rounding_step": self.rounding_step,
            "training_max_percent": self.training_max_percent,
            "lower_increment": self.lower_increment,
            "upper_increment": self.upper_increment,
        }


def _float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidConfiguration(f"{key} must be a number, got {raw!r}") from None


def _int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise InvalidConfiguration(f"{key} must be an integer, got {raw!r}") from None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Resolve Settings from *environ* (defaults to ``os.environ``).

    Raises:
        InvalidConfiguration: If a variable is present but malformed.
    """
    env = os.environ if environ is None else environ

    try:
        unit_system = UnitSystem.from_symbol(env.get("IRONPATH_UNITS", "kg"))
    except InvalidInput as exc:
        raise InvalidConfiguration(str(exc)) from None

    calendar_weeks = _int(env, "IRONPATH_CALENDAR", MACROCYCLE_WEEKS)
    if calendar_weeks == WEEKS_PER_CYCLE:
        calendar_mode = CalendarMode.MESOCYCLE
    elif 1 <= calendar_weeks <= MACROCYCLE_WEEKS:
        calendar_mode = CalendarMode.MACROCYCLE
    else:
        raise InvalidConfiguration(
            f"IRONPATH_CALENDAR must be 4 (repeating) or up to {MACROCYCLE_WEEKS}, "
            f"got {calendar_weeks}"
        )

    log_max_entries = _int(env, "IRONPATH_LOG_MAX_ENTRIES", DEFAULT_LOG_MAX_ENTRIES)
    if log_max_entries < 1:
        raise InvalidConfiguration(
            f"IRONPATH_LOG_MAX_ENTRIES must be >= 1, got {log_max_entries}"
        )

    return Settings(
        unit_system=unit_system,
        rounding_step=_float(env, "IRONPATH_ROUNDING_STEP", DEFAULT_ROUNDING_STEP[unit_system]),
        training_max_percent=_float(env, "IRONPATH_TM_PERCENT", DEFAULT_TRAINING_MAX_PERCENT),
        lower_increment=_float(
            env, "IRONPATH_LOWER_INCREMENT", DEFAULT_LOWER_INCREMENT[unit_system]
        ),
        upper_increment=_float(
            env, "IRONPATH_UPPER_INCREMENT", DEFAULT_UPPER_INCREMENT[unit_system]
        ),
        calendar_mode=calendar_mode,
        calendar_weeks=calendar_weeks,
        log_max_entries=log_max_entries,
        log_file=Path(env.get("IRONPATH_LOG_FILE", DEFAULT_LOG_FILE)).expanduser(),
        log_level=env.get("IRONPATH_LOG_LEVEL", "INFO").upper(),
    )
