"""Data models for the IronPath engine."""

from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import CalendarMode, LiftCategory, UnitSystem
from ironpath.models.lifts import LIFT_CATALOG, LiftProfile, get_lift
from ironpath.models.pace import PaceInputs, PaceTargets
from ironpath.models.top_set_log import TopSet, TopSetLog, TopSetLogEntry
from ironpath.models.training import TrainingInputs
from ironpath.models.wave_plan import LiftPlan, WavePlan, WaveScheme, WaveSet

__all__ = [
    "CalendarMode",
    "CalendarPosition",
    "LIFT_CATALOG",
    "LiftCategory",
    "LiftPlan",
    "LiftProfile",
    "PaceInputs",
    "PaceTargets",
    "TopSet",
    "TopSetLog",
    "TopSetLogEntry",
    "TrainingInputs",
    "UnitSystem",
    "WavePlan",
    "WaveScheme",
    "WaveSet",
    "get_lift",
]
