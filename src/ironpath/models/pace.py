"""Pace models: timed-trial inputs and derived training-zone targets.

All paces are in seconds per kilometre. ``None`` means "unavailable"
(no usable trial), never zero.
"""

from __future__ import annotations

from dataclasses import dataclass

from ironpath.models.enums import MULTI_STATION_RUN_DISTANCE_KM


@dataclass(frozen=True)
class PaceInputs:
    """Whichever timed trials the athlete has, in seconds."""

    one_km_trial_s: float | None = None
    five_km_trial_s: float | None = None
    multi_station_total_s: float | None = None
    station_overhead_s: float = 0.0
    running_distance_km: float = MULTI_STATION_RUN_DISTANCE_KM


@dataclass(frozen=True)
class PaceTargets:
    """Derived pace targets. Intermediate paces are kept for auditability."""

    hyrox_pace_s_per_km: float | None = None
    zone2_slow_s_per_km: float | None = None
    zone2_fast_s_per_km: float | None = None
    tempo_pace_s_per_km: float | None = None
    interval_pace_s_per_km: float | None = None

    # Intermediate derivations
    pace_5k_s_per_km: float | None = None
    used_pace_1k_s_per_km: float | None = None
    pace_from_multi_station_s_per_km: float | None = None

    @property
    def has_target(self) -> bool:
        return self.hyrox_pace_s_per_km is not None

    def training_targets(self) -> dict[str, float | None]:
        """The five displayed targets, keyed by field name, in display order."""
        return {
            "hyrox_pace_s_per_km": self.hyrox_pace_s_per_km,
            "zone2_slow_s_per_km": self.zone2_slow_s_per_km,
            "zone2_fast_s_per_km": self.zone2_fast_s_per_km,
            "tempo_pace_s_per_km": self.tempo_pace_s_per_km,
            "interval_pace_s_per_km": self.interval_pace_s_per_km,
        }
