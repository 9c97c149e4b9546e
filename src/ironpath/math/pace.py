"""Race-pace estimation and conditioning zones from timed trials.

Derives a canonical race pace (s/km) from whichever trials are available
(1 km, 5 km, multi-station race) with fixed precedence, then derives zone 2,
tempo and interval paces. Missing data yields ``None`` fields, never NaN.

Precedence:
    used 1 km pace: direct 1 km trial > 5 km Riegel estimate > multi-station pace
    race pace:      multi-station pace > mean(5 km pace, used 1 km pace)
                    > whichever single pace exists

References:
    Riegel (1981). Athletic records and human endurance. Am Sci 69(3):285-290.
    T2 = T1 * (D2 / D1) ** 1.06
"""

from __future__ import annotations

import logging
import math

from ironpath.exceptions import InsufficientData, InvalidConfiguration, InvalidInput
from ironpath.models.enums import (
    INTERVAL_WEIGHT_1K,
    INTERVAL_WEIGHT_5K,
    RIEGEL_EXPONENT,
    TEMPO_DISTANCE_KM,
    TEMPO_FALLBACK_OFFSET_S,
    TRIAL_1K_KM,
    TRIAL_5K_KM,
    ZONE2_FAST_OFFSET_S,
    ZONE2_SLOW_OFFSET_S,
)
from ironpath.models.pace import PaceInputs, PaceTargets

logger = logging.getLogger(__name__)


def _usable(value: float | None) -> float | None:
    """A trial value is usable when present, finite and positive."""
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    return float(value)


def riegel_time(
    known_time_s: float,
    known_distance_km: float,
    target_distance_km: float,
    exponent: float = RIEGEL_EXPONENT,
) -> float:
    """Project a finish time to another distance: T2 = T1 * (D2/D1)^exponent.

    Raises:
        InvalidInput: If any time or distance is non-positive or non-finite.
    """
    for name, v in (
        ("known_time_s", known_time_s),
        ("known_distance_km", known_distance_km),
        ("target_distance_km", target_distance_km),
    ):
        if not math.isfinite(v) or v <= 0:
            raise InvalidInput(f"{name} must be positive, got {v!r}")
    return known_time_s * (target_distance_km / known_distance_km) ** exponent


def pace_1k_from_5k(five_km_trial_s: float, exponent: float = RIEGEL_EXPONENT) -> float:
    """Equivalent 1 km effort (s/km) projected down from a 5 km trial."""
    return riegel_time(five_km_trial_s, TRIAL_5K_KM, TRIAL_1K_KM, exponent)


def tempo_pace_from_5k(five_km_trial_s: float, exponent: float = RIEGEL_EXPONENT) -> float:
    """Projected 10 km race pace (s/km) from a 5 km trial."""
    return riegel_time(five_km_trial_s, TRIAL_5K_KM, TEMPO_DISTANCE_KM, exponent) / TEMPO_DISTANCE_KM


def pace_from_multi_station(
    total_s: float,
    overhead_s: float,
    running_distance_km: float,
) -> float:
    """Running pace (s/km) in a multi-station race after removing station time.

    Run-only time is floored at zero, so overhead larger than the total gives
    a 0 s/km pace, which downstream code treats as unavailable.

    Raises:
        InvalidInput: If *overhead_s* is negative or non-finite.
        InvalidConfiguration: If *running_distance_km* is not positive.
    """
    if not math.isfinite(overhead_s) or overhead_s < 0:
        raise InvalidInput(f"Station overhead must be non-negative, got {overhead_s!r}")
    if not math.isfinite(running_distance_km) or running_distance_km <= 0:
        raise InvalidConfiguration(
            f"Running distance must be positive, got {running_distance_km!r}"
        )
    run_only_s = max(0.0, total_s - overhead_s)
    return run_only_s / running_distance_km


def derive_pace_targets(
    inputs: PaceInputs,
    exponent: float = RIEGEL_EXPONENT,
    strict: bool = False,
) -> PaceTargets:
    """Derive race pace and conditioning zones from the available trials.

    Args:
        inputs: Timed-trial inputs; absent, non-finite or non-positive
            trials are treated as unavailable.
        exponent: Riegel fatigue exponent.
        strict: Raise instead of returning empty targets when no trial
            is usable.

    Returns:
        PaceTargets with ``None`` for every value that cannot be derived.

    Raises:
        InsufficientData: If *strict* and no usable trial exists.
        InvalidInput / InvalidConfiguration: For structurally invalid
            overhead or running distance.
    """
    one_k_s = _usable(inputs.one_km_trial_s)
    five_k_s = _usable(inputs.five_km_trial_s)
    race_total_s = _usable(inputs.multi_station_total_s)

    pace_5k = five_k_s / TRIAL_5K_KM if five_k_s is not None else None
    pace_1k_est = pace_1k_from_5k(five_k_s, exponent) if five_k_s is not None else None
    multi_pace = None
    if race_total_s is not None:
        multi_pace = _usable(
            pace_from_multi_station(
                race_total_s, inputs.station_overhead_s, inputs.running_distance_km
            )
        )

    used_1k = _first_available(one_k_s, pace_1k_est, multi_pace)

    if multi_pace is not None:
        target = multi_pace
    elif pace_5k is not None and used_1k is not None:
        target = (pace_5k + used_1k) / 2.0
    else:
        target = _first_available(pace_5k, used_1k)

    if target is None:
        missing = ("one_km_trial_s", "five_km_trial_s", "multi_station_total_s")
        if strict:
            raise InsufficientData("No usable trial to derive a race pace", missing=missing)
        logger.debug("No usable pace trial; returning empty targets")
        return PaceTargets()

    # target falls back to the 5 km pace, so it is always the zone base
    base = target
    if five_k_s is not None:
        tempo = tempo_pace_from_5k(five_k_s, exponent)
    else:
        tempo = _usable(target - TEMPO_FALLBACK_OFFSET_S)

    if used_1k is not None and pace_5k is not None:
        interval = used_1k * INTERVAL_WEIGHT_1K + pace_5k * INTERVAL_WEIGHT_5K
    else:
        interval = _first_available(used_1k, pace_5k)

    return PaceTargets(
        hyrox_pace_s_per_km=target,
        zone2_slow_s_per_km=base + ZONE2_SLOW_OFFSET_S,
        zone2_fast_s_per_km=base + ZONE2_FAST_OFFSET_S,
        tempo_pace_s_per_km=tempo,
        interval_pace_s_per_km=interval,
        pace_5k_s_per_km=pace_5k,
        used_pace_1k_s_per_km=used_1k,
        pace_from_multi_station_s_per_km=multi_pace,
    )


def _first_available(*values: float | None) -> float | None:
    for v in values:
        if v is not None:
            return v
    return None
