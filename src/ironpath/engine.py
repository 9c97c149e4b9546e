"""WaveEngine — computes the weekly 5/3/1 prescription and top-set log entries."""

from __future__ import annotations

import dataclasses
import logging
from datetime import datetime, timezone

from ironpath.exceptions import InvalidInput
from ironpath.math.estimation import epley
from ironpath.math.units import from_canonical_kg, round_display, to_canonical_kg
from ironpath.math.wave import build_sets, training_max_kg, validate_training_max_percent
from ironpath.math.wave_table import WaveTable, macrocycle_table
from ironpath.models.calendar import CalendarPosition
from ironpath.models.enums import TRAINING_MAX_SANE_FLOOR
from ironpath.models.lifts import LIFT_CATALOG, LiftProfile, get_lift
from ironpath.models.top_set_log import TopSet, TopSetLogEntry
from ironpath.models.training import TrainingInputs
from ironpath.models.wave_plan import LiftPlan, WavePlan

logger = logging.getLogger(__name__)


class WaveEngine:
    """Stateless calculator for the 5/3/1 wave.

    The only thing an engine holds is its scheme table, so the same class
    serves a repeating 4-week deployment and a 12-week race calendar.

    Usage:
        engine = WaveEngine()                      # 12-week calendar
        engine = WaveEngine(mesocycle_table())     # repeating 4-week wave
        plan = engine.plan(inputs)
        entry = engine.log_top_set(inputs, "squat", actual_reps=8)
    """

    def __init__(
        self,
        table: WaveTable | None = None,
        lifts: tuple[LiftProfile, ...] = LIFT_CATALOG,
    ) -> None:
        self.table = table or macrocycle_table()
        self.lifts = lifts

    def plan(self, inputs: TrainingInputs) -> WavePlan:
        """Compute training maxes and rounded working sets for every lift.

        Args:
            inputs: Frozen snapshot of 1RMs, TM percent, increments,
                rounding step, units and calendar position.

        Returns:
            A WavePlan with one LiftPlan per catalog lift, in day order.
        """
        position = inputs.position
        scheme = self.table.scheme_for(position)
        tm_percent = validate_training_max_percent(inputs.training_max_percent)
        if tm_percent < TRAINING_MAX_SANE_FLOOR:
            logger.warning(
                "Training max percent %.2f is below %.2f; computing as given",
                tm_percent,
                TRAINING_MAX_SANE_FLOOR,
            )
        step_kg = to_canonical_kg(inputs.rounding_step, inputs.unit_system)

        lift_plans: list[LiftPlan] = []
        for lift in self.lifts:
            tm_kg = training_max_kg(
                one_rep_max=inputs.one_rep_max_for(lift.name),
                tm_percent=tm_percent,
                cycle=position.cycle,
                increment=inputs.increment_for(lift.category),
                unit_system=inputs.unit_system,
            )
            lift_plans.append(
                LiftPlan(
                    lift=lift,
                    training_max_kg=tm_kg,
                    training_max_display=_display(tm_kg, inputs),
                    sets=build_sets(tm_kg, scheme, step_kg, inputs.unit_system),
                )
            )

        logger.debug(
            "Planned week %d (cycle %d, %s) for %d lifts",
            position.absolute_week,
            position.cycle,
            scheme.label,
            len(lift_plans),
        )
        return WavePlan(
            position=position,
            scheme=scheme,
            unit_system=inputs.unit_system,
            lifts=tuple(lift_plans),
        )

    def log_top_set(
        self,
        inputs: TrainingInputs,
        lift_name: str,
        actual_reps: int,
        position: CalendarPosition | None = None,
        timestamp: datetime | None = None,
    ) -> TopSetLogEntry:
        """Build a log entry for the top set of *lift_name*.

        The top set is the third set of the week, or the last set of a
        shorter (taper) row. The entry is returned, not stored; appending
        to a log is the caller's job (see TopSetLog.append).

        Args:
            inputs: The inputs the week was planned with.
            lift_name: Catalog lift name or label.
            actual_reps: Reps completed on the top set.
            position: Overrides ``inputs.position`` when given.
            timestamp: Defaults to now (UTC).

        Returns:
            A TopSetLogEntry with the Epley estimate in display units.

        Raises:
            InvalidInput: For an unknown lift or negative/non-integral reps.
        """
        if (
            isinstance(actual_reps, bool)
            or not isinstance(actual_reps, int)
            or actual_reps < 0
        ):
            raise InvalidInput(f"actual_reps must be a non-negative integer, got {actual_reps!r}")
        lift = get_lift(lift_name)
        if position is not None:
            inputs = dataclasses.replace(inputs, position=position)

        lift_plan = self.plan(inputs).for_lift(lift.name)
        top = lift_plan.top_set
        estimate = epley(top.load_display, actual_reps)

        return TopSetLogEntry(
            timestamp=timestamp or datetime.now(timezone.utc),
            cycle=inputs.position.cycle,
            week_in_cycle=inputs.position.week_in_cycle,
            absolute_week=inputs.position.absolute_week,
            lift_name=lift.name,
            training_max_display=lift_plan.training_max_display,
            unit_system=inputs.unit_system,
            top_set=TopSet(
                percent_of_tm=top.percent_of_tm,
                load_display=top.load_display,
                target_reps=top.target_reps,
                actual_reps=actual_reps,
                estimated_one_rep_max=round_display(estimate),
            ),
        )


def _display(kg: float, inputs: TrainingInputs) -> float:
    return round_display(from_canonical_kg(kg, inputs.unit_system))
