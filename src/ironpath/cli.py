"""Command-line shell around the engine.

Usage:
    ironpath wave --week 5                      # this week's sets for all lifts
    ironpath wave --cycle 2 --week-in-cycle 1 --orm squat=180
    ironpath pace --5k 25:00 --race 1:25:00 --overhead 30:00
    ironpath e1rm 100 8
    ironpath log squat 8 --week 1               # append a top set to the log
    ironpath export --format csv --output log.csv
    ironpath history --limit 10 --lift squat
    ironpath clear
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ironpath.boundary import build_pace_inputs, build_training_inputs, coerce_number
from ironpath.config import Settings, load_settings
from ironpath.engine import WaveEngine
from ironpath.exceptions import IronPathError
from ironpath.formatting import UNAVAILABLE, format_load, format_pace_targets, format_set
from ironpath.math.estimation import epley
from ironpath.math.pace import derive_pace_targets
from ironpath.math.wave_table import table_for_mode
from ironpath.models.enums import HISTORY_LIMIT, CalendarMode, UnitSystem
from ironpath.models.lifts import get_lift
from ironpath.models.training import TrainingInputs
from ironpath.storage import JsonFileLogStore

logger = logging.getLogger(__name__)

_TARGET_LABELS = {
    "hyrox_pace_s_per_km": "Race pace",
    "zone2_slow_s_per_km": "Zone 2 (slow)",
    "zone2_fast_s_per_km": "Zone 2 (fast)",
    "tempo_pace_s_per_km": "Tempo",
    "interval_pace_s_per_km": "Intervals",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ironpath", description="IronPath 5/3/1 wave and pace calculator"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    def add_plan_args(p: argparse.ArgumentParser) -> None:
        p.add_argument("--week", type=int, help="Absolute week in the calendar")
        p.add_argument("--cycle", type=int, help="Mesocycle number (with --week-in-cycle)")
        p.add_argument("--week-in-cycle", type=int, help="Week within the cycle, 1-4")
        p.add_argument("--units", choices=["kg", "lb"], help="Display units")
        p.add_argument(
            "--orm", action="append", default=[], metavar="LIFT=VALUE",
            help="One-rep max override, repeatable (e.g. squat=180)",
        )
        p.add_argument("--tm", type=float, help="Training max as a fraction of 1RM")
        p.add_argument("--step", type=float, help="Rounding step in display units")
        p.add_argument("--lower-inc", type=float, help="Lower-body increment per cycle")
        p.add_argument("--upper-inc", type=float, help="Upper-body increment per cycle")

    wave = sub.add_parser("wave", help="Show this week's working sets")
    add_plan_args(wave)

    pace = sub.add_parser("pace", help="Derive pace targets from trial times")
    pace.add_argument("--1k", dest="one_km", help="1 km trial time (mm:ss)")
    pace.add_argument("--5k", dest="five_km", help="5 km trial time (mm:ss)")
    pace.add_argument("--race", dest="multi_station_total", help="Multi-station race time (hh:mm:ss)")
    pace.add_argument("--overhead", dest="station_overhead", help="Time spent at stations (mm:ss)")
    pace.add_argument("--distance", dest="running_distance_km", type=float, help="Race running distance, km")

    e1rm = sub.add_parser("e1rm", help="Epley estimated 1RM")
    e1rm.add_argument("load", type=float)
    e1rm.add_argument("reps", type=int)

    log = sub.add_parser("log", help="Log a top set")
    log.add_argument("lift")
    log.add_argument("reps", type=int)
    add_plan_args(log)

    export = sub.add_parser("export", help="Export the log")
    export.add_argument("--format", choices=["json", "csv"], default="json")
    export.add_argument("--output", type=Path, help="Write to a file instead of stdout")

    history = sub.add_parser("history", help="Show the most recent logged top sets")
    history.add_argument(
        "--limit", type=int, default=HISTORY_LIMIT, help="Entries to show (default 20)"
    )
    history.add_argument("--lift", help="Only show one lift")

    sub.add_parser("clear", help="Clear all log entries")
    return parser


def _engine(settings: Settings) -> WaveEngine:
    return WaveEngine(table_for_mode(settings.calendar_mode, settings.calendar_weeks))


def _training_inputs(args: argparse.Namespace, settings: Settings) -> TrainingInputs:
    profile = settings.profile_defaults()
    if args.units is not None:
        units = UnitSystem.from_symbol(args.units)
        if units != settings.unit_system:
            # Mass defaults follow the newly selected unit
            for key in ("rounding_step", "lower_increment", "upper_increment"):
                profile.pop(key)
        profile["units"] = units

    orm: dict[str, float] = {}
    for item in args.orm:
        name, _, value = item.partition("=")
        orm[name.strip().lower()] = coerce_number(value)
    profile["one_rep_max"] = orm

    for key, value in (
        ("training_max_percent", args.tm),
        ("rounding_step", args.step),
        ("lower_increment", args.lower_inc),
        ("upper_increment", args.upper_inc),
        ("week", args.week),
    ):
        if value is not None:
            profile[key] = value
    if args.cycle is not None or args.week_in_cycle is not None:
        profile["cycle"] = args.cycle or 1
        profile["week_in_cycle"] = args.week_in_cycle or 1

    total_weeks = (
        None if settings.calendar_mode == CalendarMode.MESOCYCLE else settings.calendar_weeks
    )
    return build_training_inputs(profile, total_weeks=total_weeks)


def _cmd_wave(args: argparse.Namespace, settings: Settings) -> int:
    inputs = _training_inputs(args, settings)
    plan = _engine(settings).plan(inputs)
    print(plan.header)
    for day, lift_plan in enumerate(plan.lifts, start=1):
        print(
            f"Day {day}: {lift_plan.lift.label} "
            f"(TM {format_load(lift_plan.training_max_display, plan.unit_system)})"
        )
        for i, wave_set in enumerate(lift_plan.sets, start=1):
            print(f"  {format_set(i, wave_set, plan.unit_system)}")
    return 0


def _cmd_pace(args: argparse.Namespace, settings: Settings) -> int:
    raw = {
        "one_km": args.one_km,
        "five_km": args.five_km,
        "multi_station_total": args.multi_station_total,
        "station_overhead": args.station_overhead,
    }
    if args.running_distance_km is not None:
        raw["running_distance_km"] = args.running_distance_km
    targets = derive_pace_targets(build_pace_inputs(raw), strict=True)
    for name, formatted in format_pace_targets(targets).items():
        print(
            f"{_TARGET_LABELS[name]:<14} {formatted['pace']:>10}  "
            f"{formatted['kph']:>10}  400m {formatted['split_400m']}"
        )
    return 0


def _cmd_e1rm(args: argparse.Namespace, settings: Settings) -> int:
    estimate = epley(args.load, args.reps)
    print(f"{estimate:.1f}" if estimate > 0 else UNAVAILABLE)
    return 0


def _cmd_log(args: argparse.Namespace, settings: Settings) -> int:
    inputs = _training_inputs(args, settings)
    entry = _engine(settings).log_top_set(inputs, args.lift, args.reps)
    store = JsonFileLogStore(settings.log_file, max_entries=settings.log_max_entries)
    log = store.append(entry)
    top = entry.top_set
    print(
        f"{entry.lift_name} W{entry.absolute_week}/C{entry.cycle}: "
        f"{format_load(top.load_display, entry.unit_system)} "
        f"@ {top.percent_of_tm * 100:.0f}% × {top.target_reps} → {top.actual_reps} reps "
        f"(e1RM {format_load(top.estimated_one_rep_max, entry.unit_system)}, "
        f"{len(log)} entries)"
    )
    return 0


def _cmd_export(args: argparse.Namespace, settings: Settings) -> int:
    store = JsonFileLogStore(settings.log_file, max_entries=settings.log_max_entries)
    text = store.export(args.format)
    if args.output is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
    else:
        args.output.write_text(text, encoding="utf-8")
        logger.info("Exported log to %s", args.output)
    return 0


def _cmd_history(args: argparse.Namespace, settings: Settings) -> int:
    log = JsonFileLogStore(settings.log_file, max_entries=settings.log_max_entries).load()
    entries = log.entries
    if args.lift is not None:
        entries = log.for_lift(get_lift(args.lift).name)
    if not entries:
        print("No top sets logged")
        return 0

    for entry in entries[: max(0, args.limit)]:
        top = entry.top_set
        # "*" marks a top set that beat its rep target
        marker = "*" if entry.beat_target else ""
        print(
            f"{entry.lift_name:<9} W{entry.absolute_week}/C{entry.cycle}  "
            f"{format_load(top.load_display, entry.unit_system)} "
            f"× {top.target_reps} → {top.actual_reps}{marker}  "
            f"e1RM {format_load(top.estimated_one_rep_max, entry.unit_system)}"
        )

    print("Best e1RM:")
    for name in dict.fromkeys(e.lift_name for e in entries):
        unit_system = next(e.unit_system for e in entries if e.lift_name == name)
        print(f"  {name:<9} {format_load(log.best_estimate(name), unit_system)}")
    return 0


def _cmd_clear(args: argparse.Namespace, settings: Settings) -> int:
    JsonFileLogStore(settings.log_file, max_entries=settings.log_max_entries).clear()
    return 0


_COMMANDS = {
    "wave": _cmd_wave,
    "pace": _cmd_pace,
    "e1rm": _cmd_e1rm,
    "log": _cmd_log,
    "export": _cmd_export,
    "history": _cmd_history,
    "clear": _cmd_clear,
}


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except IronPathError as exc:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", exc)
        return 2

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        return _COMMANDS[args.command](args, settings)
    except IronPathError as exc:
        logger.error("%s", exc)
        return 2


if __name__ == "__main__":
    sys.exit(main())
