"""Top-set log export and import: verbatim JSON and flattened CSV.

JSON is the list of entries, newest first, exactly as stored. CSV is one
row per entry with the columns in ``CSV_COLUMNS``; fields containing a
comma, quote or newline are quoted with internal quotes doubled.

All functions are pure (strings in, strings out); file handling lives in
``ironpath.storage``.
"""

from __future__ import annotations

import io
import json
from datetime import datetime
from typing import Any

import pandas as pd

from ironpath.exceptions import InvalidInput
from ironpath.models.enums import DEFAULT_LOG_MAX_ENTRIES, UnitSystem
from ironpath.models.top_set_log import TopSet, TopSetLog, TopSetLogEntry

CSV_COLUMNS: tuple[str, ...] = (
    "timestamp",
    "cycle",
    "week",
    "absWeek",
    "lift",
    "units",
    "tm",
    "top_pct",
    "top_load",
    "reps_target",
    "reps_actual",
    "est1rm",
)


# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------


def entry_to_dict(entry: TopSetLogEntry) -> dict[str, Any]:
    """Convert a log entry to a JSON-compatible dict."""
    top = entry.top_set
    return {
        "timestamp": entry.timestamp.isoformat(),
        "cycle": entry.cycle,
        "week_in_cycle": entry.week_in_cycle,
        "absolute_week": entry.absolute_week,
        "lift_name": entry.lift_name,
        "training_max_display": entry.training_max_display,
        "unit_system": entry.unit_system.symbol,
        "top_set": {
            "percent_of_tm": top.percent_of_tm,
            "load_display": top.load_display,
            "target_reps": top.target_reps,
            "actual_reps": top.actual_reps,
            "estimated_one_rep_max": top.estimated_one_rep_max,
        },
    }


def entry_from_dict(data: dict[str, Any]) -> TopSetLogEntry:
    """Inverse of entry_to_dict().

    Raises:
        InvalidInput: If a field is missing or has the wrong type.
    """
    try:
        top = data["top_set"]
        return TopSetLogEntry(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            cycle=int(data["cycle"]),
            week_in_cycle=int(data["week_in_cycle"]),
            absolute_week=int(data["absolute_week"]),
            lift_name=str(data["lift_name"]),
            training_max_display=float(data["training_max_display"]),
            unit_system=UnitSystem.from_symbol(str(data["unit_system"])),
            top_set=TopSet(
                percent_of_tm=float(top["percent_of_tm"]),
                load_display=float(top["load_display"]),
                target_reps=int(top["target_reps"]),
                actual_reps=int(top["actual_reps"]),
                estimated_one_rep_max=float(top["estimated_one_rep_max"]),
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInput(f"Malformed log entry: {exc}") from exc


def log_to_json(log: TopSetLog, indent: int = 2) -> str:
    """Serialise the log as a pretty-printed JSON array, newest first."""
    return json.dumps([entry_to_dict(e) for e in log.entries], indent=indent)


def log_from_json(text: str, max_entries: int = DEFAULT_LOG_MAX_ENTRIES) -> TopSetLog:
    """Parse a JSON export back into a TopSetLog, keeping its order.

    Entries past *max_entries* are dropped from the old end.
    """
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidInput(f"Log is not valid JSON: {exc}") from exc
    if not isinstance(raw, list):
        raise InvalidInput("Log JSON must be an array of entries")
    entries = tuple(entry_from_dict(item) for item in raw)
    return TopSetLog(entries=entries[:max_entries], max_entries=max_entries)


# ---------------------------------------------------------------------------
# CSV
# ---------------------------------------------------------------------------


def log_to_dataframe(log: TopSetLog) -> pd.DataFrame:
    """Flatten the log to one row per entry with the CSV column names."""
    rows = [
        {
            "timestamp": e.timestamp.isoformat(),
            "cycle": e.cycle,
            "week": e.week_in_cycle,
            "absWeek": e.absolute_week,
            "lift": e.lift_name,
            "units": e.unit_system.symbol,
            "tm": e.training_max_display,
            "top_pct": e.top_set.percent_of_tm,
            "top_load": e.top_set.load_display,
            "reps_target": e.top_set.target_reps,
            "reps_actual": e.top_set.actual_reps,
            "est1rm": e.top_set.estimated_one_rep_max,
        }
        for e in log.entries
    ]
    return pd.DataFrame(rows, columns=list(CSV_COLUMNS))


def log_to_csv(log: TopSetLog) -> str:
    """Export the log as CSV text with a header row."""
    return log_to_dataframe(log).to_csv(index=False, lineterminator="\n")


def log_from_csv(text: str, max_entries: int = DEFAULT_LOG_MAX_ENTRIES) -> TopSetLog:
    """Parse a CSV export back into a TopSetLog.

    Raises:
        InvalidInput: If columns are missing or a value does not parse.
    """
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype={"timestamp": str, "lift": str, "units": str},
            keep_default_na=False,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise InvalidInput(f"Log is not valid CSV: {exc}") from exc

    missing = [c for c in CSV_COLUMNS if c not in df.columns]
    if missing:
        raise InvalidInput(f"Log CSV is missing columns: {', '.join(missing)}")

    entries: list[TopSetLogEntry] = []
    for row in df.itertuples(index=False):
        record = row._asdict()
        entries.append(
            entry_from_dict(
                {
                    "timestamp": record["timestamp"],
                    "cycle": record["cycle"],
                    "week_in_cycle": record["week"],
                    "absolute_week": record["absWeek"],
                    "lift_name": record["lift"],
                    "training_max_display": record["tm"],
                    "unit_system": record["units"],
                    "top_set": {
                        "percent_of_tm": record["top_pct"],
                        "load_display": record["top_load"],
                        "target_reps": record["reps_target"],
                        "actual_reps": record["reps_actual"],
                        "estimated_one_rep_max": record["est1rm"],
                    },
                }
            )
        )
    return TopSetLog(entries=tuple(entries[:max_entries]), max_entries=max_entries)
