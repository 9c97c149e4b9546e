"""JSON-file log store — the single-user persistence collaborator.

Keeps the top-set log on disk in the JSON export format. Reads and writes
are whole-file and synchronous; there is no locking.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ironpath.exceptions import InvalidInput
from ironpath.models.enums import DEFAULT_LOG_MAX_ENTRIES
from ironpath.models.top_set_log import TopSetLog, TopSetLogEntry
from ironpath.serialization.log_export import log_from_json, log_to_csv, log_to_json

logger = logging.getLogger(__name__)


class JsonFileLogStore:
    """Load/append/clear a capped, newest-first log kept in a JSON file."""

    def __init__(self, path: Path | str, max_entries: int = DEFAULT_LOG_MAX_ENTRIES) -> None:
        self.path = Path(path).expanduser()
        self.max_entries = max_entries

    def load(self) -> TopSetLog:
        """Read the log; a missing file is an empty log."""
        if not self.path.exists():
            return TopSetLog(max_entries=self.max_entries)
        with open(self.path, encoding="utf-8") as f:
            return log_from_json(f.read(), max_entries=self.max_entries)

    def save(self, log: TopSetLog) -> Path:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(log_to_json(log))
        logger.debug("Saved %d log entries to %s", len(log), self.path)
        return self.path

    def append(self, entry: TopSetLogEntry) -> TopSetLog:
        """Prepend *entry*, trim to capacity, persist and return the new log."""
        log = self.load().append(entry)
        self.save(log)
        logger.info(
            "Logged %s top set: %.1f %s x %d",
            entry.lift_name,
            entry.top_set.load_display,
            entry.unit_system.symbol,
            entry.top_set.actual_reps,
        )
        return log

    def clear(self) -> TopSetLog:
        """Overwrite the file with an empty log, even if the old one is unreadable."""
        log = TopSetLog(max_entries=self.max_entries)
        self.save(log)
        logger.info("Cleared log at %s", self.path)
        return log

    def export(self, fmt: str = "json") -> str:
        """Return the stored log as ``json`` or ``csv`` text."""
        log = self.load()
        if fmt == "csv":
            return log_to_csv(log)
        if fmt == "json":
            return log_to_json(log)
        raise InvalidInput(f"Unknown export format {fmt!r}; expected 'json' or 'csv'")
