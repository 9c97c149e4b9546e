"""Tests for the JSON-file log store."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

import pytest

from ironpath.exceptions import InvalidInput
from ironpath.models.top_set_log import TopSetLog, TopSetLogEntry
from ironpath.serialization import log_from_csv
from ironpath.storage import JsonFileLogStore


@pytest.fixture
def store(tmp_path: Path) -> JsonFileLogStore:
    return JsonFileLogStore(tmp_path / "nested" / "log.json", max_entries=3)


class TestJsonFileLogStore:
    def test_missing_file_is_empty(self, store: JsonFileLogStore) -> None:
        log = store.load()
        assert log.is_empty
        assert log.max_entries == 3

    def test_append_persists(
        self, store: JsonFileLogStore, entry_factory: Callable[..., TopSetLogEntry]
    ) -> None:
        store.append(entry_factory(lift_name="bench"))
        store.append(entry_factory(lift_name="squat"))
        assert store.path.exists()
        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert [item["lift_name"] for item in raw] == ["squat", "bench"]
        assert [e.lift_name for e in store.load().entries] == ["squat", "bench"]

    def test_append_trims(
        self, store: JsonFileLogStore, entry_factory: Callable[..., TopSetLogEntry]
    ) -> None:
        for week in range(1, 6):
            log = store.append(entry_factory(absolute_week=week))
        assert [e.absolute_week for e in log.entries] == [5, 4, 3]
        assert len(store.load()) == 3

    def test_clear(self, store: JsonFileLogStore, sample_log: TopSetLog) -> None:
        store.save(sample_log)
        assert store.clear().is_empty
        assert json.loads(store.path.read_text(encoding="utf-8")) == []

    def test_clear_recovers_corrupt_file(self, store: JsonFileLogStore) -> None:
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{truncated", encoding="utf-8")
        with pytest.raises(InvalidInput):
            store.load()

        cleared = store.clear()
        assert cleared.is_empty
        assert cleared.max_entries == 3
        assert store.load().is_empty

    def test_export_csv(self, store: JsonFileLogStore, sample_log: TopSetLog) -> None:
        store.save(sample_log)
        restored = log_from_csv(store.export("csv"))
        assert [e.lift_name for e in restored.entries] == ["squat", "bench", "press"]

    def test_export_json_matches_file(
        self, store: JsonFileLogStore, sample_log: TopSetLog
    ) -> None:
        store.save(sample_log)
        assert store.export("json") == store.path.read_text(encoding="utf-8")

    def test_unknown_format_raises(self, store: JsonFileLogStore) -> None:
        with pytest.raises(InvalidInput, match="xml"):
            store.export("xml")
