import json
from datetime import date, datetime

import pytest

from app.kv_storage import FileStorage, MemoryStorage
from app.mess_cut_store import Mark, MessCutStore

KEY = "messcut_data"


class _CountingStorage(MemoryStorage):
    def __init__(self, initial=None):
        super().__init__(initial)
        self.writes = 0

    def set_item(self, key, value):
        self.writes += 1
        super().set_item(key, value)


class _BrokenStorage:
    def get_item(self, key):
        raise OSError("storage unavailable")

    def set_item(self, key, value):
        raise OSError("quota exceeded")

    def remove_item(self, key):
        raise OSError("storage unavailable")


@pytest.fixture
def store():
    return MessCutStore(_CountingStorage(), clock=lambda: 1_700_000_000_000)


def test_mark_then_get_returns_note(store):
    store.mark(date(2024, 3, 15), "skip")
    assert store.get(date(2024, 3, 15)) == Mark(note="skip", timestamp=1_700_000_000_000)
    assert store.is_marked(date(2024, 3, 15))


def test_scenario_mark_and_unmark_march(store):
    store.mark(date(2024, 3, 15), "skip")
    assert store.is_marked(date(2024, 3, 15)) is True
    assert store.monthly_count(2024, 2) == 1

    store.unmark(date(2024, 3, 15))
    assert store.is_marked(date(2024, 3, 15)) is False
    assert store.monthly_count(2024, 2) == 0


def test_mark_overwrites_note_and_timestamp():
    ticks = iter([1, 2])
    store = MessCutStore(MemoryStorage(), clock=lambda: next(ticks))
    store.mark(date(2024, 5, 1), "first")
    store.mark(date(2024, 5, 1), "second")
    assert store.get(date(2024, 5, 1)) == Mark(note="second", timestamp=2)
    assert store.monthly_count(2024, 4) == 1


def test_monthly_count_counts_distinct_days(store):
    for day in (1, 2, 2, 30):
        store.mark(date(2024, 4, day))
    store.mark(date(2024, 5, 1))
    assert store.monthly_count(2024, 3) == 3
    assert store.monthly_count(2024, 4) == 1
    assert store.monthly_count(2023, 3) == 0


def test_every_mutation_rewrites_full_document(store):
    store.mark(date(2024, 1, 1), "a")
    store.mark(date(2024, 2, 1), "b")
    assert store.storage.writes == 2
    persisted = json.loads(store.storage.get_item(KEY))
    assert persisted == store.document()
    assert set(persisted) == {"2024-01", "2024-02"}


def test_unmark_absent_date_does_not_write(store):
    assert store.unmark(date(2024, 1, 1)) is False
    assert store.storage.writes == 0


def test_keys_agree_for_datetime_input(store):
    store.mark(datetime(2024, 1, 31, 23, 59), "late")
    assert store.document() == {
        "2024-01": {"2024-01-31": {"note": "late", "timestamp": 1_700_000_000_000}}
    }


@pytest.mark.parametrize("raw", ["{not json", "[1, 2]", '"text"', ""])
def test_malformed_document_starts_empty(raw):
    store = MessCutStore(MemoryStorage({KEY: raw}))
    assert store.document() == {}
    assert store.monthly_count(2024, 0) == 0


def test_misfiled_and_non_object_entries_are_dropped_on_load(capsys):
    raw = json.dumps(
        {
            "2024-03": {
                "2024-03-15": "junk",
                "2024-04-01": {"note": "wrong month", "timestamp": 1},
                "2024-03-20": {"note": "kept", "timestamp": 2},
            },
            "2024-05": ["not", "a", "bucket"],
        }
    )
    store = MessCutStore(MemoryStorage({KEY: raw}))

    assert store.monthly_count(2024, 2) == 1
    assert store.monthly_count(2024, 3) == 0
    assert not store.is_marked(date(2024, 3, 15))
    assert not store.is_marked(date(2024, 4, 1))
    assert store.get(date(2024, 3, 20)) == Mark(note="kept", timestamp=2)
    marked = [d for d, _ in store.marks()]
    assert len(marked) == store.monthly_count(2024, 2)
    assert "Dropped 3 malformed entries" in capsys.readouterr().out


def test_read_and_write_failures_are_swallowed(capsys):
    store = MessCutStore(_BrokenStorage())
    store.mark(date(2024, 6, 1), "kept in memory")
    assert store.is_marked(date(2024, 6, 1))
    out = capsys.readouterr().out
    assert "Error loading data" in out
    assert "Error saving data" in out


def test_document_round_trips_through_file_storage(tmp_path):
    first = MessCutStore(FileStorage(tmp_path), clock=lambda: 42)
    first.mark(date(2024, 3, 15), "skip")
    first.mark(date(2024, 3, 16), "")
    first.mark(date(2025, 1, 1), "new year")

    second = MessCutStore(FileStorage(tmp_path))
    assert second.document() == first.document()
    assert second.get(date(2024, 3, 15)).note == "skip"


def test_marks_are_chronological(store):
    store.mark(date(2024, 2, 10), "b")
    store.mark(date(2023, 12, 1), "a")
    store.mark(date(2024, 2, 3), "c")
    assert [d for d, _ in store.marks()] == [date(2023, 12, 1), date(2024, 2, 3), date(2024, 2, 10)]
