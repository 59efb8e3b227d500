# file: app/mess_cut_store.py
"""Mess cut marks keyed by calendar date, persisted as one JSON document.

Document shape (stored under :data:`app.config.STORAGE_KEY`)::

    {"2024-03": {"2024-03-15": {"note": "skip", "timestamp": 1710460800000}}}

The document is read once when the store is built and rewritten in full after
every mutation. Storage failures are printed and swallowed so the UI keeps
working on the in-memory copy.
"""
from __future__ import annotations

import copy
import json
import time
from dataclasses import asdict, dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Iterator, Optional, Tuple

from app.config import STORAGE_KEY
from app.date_utils import day_key, month_key, month_key_for
from app.kv_storage import KeyValueStorage

Document = Dict[str, Dict[str, Dict[str, Any]]]


def _now_ms() -> int:
    return int(time.time() * 1000)


def _log(msg: str) -> None:
    print(f"[MessCut] {msg}")


@dataclass(frozen=True)
class Mark:
    note: str
    timestamp: int

    @classmethod
    def from_dict(cls, row: Dict[str, Any]) -> "Mark":
        note = row.get("note")
        stamp = row.get("timestamp")
        return cls(
            note=note if isinstance(note, str) else "",
            timestamp=int(stamp) if isinstance(stamp, (int, float)) else 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class MessCutStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = STORAGE_KEY,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.storage = storage
        self.key = key
        self._clock = clock or _now_ms
        self.data: Document = self._load()

    # ---- persistence ----
    def _load(self) -> Document:
        try:
            raw = self.storage.get_item(self.key)
            if not raw:
                return {}
            parsed = json.loads(raw)
        except Exception as exc:
            _log(f"Error loading data: {exc}")
            return {}
        if not isinstance(parsed, dict):
            _log(f"Error loading data: expected an object under {self.key!r}")
            return {}
        document: Document = {}
        dropped = 0
        for mk, bucket in parsed.items():
            if not isinstance(bucket, dict):
                dropped += 1
                continue
            # day-keys must live under their own month-key
            clean = {
                dk: row
                for dk, row in bucket.items()
                if isinstance(row, dict) and str(dk).startswith(f"{mk}-")
            }
            dropped += len(bucket) - len(clean)
            document[mk] = clean
        if dropped:
            _log(f"Dropped {dropped} malformed entries from {self.key!r}")
        return document

    def _save(self) -> None:
        try:
            self.storage.set_item(self.key, json.dumps(self.data, ensure_ascii=False))
        except Exception as exc:
            _log(f"Error saving data: {exc}")

    # ---- mutations ----
    def mark(self, when: date | datetime, note: str = "") -> Mark:
        """Insert or overwrite the mark for ``when`` and persist the document."""

        entry = Mark(note=note, timestamp=self._clock())
        self.data.setdefault(month_key(when), {})[day_key(when)] = entry.to_dict()
        self._save()
        return entry

    def unmark(self, when: date | datetime) -> bool:
        """Remove the mark for ``when``. Returns False (and writes nothing) if absent."""

        bucket = self.data.get(month_key(when))
        dk = day_key(when)
        if not bucket or dk not in bucket:
            return False
        del bucket[dk]
        self._save()
        return True

    # ---- queries ----
    def get(self, when: date | datetime) -> Optional[Mark]:
        row = self.data.get(month_key(when), {}).get(day_key(when))
        if not isinstance(row, dict):
            return None
        return Mark.from_dict(row)

    def is_marked(self, when: date | datetime) -> bool:
        return self.get(when) is not None

    def monthly_count(self, year: int, month: int) -> int:
        """Marks stored for ``year`` and zero-based ``month`` (0 = January)."""

        return len(self.data.get(month_key_for(year, month), {}))

    def document(self) -> Document:
        return copy.deepcopy(self.data)

    def marks(self) -> Iterator[Tuple[date, Mark]]:
        """Yield ``(date, Mark)`` pairs in chronological order."""

        for mk in sorted(self.data):
            bucket = self.data[mk]
            for dk in sorted(bucket):
                try:
                    day = date.fromisoformat(dk)
                except ValueError:
                    continue
                if isinstance(bucket[dk], dict):
                    yield day, Mark.from_dict(bucket[dk])


__all__ = ["Mark", "MessCutStore", "Document"]
