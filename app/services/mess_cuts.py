"""Service layer for marking and unmarking mess cuts.

The coordinator and pages talk to this module instead of the store so the
Streamlit views stay focused on rendering.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Dict, Optional

from app.mess_cut_store import Mark, MessCutStore

__all__ = ["MessCutService"]


class MessCutService:
    def __init__(self, store: MessCutStore):
        self.store = store

    def mark_mess_cut(self, when: date | datetime, note: str = "") -> Mark:
        return self.store.mark(when, note)

    def unmark_mess_cut(self, when: date | datetime) -> bool:
        return self.store.unmark(when)

    def get_mess_cut_data(self, when: date | datetime) -> Optional[Mark]:
        return self.store.get(when)

    def get_monthly_stats(self, year: int, month: int) -> Dict[str, int]:
        """Stats for ``year`` and zero-based ``month``."""

        return {"count": self.store.monthly_count(year, month)}
