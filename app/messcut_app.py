"""Coordinator wiring the store, calendar grid and note dialog together."""

from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Optional

from app.calendar_view import CalendarView, DayCell
from app.date_utils import month_label
from app.mess_cut_store import MessCutStore
from app.note_dialog import NoteDialog
from app.services.mess_cuts import MessCutService


class MessCutApp:
    def __init__(
        self,
        store: MessCutStore,
        today: Optional[Callable[[], date]] = None,
        current: Optional[date] = None,
    ):
        self._today = today or date.today
        self.store = store
        self.service = MessCutService(store)
        self.calendar = CalendarView(store, current=current, today=self._today)
        self.dialog = NoteDialog()
        self.calendar_title = ""
        self.current_month_label = ""
        self.stats: Dict[str, int] = {"count": 0}

        self.calendar.add_date_click_listener(self._on_date_click)
        self.dialog.add_save_listener(self._on_save)
        self.dialog.add_unmark_listener(self._on_unmark)

        self.update_ui()
        self.refresh_calendar()
        self.update_stats()

    # ---- listeners ----
    def _on_date_click(self, when: date) -> None:
        self.dialog.open(when, self.service.get_mess_cut_data(when))

    def _on_save(self, when: date, note: str) -> None:
        self.service.mark_mess_cut(when, note)
        self.refresh_calendar()
        self.update_stats()

    def _on_unmark(self, when: date) -> None:
        self.service.unmark_mess_cut(when)
        self.refresh_calendar()
        self.update_stats()

    # ---- navigation ----
    def previous_month(self) -> None:
        self.calendar.previous_month()
        self.update_ui()
        self.update_stats()

    def next_month(self) -> None:
        self.calendar.next_month()
        self.update_ui()
        self.update_stats()

    # ---- derived state ----
    @property
    def cells(self) -> List[DayCell]:
        return self.calendar.cells

    def update_ui(self) -> None:
        self.calendar_title = month_label(self.calendar.current_month)
        self.current_month_label = month_label(self._today())

    def refresh_calendar(self) -> List[DayCell]:
        return self.calendar.render()

    def update_stats(self) -> Dict[str, int]:
        shown = self.calendar.current_month
        self.stats = self.service.get_monthly_stats(shown.year, shown.month - 1)
        return self.stats


__all__ = ["MessCutApp"]
