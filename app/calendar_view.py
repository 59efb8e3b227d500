"""Month grid model behind the MessCut calendar page."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, List, Optional

from app.date_utils import WEEKDAY_LABELS, first_of_month, is_today, shift_month
from app.mess_cut_store import MessCutStore

GRID_CELLS = 42  # 6 weeks x 7 days

DateListener = Callable[[date], None]


@dataclass(frozen=True)
class DayCell:
    date: date
    is_current_month: bool
    is_today: bool
    is_marked: bool


class CalendarView:
    headers = WEEKDAY_LABELS

    def __init__(
        self,
        store: MessCutStore,
        current: Optional[date] = None,
        today: Optional[Callable[[], date]] = None,
    ):
        self.store = store
        self._today = today or date.today
        self._current = first_of_month(current or self._today())
        self._listeners: List[DateListener] = []
        self.cells: List[DayCell] = []

    @property
    def current_month(self) -> date:
        return self._current

    # ---- listeners ----
    def add_date_click_listener(self, listener: DateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_date_click_listener(self, listener: DateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def click(self, when: date) -> None:
        for listener in list(self._listeners):
            listener(when)

    # ---- grid ----
    def _cell(self, when: date, current: bool, today: date) -> DayCell:
        return DayCell(
            date=when,
            is_current_month=current,
            is_today=is_today(when, today),
            is_marked=self.store.is_marked(when),
        )

    def render(self) -> List[DayCell]:
        """Rebuild the 42-cell grid for the displayed month (weeks start on Sunday)."""

        today = self._today()
        first = self._current
        next_first = shift_month(first, 1)
        leading = (first.weekday() + 1) % 7  # Sunday = 0

        cells: List[DayCell] = []
        for offset in range(leading, 0, -1):
            cells.append(self._cell(first - timedelta(days=offset), False, today))

        day = first
        while day < next_first:
            cells.append(self._cell(day, True, today))
            day += timedelta(days=1)

        trailing = GRID_CELLS - len(cells)
        for offset in range(trailing):
            cells.append(self._cell(next_first + timedelta(days=offset), False, today))

        self.cells = cells
        return cells

    def previous_month(self) -> List[DayCell]:
        self._current = shift_month(self._current, -1)
        return self.render()

    def next_month(self) -> List[DayCell]:
        self._current = shift_month(self._current, 1)
        return self.render()


__all__ = ["GRID_CELLS", "DayCell", "CalendarView"]
