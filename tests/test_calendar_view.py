from datetime import date, timedelta

import pytest

from app.calendar_view import GRID_CELLS, CalendarView
from app.date_utils import days_in_month
from app.kv_storage import MemoryStorage
from app.mess_cut_store import MessCutStore


@pytest.fixture
def store():
    return MessCutStore(MemoryStorage(), clock=lambda: 0)


def _view(store, current, today=date(2024, 1, 15)):
    return CalendarView(store, current=current, today=lambda: today)


def test_january_2024_grid(store):
    cells = _view(store, date(2024, 1, 20)).render()

    assert len(cells) == GRID_CELLS
    current = [c for c in cells if c.is_current_month]
    assert len(current) == 31
    assert cells[0].date == date(2023, 12, 31)
    assert not cells[0].is_current_month
    assert cells[1].date == date(2024, 1, 1)
    assert cells[1].is_current_month
    assert cells[-1].date == date(2024, 2, 10)


@pytest.mark.parametrize("year", [2015, 2023, 2024, 2025])
def test_every_month_has_42_consecutive_cells(store, year):
    view = _view(store, date(year, 1, 1))
    for month in range(1, 13):
        cells = view.render()
        assert len(cells) == 42
        assert sum(c.is_current_month for c in cells) == days_in_month(year, month)
        assert cells[0].date.weekday() == 6  # Sunday
        for prev, nxt in zip(cells, cells[1:]):
            assert nxt.date - prev.date == timedelta(days=1)
        view.next_month()


def test_flags_today_and_marks(store):
    store.mark(date(2024, 1, 3), "trip")
    store.mark(date(2024, 2, 1), "adjacent month")
    cells = _view(store, date(2024, 1, 1), today=date(2024, 1, 15)).render()
    by_date = {c.date: c for c in cells}

    assert by_date[date(2024, 1, 15)].is_today
    assert sum(c.is_today for c in cells) == 1
    assert by_date[date(2024, 1, 3)].is_marked
    assert by_date[date(2024, 2, 1)].is_marked
    assert not by_date[date(2024, 2, 1)].is_current_month


def test_render_is_idempotent_and_replaces_cells(store):
    view = _view(store, date(2024, 1, 1))
    first = view.render()
    second = view.render()
    assert first == second
    assert view.cells is second


def test_navigation_shifts_month_and_rerenders(store):
    view = _view(store, date(2024, 1, 31))
    assert view.current_month == date(2024, 1, 1)

    cells = view.previous_month()
    assert view.current_month == date(2023, 12, 1)
    assert sum(c.is_current_month for c in cells) == 31

    view.next_month()
    cells = view.next_month()
    assert view.current_month == date(2024, 2, 1)
    assert sum(c.is_current_month for c in cells) == 29


def test_click_notifies_registered_listeners(store):
    view = _view(store, date(2024, 1, 1))
    seen = []
    listener = seen.append
    view.add_date_click_listener(listener)
    view.add_date_click_listener(listener)
    view.click(date(2024, 1, 2))
    assert seen == [date(2024, 1, 2)]

    view.remove_date_click_listener(listener)
    view.click(date(2024, 1, 3))
    assert seen == [date(2024, 1, 2)]
