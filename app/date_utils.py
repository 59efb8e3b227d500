"""Calendar date helpers shared by the MessCut store and views."""

from __future__ import annotations

import calendar
from datetime import date, datetime
from typing import Optional, Tuple

WEEKDAY_LABELS: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def as_date(value: date | datetime) -> date:
    """Reduce ``value`` to its calendar date (datetimes keep their own wall clock)."""

    if isinstance(value, datetime):
        return value.date()
    return value


def day_key(value: date | datetime) -> str:
    """Return the ``YYYY-MM-DD`` key for ``value``."""

    d = as_date(value)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def month_key(value: date | datetime) -> str:
    """Return the ``YYYY-MM`` key for ``value``."""

    d = as_date(value)
    return month_key_for(d.year, d.month - 1)


def month_key_for(year: int, month_index: int) -> str:
    """``YYYY-MM`` key for a zero-based ``month_index`` (0 = January)."""

    return f"{year:04d}-{month_index + 1:02d}"


def is_today(value: date | datetime, today: Optional[date] = None) -> bool:
    return as_date(value) == (today or date.today())


def is_same_month(first: date | datetime, second: date | datetime) -> bool:
    a, b = as_date(first), as_date(second)
    return a.year == b.year and a.month == b.month


def days_in_month(year: int, month: int) -> int:
    """Number of days in ``month`` (1-12) of ``year``."""

    return calendar.monthrange(year, month)[1]


def first_of_month(value: date | datetime) -> date:
    d = as_date(value)
    return d.replace(day=1)


def shift_month(value: date | datetime, delta: int) -> date:
    """First day of the month ``delta`` months away from ``value``."""

    d = as_date(value)
    index = d.year * 12 + (d.month - 1) + delta
    year, month0 = divmod(index, 12)
    return date(year, month0 + 1, 1)


def format_dialog_date(value: date | datetime) -> str:
    d = as_date(value)
    return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"


def month_label(value: date | datetime) -> str:
    d = as_date(value)
    return f"{MONTH_NAMES[d.month - 1]} {d.year}"


__all__ = [
    "WEEKDAY_LABELS",
    "MONTH_NAMES",
    "as_date",
    "day_key",
    "month_key",
    "month_key_for",
    "is_today",
    "is_same_month",
    "days_in_month",
    "first_of_month",
    "shift_month",
    "format_dialog_date",
    "month_label",
]
