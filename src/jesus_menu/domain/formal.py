"""Formal hall eligibility rule."""

from __future__ import annotations

from datetime import date

# ISO weekday numbers, Monday == 1.
FORMAL_WEEKDAYS: frozenset[int] = frozenset({2, 3, 5, 7})

_WEEKDAY_NAMES = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}


def is_formal_day(day: date) -> bool:
    """Return True if formal hall runs on *day*."""
    return day.isoweekday() in FORMAL_WEEKDAYS


def weekday_name(day: date) -> str:
    return _WEEKDAY_NAMES[day.isoweekday()]


def formal_days_text() -> str:
    """Human listing of formal weekdays, e.g. ``Tuesdays, ... and Sundays``."""
    names = [f"{_WEEKDAY_NAMES[n]}s" for n in sorted(FORMAL_WEEKDAYS)]
    return f"{', '.join(names[:-1])}, and {names[-1]}"
