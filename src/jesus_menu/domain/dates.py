"""Date token resolution relative to a reference date.

Three token shapes are accepted:
- ``DD``: day of month. A day earlier than today's means next month.
- ``MM-DD``: month and day in the reference year. Never rolls to next year.
- ``YYYY-MM-DD``: a fully qualified date.

INVARIANT: resolution is pure. The result depends only on the token and
the reference date passed in.
"""

from __future__ import annotations

import re
from datetime import date

from jesus_menu.domain.errors import InvalidDateError

_DIGITS = re.compile(r"[0-9]+", re.ASCII)
_ISO_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


def _parse_int(text: str, reason: str) -> int:
    """Parse ASCII digits only; ``int()`` would also take spaces and underscores."""
    if not _DIGITS.fullmatch(text):
        raise InvalidDateError(reason)
    return int(text)


def _make_date(year: int, month: int, day: int, reason: str) -> date:
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(reason) from exc


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def resolve_day(token: str, today: date) -> date:
    """Resolve a ``DD`` token.

    Examples:
        >>> resolve_day("20", date(2024, 3, 15))
        datetime.date(2024, 3, 20)
        >>> resolve_day("02", date(2024, 12, 15))
        datetime.date(2025, 1, 2)
    """
    day = _parse_int(token, "Invalid day format")
    year, month = today.year, today.month
    if day < today.day:
        year, month = _next_month(year, month)
    return _make_date(year, month, day, "Invalid date combination")


def resolve_month_day(token: str, today: date) -> date:
    """Resolve an ``MM-DD`` token in the reference year.

    A date already behind *today* stays in the reference year.
    """
    parts = token.split("-")
    if len(parts) != 2:
        raise InvalidDateError("Invalid MM-DD format")
    month = _parse_int(parts[0], "Invalid month")
    day = _parse_int(parts[1], "Invalid day")
    return _make_date(today.year, month, day, "Invalid date combination")


def resolve_full_date(token: str) -> date:
    """Resolve a ``YYYY-MM-DD`` token, strictly."""
    match = _ISO_DATE.fullmatch(token)
    if match is None:
        raise InvalidDateError("Invalid YYYY-MM-DD format")
    year, month, day = (int(group) for group in match.groups())
    return _make_date(year, month, day, "Invalid YYYY-MM-DD format")


def resolve_date(token: str, today: date) -> date:
    """Map a user-typed date *token* to a calendar date.

    Dispatches on token length. Raises :class:`InvalidDateError` for any
    malformed token or impossible date.
    """
    if len(token) == 2:
        return resolve_day(token, today)
    if len(token) == 5:
        return resolve_month_day(token, today)
    if len(token) == 10:
        return resolve_full_date(token)
    raise InvalidDateError("Invalid date format. Use DD, MM-DD, or YYYY-MM-DD")
