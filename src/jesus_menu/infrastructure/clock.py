"""Clock providers.

The dispatcher reads the time exactly once per invocation through a
``Clock`` so tests can pin "now" without touching the system clock.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        """Return the current local date and time."""
        ...


class SystemClock:
    """Local wall-clock time from the operating system."""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock:
    """A clock frozen at a given instant."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
