"""Meal events shown on the digiboard menu endpoint."""

from __future__ import annotations

from enum import IntEnum


class MealEvent(IntEnum):
    """Digiboard ``event_id`` for each meal service."""

    LUNCH = 1
    DINNER = 2
    FORMAL = 5
