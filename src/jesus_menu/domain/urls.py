"""Digiboard menu URL construction."""

from __future__ import annotations

from datetime import date
from urllib.parse import urlencode

from jesus_menu.domain.types import MealEvent

DEFAULT_BASE_URL = "https://apps.jesus.cam.ac.uk/foodmenuview/digiboard.php"


def menu_url(
    event: MealEvent | int,
    *,
    on: date | None = None,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """Build the digiboard URL for *event*, optionally qualified by date.

    Examples:
        >>> menu_url(MealEvent.LUNCH)
        'https://apps.jesus.cam.ac.uk/foodmenuview/digiboard.php?event_id=1'
        >>> menu_url(MealEvent.FORMAL, on=date(2024, 3, 15))
        'https://apps.jesus.cam.ac.uk/foodmenuview/digiboard.php?event_id=5&date=2024-03-15'
    """
    params: dict[str, str] = {"event_id": str(int(event))}
    if on is not None:
        params["date"] = on.isoformat()
    return f"{base_url}?{urlencode(params)}"
