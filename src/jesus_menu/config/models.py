"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, jesus_menu.toml only contains
overrides. No config file is needed at all for normal use.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from jesus_menu.domain.types import MealEvent
from jesus_menu.domain.urls import DEFAULT_BASE_URL

# --- jesus_menu.toml sections ---


class DigiboardConfig(BaseModel):
    """[digiboard] section."""

    model_config = {"frozen": True}

    base_url: str = DEFAULT_BASE_URL
    lunch_event: int = int(MealEvent.LUNCH)
    dinner_event: int = int(MealEvent.DINNER)
    formal_event: int = int(MealEvent.FORMAL)

    def event_id(self, meal: MealEvent) -> int:
        """Configured ``event_id`` for *meal*."""
        return {
            MealEvent.LUNCH: self.lunch_event,
            MealEvent.DINNER: self.dinner_event,
            MealEvent.FORMAL: self.formal_event,
        }[meal]


class ScheduleConfig(BaseModel):
    """[schedule] section."""

    model_config = {"frozen": True}

    # Dinner is chosen when the local hour is strictly greater than this.
    dinner_after_hour: int = Field(default=13, ge=0, le=23)

