"""MenuService — decide which digiboard page to open and open it.

Operations:
- ``open_meal``: lunch or dinner, unqualified.
- ``open_default``: lunch or dinner by the current local hour.
- ``open_formal``: formal hall, optionally for a resolved date. A date
  without formal hall is a successful no-op, not an error.

INVARIANT: the clock is read at most once per operation.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from jesus_menu.config.models import DigiboardConfig, ScheduleConfig
from jesus_menu.domain.dates import resolve_date
from jesus_menu.domain.errors import BrowserLaunchError, InvalidDateError
from jesus_menu.domain.formal import formal_days_text, is_formal_day, weekday_name
from jesus_menu.domain.types import MealEvent
from jesus_menu.domain.urls import menu_url
from jesus_menu.infrastructure.browser import BrowserUnavailableError
from jesus_menu.services.base import BaseService
from jesus_menu.services.result import ServiceResult

if TYPE_CHECKING:
    from jesus_menu.infrastructure.browser import BrowserLauncher
    from jesus_menu.infrastructure.clock import Clock

logger = logging.getLogger(__name__)

NOT_FORMAL_MESSAGE = "There is no formal hall on this day."


class MenuService(BaseService):
    """Opens lunch, dinner, and formal hall menus."""

    def __init__(
        self,
        clock: Clock,
        browser: BrowserLauncher,
        *,
        digiboard: DigiboardConfig | None = None,
        schedule: ScheduleConfig | None = None,
        launch: bool = True,
    ) -> None:
        super().__init__(clock, browser)
        self._digiboard = digiboard or DigiboardConfig()
        self._schedule = schedule or ScheduleConfig()
        self._launch = launch

    # ── Operations ────────────────────────────────────────────────────

    def open_meal(self, meal: MealEvent) -> ServiceResult:
        """Open the undated menu page for *meal*."""
        return self._open(meal, command=meal.name.lower())

    def open_default(self) -> ServiceResult:
        """Open dinner after the cutoff hour, lunch otherwise.

        The comparison is strict: at exactly the cutoff hour lunch opens.
        """
        now = self._clock.now()
        cutoff = self._schedule.dinner_after_hour
        meal = MealEvent.DINNER if now.hour > cutoff else MealEvent.LUNCH
        logger.debug("Default command at hour %d (cutoff %d) -> %s", now.hour, cutoff, meal.name)
        return self._open(meal, command="default", meta={"hour": now.hour})

    def open_formal(self, token: str | None = None) -> ServiceResult:
        """Open the formal hall menu, resolving *token* to a date if given."""
        if token is None:
            return self._open(MealEvent.FORMAL, command="formal")

        today = self._clock.now().date()
        try:
            target = resolve_date(token, today)
        except InvalidDateError as exc:
            return self._failure("open_menu", exc, token=token, today=today.isoformat())

        logger.debug("Resolved %r against %s -> %s", token, today, target)
        if not is_formal_day(target):
            return self._not_formal(target, token)
        return self._open(MealEvent.FORMAL, command="formal", on=target)

    # ── Helpers ───────────────────────────────────────────────────────

    def _open(
        self,
        meal: MealEvent,
        *,
        command: str,
        on: date | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        url = menu_url(
            self._digiboard.event_id(meal),
            on=on,
            base_url=self._digiboard.base_url,
        )
        if self._launch:
            try:
                self._browser.open(url)
            except BrowserUnavailableError as exc:
                return self._failure("open_menu", BrowserLaunchError(str(exc)), url=url)

        data: dict[str, Any] = {
            "meal": meal.name.lower(),
            "url": url,
            "launched": self._launch,
        }
        if on is not None:
            data["date"] = on.isoformat()
            data["weekday"] = weekday_name(on)
        return ServiceResult(
            ok=True,
            op="open_menu",
            data=data,
            meta={"command": command, **(meta or {})},
        )

    @staticmethod
    def _not_formal(target: date, token: str) -> ServiceResult:
        return ServiceResult(
            ok=True,
            op="formal_notice",
            data={
                "date": target.isoformat(),
                "weekday": weekday_name(target),
                "formal": False,
                "message": NOT_FORMAL_MESSAGE,
                "formal_days": f"Formal halls are only on {formal_days_text()}.",
            },
            meta={"command": "formal", "token": token},
        )
