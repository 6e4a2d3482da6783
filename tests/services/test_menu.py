"""Tests for MenuService."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import pytest

from jesus_menu.config.models import DigiboardConfig, ScheduleConfig
from jesus_menu.domain.types import MealEvent
from jesus_menu.infrastructure.clock import FixedClock
from jesus_menu.services.menu import MenuService
from tests.conftest import (
    DINNER_URL,
    FORMAL_URL,
    LUNCH_URL,
    FailingLauncher,
    RecordingLauncher,
)


def _service(clock: FixedClock, browser: RecordingLauncher, **kwargs: object) -> MenuService:
    return MenuService(clock, browser, **kwargs)  # type: ignore[arg-type]


class TestOpenMeal:
    def test_lunch(self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher) -> None:
        result = _service(clock_at(), browser).open_meal(MealEvent.LUNCH)
        assert result.ok
        assert result.op == "open_menu"
        assert result.data == {"meal": "lunch", "url": LUNCH_URL, "launched": True}
        assert browser.opened == [LUNCH_URL]

    def test_dinner(self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher) -> None:
        result = _service(clock_at(), browser).open_meal(MealEvent.DINNER)
        assert result.data["url"] == DINNER_URL
        assert result.meta == {"command": "dinner"}
        assert browser.opened == [DINNER_URL]

    def test_custom_digiboard(
        self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher
    ) -> None:
        digiboard = DigiboardConfig(base_url="http://localhost/menu.php", lunch_event=9)
        result = _service(clock_at(), browser, digiboard=digiboard).open_meal(MealEvent.LUNCH)
        assert result.data["url"] == "http://localhost/menu.php?event_id=9"

    def test_no_launch(self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher) -> None:
        result = _service(clock_at(), browser, launch=False).open_meal(MealEvent.LUNCH)
        assert result.ok
        assert result.data["launched"] is False
        assert browser.opened == []


class TestOpenDefault:
    @pytest.mark.parametrize(
        ("hour", "expected"),
        [(0, LUNCH_URL), (12, LUNCH_URL), (13, LUNCH_URL), (14, DINNER_URL), (23, DINNER_URL)],
    )
    def test_hour_cutoff(
        self,
        clock_at: Callable[..., FixedClock],
        browser: RecordingLauncher,
        hour: int,
        expected: str,
    ) -> None:
        result = _service(clock_at(hour=hour), browser).open_default()
        assert result.ok
        assert browser.opened == [expected]
        assert result.meta == {"command": "default", "hour": hour}

    def test_boundary_is_strict_at_minute_59(self, browser: RecordingLauncher) -> None:
        clock = FixedClock(datetime(2024, 3, 15, 13, 59, 59))
        _service(clock, browser).open_default()
        assert browser.opened == [LUNCH_URL]

    def test_configured_cutoff(
        self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher
    ) -> None:
        schedule = ScheduleConfig(dinner_after_hour=17)
        _service(clock_at(hour=17), browser, schedule=schedule).open_default()
        _service(clock_at(hour=18), browser, schedule=schedule).open_default()
        assert browser.opened == [LUNCH_URL, DINNER_URL]


class TestOpenFormal:
    def test_without_date(
        self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher
    ) -> None:
        result = _service(clock_at(), browser).open_formal()
        assert result.ok
        assert result.data["url"] == FORMAL_URL
        assert "date" not in result.data
        assert browser.opened == [FORMAL_URL]

    def test_formal_day(self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher) -> None:
        result = _service(clock_at(2024, 3, 10), browser).open_formal("03-15")
        assert result.ok
        assert result.op == "open_menu"
        assert result.data["date"] == "2024-03-15"
        assert result.data["weekday"] == "Friday"
        assert browser.opened == [f"{FORMAL_URL}&date=2024-03-15"]

    def test_day_token_rolls_month(
        self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher
    ) -> None:
        # 2024-04-02 is a Tuesday.
        result = _service(clock_at(2024, 3, 15), browser).open_formal("02")
        assert result.data["date"] == "2024-04-02"
        assert browser.opened == [f"{FORMAL_URL}&date=2024-04-02"]

    def test_not_formal_day(
        self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher
    ) -> None:
        result = _service(clock_at(2024, 3, 10), browser).open_formal("03-14")
        assert result.ok
        assert result.op == "formal_notice"
        assert result.data["formal"] is False
        assert result.data["weekday"] == "Thursday"
        assert result.data["message"] == "There is no formal hall on this day."
        assert result.data["formal_days"] == (
            "Formal halls are only on Tuesdays, Wednesdays, Fridays, and Sundays."
        )
        assert browser.opened == []

    @pytest.mark.parametrize("token", ["abc", "", "2024-13-01", "99"])
    def test_invalid_token(
        self, clock_at: Callable[..., FixedClock], browser: RecordingLauncher, token: str
    ) -> None:
        result = _service(clock_at(), browser).open_formal(token)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_DATE"
        assert result.error.message.startswith("Invalid date: ")
        assert result.error.detail["token"] == token
        assert browser.opened == []


class TestBrowserFailure:
    def test_surfaces_launch_error(self, clock_at: Callable[..., FixedClock]) -> None:
        svc = MenuService(clock_at(), FailingLauncher("no display"))
        result = svc.open_meal(MealEvent.DINNER)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "BROWSER_LAUNCH_FAILED"
        assert result.error.message == "Browser error: no display"
        assert result.error.detail == {"url": DINNER_URL}

    def test_no_launch_skips_browser(self, clock_at: Callable[..., FixedClock]) -> None:
        svc = MenuService(clock_at(), FailingLauncher(), launch=False)
        assert svc.open_formal().ok
