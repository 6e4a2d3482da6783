"""Shared pytest fixtures and test helpers for jesus-menu tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from datetime import datetime
from pathlib import Path

import pytest
from click.testing import CliRunner

from jesus_menu.infrastructure.browser import BrowserUnavailableError
from jesus_menu.infrastructure.clock import FixedClock

MENU_URL = "https://apps.jesus.cam.ac.uk/foodmenuview/digiboard.php"
LUNCH_URL = f"{MENU_URL}?event_id=1"
DINNER_URL = f"{MENU_URL}?event_id=2"
FORMAL_URL = f"{MENU_URL}?event_id=5"


class RecordingLauncher:
    """Browser launcher that records URLs instead of opening them."""

    def __init__(self) -> None:
        self.opened: list[str] = []

    def open(self, url: str) -> None:
        self.opened.append(url)


class FailingLauncher:
    """Browser launcher that always fails."""

    def __init__(self, reason: str = "no display") -> None:
        self.reason = reason

    def open(self, url: str) -> None:
        raise BrowserUnavailableError(self.reason)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def browser() -> RecordingLauncher:
    return RecordingLauncher()


@pytest.fixture
def clock_at() -> Callable[..., FixedClock]:
    """Factory for clocks pinned to a local date and time."""

    def _make(year: int = 2024, month: int = 3, day: int = 10, hour: int = 9) -> FixedClock:
        return FixedClock(datetime(year, month, day, hour, 30))

    return _make


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config overrides.

    Tests that need a config file write ``jesus_menu.toml`` into ``tmp_path``.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JESUS_MENU_CONFIG", raising=False)
    monkeypatch.delenv("JESUS_MENU_DRY_RUN", raising=False)
    monkeypatch.delenv("JESUS_MENU_SCHEDULE__DINNER_AFTER_HOUR", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state; the CLI reconfigures logging on every run."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    menu = logging.getLogger("jesus_menu")
    menu_level = menu.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    menu.setLevel(menu_level)
