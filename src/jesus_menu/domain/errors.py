"""Error taxonomy for menu operations.

Every failure is terminal for the current invocation. Services convert
these into a failed ServiceResult keyed by ``code``.
"""

from __future__ import annotations


class MenuError(Exception):
    """Base class for all jesus-menu failures."""

    code = "MENU_ERROR"
    prefix = "Error"

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.prefix}: {self.reason}"


class InvalidDateError(MenuError):
    """A date token was malformed or named an impossible date."""

    code = "INVALID_DATE"
    prefix = "Invalid date"


class BrowserLaunchError(MenuError):
    """The operating system could not open a browser for the URL."""

    code = "BROWSER_LAUNCH_FAILED"
    prefix = "Browser error"
