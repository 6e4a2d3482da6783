"""BrowserLauncher — hand a URL to the user's default web browser.

Fire and forget: the launched browser process is never tracked. The only
observable outcomes are success or :class:`BrowserUnavailableError`.
"""

from __future__ import annotations

import logging
import webbrowser
from typing import Protocol

logger = logging.getLogger(__name__)


class BrowserUnavailableError(RuntimeError):
    """No browser could be launched for the URL."""


class BrowserLauncher(Protocol):
    def open(self, url: str) -> None:
        """Open *url*, raising BrowserUnavailableError on failure."""
        ...


class WebBrowserLauncher:
    """Launch via the stdlib ``webbrowser`` registry.

    ``webbrowser.open`` reports most failures by returning False (no
    registered browser, no display) rather than raising.
    """

    def open(self, url: str) -> None:
        logger.debug("Launching browser for %s", url)
        try:
            opened = webbrowser.open(url)
        except webbrowser.Error as exc:
            raise BrowserUnavailableError(str(exc)) from exc
        if not opened:
            raise BrowserUnavailableError("no runnable browser found")

