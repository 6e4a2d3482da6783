"""BaseService — shared foundation for jesus-menu services.

Every service receives its external capabilities (clock, browser) at
construction time so operations stay deterministic under test.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from jesus_menu.domain.errors import MenuError
from jesus_menu.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from jesus_menu.infrastructure.browser import BrowserLauncher
    from jesus_menu.infrastructure.clock import Clock

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class MenuService(BaseService):
            def open_lunch(self) -> ServiceResult:
                ...
    """

    def __init__(self, clock: Clock, browser: BrowserLauncher) -> None:
        self._clock = clock
        self._browser = browser

    @staticmethod
    def _failure(op: str, exc: MenuError, **detail: Any) -> ServiceResult:
        """Convert a domain error into a failed result."""
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
