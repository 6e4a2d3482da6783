"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Holds the injected clock and browser launcher and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import structlog

from jesus_menu.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from jesus_menu.config.settings import MenuSettings
    from jesus_menu.infrastructure.browser import BrowserLauncher
    from jesus_menu.infrastructure.clock import Clock
    from jesus_menu.services.menu import MenuService
    from jesus_menu.services.result import ServiceResult

log = structlog.get_logger(__name__)


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    *clock* and *browser* default to the system clock and the stdlib
    ``webbrowser`` launcher. Tests inject fakes by invoking the CLI with
    ``obj={"clock": ..., "browser": ...}``.
    """

    def __init__(
        self,
        settings: MenuSettings,
        *,
        clock: Clock | None = None,
        browser: BrowserLauncher | None = None,
    ) -> None:
        self.settings = settings

        from jesus_menu.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if clock is None:
            from jesus_menu.infrastructure.clock import SystemClock

            clock = SystemClock()
        if browser is None:
            from jesus_menu.infrastructure.browser import WebBrowserLauncher

            browser = WebBrowserLauncher()
        self.clock = clock
        self.browser = browser

    @property
    def menu(self) -> MenuService:
        """A MenuService wired to this invocation's settings."""
        from jesus_menu.services.menu import MenuService

        return MenuService(
            self.clock,
            self.browser,
            digiboard=self.settings.digiboard,
            schedule=self.settings.schedule,
            launch=not self.settings.dry_run,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        log.debug("result", op=result.op, ok=result.ok)
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
