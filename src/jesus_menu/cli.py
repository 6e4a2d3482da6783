"""Root CLI group for jesus-menu with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from jesus_menu import __version__
from jesus_menu.commands import register_commands
from jesus_menu.commands._base import MenuGroup
from jesus_menu.commands._context import AppContext
from jesus_menu.config.settings import MenuSettings


@click.group(
    cls=MenuGroup,
    invoke_without_command=True,
    examples="""\
  jesus-menu
  jesus-menu f 2024-03-15
  jesus-menu --dry-run f 21
  jesus-menu --json d""",
)
@click.version_option(version=__version__, prog_name="jesus-menu")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-n", "--dry-run", is_flag=True, help="Print the menu URL without opening a browser.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    dry_run: bool,
    config_path: str | None,
) -> None:
    """Open the Jesus College dining hall menus in a browser.

    With no command, opens the lunch menu, or the dinner menu once the
    local hour is past the cutoff (13 unless configured).
    """
    injected: dict[str, Any] = ctx.obj if isinstance(ctx.obj, dict) else {}
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "dry_run": dry_run,
    }
    # Unset flags must not mask JESUS_MENU_* env vars or the TOML file.
    settings = MenuSettings.from_cli(
        config_path=config_path,
        **{name: True for name, value in flags.items() if value},
    )
    ctx.obj = AppContext(
        settings,
        clock=injected.get("clock"),
        browser=injected.get("browser"),
    )
    if ctx.invoked_subcommand is None:
        ctx.obj.emit(ctx.obj.menu.open_default())


register_commands(cli)
