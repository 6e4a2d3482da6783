"""Command: formal hall menu, optionally for a specific date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jesus_menu.commands._base import MenuCommand

if TYPE_CHECKING:
    from jesus_menu.commands._context import AppContext


@click.command(
    "f",
    cls=MenuCommand,
    examples="""\
  jesus-menu f
  jesus-menu f 21
  jesus-menu f 03-15
  jesus-menu f 2024-03-15""",
)
@click.argument("date_token", required=False, metavar="[DD|MM-DD|YYYY-MM-DD]")
@click.pass_obj
def formal(app: AppContext, date_token: str | None) -> None:
    """Open formal menu, optionally for a specific date.

    DD means this month, or next month if the day has already passed.
    MM-DD always means this year.
    """
    app.emit(app.menu.open_formal(date_token))
