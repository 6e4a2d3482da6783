"""Commands: fixed lunch and dinner menus."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jesus_menu.commands._base import MenuCommand
from jesus_menu.domain.types import MealEvent

if TYPE_CHECKING:
    from jesus_menu.commands._context import AppContext


@click.command(
    "l",
    cls=MenuCommand,
    examples="""\
  jesus-menu l
  jesus-menu --dry-run l""",
)
@click.pass_obj
def lunch(app: AppContext) -> None:
    """Open lunch menu."""
    app.emit(app.menu.open_meal(MealEvent.LUNCH))


@click.command(
    "d",
    cls=MenuCommand,
    examples="""\
  jesus-menu d
  jesus-menu --json d""",
)
@click.pass_obj
def dinner(app: AppContext) -> None:
    """Open dinner menu."""
    app.emit(app.menu.open_meal(MealEvent.DINNER))
