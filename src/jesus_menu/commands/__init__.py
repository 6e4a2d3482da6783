"""Subcommand modules for jesus-menu.

Provides register_commands() which uses deferred imports to keep
``jesus-menu --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the meal commands and the help aliases on the root group."""
    from jesus_menu.commands.formal import formal
    from jesus_menu.commands.help_cmd import help_cmd
    from jesus_menu.commands.meals import dinner, lunch

    cli.add_command(lunch)
    cli.add_command(dinner)
    cli.add_command(formal)
    cli.add_command(help_cmd, name="h")
    cli.add_command(help_cmd, name="help")
