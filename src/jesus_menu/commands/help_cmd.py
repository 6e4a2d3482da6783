"""Command: print the usage summary."""

from __future__ import annotations

import click

from jesus_menu.commands._base import MenuCommand

USAGE = """\
Jesus College Menu Viewer

USAGE:
    jesus-menu [OPTIONS] [COMMAND]

COMMANDS:
    l               Open lunch menu
    d               Open dinner menu
    f               Open formal menu
    f DD            Open formal menu for specific day
    f MM-DD         Open formal menu for specific month and day
    f YYYY-MM-DD    Open formal menu for specific date
    h, help         Print this help message

If no command is provided, opens lunch menu before 2pm and dinner menu after.
Run 'jesus-menu --help' for global options."""


@click.command("help", cls=MenuCommand)
def help_cmd() -> None:
    """Print this help message."""
    click.echo(USAGE)
