"""Rich Console factory and theme for jesus-menu output.

Creates Console instances that render to a StringIO buffer, preserving
the ``render_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

MENU_THEME = Theme(
    {
        "menu.error": "bold red",
        "menu.notice": "bold yellow",
        "menu.url": "underline cyan",
        "menu.date": "bold",
        "menu.dim": "dim",
        "menu.meal.lunch": "green",
        "menu.meal.dinner": "blue",
        "menu.meal.formal": "magenta",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes.
        width: Override terminal width. URLs are never wrapped below 120.
    """
    return Console(
        file=StringIO(),
        theme=MENU_THEME,
        no_color=no_color,
        highlight=False,
        soft_wrap=True,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_meal(meal: str) -> str:
    """Return the Rich style name for a meal, or ``""`` if unknown."""
    style = f"menu.meal.{meal}"
    return style if style in MENU_THEME.styles else ""
