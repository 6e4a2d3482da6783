"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from rich.text import Text

from jesus_menu.output.console import create_console, get_output, style_for_meal

if TYPE_CHECKING:
    from rich.console import Console

    from jesus_menu.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console)
    if verbose and result.meta:
        _render_meta(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: the URL, the notice, or the error."""
    if not result.ok:
        return _error_line(result)
    if result.op == "open_menu":
        return str(result.data.get("url", ""))
    if result.op == "formal_notice":
        return str(result.data.get("message", ""))
    return f"OK: {result.op}"


# ── Renderers ─────────────────────────────────────────────────────────


def _error_line(result: ServiceResult) -> str:
    message = result.error.message if result.error else "Unknown error"
    return f"Error: {message}"


def _render_open_menu(result: ServiceResult, console: Console) -> None:
    meal = str(result.data.get("meal", ""))
    verb = "Opening" if result.data.get("launched", True) else "Would open"
    heading = Text(f"{verb} ")
    heading.append(f"{meal} menu", style=style_for_meal(meal))
    if "date" in result.data:
        heading.append(" for ")
        heading.append(f"{result.data['weekday']} {result.data['date']}", style="menu.date")
    console.print(heading)
    console.print(Text(f"  {result.data.get('url', '')}", style="menu.url"))


def _render_formal_notice(result: ServiceResult, console: Console) -> None:
    console.print(Text(str(result.data.get("message", "")), style="menu.notice"))
    console.print(str(result.data.get("formal_days", "")))


def _render_error(result: ServiceResult, console: Console) -> None:
    console.print(Text(_error_line(result), style="menu.error"))


def _render_generic(result: ServiceResult, console: Console) -> None:
    console.print(f"OK: {result.op}")
    for key, value in result.data.items():
        console.print(f"  {key}: {value}")


def _render_meta(result: ServiceResult, console: Console) -> None:
    assert result.meta is not None
    console.print(Text("  meta:", style="menu.dim"))
    for key, value in result.meta.items():
        console.print(Text(f"    {key}: {value}", style="menu.dim"))


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "open_menu": _render_open_menu,
    "formal_notice": _render_formal_notice,
}
