"""Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from hostkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from hostkit.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render only the primary value, for capture in shell scripts."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if not result.data:
        return ""
    return str(next(iter(result.data.values())))


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="host.ok"), Text(f"  {result.op}", style="host.op"))


def _field(console: Console, key: str, value: Any) -> None:
    if key in ("canonical_address", "command"):
        style = "host.address"
    elif key == "path":
        style = "host.path"
    else:
        style = ""
    console.print(Text(f"  {key}: ", style="host.key"), Text(str(value), style=style), sep="")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        for key, value in result.meta.items():
            console.print(Text(f"    {key}: {value}", style="dim"))


def _render_escape(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "command", result.data["command"])
    if verbose:
        for i, word in enumerate(result.data["escaped"]):
            _field(console, f"arg[{i}]", word)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="host.error"),
        Text(f"  {result.op}", style="host.op"),
        Text(f" — {message}"),
    )
    if error and verbose:
        console.print(Text(f"  code: {error.code}", style="host.code"))
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "escape": _render_escape,
}
