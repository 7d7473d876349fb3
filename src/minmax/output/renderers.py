"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from minmax.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from minmax.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the bare result value."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "result" in result.data:
        return format_value(result.data["result"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def format_value(value: Any) -> str:
    """Display form of an operand; JSON round-trips turn tuples into lists."""
    if isinstance(value, (list, tuple)):
        return "(" + ", ".join(format_value(v) for v in value) + ")"
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="minmax.ok")
    op = Text(f"  {result.op}", style="minmax.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}:", style="minmax.key")
    v = Text(value if isinstance(value, str) else format_value(value), style=style)
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(Text(f"    {k}: {v}"))


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="minmax.error")
    op = Text(f"  {result.op}", style="minmax.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_reduction(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render min/max results."""
    _status_line(console, result)
    _field(console, "result", result.data.get("result"), style="minmax.result")
    operands = result.data.get("operands", [])
    _field(console, "operands", ", ".join(format_value(v) for v in operands))
    if verbose:
        _render_meta(console, result)


def _render_clamp(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "result", data.get("result"), style="minmax.result")
    _field(console, "value", data.get("value"))
    bounds = f"[{format_value(data.get('lower'))}, {format_value(data.get('upper'))}]"
    _field(console, "bounds", bounds, style="minmax.bound")
    _field(console, "clamped", data.get("clamped", "none"))
    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback: status line plus every data field."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "min": _render_reduction,
    "max": _render_reduction,
    "clamp": _render_clamp,
}
