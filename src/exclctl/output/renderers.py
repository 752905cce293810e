"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from exclctl.output.console import create_console, get_output, style_for_effect

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from exclctl.services.result import ServiceResult

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    time_format: str = DEFAULT_TIME_FORMAT,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, time_format)
        if verbose:
            _render_meta(console, result)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult, *, time_format: str = DEFAULT_TIME_FORMAT) -> str:
    """Render minimal output for ``--quiet`` mode.

    Expansions print one tab-separated ``start end`` pair per line.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "expand":
        return "\n".join(
            f"{_fmt(item['start'], time_format)}\t{_fmt(item['end'], time_format)}"
            for item in result.data.get("items", [])
        )
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _fmt(value: str, time_format: str) -> str:
    return datetime.fromisoformat(value).strftime(time_format)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="excl.ok"), Text(f"  {result.op}", style="excl.op"))


def _field(console: Console, key: str, value: Any) -> None:
    console.print(Text(f"  {key}: ", style="excl.key"), Text(str(value)), sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(f"    {key}: {value}")


# ── Renderers ─────────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, time_format: str) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_check(result: ServiceResult, console: Console, time_format: str) -> None:
    _status_line(console, result)
    _field(console, "count", result.data.get("count", 0))
    for entry in result.data.get("rules", []):
        additive = bool(entry.get("additive"))
        marker = "+" if additive else "-"
        console.print(
            Text(f"  {marker} ", style=style_for_effect(additive)),
            Text(entry["rule"], style="excl.rule"),
            sep="",
        )


def _render_show(result: ServiceResult, console: Console, time_format: str) -> None:
    console.print(Text(result.data.get("dump", "").rstrip("\n")))


def _render_expand(result: ServiceResult, console: Console, time_format: str) -> None:
    data = result.data
    _status_line(console, result)
    span = f"{_fmt(data['start'], time_format)} → {_fmt(data['end'], time_format)}"
    _field(console, "range", span)
    _field(console, "count", data.get("count", 0))

    items = data.get("items", [])
    if not items:
        return

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("Start", style="excl.time")
    table.add_column("End", style="excl.time")
    table.add_column("Duration", justify="right")
    table.add_column("Effect")
    table.add_column("Rule", style="excl.rule")
    for item in items:
        start = datetime.fromisoformat(item["start"])
        end = datetime.fromisoformat(item["end"])
        additive = bool(item.get("additive"))
        table.add_row(
            start.strftime(time_format),
            end.strftime(time_format),
            str(end - start),
            Text("include" if additive else "exclude", style=style_for_effect(additive)),
            item["rule"],
        )
    console.print(table)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    console.print(
        Text("ERROR", style="excl.error"),
        Text(f"  {result.op}", style="excl.op"),
        Text(f"  {message}"),
        sep="",
    )
    if verbose and error is not None:
        _field(console, "code", error.code)
        for key, value in error.detail.items():
            _field(console, key, value)


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console, str], None]] = {
    "check": _render_check,
    "show": _render_show,
    "expand": _render_expand,
}
