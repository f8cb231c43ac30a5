"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from expiryctl.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from expiryctl.services.result import ServiceResult


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items") or result.data.get("results")
    if items and isinstance(items, list):
        return "\n".join(str(item.get("domain", "")) for item in items if item.get("domain"))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK/ERROR status line."""
    label = Text("OK", style="exp.ok")
    op = Text(f"  {result.op}", style="exp.op")
    console.print(label, op, sep="", end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="exp.key")
    if key == "domain":
        v = Text(str(value), style="exp.domain")
    elif key == "status":
        v = Text(str(value), style=style_for_status(str(value)))
    elif isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    else:
        v = Text(str(value))
    console.print(k, v, sep="", end="")
    console.print()


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="exp.error")
    op = Text(f"  {result.op}", style="exp.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _records_table(rows: list[dict[str, Any]], *, title: str | None = None) -> Table:
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("Domain", style="exp.domain")
    table.add_column("Expiry")
    table.add_column("Days", justify="right")
    table.add_column("Status / last sent")
    for row in rows:
        status = row.get("status")
        if status is not None:
            tail = Text(str(status), style=style_for_status(str(status)))
        else:
            tail = Text(str(row.get("last_notification_threshold") or "-"))
        table.add_row(
            str(row.get("domain") or row.get("error", "")),
            str(row.get("expiry") or "-"),
            str(row.get("days_remaining") if row.get("days_remaining") is not None else "-"),
            tail,
        )
    return table


# ── Operation renderers ───────────────────────────────────────────────


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single monitor tick."""
    _status_line(console, result)
    console.print(Text(f"  {result.data.get('message', '')}"))
    keys = ("domain", "status", "expiry", "days_remaining", "notification_sent")
    if verbose:
        keys = ("monitor", "tld", *keys)
    for key in keys:
        value = result.data.get(key)
        if value is not None:
            _field(console, key, value)


def _render_run(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    console.print(_records_table(result.data.get("results", [])))


def _render_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if not items:
        console.print(Text("  no records", style="dim"))
        return
    console.print(_records_table(items))


def _render_show(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one record, with the WHOIS attributes as a nested block."""
    _status_line(console, result)
    for key, value in result.data.items():
        if key == "whois_info":
            continue
        _field(console, key, value if value is not None else "-")
    info = result.data.get("whois_info") or {}
    if info:
        console.print(Text("  whois_info:", style="exp.key"))
        for k, v in info.items():
            console.print(Text(f"    {k}: ", style="exp.key"), Text(str(v)), sep="", end="")
            console.print()


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "check": _render_check,
    "run": _render_run,
    "list": _render_list,
    "show": _render_show,
}
