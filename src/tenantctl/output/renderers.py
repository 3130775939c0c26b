"""Operation-specific Rich renderers for ServiceResult.

Renderers write to a StringIO-backed Console and are dispatched on
``result.op`` by :func:`render_result`. Ops without a dedicated renderer
fall through to the generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tenantctl.output.console import create_console, get_output, style_for_user_type

if TYPE_CHECKING:
    from rich.console import Console

    from tenantctl.services.result import ServiceResult

Renderer = Callable[["ServiceResult", "Console"], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a string.

    Output is plain text whenever the console is not attached to a
    terminal. With *verbose*, error details are printed too.
    """
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


# ── Helpers ───────────────────────────────────────────────────────────


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"), default=str)
    return str(value)


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK:", style="tenant.ok"), Text(result.op, style="tenant.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="tenant.key")
    if key == "id" or key.endswith("_id"):
        v = Text(_format_value(value), style="tenant.id")
    elif key == "name":
        v = Text(_format_value(value), style="tenant.name")
    else:
        v = Text(_format_value(value))
    console.print(k + v)


def _cell(value: Any, style: str = "") -> Text:
    # Text cells keep user data (names with brackets) out of markup parsing.
    return Text("" if value is None else str(value), style=style)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    line = Text("ERROR: ", style="tenant.error") + Text(f"{result.op}:", style="tenant.op")
    if err is None:
        console.print(line + Text(" Unknown error"))
        return
    console.print(line + Text(f" {err.message} ({err.code})"))
    if verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {_format_value(v)}"))


# ── Generic renderer ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


# ── List renderers ────────────────────────────────────────────────────


def _organization_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="tenant.id", no_wrap=True)
    table.add_column("Name", style="tenant.name")
    table.add_column("Description")
    table.add_column("Created", style="dim")
    for item in items:
        table.add_row(
            _cell(item.get("id")),
            _cell(item.get("name")),
            _cell(item.get("description")),
            _cell(item.get("created_at")),
        )
    return table


def _mapping_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Resource Type")
    table.add_column("Resource ID", style="tenant.id", no_wrap=True)
    table.add_column("User ID", style="tenant.id", no_wrap=True)
    table.add_column("User Type")
    for item in items:
        user_type = str(item.get("user_type", ""))
        table.add_row(
            _cell(item.get("resource_type")),
            _cell(item.get("resource_id")),
            _cell(item.get("user_id")),
            _cell(user_type, style_for_user_type(user_type)),
        )
    return table


def _render_organizations(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    _status_line(console, result)
    if items:
        console.print(_organization_table(items))
    console.print(Text(f"{result.data.get('count', len(items))} organizations"))


def _render_mappings(result: ServiceResult, console: Console) -> None:
    items = result.data.get("items", [])
    _status_line(console, result)
    if items:
        console.print(_mapping_table(items))
    console.print(Text(f"{result.data.get('count', len(items))} mappings"))


_OP_RENDERERS: dict[str, Renderer] = {
    "find_organizations": _render_organizations,
    "find_user_resource_mappings": _render_mappings,
}
