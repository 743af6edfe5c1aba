"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). Renderers are
dispatched by ``result.op`` in :func:`render_result`; unknown ops fall
through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from pieshop.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from pieshop.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


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
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if "total" in result.data and result.op == "total":
        return str(result.data["total"])

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if isinstance(item, dict))

    if result.op == "cart_id":
        return str(result.data["cart_id"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _money(value: Any) -> str:
    return f"{value:.2f}" if value is not None else ""


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="pie.ok"), Text(f"  {result.op}", style="pie.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pie.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="pie.id")
    elif key == "name":
        v = Text(str(value), style="pie.name")
    elif key == "total":
        v = Text(_money(value), style="pie.total")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the meta block including the telemetry span tree."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        if k == "telemetry":
            _render_span(console, v, indent=4)
        else:
            console.print(f"    {k}: {v}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = span.get("duration_ms", 0.0)
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = f"{' ' * indent}[{style}]{duration:>8.2f}ms[/{style}]  {span.get('name', '?')}"
    if span.get("annotations"):
        extras = ", ".join(f"{k}={v}" for k, v in span["annotations"].items())
        line += f"  ({extras})"
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


def _pie_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="pie.id", justify="right", no_wrap=True)
    table.add_column("Name", style="pie.name")
    table.add_column("Price", style="pie.price", justify="right")
    table.add_column("")
    for item in items:
        flags: list[str] = []
        if item.get("is_pie_of_the_week"):
            flags.append("[pie.week]pie of the week[/pie.week]")
        if not item.get("in_stock", True):
            flags.append("[pie.soldout]sold out[/pie.soldout]")
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            _money(item.get("price")),
            " ".join(flags),
        )
    return table


def _cart_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="pie.id", justify="right", no_wrap=True)
    table.add_column("Pie", style="pie.name")
    table.add_column("Qty", justify="right")
    table.add_column("Price", style="pie.price", justify="right")
    table.add_column("Subtotal", justify="right")
    for item in items:
        table.add_row(
            str(item.get("id", "")),
            str(item.get("name", "")),
            str(item.get("quantity", "")),
            _money(item.get("price")),
            _money(item.get("line_total")),
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text("ERROR", style="pie.error"), Text(f"  {result.op}", style="pie.op"), "—", msg)
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── Cart renderers ────────────────────────────────────────────────────


def _render_mutation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render add_item / remove_item / clear / cart_id results."""
    _status_line(console, result)
    for key in ("cart_id", "pie_id", "name", "quantity", "removed", "session", "minted"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_cart(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render list_items / cart_summary results."""
    d = result.data
    items = d.get("items", [])
    if not items:
        console.print(Text("Your cart is empty.", style="dim"))
    else:
        console.print(_cart_table(items))
    if "total" in d:
        console.print(
            Text(f"\n{d.get('quantity', 0)} pies", style="pie.key"),
            Text(f"  total {_money(d['total'])} {d.get('currency', '')}".rstrip(), style="pie.total"),
        )
    elif items:
        console.print(f"\n{d.get('count', len(items))} lines")
    if verbose:
        _field(console, "cart_id", d.get("cart_id", ""))
        _render_meta(console, result)


def _render_total(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    console.print(Text(f"{_money(d['total'])} {d.get('currency', '')}".rstrip(), style="pie.total"))
    if verbose:
        _field(console, "cart_id", d.get("cart_id", ""))
        _render_meta(console, result)


# ── Catalog renderers ─────────────────────────────────────────────────


def _render_pies(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    console.print(_pie_table(items))
    console.print(f"\n{result.data.get('count', len(items))} pies")
    if verbose:
        _render_meta(console, result)


def _render_pie(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    lines = [f"price: {_money(d.get('price'))}"]
    if d.get("short_description"):
        lines.append(str(d["short_description"]))
    if verbose and d.get("long_description"):
        lines.append(f"\n{d['long_description']}")
    if d.get("allergy_information"):
        lines.append(f"allergy information: {d['allergy_information']}")
    lines.append("in stock" if d.get("in_stock") else "sold out")
    if d.get("is_pie_of_the_week"):
        lines.append("pie of the week")
    title = f"{d.get('id', '?')} — {d.get('name', 'Unnamed')}"
    console.print(Panel("\n".join(lines), title=title, border_style="dim", expand=False))


def _render_categories(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, pad_edge=False, expand=False)
    table.add_column("ID", style="pie.id", justify="right")
    table.add_column("Name", style="pie.name")
    table.add_column("Description")
    for item in result.data.get("items", []):
        table.add_row(str(item["id"]), str(item["name"]), str(item.get("description", "")))
    console.print(table)


# ── Shop lifecycle renderers ──────────────────────────────────────────


def _render_init(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("name", "shop_root", "config_path", "pies"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _field(console, "db_path", result.data.get("db_path", ""))


def _render_upgrade(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    d = result.data
    for key in ("applied_count", "pending_count", "current", "head", "backup_path", "message"):
        if key in d:
            _field(console, key, d[key])
    if d.get("unstamped"):
        _field(console, "unstamped", "built at head, run upgrade to stamp")
    if d.get("stamped"):
        _field(console, "stamped", d["stamped"])
    if verbose and d.get("pending"):
        console.print()
        for p in d["pending"]:
            console.print(f"  {p['revision']}: {p['description']}")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Status line plus all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":"), default=str))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    # Cart
    "add_item": _render_mutation,
    "remove_item": _render_mutation,
    "clear": _render_mutation,
    "cart_id": _render_mutation,
    "list_items": _render_cart,
    "cart_summary": _render_cart,
    "total": _render_total,
    # Catalog
    "list_pies": _render_pies,
    "pies_of_the_week": _render_pies,
    "get_pie": _render_pie,
    "list_categories": _render_categories,
    # Shop
    "init": _render_init,
    "upgrade": _render_upgrade,
}
