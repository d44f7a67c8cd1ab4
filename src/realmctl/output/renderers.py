"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from realmctl.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from realmctl.services.result import ServiceResult

# Ops whose data is a document the user will copy (printed as raw JSON).
DOCUMENT_OPS = frozenset({"multiply", "send_donkeys", "export_realms"})


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False, indent: int = 2) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if not result.ok:
        _render_error(result, console, verbose=verbose)
    elif result.op in DOCUMENT_OPS:
        _render_document(result, console, indent=indent)
    else:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op in DOCUMENT_OPS:
        return _json.dumps(result.data, separators=(",", ":"), ensure_ascii=False)

    items = result.data.get("items")
    if items and isinstance(items, list):
        return "\n".join(_extract_id(item) for item in items if _extract_id(item))

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _extract_id(item: Any) -> str:
    """Extract an id (or selector value) from a dict item."""
    if isinstance(item, dict):
        for key in ("id", "value"):
            val = item.get(key)
            if val is not None:
                return str(val)
    return ""


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="realm.ok")
    op = Text(f"  {result.op}", style="realm.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="realm.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="realm.id")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for k, v in result.meta.items():
        console.print(f"    {k}: {v}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="realm.error")
    op = Text(f"  {result.op}", style="realm.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Documents ─────────────────────────────────────────────────────────


def _render_document(result: ServiceResult, console: Console, *, indent: int) -> None:
    """Write the payload as pretty-printed JSON, unstyled and unwrapped."""
    console.out(_json.dumps(result.data, indent=indent, ensure_ascii=False), highlight=False)


# ── Realm renderers ───────────────────────────────────────────────────


def _render_realm_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    if not items:
        console.print("No realms saved.")
        return

    resource = result.data.get("resource", "Donkey")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="realm.id", no_wrap=True)
    table.add_column("Name", style="realm.name")
    table.add_column("Output")
    table.add_column(resource, style="realm.carrier", justify="center")

    for item in items:
        table.add_row(
            str(item.get("id", "")),
            Text(str(item.get("name", ""))),
            Text(", ".join(item.get("output", []))),
            "yes" if item.get("carrier") else "",
        )

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} realms")


def _render_options(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    selected = result.data.get("selected")
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("", no_wrap=True)
    table.add_column("Value", style="realm.id", no_wrap=True)
    table.add_column("Label", style="realm.name")

    for item in result.data.get("items", []):
        value = str(item.get("value", ""))
        marker = Text("*", style="realm.selected") if value == selected else Text("")
        table.add_row(marker, Text(value), Text(str(item.get("label", ""))))

    console.print(table)
    realm_id = result.data.get("realm_id") or "(none)"
    console.print()
    console.print(Text("Realm ID: "), Text(str(realm_id), style="realm.id"), sep="")


def _render_save(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("count", "carriers", "key", "path"):
        if key in result.data:
            _field(console, key, result.data[key])


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "show_realms": _render_realm_table,
    "save_realms": _render_save,
    "realm_options": _render_options,
    "select_realm": _render_generic,
    "set_custom_id": _render_generic,
}
