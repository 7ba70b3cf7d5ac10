"""Human-readable rendering of ServiceResult, one renderer per operation.

:func:`render_result` picks a renderer from ``result.op``; operations
without one get a plain key/value listing.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from rich.table import Table
from rich.text import Text

from a11yctl.output.console import BufferedConsole, style_for_principle
from a11yctl.services.result import ServiceResult

Renderer = Callable[[ServiceResult, BufferedConsole, bool], None]

# Sites beyond this many collapse to a count unless --verbose.
SITE_TABLE_LIMIT = 20

_PATH_KEYS = ("path", "source", "written")


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    console = BufferedConsole()
    if result.ok:
        _RENDERERS.get(result.op, _render_generic)(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return console.getvalue().rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One-line (or one-path-per-line) output for ``--quiet``."""
    if not result.ok:
        message = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {message}"
    if result.op == "analysis_run" and result.data.get("files_written"):
        return "\n".join(result.data["files_written"])
    if result.op == "copy_csv":
        return str(result.data.get("path", ""))
    return f"OK: {result.op}"


def _headline(console: BufferedConsole, status: str, op: str, message: str = "") -> None:
    line = Text.assemble(
        (status, "a11y.ok" if status == "OK" else "a11y.error"),
        "  ",
        (op, "a11y.op"),
    )
    if message:
        line.append(f": {message}")
    console.print(line)


def _field(console: BufferedConsole, key: str, value: Any) -> None:
    if key in _PATH_KEYS or key.endswith(("_path", "_dir")):
        style = "a11y.path"
    elif key.endswith("violations"):
        style = "a11y.count"
    else:
        style = ""
    console.print(Text.assemble((f"  {key}: ", "a11y.key"), (str(value), style)))


def _table(*columns: str) -> Table:
    table = Table(show_header=True, pad_edge=False)
    for column in columns:
        table.add_column(column)
    return table


def _render_error(result: ServiceResult, console: BufferedConsole, verbose: bool) -> None:
    error = result.error
    _headline(console, "ERROR", result.op, error.message if error else "Unknown error")
    if verbose and error and error.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in error.detail.items():
            _field(console, f"  {key}", value)


def _render_meta(result: ServiceResult, console: BufferedConsole) -> None:
    if result.meta:
        console.print(Text("  meta:", style="dim"))
        for key, value in result.meta.items():
            _field(console, f"  {key}", json.dumps(value, separators=(",", ":")))


def _render_analysis(result: ServiceResult, console: BufferedConsole, verbose: bool) -> None:
    data = result.data
    _headline(console, "OK", result.op)
    for key in ("mode", "standard_id", "audits_path", "total_violations"):
        if data.get(key) is not None:
            _field(console, key, data[key])

    principles: dict[str, Any] = data.get("principles") or {}
    if principles:
        table = _table("Principle", "Violations")
        table.columns[1].justify = "right"
        for name, total in principles.items():
            table.add_row(Text(name, style=style_for_principle(name)), str(total))
        console.print(table)

    sites: list[dict[str, Any]] = data.get("sites") or []
    if sites and (verbose or len(sites) <= SITE_TABLE_LIMIT):
        table = _table("Site", "Compliance", "Other")
        for site in sites:
            violations = site.get("violations") or {}
            table.add_row(
                Text(str(site.get("siteId", "")), style="a11y.site"),
                str(violations.get("compliance", 0)),
                str(violations.get("other", 0)),
            )
        console.print(table)
    elif sites:
        _field(console, "sites", len(sites))

    for path in data.get("files_written") or []:
        _field(console, "written", path)
    if verbose:
        _render_meta(result, console)


def _render_csv_list(result: ServiceResult, console: BufferedConsole, verbose: bool) -> None:
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = _table("#", "File", *(["Path"] if verbose else []))
    for item in items:
        row = [str(item.get("index", "")), str(item.get("name", ""))]
        if verbose:
            row.append(str(item.get("path", "")))
        table.add_row(*row)
    console.print(table)
    console.print(f"{result.data.get('count', len(items))} files")


def _render_copy(result: ServiceResult, console: BufferedConsole, verbose: bool) -> None:
    _headline(console, "OK", result.op)
    _field(console, "source", result.data.get("source", ""))
    _field(console, "path", result.data.get("path", ""))


def _render_generic(result: ServiceResult, console: BufferedConsole, verbose: bool) -> None:
    _headline(console, "OK", result.op)
    for key, value in result.data.items():
        if isinstance(value, dict | list):
            value = json.dumps(value, separators=(",", ":"))
        _field(console, key, value)
    if verbose:
        _render_meta(result, console)


_RENDERERS: dict[str, Renderer] = {
    "analysis_run": _render_analysis,
    "list_csv": _render_csv_list,
    "copy_csv": _render_copy,
}
