"""Format ServiceResult for the CLI.

JSON mode dumps the full result model. Human mode prints a status line,
then either a table (for ``items`` payloads) or key-value pairs; errors
list every constraint violation on its own line.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from eden.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from eden.services.result import ServiceResult


def format_result(
    result: ServiceResult,
    *,
    json_output: bool = False,
    verbose: bool = False,
) -> str:
    """Format a ServiceResult for display."""
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(Text("OK", style="eden.ok"), Text(result.op, style="eden.op"))
        items = result.data.get("items")
        if isinstance(items, list) and items:
            _render_items(console, items)
            _render_pairs(console, {k: v for k, v in result.data.items() if k != "items"})
        else:
            _render_pairs(console, result.data)
    else:
        _render_error(console, result)

    if verbose and result.meta:
        _render_pairs(console, {"meta": result.meta})
    return get_output(console).rstrip("\n")


def _render_pairs(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        console.print(Text(f"  {key}:", style="eden.key"), Text(str(value)))


def _render_items(console: Console, items: list[Any]) -> None:
    rows = [item for item in items if isinstance(item, dict)]
    if not rows:
        return
    columns = list(rows[0].keys())
    table = Table(show_header=True, header_style="eden.field")
    for column in columns:
        table.add_column(column)
    for row in rows:
        table.add_row(*(Text("" if row.get(c) is None else str(row.get(c))) for c in columns))
    console.print(table)


def _render_error(console: Console, result: ServiceResult) -> None:
    error = result.error
    message = error.message if error else "Unknown error"
    code = error.code if error else "UNKNOWN"
    console.print(
        Text("ERROR", style="eden.error"),
        Text(result.op, style="eden.op"),
        Text(f"[{code}]"),
    )
    console.print(Text(f"  {message}"))
    if error is not None:
        for violation in error.detail.get("violations", []):
            label = Text(f"  - {violation['field']}:", style="eden.field")
            console.print(label, Text(violation["message"]))
