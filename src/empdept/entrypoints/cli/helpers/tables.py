"""Render query results as Rich tables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import is_dataclass
from typing import Any

from rich.table import Table

from empdept.queries.rows import fields_of

NULL = "[dim]NULL[/dim]"


def _as_mapping(row: Any) -> Mapping[str, Any]:
    if isinstance(row, Mapping) or (is_dataclass(row) and not isinstance(row, type)):
        return fields_of(row)
    return {"value": row}


def _cell(value: Any) -> str:
    return NULL if value is None else str(value)


def render_rows(rows: Iterable[Any], title: str | None = None) -> Table:
    """Build a table with one column per field, in first-seen order.

    Rows may be records, `Row` projections, mappings or plain scalars (shown
    in a single ``value`` column). Missing and absent values print as NULL.
    """
    mappings = [_as_mapping(row) for row in rows]
    columns: dict[str, None] = {}
    for mapping in mappings:
        columns.update(dict.fromkeys(mapping))

    table = Table(title=title, caption=f"{len(mappings)} row(s)")
    for name in columns:
        table.add_column(name.upper())
    for mapping in mappings:
        table.add_row(*(_cell(mapping.get(name)) for name in columns))
    return table
