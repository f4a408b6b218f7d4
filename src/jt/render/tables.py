"""Table rendering: one level of a mapping or sequence to a table."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..options import RenderOptions
from ..values import ValueKind, kind_of
from .backends import emit_table
from .cells import EMPTY_CELL, format_cell, key_cell, render_cell

INDEX_HEADER = "[key]"
SCALAR_LABEL = "value"


@dataclass
class TableData:
    """Cells and caption handed to the drawing backend."""

    headers: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)
    caption: Optional[str] = None


def render_table(value: Any, options: RenderOptions) -> str:
    """Render a value as a complete table in ``options.output_format``."""
    return emit_table(build_table(value, options), options.output_format)


def build_table(value: Any, options: RenderOptions) -> TableData:
    kind = kind_of(value)
    if kind is ValueKind.MAPPING:
        return _mapping_table(value, options)
    if kind is ValueKind.SEQUENCE:
        return _sequence_table(value, options)
    return TableData(rows=[[SCALAR_LABEL, format_cell(value, options)]])


def _mapping_table(mapping: Dict[str, Any], options: RenderOptions) -> TableData:
    table = TableData()
    if options.show_details:
        table.caption = f"[-] object, {len(mapping)} properties"

    for key in sorted(mapping):
        table.rows.append(_pair_row(key, mapping[key], options))
    return table


def _sequence_table(items: List[Any], options: RenderOptions) -> TableData:
    table = TableData()
    if options.show_details:
        table.caption = f"[-] array, {len(items)} items"
    if not items:
        return table

    columns = sequence_columns(items)
    table.headers = [INDEX_HEADER] + (columns or [""])

    for index, item in enumerate(items):
        if columns and kind_of(item) is ValueKind.MAPPING:
            row = [key_cell(index, options).styled(options)]
            for column in columns:
                cell = render_cell(item[column], options) if column in item else EMPTY_CELL
                row.append(cell.styled(options))
        else:
            row = _pair_row(index, item, options)
        table.rows.append(_pad(row, len(table.headers)))
    return table


def sequence_columns(items: List[Any]) -> List[str]:
    """Column names taken from the first item when it is a mapping."""
    if items and kind_of(items[0]) is ValueKind.MAPPING:
        return sorted(items[0])
    return []


def _pair_row(key: Any, value: Any, options: RenderOptions) -> List[str]:
    return [
        key_cell(key, options).styled(options),
        render_cell(value, options).styled(options),
    ]


def _pad(row: List[str], width: int) -> List[str]:
    return row + [""] * (width - len(row))
