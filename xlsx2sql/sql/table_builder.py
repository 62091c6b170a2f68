from __future__ import annotations

from collections.abc import Sequence

from ..models.cells import (
    BooleanCell,
    DurationCell,
    EmptyCell,
    ErrorCell,
    FloatCell,
    RawCell,
    TextCell,
    TimestampCell,
    WholeNumberCell,
)
from ..models.table import Table
from .formatter import format_number
from .normalizer import normalize_row, timestamp_text
from .renderer import NoDataError, RowArityError, SheetSkipError

"""Pair a sheet's header row with its data rows to build a Table.

First row = header (column names), remaining rows = data in document order.
"""

__all__ = [
    "EmptySheetError",
    "MissingHeadersError",
    "header_text",
    "extract_columns",
    "build_table",
]


class EmptySheetError(SheetSkipError):
    """Sheet has no rows at all, so no header can be read."""
    error_type = "EMPTY_SHEET"


class MissingHeadersError(SheetSkipError):
    """Header row exists but every name in it is blank."""
    error_type = "MISSING_HEADERS"


def header_text(cell: RawCell) -> str:
    """Display text of a header cell, used as the column name."""
    if isinstance(cell, TextCell):
        return cell.value
    if isinstance(cell, EmptyCell):
        return ""
    if isinstance(cell, WholeNumberCell):
        return str(cell.value)
    if isinstance(cell, FloatCell):
        text = format_number(cell.value)
        return text if text is not None else str(cell.value)
    if isinstance(cell, BooleanCell):
        return "true" if cell.value else "false"
    if isinstance(cell, TimestampCell):
        return timestamp_text(cell.value)
    if isinstance(cell, ErrorCell):
        return cell.code
    if isinstance(cell, DurationCell):
        return cell.value
    raise TypeError(f"not a RawCell: {cell!r}")


def extract_columns(sheet_name: str, rows: Sequence[Sequence[RawCell]]) -> list[str]:
    if not rows:
        raise EmptySheetError(f"sheet '{sheet_name}' has no rows")
    columns = [header_text(c) for c in rows[0]]
    if all(not c.strip() for c in columns):
        raise MissingHeadersError(f"sheet '{sheet_name}' has no column headers")
    return columns


def build_table(
    sheet_name: str,
    rows: Sequence[Sequence[RawCell]],
    table_name: str | None = None,
) -> Table:
    """Build a Table from raw rows.

    Parameters
    ----------
    sheet_name: sheet name (used in messages and as default table name)
    rows: all rows of the sheet, header first
    table_name: destination table override

    Raises
    ------
    EmptySheetError / MissingHeadersError / NoDataError: sheet is skipped
    RowArityError: a data row cannot be reconciled with the header
    """
    columns = extract_columns(sheet_name, rows)
    data_rows = rows[1:]
    if not data_rows:
        raise NoDataError(f"sheet '{sheet_name}' has headers but no data rows")

    width = len(columns)
    values = []
    for offset, raw in enumerate(data_rows):
        if len(raw) != width:
            # 2 = header row + 1-based numbering
            raise RowArityError(
                f"sheet '{sheet_name}' row {offset + 2}: {len(raw)} cells for {width} columns"
            )
        values.append(normalize_row(list(raw)))

    return Table(name=table_name or sheet_name, columns=columns, rows=values)
