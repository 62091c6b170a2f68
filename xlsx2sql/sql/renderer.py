from __future__ import annotations

from ..models.sql_value import (
    SqlBoolean,
    SqlDateTime,
    SqlInteger,
    SqlNull,
    SqlNumber,
    SqlText,
    SqlValue,
)
from ..models.table import Table
from .formatter import format_identifier, format_number, format_string_literal

"""Statement renderer: Table -> one batched INSERT statement.

Output shape (byte for byte)::

    INSERT INTO `<table>` (`<c1>`, `<c2>`) VALUES
    (<v1>,<v2>),
    (<v1>,<v2>);

Column list is ", " separated, tuple members are "," separated, tuples are
joined with ",\\n" and the statement ends with ";" (no trailing newline; the
caller picks the separator between statements).
"""

__all__ = [
    "SheetSkipError",
    "NoDataError",
    "RowArityError",
    "literal",
    "render",
]


class SheetSkipError(Exception):
    """Base for per-sheet conditions that skip the sheet without aborting the run."""
    error_type = "SHEET_SKIPPED"


class NoDataError(SheetSkipError):
    """Header exists but there are no data rows (or no columns) to render."""
    error_type = "NO_DATA"


class RowArityError(Exception):
    """A row's value count does not match the column count (hard failure)."""


def literal(value: SqlValue) -> str:
    if isinstance(value, SqlNull):
        return "NULL"
    if isinstance(value, SqlText):
        return format_string_literal(value.value)
    if isinstance(value, SqlNumber):
        text = format_number(float(value.value))
        return "NULL" if text is None else text
    if isinstance(value, SqlInteger):
        return str(int(value.value))
    if isinstance(value, SqlBoolean):
        return "1" if value.value else "0"
    if isinstance(value, SqlDateTime):
        # quoted only: timestamp text is not quote-escaped
        return f"'{value.value}'"
    raise TypeError(f"not a SqlValue: {value!r}")


def render(table: Table) -> str:
    """Render a Table as a single multi-row INSERT statement.

    Raises:
        NoDataError: table has no columns or no rows
        RowArityError: a row length differs from the column count
    """
    if not table.columns:
        raise NoDataError(f"table '{table.name}' has no columns")
    if not table.rows:
        raise NoDataError(f"table '{table.name}' has no data rows")

    width = len(table.columns)
    tuples: list[str] = []
    for index, row in enumerate(table.rows):
        if len(row) != width:
            raise RowArityError(
                f"table '{table.name}' row {index + 1}: expected {width} values, got {len(row)}"
            )
        tuples.append("(" + ",".join(literal(v) for v in row) + ")")

    columns = ", ".join(format_identifier(c) for c in table.columns)
    values = ",\n".join(tuples)
    return f"INSERT INTO {format_identifier(table.name)} ({columns}) VALUES\n{values};"
