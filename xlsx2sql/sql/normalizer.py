from __future__ import annotations

from datetime import date, datetime, time

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
from ..models.sql_value import (
    SqlBoolean,
    SqlDateTime,
    SqlInteger,
    SqlNull,
    SqlNumber,
    SqlText,
    SqlValue,
)

"""Value normalizer: RawCell -> SqlValue.

Mapping:
    EmptyCell       -> SqlNull
    TextCell        -> SqlText (verbatim, no trimming)
    WholeNumberCell -> SqlInteger
    FloatCell       -> SqlNumber
    BooleanCell     -> SqlBoolean
    TimestampCell   -> SqlDateTime (ISO text, see timestamp_text)
    ErrorCell       -> SqlNull (error code is dropped silently)
    DurationCell    -> SqlText

Pure, no I/O. Every RawCell variant is handled.
"""

__all__ = [
    "normalize",
    "normalize_row",
    "timestamp_text",
]


def timestamp_text(value: datetime | date | time) -> str:
    """Stable ISO-like text: ``YYYY-MM-DD HH:MM:SS[.ffffff]``, ``YYYY-MM-DD`` or ``HH:MM:SS``.

    datetime must be checked before date (datetime is a date subclass).
    pandas.Timestamp is a datetime subclass and takes the same path.
    """
    if isinstance(value, datetime):
        return value.isoformat(sep=" ")
    return value.isoformat()


def normalize(cell: RawCell) -> SqlValue:
    if isinstance(cell, EmptyCell):
        return SqlNull()
    if isinstance(cell, TextCell):
        return SqlText(cell.value)
    if isinstance(cell, WholeNumberCell):
        return SqlInteger(cell.value)
    if isinstance(cell, FloatCell):
        return SqlNumber(cell.value)
    if isinstance(cell, BooleanCell):
        return SqlBoolean(cell.value)
    if isinstance(cell, TimestampCell):
        return SqlDateTime(timestamp_text(cell.value))
    if isinstance(cell, ErrorCell):
        return SqlNull()
    if isinstance(cell, DurationCell):
        return SqlText(cell.value)
    raise TypeError(f"not a RawCell: {cell!r}")


def normalize_row(cells: list[RawCell]) -> list[SqlValue]:
    return [normalize(c) for c in cells]
