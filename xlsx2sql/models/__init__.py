"""Domain models for the xlsx -> SQL INSERT converter.

RawCell variants (reader output), SqlValue variants (normalizer output), the
per-sheet Table and the aggregated ConversionResult.
"""

from .cells import (
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
from .conversion_result import ConversionResult, SheetStat, SkippedSheet
from .error_record import ErrorRecord
from .sql_value import SqlBoolean, SqlDateTime, SqlInteger, SqlNull, SqlNumber, SqlText, SqlValue
from .table import Table

__all__ = [
    # Cells
    "RawCell",
    "EmptyCell",
    "TextCell",
    "WholeNumberCell",
    "FloatCell",
    "BooleanCell",
    "TimestampCell",
    "ErrorCell",
    "DurationCell",
    # SQL values
    "SqlValue",
    "SqlNull",
    "SqlText",
    "SqlNumber",
    "SqlInteger",
    "SqlBoolean",
    "SqlDateTime",
    # Results
    "Table",
    "ConversionResult",
    "SheetStat",
    "SkippedSheet",
    "ErrorRecord",
]
