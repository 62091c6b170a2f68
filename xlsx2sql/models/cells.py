from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Union

"""RawCell variants produced by the workbook reader.

Each spreadsheet cell is classified into exactly one of the frozen dataclasses
below. ``RawCell`` is the union of all of them and is what the value
normalizer consumes.
"""

__all__ = [
    "EmptyCell",
    "TextCell",
    "WholeNumberCell",
    "FloatCell",
    "BooleanCell",
    "TimestampCell",
    "ErrorCell",
    "DurationCell",
    "RawCell",
]


@dataclass(frozen=True)
class EmptyCell:
    """Blank cell."""


@dataclass(frozen=True)
class TextCell:
    value: str


@dataclass(frozen=True)
class WholeNumberCell:
    value: int


@dataclass(frozen=True)
class FloatCell:
    value: float


@dataclass(frozen=True)
class BooleanCell:
    value: bool


@dataclass(frozen=True)
class TimestampCell:
    """Date / time / datetime cell (naive, as stored in the workbook)."""
    value: datetime | date | time


@dataclass(frozen=True)
class ErrorCell:
    """Formula or computation error such as ``#DIV/0!``."""
    code: str = "#N/A"


@dataclass(frozen=True)
class DurationCell:
    """Elapsed-time cell, kept as its ISO 8601 duration text (e.g. ``P0DT1H30M0S``)."""
    value: str


RawCell = Union[
    EmptyCell,
    TextCell,
    WholeNumberCell,
    FloatCell,
    BooleanCell,
    TimestampCell,
    ErrorCell,
    DurationCell,
]
