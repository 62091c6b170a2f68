from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

"""Conversion result models.

``ConversionResult`` aggregates what a workbook conversion produced: the
rendered statements in sheet order plus a report of the sheets that were
skipped and why. Timing fields feed the SUMMARY line.
"""

__all__ = [
    "SheetStat",
    "SkippedSheet",
    "ConversionResult",
]


@dataclass(frozen=True)
class SheetStat:
    """Per-sheet statistics for a rendered statement."""
    sheet_name: str
    table_name: str
    rows: int  # rendered data rows


@dataclass(frozen=True)
class SkippedSheet:
    """A sheet that produced no statement.

    reason is the UPPER_SNAKE error type (EMPTY_SHEET / MISSING_HEADERS / NO_DATA).
    """
    sheet_name: str
    reason: str
    message: str


@dataclass(frozen=True)
class ConversionResult:
    statements: list[str]  # sheet order
    sheet_stats: list[SheetStat] = field(default_factory=list)
    skipped: list[SkippedSheet] = field(default_factory=list)
    start_time: datetime | None = None
    end_time: datetime | None = None

    @property
    def total_sheets(self) -> int:
        return len(self.sheet_stats) + len(self.skipped)

    @property
    def converted_sheets(self) -> int:
        return len(self.sheet_stats)

    @property
    def total_rows(self) -> int:
        return sum(s.rows for s in self.sheet_stats)

    @property
    def elapsed_seconds(self) -> float:
        if self.start_time is None or self.end_time is None:
            return 0.0
        return (self.end_time - self.start_time).total_seconds()

    @property
    def all_skipped(self) -> bool:
        """True when nothing was rendered (including a workbook without sheets)."""
        return not self.statements
