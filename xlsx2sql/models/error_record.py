from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from .conversion_result import SkippedSheet

"""Skipped-sheet log record.

One JSON Lines entry per sheet that produced no INSERT statement. ``row`` is
kept for a stable record shape; sheet-level skips always carry -1.
"""

__all__ = [
    "ErrorRecord",
    "SHEET_LEVEL_ROW",
]

SHEET_LEVEL_ROW = -1


def _utc_now_z() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class ErrorRecord:
    """One line of the skip log.

    Attributes:
        timestamp: ISO8601 UTC with 'Z' suffix
        file: workbook file name
        sheet: sheet name
        row: 1-based worksheet row, SHEET_LEVEL_ROW for whole-sheet problems
        error_type: EMPTY_SHEET / MISSING_HEADERS / NO_DATA
        message: human readable reason
    """
    timestamp: str
    file: str
    sheet: str
    row: int
    error_type: str
    message: str

    @staticmethod
    def create(file: str, sheet: str, row: int, error_type: str, message: str) -> ErrorRecord:
        return ErrorRecord(_utc_now_z(), file, sheet, row, error_type, message)

    @classmethod
    def for_skipped_sheet(cls, file: str, skipped: SkippedSheet) -> ErrorRecord:
        """Record for a sheet reported in ConversionResult.skipped."""
        return cls.create(file, skipped.sheet_name, SHEET_LEVEL_ROW, skipped.reason, skipped.message)

    def to_json_line(self) -> str:
        # asdict keeps the key set fixed to the dataclass fields
        return json.dumps(asdict(self), ensure_ascii=False)
