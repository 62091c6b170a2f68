from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ConverterConfig
from ..excel.reader import SheetData, read_workbook
from ..logging.error_log import ErrorLogBuffer
from ..models.conversion_result import ConversionResult, SheetStat, SkippedSheet
from ..models.error_record import ErrorRecord
from ..sql.renderer import SheetSkipError, render
from ..sql.table_builder import build_table
from .progress import ProgressTracker

"""Conversion service: workbook -> ordered INSERT statements.

Each sheet is converted independently. Per-sheet skip conditions (empty
sheet, blank header, header without data) are recorded and the run goes on;
RowArityError and read failures propagate to the caller.

Sheets that map to the same table name yield separate sequential statements
(no merging).
"""

__all__ = [
    "convert_sheets",
    "convert_workbook",
]

logger = logging.getLogger(__name__)


def convert_sheets(
    sheets: Sequence[SheetData],
    table_name_for: Callable[[str], str] | None = None,
    error_log: ErrorLogBuffer | None = None,
    file_name: str = "",
) -> ConversionResult:
    """Render one statement per sheet, preserving sheet order.

    Args:
        sheets: sheets with header-first rows
        table_name_for: sheet name -> table name (default: identity)
        error_log: receives one ErrorRecord per skipped sheet
        file_name: workbook name for error records

    Returns:
        ConversionResult with statements, per-sheet stats and the skip report
    """
    start_time = datetime.now(UTC)
    statements: list[str] = []
    stats: list[SheetStat] = []
    skipped: list[SkippedSheet] = []

    with ProgressTracker(len(sheets)) as progress:
        for sheet in sheets:
            progress.start_sheet(sheet.sheet_name)
            table_name = table_name_for(sheet.sheet_name) if table_name_for else sheet.sheet_name
            try:
                table = build_table(sheet.sheet_name, sheet.rows, table_name=table_name)
                statement = render(table)
            except SheetSkipError as e:
                logger.warning("sheet=%s skipped (%s): %s", sheet.sheet_name, e.error_type, e)
                skip = SkippedSheet(sheet_name=sheet.sheet_name, reason=e.error_type, message=str(e))
                skipped.append(skip)
                if error_log is not None:
                    error_log.append(ErrorRecord.for_skipped_sheet(file_name, skip))
                progress.finish_sheet(converted=len(stats), skipped=len(skipped))
                continue

            statements.append(statement)
            stats.append(SheetStat(sheet_name=sheet.sheet_name, table_name=table.name, rows=table.row_count))
            logger.debug(
                "sheet=%s table=%s columns=%d rows=%d",
                sheet.sheet_name,
                table.name,
                len(table.columns),
                table.row_count,
            )
            progress.finish_sheet(converted=len(stats), skipped=len(skipped))

    return ConversionResult(
        statements=statements,
        sheet_stats=stats,
        skipped=skipped,
        start_time=start_time,
        end_time=datetime.now(UTC),
    )


def convert_workbook(
    path: Path,
    config: ConverterConfig | None = None,
    error_log: ErrorLogBuffer | None = None,
) -> ConversionResult:
    """Read a workbook and convert every (selected) sheet.

    Raises:
        WorkbookReadError: workbook cannot be read
        RowArityError: a data row cannot be reconciled with its header
    """
    cfg = config or ConverterConfig()
    sheets = read_workbook(path, target_sheets=cfg.sheets, skip_blank_rows=cfg.skip_blank_rows)
    if cfg.sheets is not None:
        found = {s.sheet_name for s in sheets}
        for missing in cfg.sheets:
            if missing not in found:
                logger.warning("configured sheet not found in %s: %s", path.name, missing)
    logger.debug("file=%s sheets=%s", path.name, [s.sheet_name for s in sheets])
    return convert_sheets(sheets, table_name_for=cfg.table_name_for, error_log=error_log, file_name=path.name)
