from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd
from openpyxl import load_workbook
from openpyxl.cell.cell import TYPE_ERROR

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

"""Workbook reader: file -> sheets of typed RawCells.

- .xlsx / .xlsm: openpyxl (read_only=True, data_only=True: streamed rows,
  cached formula results). Error cells become ErrorCell, elapsed-time cells
  become DurationCell.
- .xls / .ods and anything else: pandas.ExcelFile (engine chosen by pandas,
  xlrd / odfpy must be installed for those formats). pandas turns error cells
  into NaN there, so they read as EmptyCell rather than ErrorCell.

Grids are trimmed to the used area: leading / trailing blank rows and
columns are dropped so the first non-blank row is the header.
"""

__all__ = [
    "WorkbookReadError",
    "SheetData",
    "OPENPYXL_SUFFIXES",
    "classify_value",
    "read_workbook",
]

OPENPYXL_SUFFIXES = {".xlsx", ".xlsm"}


class WorkbookReadError(Exception):
    """Raised when the workbook cannot be opened or decoded."""


@dataclass
class SheetData:
    sheet_name: str
    rows: list[list[RawCell]]  # header first, rectangular


def classify_value(value: Any) -> RawCell:
    """Map a python / numpy / pandas scalar to its RawCell variant."""
    if isinstance(value, np.datetime64):
        value = pd.Timestamp(value)
    elif isinstance(value, np.timedelta64):
        value = pd.Timedelta(value)
    if value is None or value is pd.NaT:
        return EmptyCell()
    # bool before int: bool is an int subclass
    if isinstance(value, (bool, np.bool_)):
        return BooleanCell(bool(value))
    if isinstance(value, (int, np.integer)):
        return WholeNumberCell(int(value))
    if isinstance(value, (float, np.floating)):
        f = float(value)
        if math.isnan(f):
            return EmptyCell()
        return FloatCell(f)
    if isinstance(value, timedelta):
        return DurationCell(pd.Timedelta(value).isoformat())
    if isinstance(value, pd.Timestamp):
        return TimestampCell(value.to_pydatetime())
    if isinstance(value, (datetime, date, time)):
        return TimestampCell(value)
    if isinstance(value, str):
        return TextCell(value)
    return TextCell(str(value))


def _is_blank(cells: Iterable[RawCell]) -> bool:
    return all(isinstance(c, EmptyCell) for c in cells)


def _trim_grid(rows: list[list[RawCell]], skip_blank_rows: bool = False) -> list[list[RawCell]]:
    """Cut the grid down to its used area (optionally dropping interior blank rows too)."""
    if skip_blank_rows:
        rows = [r for r in rows if not _is_blank(r)]
    else:
        start = 0
        while start < len(rows) and _is_blank(rows[start]):
            start += 1
        end = len(rows)
        while end > start and _is_blank(rows[end - 1]):
            end -= 1
        rows = rows[start:end]
    if not rows:
        return []

    width = max(len(r) for r in rows)
    # 行長を揃えてから列方向の空白をトリム
    grid = [r + [EmptyCell()] * (width - len(r)) for r in rows]
    first = 0
    while first < width and _is_blank(r[first] for r in grid):
        first += 1
    last = width
    while last > first and _is_blank(r[last - 1] for r in grid):
        last -= 1
    return [r[first:last] for r in grid]


def _classify_openpyxl_cell(cell: Any) -> RawCell:
    if cell.data_type == TYPE_ERROR:
        return ErrorCell(str(cell.value)) if cell.value is not None else ErrorCell()
    return classify_value(cell.value)


def _read_with_openpyxl(path: Path, target_sheets: set[str] | None) -> list[tuple[str, list[list[RawCell]]]]:
    # read_only streams rows; cell.data_type still reports error cells
    wb = load_workbook(path, read_only=True, data_only=True)
    try:
        out = []
        for ws in wb.worksheets:
            if target_sheets is not None and ws.title not in target_sheets:
                continue
            grid = [[_classify_openpyxl_cell(c) for c in row] for row in ws.iter_rows()]
            out.append((ws.title, grid))
        return out
    finally:
        wb.close()


def _read_with_pandas(path: Path, target_sheets: set[str] | None) -> list[tuple[str, list[list[RawCell]]]]:
    out = []
    with pd.ExcelFile(path) as xls:
        for name in xls.sheet_names:
            if target_sheets is not None and str(name) not in target_sheets:
                continue
            # 空セルのみ NaN 扱い ("NA" / "null" などの文字列はそのまま残す)
            df = xls.parse(name, header=None, keep_default_na=False, na_values=[""])
            grid = [
                [classify_value(v) for v in record]
                for record in df.itertuples(index=False, name=None)
            ]
            out.append((str(name), grid))
    return out


def read_workbook(
    path: Path,
    target_sheets: Iterable[str] | None = None,
    skip_blank_rows: bool = False,
) -> list[SheetData]:
    """Read every worksheet of a workbook as typed cells, in workbook order.

    Parameters
    ----------
    path: workbook path
    target_sheets: restrict to these sheet names (None = all sheets)
    skip_blank_rows: also drop blank rows between data rows

    Raises
    ------
    WorkbookReadError: the file cannot be opened or parsed
    """
    wanted = set(target_sheets) if target_sheets is not None else None
    try:
        if path.suffix.lower() in OPENPYXL_SUFFIXES:
            raw = _read_with_openpyxl(path, wanted)
        else:
            raw = _read_with_pandas(path, wanted)
    except Exception as e:
        raise WorkbookReadError(f"failed to read workbook {path.name}: {e}") from e

    return [SheetData(sheet_name=name, rows=_trim_grid(grid, skip_blank_rows)) for name, grid in raw]
