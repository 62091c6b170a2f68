#!/usr/bin/env python3
"""Sample workbook generator for manual and performance testing.

Generates synthetic workbooks in the layout the converter expects:
- Row 1: Header row with column names
- Row 2+: Data rows

Mixed cell types are produced (text with quotes and non-Latin characters,
integers, decimals, booleans, dates, blanks) so every SQL literal kind shows
up in the generated INSERT statements.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

TEXT_SAMPLES = ["業務用", "日常用", "it's", "plain", "O'Brien", "ümlaut"]


def generate_synthetic_data(rows: int, cols: int, seed: int = 42) -> pd.DataFrame:
    """Generate a DataFrame with mixed column types.

    Args:
        rows: Number of data rows
        cols: Number of columns (at least 5: id, name, amount, active, created)
        seed: Random seed for reproducible data
    """
    rng = np.random.default_rng(seed)
    cols = max(cols, 5)

    data: dict[str, list[Any]] = {}
    data["id"] = list(range(1, rows + 1))
    data["name"] = rng.choice(TEXT_SAMPLES, rows).tolist()
    data["amount"] = np.round(rng.uniform(0.01, 9999.99, rows), 2).tolist()
    data["active"] = rng.choice([True, False], rows).tolist()
    date_range = pd.date_range("2023-01-01", "2024-12-31", periods=100)
    data["created"] = list(pd.DatetimeIndex(rng.choice(date_range.values, rows)).to_pydatetime())

    # Extra columns: quantities with occasional blanks
    for i in range(cols - 5):
        values: list[Any] = rng.integers(1, 1000, rows).tolist()
        for j in range(0, rows, 7):
            values[j] = None
        data[f"quantity_{i + 1}"] = values

    return pd.DataFrame(data)


def create_workbook(
    output_path: Path,
    rows: int,
    cols: int,
    sheets: list[str] | None = None,
    seed: int = 42,
) -> None:
    """Write one sheet per name, header in row 1."""
    if sheets is None:
        sheets = ["Sheet1"]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        for offset, sheet_name in enumerate(sheets):
            df = generate_synthetic_data(rows, cols, seed + offset)
            df.to_excel(writer, sheet_name=sheet_name, index=False)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Generate a synthetic workbook for xlsx2sql",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s sample.xlsx
  %(prog)s large.xlsx --rows 100000 --cols 20
  %(prog)s multi.xlsx --sheets cards orders users
        """,
    )
    parser.add_argument("output", type=Path, help="Output workbook path")
    parser.add_argument("--rows", type=int, default=1_000, help="Data rows per sheet (default: 1,000)")
    parser.add_argument("--cols", type=int, default=8, help="Columns per sheet, minimum 5 (default: 8)")
    parser.add_argument("--sheets", nargs="+", default=["Sheet1"], help="Sheet names (default: Sheet1)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args(argv)

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1
    if args.cols <= 0:
        print("Error: --cols must be positive", file=sys.stderr)
        return 1

    try:
        create_workbook(args.output, args.rows, args.cols, args.sheets, args.seed)
    except OSError as e:
        print(f"Error generating workbook: {e}", file=sys.stderr)
        return 1

    print(f"Created {args.output}: {len(args.sheets)} sheet(s), {args.rows} rows x {max(args.cols, 5)} cols")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
