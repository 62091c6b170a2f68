from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path

"""Input file validation and selection.

When no input is given on the command line the working directory is scanned
for spreadsheets (non-recursive). One candidate is used as is; several are
offered as a numbered menu when stdin is interactive.
"""

__all__ = [
    "InputError",
    "InputFileNotFoundError",
    "InvalidFormatError",
    "SUPPORTED_SUFFIXES",
    "validate_file_exists",
    "validate_file_format",
    "find_workbooks",
    "select_input_file",
]

SUPPORTED_SUFFIXES = {".xlsx", ".xlsm", ".xls", ".ods"}


class InputError(Exception):
    pass


class InputFileNotFoundError(InputError):
    pass


class InvalidFormatError(InputError):
    pass


def validate_file_exists(path: Path) -> None:
    if not path.exists():
        raise InputFileNotFoundError(f"file not found: {path}")
    if not path.is_file():
        raise InputFileNotFoundError(f"not a file: {path}")


def validate_file_format(path: Path) -> None:
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise InvalidFormatError(
            f"unsupported file format: {path.name} (expected one of {sorted(SUPPORTED_SUFFIXES)})"
        )


def find_workbooks(directory: Path) -> list[Path]:
    """Spreadsheet files directly under directory, sorted by path."""
    if not directory.is_dir():
        raise InputFileNotFoundError(f"directory not found: {directory}")
    # Office lock files (~$name.xlsx) are not workbooks
    return sorted(
        p for p in directory.iterdir()
        if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES and not p.name.startswith("~$")
    )


def select_input_file(
    directory: Path,
    prompt: Callable[[str], str] | None = None,
    interactive: bool | None = None,
) -> Path:
    """Pick the workbook to convert from directory.

    Parameters
    ----------
    directory: directory to scan
    prompt: reads the user's choice (None = builtin input)
    interactive: override TTY detection (None = sys.stdin.isatty())
    """
    candidates = find_workbooks(directory)
    if not candidates:
        raise InputFileNotFoundError(f"no spreadsheet files (.xlsx/.xlsm/.xls/.ods) found in {directory}")
    if len(candidates) == 1:
        return candidates[0]

    if interactive is None:
        interactive = sys.stdin.isatty()
    if not interactive:
        names = ", ".join(p.name for p in candidates)
        raise InputError(f"multiple spreadsheet files found, specify one: {names}")
    if prompt is None:
        prompt = input

    # 対話選択: 番号で指定
    print("Select an Excel file to convert:", file=sys.stderr)
    for i, p in enumerate(candidates, start=1):
        print(f"  {i}) {p.name}", file=sys.stderr)
    while True:
        try:
            answer = prompt(f"[1-{len(candidates)}]: ").strip()
        except (EOFError, KeyboardInterrupt) as e:
            # stdin closed or Ctrl-C at the menu
            raise InputError("no input file selected") from e
        if answer.isdigit() and 1 <= int(answer) <= len(candidates):
            return candidates[int(answer) - 1]
        print(f"invalid selection: {answer!r}", file=sys.stderr)
