from __future__ import annotations

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from .. import __version__
from ..config.loader import ConfigError, ConverterConfig, load_config, resolve_config_path
from ..excel.reader import WorkbookReadError, read_workbook
from ..input.file_handler import (
    InputError,
    select_input_file,
    validate_file_exists,
    validate_file_format,
)
from ..logging.error_log import ErrorLogBuffer
from ..logging.init import log_summary, setup_logging
from ..output.writer import OutputWriteError, join_statements, resolve_destination, write_output
from ..services.converter import convert_workbook
from ..services.summary import render_summary_line
from ..sql.normalizer import normalize_row
from ..sql.renderer import RowArityError, SheetSkipError, literal
from ..sql.table_builder import extract_columns

"""CLI entrypoint.

Flow:
- Load .env, then the optional YAML config
- Resolve the input workbook (argument, -f, or scan of the working directory)
- Convert every sheet, write the SQL, print the SUMMARY line

Exit codes: 0 all sheets converted, 2 output written but some sheets
skipped, 1 fatal (nothing written).
"""

EXIT_SUCCESS_ALL = 0
EXIT_FATAL = 1
EXIT_PARTIAL_SKIP = 2

INSPECT_SAMPLE_ROWS = 3


def _load_env_file(path: Path) -> None:
    """Load .env via python-dotenv without overriding variables already set."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=False)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="xlsx2sql",
        description="Convert xlsx files to SQL INSERT statements",
    )
    p.add_argument("file", nargs="?", metavar="FILE", help="Input spreadsheet path")
    p.add_argument("-f", "--file", dest="file_option", metavar="FILE",
                   help="Input spreadsheet path (alternative to the positional argument)")
    p.add_argument("-o", "--output", metavar="FILE",
                   help="Output SQL file ('-' for stdout, default: input name with .sql extension)")
    p.add_argument("--config", metavar="PATH", help="YAML config file (default: ./xlsx2sql.yml if present)")
    p.add_argument("--error-log", metavar="DIR", help="Write skipped-sheet records as JSON Lines into DIR")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print sheet headers & first rows then exit")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p.parse_args(argv)


def _resolve_input(args: argparse.Namespace) -> Path:
    raw = args.file or args.file_option
    if raw:
        path = Path(raw)
    else:
        path = select_input_file(Path.cwd())
    validate_file_exists(path)
    validate_file_format(path)
    return path


def _inspect_data(path: Path, cfg: ConverterConfig) -> int:
    sheets = read_workbook(path, target_sheets=cfg.sheets, skip_blank_rows=cfg.skip_blank_rows)
    print(f"FILE: {path.name}")
    for sheet in sheets:
        try:
            columns = extract_columns(sheet.sheet_name, sheet.rows)
        except SheetSkipError as e:
            print(f"  SHEET: {sheet.sheet_name} skipped={e.error_type}")
            continue
        data_rows = sheet.rows[1:]
        table = cfg.table_name_for(sheet.sheet_name)
        print(f"  SHEET: {sheet.sheet_name} table={table} cols={columns} rows={len(data_rows)}")
        sample = [[literal(v) for v in normalize_row(r)] for r in data_rows[:INSPECT_SAMPLE_ROWS]]
        print("    sample_rows=", sample)
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    # NOTE: [] は「引数なし」として扱う (None のときのみ sys.argv を読む)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    logger = setup_logging(debug=args.debug)
    if args.debug:
        logger.debug("debug mode enabled")

    _load_env_file(Path(".env"))
    try:
        config_path, _ = resolve_config_path(args.config)
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL
    if config_path is not None:
        logger.debug(f"config loaded from {config_path}")

    try:
        input_path = _resolve_input(args)
    except InputError as e:
        logger.error(f"input: {e}")
        return EXIT_FATAL

    if args.inspect_data:
        try:
            return _inspect_data(input_path, cfg)
        except WorkbookReadError as e:
            logger.error(f"read: {e}")
            return EXIT_FATAL

    logger.info(f"Converting {input_path}")

    error_log_dir = args.error_log or cfg.error_log_dir
    error_log = ErrorLogBuffer(Path(error_log_dir)) if error_log_dir else None

    try:
        result = convert_workbook(input_path, cfg, error_log=error_log)
    except WorkbookReadError as e:
        logger.error(f"read: {e}")
        return EXIT_FATAL
    except RowArityError as e:
        logger.error(f"row arity: {e}")
        return EXIT_FATAL
    finally:
        if error_log is not None:
            try:
                log_path = error_log.flush()
            except OSError as e:
                logger.warning(f"failed to write error log: {e}")
            else:
                if log_path is not None:
                    logger.info(f"error log written: {log_path}")

    destination = resolve_destination(input_path, args.output)

    if result.all_skipped:
        logger.error("no data to generate SQL from: every sheet was skipped")
        log_summary(render_summary_line(result, "none")[len("SUMMARY "):])
        return EXIT_FATAL

    content = join_statements(result.statements, cfg.statement_separator)
    try:
        write_output(content, destination)
    except OutputWriteError as e:
        logger.error(f"output: {e}")
        return EXIT_FATAL

    if not destination.is_stdout:
        logger.info(f"SQL written to {destination}")

    # log_summary adds the "SUMMARY " label itself
    log_summary(render_summary_line(result, str(destination))[len("SUMMARY "):])

    if result.skipped:
        return EXIT_PARTIAL_SKIP
    return EXIT_SUCCESS_ALL
