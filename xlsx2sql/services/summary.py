from __future__ import annotations

from ..models.conversion_result import ConversionResult

"""SUMMARY line rendering.

Format::

    SUMMARY sheets={total} converted={converted} skipped={skipped} rows={rows} elapsed_sec={elapsed} output={dest}
"""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # avoid scientific notation for tiny values
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return str(round(seconds, 3))


def render_summary_line(result: ConversionResult, destination: str) -> str:
    """Render the SUMMARY line for a conversion.

    Examples:
        >>> from datetime import datetime, timezone
        >>> from xlsx2sql.models.conversion_result import SheetStat
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = ConversionResult(
        ...     statements=["INSERT ..."], sheet_stats=[SheetStat("cards", "cards", 2)],
        ...     start_time=start, end_time=end,
        ... )
        >>> render_summary_line(result, "cards.sql")
        'SUMMARY sheets=1 converted=1 skipped=0 rows=2 elapsed_sec=2 output=cards.sql'
    """
    return (
        f"SUMMARY sheets={result.total_sheets} "
        f"converted={result.converted_sheets} "
        f"skipped={len(result.skipped)} "
        f"rows={result.total_rows} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)} "
        f"output={destination}"
    )
