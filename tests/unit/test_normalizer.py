from __future__ import annotations

from datetime import date, datetime, time

import pytest

from xlsx2sql.models.cells import (
    BooleanCell,
    DurationCell,
    EmptyCell,
    ErrorCell,
    FloatCell,
    TextCell,
    TimestampCell,
    WholeNumberCell,
)
from xlsx2sql.models.sql_value import (
    SqlBoolean,
    SqlDateTime,
    SqlInteger,
    SqlNull,
    SqlNumber,
    SqlText,
)
from xlsx2sql.sql.normalizer import normalize, normalize_row, timestamp_text

"""Value normalizer mapping table tests."""


@pytest.mark.parametrize(
    "cell, expected",
    [
        (EmptyCell(), SqlNull()),
        (TextCell("  padded  "), SqlText("  padded  ")),
        (WholeNumberCell(42), SqlInteger(42)),
        (FloatCell(3.14), SqlNumber(3.14)),
        (BooleanCell(True), SqlBoolean(True)),
        (BooleanCell(False), SqlBoolean(False)),
        (TimestampCell(datetime(2024, 1, 5, 10, 30)), SqlDateTime("2024-01-05 10:30:00")),
        (ErrorCell("#DIV/0!"), SqlNull()),
        (DurationCell("P0DT1H30M0S"), SqlText("P0DT1H30M0S")),
    ],
)
def test_normalize_mapping(cell, expected):
    assert normalize(cell) == expected


def test_whole_number_stays_integer():
    value = normalize(WholeNumberCell(7))
    assert isinstance(value, SqlInteger)
    assert isinstance(value.value, int)


def test_error_marker_without_code_is_null():
    assert normalize(ErrorCell()) == SqlNull()


def test_text_is_not_trimmed_or_altered():
    assert normalize(TextCell("it's\n業務用")) == SqlText("it's\n業務用")


def test_timestamp_text_forms():
    assert timestamp_text(datetime(2024, 2, 29, 23, 59, 59)) == "2024-02-29 23:59:59"
    assert timestamp_text(datetime(2024, 2, 29, 0, 0, 0, 500)) == "2024-02-29 00:00:00.000500"
    assert timestamp_text(date(2024, 2, 29)) == "2024-02-29"
    assert timestamp_text(time(8, 15)) == "08:15:00"


def test_normalize_row_preserves_order():
    row = [WholeNumberCell(1), EmptyCell(), TextCell("x")]
    assert normalize_row(row) == [SqlInteger(1), SqlNull(), SqlText("x")]


def test_normalize_rejects_non_cell():
    with pytest.raises(TypeError):
        normalize("raw string")  # type: ignore[arg-type]
