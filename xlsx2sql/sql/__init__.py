"""SQL conversion core: value normalization and INSERT statement rendering."""

from .normalizer import normalize, normalize_row
from .renderer import NoDataError, RowArityError, SheetSkipError, literal, render
from .table_builder import EmptySheetError, MissingHeadersError, build_table

__all__ = [
    "normalize",
    "normalize_row",
    "literal",
    "render",
    "build_table",
    "SheetSkipError",
    "EmptySheetError",
    "MissingHeadersError",
    "NoDataError",
    "RowArityError",
]
