from __future__ import annotations

from dataclasses import dataclass

from .sql_value import SqlValue

"""Table model: one sheet's header paired with its normalized data rows.

A Table is built once per sheet, handed to the statement renderer and then
dropped. Row order is the sheet's document order.
"""

__all__ = [
    "Table",
]


@dataclass(frozen=True)
class Table:
    name: str  # Destination table (sheet name unless renamed via config)
    columns: list[str]  # Header order; governs the value order of every row
    rows: list[list[SqlValue]]  # len(row) == len(columns)

    @property
    def row_count(self) -> int:
        return len(self.rows)
