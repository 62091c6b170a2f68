from __future__ import annotations

from dataclasses import dataclass
from typing import Union

"""SqlValue variants: the closed set of value kinds the renderer understands."""

__all__ = [
    "SqlNull",
    "SqlText",
    "SqlNumber",
    "SqlInteger",
    "SqlBoolean",
    "SqlDateTime",
    "SqlValue",
]


@dataclass(frozen=True)
class SqlNull:
    pass


@dataclass(frozen=True)
class SqlText:
    value: str


@dataclass(frozen=True)
class SqlNumber:
    value: float


@dataclass(frozen=True)
class SqlInteger:
    value: int


@dataclass(frozen=True)
class SqlBoolean:
    value: bool


@dataclass(frozen=True)
class SqlDateTime:
    """Timestamp already converted to its text form (quoted but not escaped on output)."""
    value: str


SqlValue = Union[SqlNull, SqlText, SqlNumber, SqlInteger, SqlBoolean, SqlDateTime]
