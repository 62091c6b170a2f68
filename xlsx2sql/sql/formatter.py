from __future__ import annotations

import math

import numpy as np

"""Stateless SQL text helpers (identifier quoting, string escaping, numbers).

Identifiers are wrapped in backticks verbatim: embedded backticks are NOT
escaped and names are not validated. Only single quotes are escaped inside
string literals.
"""

__all__ = [
    "format_identifier",
    "escape_string",
    "format_string_literal",
    "format_number",
]


def format_identifier(name: str) -> str:
    return f"`{name}`"


def escape_string(s: str) -> str:
    return s.replace("'", "''")


def format_string_literal(s: str) -> str:
    return f"'{escape_string(s)}'"


def format_number(f: float) -> str | None:
    """Shortest positional decimal text for a float.

    ``3.0 -> '3'``, ``3.14 -> '3.14'``, ``1e-7 -> '0.0000001'``. No exponent,
    no grouping, no fixed precision. Returns None for NaN / infinity, which
    have no SQL numeric literal.
    """
    if not math.isfinite(f):
        return None
    return np.format_float_positional(f, trim="-")
