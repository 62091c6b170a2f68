"""Command line interface (``xlsx2sql`` / ``python -m xlsx2sql.cli``)."""

from .app import main

__all__ = ["main"]
