"""Convert spreadsheet workbooks into SQL INSERT statements (one statement per sheet)."""

__version__ = "0.1.6"
