"""Workbook reading (openpyxl / pandas)."""
