"""Flatten variable-shape form entries into aligned spreadsheet rows."""

__version__ = "0.1.0"
