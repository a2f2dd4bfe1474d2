"""
app/readers package marker.
"""

from app.readers.tabular_reader import DISCLOSURE_COLUMNS, REQUIRED_COLUMNS, read_rows

__all__ = [
    "DISCLOSURE_COLUMNS",
    "REQUIRED_COLUMNS",
    "read_rows",
]
