"""Strong Sheets - republish a Strong workout export into Google Sheets.

This package reads the semicolon-delimited export of the Strong app and
rebuilds a spreadsheet with one worksheet per exercise.
"""

__version__ = "0.1.0"

from .publisher import WorkoutPublisher
from .records.loader import load_records
from .sheets.client import GoogleSheetsClient


__all__ = [
    "GoogleSheetsClient",
    "WorkoutPublisher",
    "load_records",
]
