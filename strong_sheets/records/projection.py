from typing import Optional

from ..sheets.models import HEADER_VALUES
from .loader import Record


def project_row(record: Record, columns: list[str] = HEADER_VALUES) -> dict[str, str]:
    """Reduce a record to the destination columns that hold a value"""
    return {column: record[column] for column in columns if record.get(column)}


def row_values(row: dict[str, str], columns: list[str] = HEADER_VALUES) -> list[Optional[str]]:
    """Lay out a projected row by column position

    Absent columns become None, which the Sheets API skips instead of writing
    an empty cell.
    """
    return [row.get(column) for column in columns]
