import logging

from ..records.grouping import records_for_exercise
from ..records.loader import Record
from ..records.projection import project_row, row_values
from .client import GoogleSheetsClient, SheetError
from .models import HEADER_VALUES

logger = logging.getLogger(__name__)


def fill_sheets(
    sheets_client: GoogleSheetsClient,
    records: list[Record],
    exercises: list[str],
    header_values: list[str] = HEADER_VALUES,
) -> dict[str, int]:
    """Append each exercise's sets to its worksheet, in input order

    Returns:
        Number of rows appended per worksheet title

    """
    sheets_by_title = sheets_client.sheets_by_title
    appended: dict[str, int] = {}

    for exercise in exercises:
        sheet = sheets_by_title.get(exercise)
        if sheet is None:
            raise SheetError(f"No worksheet found for exercise {exercise!r}")

        rows = [
            row_values(project_row(record, header_values), header_values)
            for record in records_for_exercise(records, exercise)
        ]
        if rows:
            sheets_client.append_rows(sheet.sheet_id, rows)
        logger.info(f"Appended {len(rows)} rows to {exercise!r}")
        appended[exercise] = len(rows)

    return appended
