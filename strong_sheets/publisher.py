import logging

from .records.grouping import exercise_names
from .records.loader import Record
from .sheets.client import GoogleSheetsClient
from .sheets.filler import fill_sheets
from .sheets.formatter import format_sheets
from .sheets.reconciler import SheetReconciler

logger = logging.getLogger(__name__)


class WorkoutPublisher:
    """Republishes a workout export into one worksheet per exercise"""

    def __init__(self, sheets_client: GoogleSheetsClient):
        self.sheets_client = sheets_client
        self.reconciler = SheetReconciler(sheets_client)

    def publish(self, records: list[Record]) -> dict[str, int]:
        """Rebuild the spreadsheet from scratch for the given records

        Phases run strictly in order and any failure stops the run, leaving
        the spreadsheet as it was at that point.
        """
        exercises = exercise_names(records)
        logger.info(f"Found {len(exercises)} exercises in {len(records)} records")

        logger.info("Resetting sheets...")
        anchor = self.reconciler.reset()

        logger.info("Creating sheets...")
        self.reconciler.create(exercises, anchor)

        logger.info("Filling sheets...")
        appended = fill_sheets(self.sheets_client, records, exercises)

        logger.info("Format sheets...")
        format_sheets(self.sheets_client)

        return appended
