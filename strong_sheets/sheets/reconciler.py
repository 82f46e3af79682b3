import logging
from typing import Optional

from .client import GoogleSheetsClient, SheetError
from .models import HEADER_VALUES, PLACEHOLDER_TITLE, WorksheetProperties

logger = logging.getLogger(__name__)


class SheetReconciler:
    """Rebuilds the worksheet collection so it holds one sheet per exercise"""

    def __init__(self, sheets_client: GoogleSheetsClient, header_values: list[str] = HEADER_VALUES):
        self.sheets_client = sheets_client
        self.header_values = header_values

    def reconcile(self, exercises: list[str]) -> dict[str, WorksheetProperties]:
        anchor = self.reset()
        return self.create(exercises, anchor)

    def reset(self) -> WorksheetProperties:
        """Delete every worksheet but the one with the highest id

        The survivor is renamed to the placeholder title and emptied so it can
        be reused as the first exercise sheet.
        """
        existing_sheet_ids = list(self.sheets_client.sheets_by_id)
        if not existing_sheet_ids:
            raise SheetError("Spreadsheet has no worksheets to reuse")

        last_sheet_id = existing_sheet_ids[-1]
        for sheet_id in existing_sheet_ids[:-1]:
            logger.info(f"Deleting worksheet {self.sheets_client.get_sheet(sheet_id).title!r}")
            self.sheets_client.delete_sheet(sheet_id)

        anchor = self.sheets_client.rename_sheet(last_sheet_id, PLACEHOLDER_TITLE)
        self.sheets_client.clear_sheet(last_sheet_id)
        return anchor

    def create(
        self, exercises: list[str], anchor: Optional[WorksheetProperties] = None
    ) -> dict[str, WorksheetProperties]:
        """Give every exercise a worksheet with the fixed header row"""
        if anchor is None:
            anchor = self.sheets_client.sheets_by_title.get(PLACEHOLDER_TITLE)
            if anchor is None:
                raise SheetError(f"No {PLACEHOLDER_TITLE!r} worksheet to reuse")

        created: dict[str, WorksheetProperties] = {}
        for position, title in enumerate(exercises):
            if position == 0:
                sheet = self.sheets_client.rename_sheet(anchor.sheet_id, title)
                self.sheets_client.set_header_row(sheet.sheet_id, self.header_values)
            else:
                sheet = self.sheets_client.add_sheet(title, self.header_values)
            logger.info(f"Prepared worksheet {title!r}")
            created[title] = sheet
        return created
