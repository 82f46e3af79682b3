import logging
from dataclasses import replace
from typing import Optional

from google.oauth2 import service_account
from googleapiclient.discovery import build

from .models import ValueInputOption, WorksheetProperties

logger = logging.getLogger(__name__)


class SheetError(Exception):
    """Custom exception for sheet-related errors"""

    pass


def column_letter(index: int) -> str:
    """Convert a 1-based column index to its A1 letter (1 -> A, 27 -> AA)"""
    letters = ""
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(65 + remainder) + letters
    return letters


def a1_range(title: str, cells: Optional[str] = None) -> str:
    """Build an A1 range with the sheet title quoted"""
    quoted = "'" + title.replace("'", "''") + "'"
    return f"{quoted}!{cells}" if cells else quoted


class GoogleSheetsClient:
    """Handles all Google Sheets operations for one spreadsheet"""

    SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
    TOKEN_URI = "https://oauth2.googleapis.com/token"

    def __init__(
        self,
        spreadsheet_id: str,
        service_account_email: str,
        private_key: str,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.service_account_email = service_account_email
        self.service = self._build_sheets_service(private_key)
        self._worksheets: dict[int, WorksheetProperties] = {}

    def _build_sheets_service(self, private_key: str):
        """Create and return an authorized Sheets API service object"""
        try:
            creds = service_account.Credentials.from_service_account_info(
                {
                    "client_email": self.service_account_email,
                    "private_key": private_key,
                    "token_uri": self.TOKEN_URI,
                },
                scopes=self.SCOPES,
            )
            return build("sheets", "v4", credentials=creds)
        except Exception as e:
            logger.error(f"Failed to build sheets service: {e}")
            raise SheetError(f"Could not initialize sheets service: {str(e)}")

    @property
    def sheets_by_id(self) -> dict[int, WorksheetProperties]:
        """Known worksheets keyed by id, in ascending id order"""
        return {sheet_id: self._worksheets[sheet_id] for sheet_id in sorted(self._worksheets)}

    @property
    def sheets_by_title(self) -> dict[str, WorksheetProperties]:
        """Known worksheets keyed by title, in tab order"""
        ordered = sorted(self._worksheets.values(), key=lambda sheet: sheet.index)
        return {sheet.title: sheet for sheet in ordered}

    def get_sheet(self, sheet_id: int) -> WorksheetProperties:
        try:
            return self._worksheets[sheet_id]
        except KeyError:
            raise SheetError(f"Unknown worksheet id: {sheet_id}")

    def load_info(self) -> list[WorksheetProperties]:
        """Fetch the worksheet list of the spreadsheet"""
        try:
            result = (
                self.service.spreadsheets()
                .get(spreadsheetId=self.spreadsheet_id, fields="sheets.properties")
                .execute()
            )
        except Exception as e:
            logger.error(f"Error loading spreadsheet {self.spreadsheet_id}: {e}")
            raise SheetError(f"Failed to load spreadsheet: {str(e)}")

        sheets = [WorksheetProperties.from_api(sheet["properties"]) for sheet in result.get("sheets", [])]
        self._worksheets = {sheet.sheet_id: sheet for sheet in sheets}
        logger.info(f"Loaded {len(sheets)} worksheets")
        return sheets

    def batch_update(self, requests: list[dict]) -> dict:
        """Send structural or formatting requests in a single call"""
        try:
            return (
                self.service.spreadsheets()
                .batchUpdate(spreadsheetId=self.spreadsheet_id, body={"requests": requests})
                .execute()
            )
        except Exception as e:
            logger.error(f"Error in batch update: {e}")
            raise SheetError(f"Failed to update spreadsheet: {str(e)}")

    def rename_sheet(self, sheet_id: int, title: str) -> WorksheetProperties:
        sheet = self.get_sheet(sheet_id)
        self.batch_update(
            [
                {
                    "updateSheetProperties": {
                        "properties": {"sheetId": sheet_id, "title": title},
                        "fields": "title",
                    }
                }
            ]
        )
        renamed = replace(sheet, title=title)
        self._worksheets[sheet_id] = renamed
        return renamed

    def delete_sheet(self, sheet_id: int) -> None:
        deleted = self.get_sheet(sheet_id)
        self.batch_update([{"deleteSheet": {"sheetId": sheet_id}}])
        del self._worksheets[sheet_id]

        # tabs to the right of the deleted one shift left
        for other in list(self._worksheets.values()):
            if other.index > deleted.index:
                self._worksheets[other.sheet_id] = replace(other, index=other.index - 1)

    def add_sheet(self, title: str, header_values: Optional[list[str]] = None) -> WorksheetProperties:
        """Create a new worksheet, optionally writing its header row"""
        response = self.batch_update([{"addSheet": {"properties": {"title": title}}}])
        sheet = WorksheetProperties.from_api(response["replies"][0]["addSheet"]["properties"])
        self._worksheets[sheet.sheet_id] = sheet

        if header_values:
            self.set_header_row(sheet.sheet_id, header_values)
        return sheet

    def clear_sheet(self, sheet_id: int) -> None:
        """Clear all cell values from a worksheet"""
        sheet = self.get_sheet(sheet_id)
        try:
            self.service.spreadsheets().values().batchClear(
                spreadsheetId=self.spreadsheet_id, body={"ranges": [a1_range(sheet.title)]}
            ).execute()
        except Exception as e:
            logger.error(f"Error clearing sheet: {e}")
            raise SheetError(f"Failed to clear sheet {sheet.title}: {str(e)}")

    def set_header_row(self, sheet_id: int, header_values: list[str]) -> None:
        """Write the header row of a worksheet"""
        sheet = self.get_sheet(sheet_id)
        range_name = a1_range(sheet.title, f"A1:{column_letter(len(header_values))}1")
        try:
            self.service.spreadsheets().values().update(
                spreadsheetId=self.spreadsheet_id,
                range=range_name,
                valueInputOption=ValueInputOption.RAW.value,
                body={"values": [header_values]},
            ).execute()
        except Exception as e:
            logger.error(f"Error updating header row: {e}")
            raise SheetError(f"Failed to update header row of {sheet.title}: {str(e)}")

    def append_rows(self, sheet_id: int, rows: list[list[Optional[str]]]) -> None:
        """Append rows below the existing content of a worksheet"""
        sheet = self.get_sheet(sheet_id)
        try:
            self.service.spreadsheets().values().append(
                spreadsheetId=self.spreadsheet_id,
                range=a1_range(sheet.title, "A1"),
                valueInputOption=ValueInputOption.USER_ENTERED.value,
                insertDataOption="INSERT_ROWS",
                body={"values": rows},
            ).execute()
        except Exception as e:
            logger.error(f"Error appending to sheet: {e}")
            raise SheetError(f"Failed to append to sheet {sheet.title}: {str(e)}")
