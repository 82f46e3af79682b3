import logging

from .client import GoogleSheetsClient
from .models import DATE_FORMAT_PATTERN, FORMAT_ROW_LIMIT, HEADER_VALUES

logger = logging.getLogger(__name__)


def date_column_request(sheet_id: int, row_limit: int = FORMAT_ROW_LIMIT) -> dict:
    """Date display format for the first row_limit cells of column A"""
    return {
        "repeatCell": {
            "range": {
                "sheetId": sheet_id,
                "startRowIndex": 0,
                "endRowIndex": row_limit,
                "startColumnIndex": 0,
                "endColumnIndex": 1,
            },
            "cell": {"userEnteredFormat": {"numberFormat": {"type": "DATE", "pattern": DATE_FORMAT_PATTERN}}},
            "fields": "userEnteredFormat.numberFormat",
        }
    }


def header_style_request(sheet_id: int, column_count: int = len(HEADER_VALUES)) -> dict:
    """Bold text across the header row"""
    return {
        "repeatCell": {
            "range": {
                "sheetId": sheet_id,
                "startRowIndex": 0,
                "endRowIndex": 1,
                "startColumnIndex": 0,
                "endColumnIndex": column_count,
            },
            "cell": {"userEnteredFormat": {"textFormat": {"bold": True}}},
            "fields": "userEnteredFormat.textFormat.bold",
        }
    }


def format_sheets(sheets_client: GoogleSheetsClient) -> None:
    """Apply the date column and header styles to every worksheet

    Rows past FORMAT_ROW_LIMIT keep the default number format.
    """
    for title, sheet in sheets_client.sheets_by_title.items():
        sheets_client.batch_update(
            [
                date_column_request(sheet.sheet_id),
                header_style_request(sheet.sheet_id),
            ]
        )
        logger.info(f"Formatted {title!r}")
