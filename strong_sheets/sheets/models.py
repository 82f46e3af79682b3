from dataclasses import dataclass
from enum import Enum


HEADER_VALUES = ["Date", "Set Order", "Reps", "Weight", "RPE", "Notes"]
PLACEHOLDER_TITLE = "Untitled"
EXERCISE_NAME_FIELD = "Exercise Name"

# https://developers.google.com/sheets/api/guides/formats
DATE_FORMAT_PATTERN = "ddd, m/d/yy"
FORMAT_ROW_LIMIT = 200


@dataclass(frozen=True)
class WorksheetProperties:
    """Identity of a single worksheet inside the spreadsheet"""

    sheet_id: int
    title: str
    index: int = 0

    @classmethod
    def from_api(cls, properties: dict) -> "WorksheetProperties":
        return cls(
            sheet_id=int(properties["sheetId"]),
            title=properties["title"],
            index=int(properties.get("index", 0)),
        )


class ValueInputOption(Enum):
    """How the Sheets API interprets written values"""

    RAW = "RAW"
    USER_ENTERED = "USER_ENTERED"
