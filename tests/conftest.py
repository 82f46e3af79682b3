from dataclasses import replace
from pathlib import Path
from types import MappingProxyType

import pytest

from strong_sheets.sheets.client import SheetError
from strong_sheets.sheets.models import WorksheetProperties


class FakeSheetsClient:
    """In-memory stand-in for GoogleSheetsClient"""

    def __init__(self, titles=("Sheet1",)):
        self.worksheets: dict[int, WorksheetProperties] = {}
        self.values: dict[int, list[list]] = {}
        self.requests: list[dict] = []
        self.calls: list[tuple] = []
        self._next_id = 0
        for title in titles:
            self._create(title)

    def _create(self, title):
        if title in self.sheets_by_title:
            raise SheetError(f"A sheet with the name {title!r} already exists")
        sheet = WorksheetProperties(sheet_id=self._next_id, title=title, index=len(self.worksheets))
        self._next_id += 1
        self.worksheets[sheet.sheet_id] = sheet
        self.values[sheet.sheet_id] = []
        return sheet

    @property
    def sheets_by_id(self):
        return {sheet_id: self.worksheets[sheet_id] for sheet_id in sorted(self.worksheets)}

    @property
    def sheets_by_title(self):
        ordered = sorted(self.worksheets.values(), key=lambda sheet: sheet.index)
        return {sheet.title: sheet for sheet in ordered}

    def get_sheet(self, sheet_id):
        try:
            return self.worksheets[sheet_id]
        except KeyError:
            raise SheetError(f"Unknown worksheet id: {sheet_id}")

    def rows_of(self, title):
        return self.values[self.sheets_by_title[title].sheet_id]

    def load_info(self):
        self.calls.append(("load_info",))
        return list(self.worksheets.values())

    def batch_update(self, requests):
        self.calls.append(("batch_update", len(requests)))
        self.requests.extend(requests)
        return {"replies": [{} for _ in requests]}

    def rename_sheet(self, sheet_id, title):
        self.calls.append(("rename_sheet", sheet_id, title))
        sheet = self.get_sheet(sheet_id)
        renamed = replace(sheet, title=title)
        self.worksheets[sheet_id] = renamed
        return renamed

    def delete_sheet(self, sheet_id):
        self.calls.append(("delete_sheet", sheet_id))
        deleted = self.get_sheet(sheet_id)
        del self.worksheets[sheet_id]
        del self.values[sheet_id]
        for other in list(self.worksheets.values()):
            if other.index > deleted.index:
                self.worksheets[other.sheet_id] = replace(other, index=other.index - 1)

    def add_sheet(self, title, header_values=None):
        self.calls.append(("add_sheet", title))
        sheet = self._create(title)
        if header_values:
            self.set_header_row(sheet.sheet_id, header_values)
        return sheet

    def clear_sheet(self, sheet_id):
        self.calls.append(("clear_sheet", sheet_id))
        self.get_sheet(sheet_id)
        self.values[sheet_id] = []

    def set_header_row(self, sheet_id, header_values):
        self.calls.append(("set_header_row", sheet_id))
        rows = self.values[sheet_id]
        if rows:
            rows[0] = list(header_values)
        else:
            rows.append(list(header_values))

    def append_rows(self, sheet_id, rows):
        self.calls.append(("append_rows", sheet_id, len(rows)))
        self.get_sheet(sheet_id)
        self.values[sheet_id].extend(list(row) for row in rows)


def make_record(**fields):
    defaults = {
        "Date": "2022-10-28 13:42:11",
        "Workout Name": "Week A Day 2",
        "Exercise Name": "",
        "Set Order": "1",
        "Weight": "",
        "Weight Unit": "lbs",
        "Reps": "",
        "RPE": "",
        "Notes": "",
    }
    defaults.update({key.replace("_", " "): value for key, value in fields.items()})
    return MappingProxyType(defaults)


@pytest.fixture
def fake_client():
    return FakeSheetsClient(titles=("Sheet1", "Old Squat", "Old Bench"))


@pytest.fixture
def sample_records():
    return [
        MappingProxyType(
            {
                "Date": "2022-10-28",
                "Exercise Name": "Squat",
                "Set Order": "1",
                "Weight": "100",
                "Reps": "5",
                "RPE": "7",
                "Notes": "",
            }
        ),
        MappingProxyType(
            {
                "Date": "2022-10-28",
                "Exercise Name": "Deadlift",
                "Set Order": "1",
                "Weight": "135",
                "Reps": "4",
                "RPE": "6",
                "Notes": "",
            }
        ),
    ]


@pytest.fixture
def write_export(tmp_path: Path):
    def _write(text: str, name: str = "strong.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
