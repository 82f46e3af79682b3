from .grouping import exercise_names, records_for_exercise
from .loader import ReadError, Record, load_records
from .projection import project_row, row_values


__all__ = [
    "ReadError",
    "Record",
    "exercise_names",
    "load_records",
    "project_row",
    "records_for_exercise",
    "row_values",
]
