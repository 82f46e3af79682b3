from collections.abc import Iterable

from ..sheets.models import EXERCISE_NAME_FIELD
from .loader import Record


def exercise_names(records: Iterable[Record]) -> list[str]:
    """Distinct non-empty exercise names, sorted

    Records without an exercise name are left out and never reach a worksheet.
    """
    seen = dict.fromkeys(record.get(EXERCISE_NAME_FIELD) for record in records)
    return sorted(name for name in seen if name)


def records_for_exercise(records: Iterable[Record], name: str) -> list[Record]:
    return [record for record in records if record.get(EXERCISE_NAME_FIELD) == name]
