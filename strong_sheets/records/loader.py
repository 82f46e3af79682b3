import csv
import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Union


logger = logging.getLogger(__name__)

DELIMITER = ";"

# One logged set, keyed by the header names of the export
Record = Mapping[str, str]


class ReadError(OSError):
    """Raised when the input export cannot be read"""

    pass


def load_records(path: Union[Path, str]) -> list[Record]:
    """Read a semicolon-delimited workout export into records

    The first line names the columns. Missing trailing fields become empty
    strings and surplus fields are dropped.

    Args:
        path: Location of the export file

    Returns:
        Records in file order, empty for a header-only file

    """
    path = Path(path)
    try:
        with path.open(newline="", encoding="utf-8-sig") as export_file:
            reader = csv.DictReader(export_file, delimiter=DELIMITER, restval="")
            records = [
                MappingProxyType({key: value for key, value in row.items() if key is not None})
                for row in reader
            ]
    except OSError as e:
        logger.error(f"Error reading {path}: {e}")
        raise ReadError(f"Could not read input file {path}: {e.strerror or e}") from e
    except (UnicodeDecodeError, csv.Error) as e:
        logger.error(f"Error decoding {path}: {e}")
        raise ReadError(f"Could not decode input file {path}: {e}") from e

    logger.info(f"Loaded {len(records)} records from {path}")
    return records
