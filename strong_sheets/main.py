import logging

from strong_sheets.config import load_config
from strong_sheets.logging_config.logging_config import setup_logging
from strong_sheets.publisher import WorkoutPublisher
from strong_sheets.records.loader import load_records
from strong_sheets.sheets.client import GoogleSheetsClient


logger = logging.getLogger(__name__)


def run() -> None:
    config = load_config()

    logger.info("Authenticating with Google Sheets API...")
    sheets_client = GoogleSheetsClient(
        spreadsheet_id=config["GOOGLE_SHEET_ID"],
        service_account_email=config["GOOGLE_SERVICE_ACCOUNT_EMAIL"],
        private_key=config["GOOGLE_PRIVATE_KEY"],
    )

    logger.info("Loading doc...")
    sheets_client.load_info()

    records = load_records(config["INPUT_FILE"])

    appended = WorkoutPublisher(sheets_client).publish(records)
    logger.info(f"Published {sum(appended.values())} sets across {len(appended)} worksheets")


# ruff: noqa: D103
def main() -> None:
    setup_logging()
    try:
        run()
    except Exception as e:
        logger.error(str(e))


if __name__ == "__main__":
    main()
