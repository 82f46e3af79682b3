import logging
import logging.handlers
import os
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_logging(app_name: str = "strong-sheets") -> None:
    """Configure application logging

    Console output is always enabled. Rotating log files are written only when
    the LOG_DIR environment variable is set.

    Args:
        app_name: Name to use for log files

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)

    global _configured
    if _configured:
        return

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    log_dir_env = os.getenv("LOG_DIR")
    if log_dir_env:
        log_dir = Path(log_dir_env)
        os.makedirs(log_dir, exist_ok=True)
        file_formatter = logging.Formatter(LOG_FORMAT)

        # File handler with rotation
        file_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / f"{app_name}.log",
            maxBytes=10_000_000,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

        # Add error file handler for ERROR and above
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_dir / f"{app_name}-error.log",
            maxBytes=10_000_000,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(file_formatter)
        root_logger.addHandler(error_handler)

    _configured = True
