import os
from pathlib import Path
from typing import Optional, TypedDict

from dotenv import load_dotenv


PACKAGE_DIR = Path(__file__).resolve().parent

REQUIRED_VARS = (
    "INPUT_FILE",
    "GOOGLE_PRIVATE_KEY",
    "GOOGLE_SERVICE_ACCOUNT_EMAIL",
    "GOOGLE_SHEET_ID",
)


def program_dir(package_dir: Path = PACKAGE_DIR) -> Path:
    """Directory that relative INPUT_FILE values are resolved against

    In a source checkout this is the project root next to setup.py. An
    installed package has no such root, so the working directory is used.
    """
    project_root = package_dir.parent
    if (project_root / "setup.py").is_file():
        return project_root
    return Path.cwd()


class ConfigError(OSError):
    """Raised when a required environment variable is missing"""

    pass


class AppConfig(TypedDict):
    """Configuration for the application"""

    INPUT_FILE: Path
    GOOGLE_PRIVATE_KEY: str
    GOOGLE_SERVICE_ACCOUNT_EMAIL: str
    GOOGLE_SHEET_ID: str


def load_config(base_dir: Optional[Path] = None) -> AppConfig:
    """Load configuration from environment variables"""
    load_dotenv()

    required_vars = {name: os.getenv(name) for name in REQUIRED_VARS}

    missing = [k for k, v in required_vars.items() if not isinstance(v, str) or not v]
    if missing:
        raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

    base_dir = base_dir or program_dir()

    return {
        "INPUT_FILE": base_dir / required_vars["INPUT_FILE"],
        # keys pasted into .env files usually carry escaped newlines
        "GOOGLE_PRIVATE_KEY": required_vars["GOOGLE_PRIVATE_KEY"].replace("\\n", "\n"),
        "GOOGLE_SERVICE_ACCOUNT_EMAIL": required_vars["GOOGLE_SERVICE_ACCOUNT_EMAIL"],
        "GOOGLE_SHEET_ID": required_vars["GOOGLE_SHEET_ID"],
    }
