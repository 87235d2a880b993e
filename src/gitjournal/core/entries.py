"""Entry file naming."""

from datetime import date
from pathlib import Path

DATE_KEY_FORMAT = "%d-%m-%Y"
ENTRY_SUFFIX = ".txt"


def date_key(day: date) -> str:
    """Format a date as the day-month-year key used to name entry files."""
    return day.strftime(DATE_KEY_FORMAT)


def entry_path(storage_path: Path | str, key: str) -> Path:
    """Path of the entry file for a date key inside the journal directory."""
    return Path(storage_path) / f"{key}{ENTRY_SUFFIX}"
