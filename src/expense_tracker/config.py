"""Configuration: store path, logging, display defaults."""

import logging
import os
from pathlib import Path

# The store lives in the working directory unless overridden
STORE_FILENAME = "expenses.json"
STORE_PATH_ENV = "EXPENSE_TRACKER_FILE"

LOG_LEVEL = os.environ.get("EXPENSE_TRACKER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

CURRENCY_SYMBOL = "$"

# Export and display formats
DATE_FORMAT = "%Y-%m-%d"
CSV_HEADER = ["ID", "Date", "Description", "Amount", "Category"]


def store_path() -> Path:
    """Resolve the store path at call time (env and cwd may change after import)."""
    return Path(os.environ.get(STORE_PATH_ENV, Path.cwd() / STORE_FILENAME))


def setup_logging(level: str | int = LOG_LEVEL) -> None:
    """Configure root logging for a CLI run."""
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger("expense_tracker").setLevel(level)
