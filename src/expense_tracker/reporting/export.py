"""CSV export of the expense list."""

import csv
import logging
from pathlib import Path

from expense_tracker.config import CSV_HEADER
from expense_tracker.models.expense import Expense

logger = logging.getLogger(__name__)


def export_csv(expenses: list[Expense], path: str | Path) -> int:
    """Write expenses to ``path`` in stored order. Returns the row count.

    Fields are quoted only when they contain a comma, quote or newline, so
    ordinary rows read as plain ``id,date,description,amount,category``.
    """
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for e in expenses:
            writer.writerow([e.id, e.day, e.description, f"{e.amount:.2f}", e.category])

    logger.debug("Exported %d expenses to %s", len(expenses), path)
    return len(expenses)
