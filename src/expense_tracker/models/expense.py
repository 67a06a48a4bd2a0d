"""Pydantic models for a recorded expense and partial updates to it."""

import datetime as _dt
from typing import Optional

from pydantic import BaseModel, Field

from expense_tracker.config import CURRENCY_SYMBOL, DATE_FORMAT


class Expense(BaseModel):
    """A single expense entry."""

    id: int
    date: _dt.datetime = Field(default_factory=_dt.datetime.now)
    description: str
    amount: float
    category: str = ""

    @property
    def day(self) -> str:
        """Creation date as YYYY-MM-DD."""
        return self.date.strftime(DATE_FORMAT)

    @property
    def display_amount(self) -> str:
        return f"{CURRENCY_SYMBOL}{self.amount:.2f}"


class ExpenseUpdate(BaseModel):
    """Partial changes for an existing expense.

    Only fields that were explicitly set are applied, so ``category=""``
    clears the category while leaving ``category`` out keeps it.
    """

    description: Optional[str] = None
    amount: Optional[float] = None
    category: Optional[str] = None

    def changes(self) -> dict:
        """Fields the caller actually supplied."""
        return self.model_dump(include=self.model_fields_set)
