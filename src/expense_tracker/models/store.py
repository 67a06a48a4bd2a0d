"""In-memory expense collection with id allocation."""

import datetime as _dt
import logging

from pydantic import BaseModel, Field, model_validator

from expense_tracker.models.expense import Expense, ExpenseUpdate

logger = logging.getLogger(__name__)


class ExpenseNotFoundError(LookupError):
    """No expense with the requested id."""

    def __init__(self, expense_id: int) -> None:
        super().__init__(f"expense with ID {expense_id} not found")
        self.expense_id = expense_id


class ExpenseStore(BaseModel):
    """All recorded expenses plus the next id to hand out.

    ``next_id`` is always greater than any id this store has assigned, so ids
    are never reused after a delete.
    """

    expenses: list[Expense] = Field(default_factory=list)
    next_id: int = 1

    @model_validator(mode="after")
    def bump_next_id(self) -> "ExpenseStore":
        # Hand-edited files can carry a stale counter
        highest = max((e.id for e in self.expenses), default=0)
        if self.next_id <= highest:
            logger.warning("next_id %d is not above stored id %d, bumping", self.next_id, highest)
            self.next_id = highest + 1
        return self

    def _index(self, expense_id: int) -> int:
        for i, e in enumerate(self.expenses):
            if e.id == expense_id:
                return i
        raise ExpenseNotFoundError(expense_id)

    def get(self, expense_id: int) -> Expense:
        return self.expenses[self._index(expense_id)]

    def add(self, description: str, amount: float, category: str = "") -> Expense:
        """Append a new expense dated now and return it."""
        expense = Expense(
            id=self.next_id,
            date=_dt.datetime.now(),
            description=description,
            amount=amount,
            category=category,
        )
        self.expenses.append(expense)
        self.next_id += 1
        logger.debug("Added expense %d (%s, %.2f)", expense.id, description, amount)
        return expense

    def update(self, expense_id: int, changes: ExpenseUpdate) -> Expense:
        """Apply the supplied fields of ``changes`` to an existing expense."""
        i = self._index(expense_id)
        fields = changes.changes()
        updated = Expense.model_validate({**self.expenses[i].model_dump(), **fields})
        self.expenses[i] = updated
        logger.debug("Updated expense %d: %s", expense_id, sorted(fields))
        return updated

    def delete(self, expense_id: int) -> Expense:
        """Remove an expense, keeping the others in order."""
        removed = self.expenses.pop(self._index(expense_id))
        logger.debug("Deleted expense %d", expense_id)
        return removed

    def list(self) -> list[Expense]:
        return list(self.expenses)

    def summarize(self, month: int | None = None) -> float:
        """Total amount, optionally restricted to a calendar month of any year.

        ``None`` and ``0`` both mean every month.
        """
        if not month:
            return sum(e.amount for e in self.expenses)
        if not 1 <= month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {month}")
        return sum(e.amount for e in self.expenses if e.date.month == month)
