"""Expense table and summary rendering."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from expense_tracker.config import CURRENCY_SYMBOL
from expense_tracker.models.expense import Expense


def expense_table(expenses: list[Expense]) -> Table:
    """Build the list table: ID, Date, Description, Amount, Category."""
    table = Table(title="Expenses")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Date", width=10)
    table.add_column("Description")
    table.add_column("Amount", justify="right")
    table.add_column("Category")

    for e in expenses:
        table.add_row(
            str(e.id),
            e.day,
            escape(e.description),
            e.display_amount,
            escape(e.category),
        )
    return table


def summary_line(total: float, month: int | None = None) -> str:
    if month is not None:
        return f"Total expenses for month {month}: {CURRENCY_SYMBOL}{total:.2f}"
    return f"Total expenses: {CURRENCY_SYMBOL}{total:.2f}"


def print_expenses(console: Console, expenses: list[Expense]) -> None:
    if not expenses:
        console.print("[yellow]No expenses recorded.[/yellow]")
        return

    console.print(expense_table(expenses))
    console.print(f"  ({len(expenses)} expenses)")
