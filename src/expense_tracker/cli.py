"""Click CLI: all user-facing commands."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from expense_tracker.config import LOG_LEVEL, STORE_PATH_ENV, setup_logging, store_path
from expense_tracker.models.expense import ExpenseUpdate
from expense_tracker.models.store import ExpenseNotFoundError, ExpenseStore
from expense_tracker.reporting.export import export_csv
from expense_tracker.reporting.reports import print_expenses, summary_line
from expense_tracker.storage.adapter import LoadStatus, StorageAdapter
from expense_tracker.storage.local_json import LocalJsonStorage

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True)


class Session:
    """Storage plus the store it loaded, shared by one command invocation."""

    def __init__(self, storage: StorageAdapter, store: ExpenseStore) -> None:
        self.storage = storage
        self.store = store

    def save(self) -> None:
        try:
            self.storage.save(self.store)
        except OSError as e:
            raise click.ClickException(f"could not save expenses: {e}") from e


pass_session = click.make_pass_decorator(Session)


def _open_session(path: Path | None) -> Session:
    storage = LocalJsonStorage(path)
    try:
        result = storage.load()
    except OSError as e:
        raise click.ClickException(f"could not read {storage.path}: {e}") from e

    if result.status == LoadStatus.MALFORMED:
        err_console.print(
            f"[bold red]Error loading data:[/bold red] {escape(str(storage.path))} is not a valid "
            "expense file. Continuing with an empty list; the next change will overwrite it.",
            soft_wrap=True,
        )
        logger.debug("Parse failure detail: %s", result.error)

    return Session(storage, result.store)


@click.group()
@click.option("--file", "data_file", type=click.Path(path_type=Path),
              envvar=STORE_PATH_ENV, help="Expense store (default: ./expenses.json)")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, data_file: Path | None, debug: bool) -> None:
    """Track your expenses."""
    setup_logging("DEBUG" if debug else LOG_LEVEL)
    ctx.obj = _open_session(data_file or store_path())


@cli.command()
@click.option("-d", "--description", required=True, help="What the money was spent on")
@click.option("-a", "--amount", type=float, required=True, help="Amount spent")
@click.option("-c", "--category", default="", help="Optional category")
@pass_session
def add(session: Session, description: str, amount: float, category: str) -> None:
    """Add a new expense."""
    expense = session.store.add(description, amount, category)
    session.save()
    console.print(f"Expense added successfully (ID: {expense.id})")


@cli.command()
@click.option("--id", "expense_id", type=int, required=True, help="Expense to change")
@click.option("-d", "--description", help="New description")
@click.option("-a", "--amount", type=float, help="New amount")
@click.option("-c", "--category", help="New category")
@pass_session
def update(session: Session, expense_id: int, description: str | None,
           amount: float | None, category: str | None) -> None:
    """Update an existing expense."""
    supplied = {"description": description, "amount": amount, "category": category}
    changes = ExpenseUpdate(**{k: v for k, v in supplied.items() if v is not None})

    try:
        session.store.update(expense_id, changes)
    except ExpenseNotFoundError as e:
        raise click.ClickException(str(e)) from e

    session.save()
    console.print(f"Expense updated successfully (ID: {expense_id})")


@cli.command()
@click.option("--id", "expense_id", type=int, required=True, help="Expense to remove")
@pass_session
def delete(session: Session, expense_id: int) -> None:
    """Delete an expense."""
    try:
        session.store.delete(expense_id)
    except ExpenseNotFoundError as e:
        raise click.ClickException(str(e)) from e

    session.save()
    console.print(f"Expense deleted successfully (ID: {expense_id})")


@cli.command("list")
@pass_session
def list_expenses(session: Session) -> None:
    """List all expenses."""
    print_expenses(console, session.store.list())


@cli.command()
@click.option("-m", "--month", type=click.IntRange(0, 12),
              help="Only count this month (1-12), any year; 0 means all months")
@pass_session
def summary(session: Session, month: int | None) -> None:
    """View expense summary."""
    month = month or None
    total = session.store.summarize(month)
    console.print(summary_line(total, month))


@cli.command()
@click.option("-f", "--file", "output", type=click.Path(dir_okay=False, path_type=Path),
              required=True, help="Destination CSV file")
@pass_session
def export(session: Session, output: Path) -> None:
    """Export expenses to CSV."""
    try:
        export_csv(session.store.list(), output)
    except OSError as e:
        raise click.ClickException(f"could not export to {output}: {e}") from e

    console.print(f"Expenses exported to {escape(str(output))}", soft_wrap=True)
