"""
Pytest Configuration and Shared Fixtures
"""

import datetime as _dt

import pytest
from click.testing import CliRunner

from expense_tracker.cli import cli
from expense_tracker.models.expense import Expense
from expense_tracker.models.store import ExpenseStore


@pytest.fixture
def store_file(tmp_path, monkeypatch):
    """Path of an isolated store file; the env override keeps ./expenses.json untouched."""
    path = tmp_path / "expenses.json"
    monkeypatch.setenv("EXPENSE_TRACKER_FILE", str(path))
    return path


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def run(runner, store_file):
    """Invoke the CLI against the temporary store."""

    def _run(*args):
        return runner.invoke(cli, ["--file", str(store_file), *args])

    return _run


@pytest.fixture
def dated_store() -> ExpenseStore:
    """Three expenses across two years, with a gap in ids from an old delete."""
    return ExpenseStore(
        expenses=[
            Expense(id=1, date=_dt.datetime(2024, 3, 5, 9, 30), description="Coffee",
                    amount=3.5, category="Food"),
            Expense(id=2, date=_dt.datetime(2025, 3, 20, 18, 0), description="Bus",
                    amount=2.0, category="Transport"),
            Expense(id=4, date=_dt.datetime(2025, 7, 1, 12, 0), description="Refund",
                    amount=-10.0),
        ],
        next_id=5,
    )
