"""
Unit tests for the in-memory expense store.
"""

import datetime as _dt

import pytest

from expense_tracker.models.expense import Expense, ExpenseUpdate
from expense_tracker.models.store import ExpenseNotFoundError, ExpenseStore


class TestAdd:
    def test_ids_start_at_one_and_increase(self):
        store = ExpenseStore()

        first = store.add("Coffee", 3.5, "Food")
        second = store.add("Bus", 2.0, "Transport")

        assert (first.id, second.id) == (1, 2)
        assert store.next_id == 3
        assert [e.description for e in store.list()] == ["Coffee", "Bus"]

    def test_add_dates_entry_now_and_defaults_category(self):
        store = ExpenseStore()
        before = _dt.datetime.now()

        expense = store.add("Lunch", 12.0)

        assert before <= expense.date <= _dt.datetime.now()
        assert expense.category == ""

    def test_ids_are_not_reused_after_delete(self):
        store = ExpenseStore()
        store.add("a", 1.0)
        store.add("b", 2.0)
        store.delete(2)

        assert store.add("c", 3.0).id == 3

    def test_negative_and_zero_amounts_are_accepted(self):
        store = ExpenseStore()

        assert store.add("refund", -4.25).amount == -4.25
        assert store.add("free", 0).amount == 0

    def test_stale_counter_is_bumped_past_existing_ids(self):
        store = ExpenseStore(
            expenses=[Expense(id=7, description="x", amount=1.0)],
            next_id=3,
        )

        assert store.next_id == 8
        assert store.add("y", 1.0).id == 8


class TestUpdate:
    def test_only_supplied_fields_change(self, dated_store):
        original = dated_store.get(1)

        updated = dated_store.update(1, ExpenseUpdate(amount=4.0))

        assert updated.amount == 4.0
        assert updated.description == original.description
        assert updated.category == original.category
        assert updated.date == original.date
        assert updated.id == 1

    def test_explicit_empty_string_clears_field(self, dated_store):
        dated_store.update(1, ExpenseUpdate(category=""))

        assert dated_store.get(1).category == ""

    def test_no_fields_leaves_expense_unchanged(self, dated_store):
        before = dated_store.get(2).model_copy()

        dated_store.update(2, ExpenseUpdate())

        assert dated_store.get(2) == before

    def test_missing_id_raises_and_leaves_store_unchanged(self, dated_store):
        snapshot = dated_store.model_copy(deep=True)

        with pytest.raises(ExpenseNotFoundError, match="expense with ID 3 not found"):
            dated_store.update(3, ExpenseUpdate(description="nope"))

        assert dated_store == snapshot

    def test_update_keeps_position(self, dated_store):
        dated_store.update(2, ExpenseUpdate(description="Train"))

        assert [e.id for e in dated_store.list()] == [1, 2, 4]
        assert dated_store.list()[1].description == "Train"


class TestDelete:
    def test_removes_exactly_one_and_preserves_order(self, dated_store):
        removed = dated_store.delete(2)

        assert removed.description == "Bus"
        assert [e.id for e in dated_store.list()] == [1, 4]
        assert dated_store.next_id == 5

    def test_missing_id_raises(self, dated_store):
        with pytest.raises(ExpenseNotFoundError) as exc_info:
            dated_store.delete(3)

        assert exc_info.value.expense_id == 3
        assert len(dated_store.list()) == 3


class TestSummarize:
    def test_total_without_month(self, dated_store):
        assert dated_store.summarize() == pytest.approx(-4.5)

    def test_month_filter_spans_years(self, dated_store):
        assert dated_store.summarize(3) == pytest.approx(5.5)
        assert dated_store.summarize(7) == pytest.approx(-10.0)

    def test_month_without_expenses_is_zero(self, dated_store):
        assert dated_store.summarize(12) == 0

    def test_empty_store_totals_zero(self):
        assert ExpenseStore().summarize() == 0

    def test_zero_month_means_all_months(self, dated_store):
        assert dated_store.summarize(0) == pytest.approx(dated_store.summarize())

    @pytest.mark.parametrize("month", [13, -1])
    def test_out_of_range_month_is_rejected(self, dated_store, month):
        with pytest.raises(ValueError):
            dated_store.summarize(month)


def test_list_returns_copy(dated_store):
    listed = dated_store.list()
    listed.clear()

    assert len(dated_store.list()) == 3


def test_expense_update_reports_only_set_fields():
    assert ExpenseUpdate(description="x").changes() == {"description": "x"}
    assert ExpenseUpdate().changes() == {}
