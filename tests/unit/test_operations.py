#!/usr/bin/env python3
"""Tests for the expense operations."""

from datetime import UTC, datetime

import pytest

from etracker.core.exceptions import FlagError, RecordNotFoundError, StorageError, ValidationError
from etracker.core.json_utils import read_json
from etracker.core.money import Money
from etracker.flags import ParsedFlags
from etracker.operations import (
    add_expense,
    breakdown,
    delete_expense,
    export_expenses,
    month_name,
    summarize,
    total_of,
    update_expense,
)
from etracker.store import ExpenseStore


def flags(payload: str) -> ParsedFlags:
    return ParsedFlags.parse(payload)


@pytest.fixture
def loaded_store(write_csv, sample_rows, storage_file) -> ExpenseStore:
    """Store loaded from the three sample rows."""
    write_csv(*sample_rows)
    return ExpenseStore.open(storage_file)


class TestAddExpense:
    """Test the add operation."""

    def test_add_with_all_flags(self, store):
        """Test a fully specified expense."""
        expense = add_expense(store, flags("--description Tea --amount 20 --category Drinks"))

        assert expense.id == 1
        assert expense.description == "Tea"
        assert expense.amount == Money.from_cents(2000)
        assert expense.category == "Drinks"

    def test_add_with_amount_only(self, store):
        """Test description and category default to empty."""
        expense = add_expense(store, flags("--amount 3"))

        assert expense.description == ""
        assert expense.category == ""

    def test_add_without_payload_is_usage_error(self, store):
        """Test the empty payload message."""
        with pytest.raises(FlagError, match="Invalid format. add"):
            add_expense(store, flags(""))

    def test_add_without_amount_is_rejected(self, store):
        """Test amount is required."""
        with pytest.raises(FlagError, match="at least write an amount"):
            add_expense(store, flags("--description Tea"))
        assert len(store) == 0

    def test_stray_words_without_amount_are_rejected(self, store):
        """Test a payload with no flags asks for the amount, not the usage."""
        with pytest.raises(FlagError, match="at least write an amount"):
            add_expense(store, flags("foo"))
        assert len(store) == 0

    @pytest.mark.parametrize("amount", ["0", "-5", "0.00"])
    def test_non_positive_amount_never_touches_file(self, store, storage_file, amount):
        """Test zero and negative amounts are rejected without a write."""
        with pytest.raises(ValidationError):
            add_expense(store, flags(f"--amount {amount}"))

        assert len(store) == 0
        assert not storage_file.exists()

    def test_ids_continue_after_prepopulated_store(self, loaded_store):
        """Test new ids start at max + 1."""
        first = add_expense(loaded_store, flags("--amount 1"))
        second = add_expense(loaded_store, flags("--amount 2"))

        assert (first.id, second.id) == (4, 5)


class TestUpdateExpense:
    """Test the update operation."""

    def test_update_amount_only(self, loaded_store):
        """Test only the amount and updated_at change."""
        before = loaded_store.get(1)
        created_at = before.created_at
        old_updated_at = before.updated_at

        expense = update_expense(loaded_store, flags("--id 1 --amount 25"))

        assert expense.amount == Money.from_cents(2500)
        assert expense.description == "Tea"
        assert expense.category == "Drinks"
        assert expense.created_at == created_at
        assert expense.updated_at > old_updated_at

    def test_update_description_and_category(self, loaded_store):
        """Test category is applied alongside description."""
        expense = update_expense(loaded_store, flags("--id 2 --description Big lunch --category Treats"))

        assert expense.description == "Big lunch"
        assert expense.category == "Treats"
        assert expense.amount == Money.from_cents(1250)

    def test_update_persists(self, loaded_store, storage_file):
        """Test the change is on disk."""
        update_expense(loaded_store, flags("--id 3 --description Espresso"))

        assert ExpenseStore.open(storage_file).get(3).description == "Espresso"

    @pytest.mark.parametrize(
        "payload",
        ["", "--id 1", "--id 1 --category Food", "--description Tea --amount 3"],
    )
    def test_missing_flag_combination_is_usage_error(self, loaded_store, payload):
        """Test --id plus description or amount is required."""
        with pytest.raises(FlagError, match="Invalid format. update"):
            update_expense(loaded_store, flags(payload))

    def test_unknown_id(self, loaded_store, storage_file):
        """Test a missing id is reported and nothing is written."""
        before = storage_file.read_bytes()

        with pytest.raises(RecordNotFoundError, match="Expense with ID 99 not found!"):
            update_expense(loaded_store, flags("--id 99 --amount 5"))

        assert storage_file.read_bytes() == before

    def test_non_positive_amount_is_rejected(self, loaded_store):
        """Test update cannot break the positive-amount invariant."""
        with pytest.raises(ValidationError):
            update_expense(loaded_store, flags("--id 1 --amount 0"))

        assert loaded_store.get(1).amount == Money.from_cents(2000)


class TestDeleteExpense:
    """Test the delete operation."""

    def test_delete_existing(self, loaded_store):
        """Test the record is removed."""
        expense = delete_expense(loaded_store, flags("--id 2"))

        assert expense.id == 2
        assert [e.id for e in loaded_store.expenses] == [1, 3]

    def test_delete_without_id_is_usage_error(self, loaded_store):
        """Test the usage message."""
        with pytest.raises(FlagError, match="Invalid format. delete --id 1"):
            delete_expense(loaded_store, flags(""))

    def test_delete_unknown_id(self, loaded_store, storage_file):
        """Test a missing id is reported and nothing is written."""
        before = storage_file.read_bytes()

        with pytest.raises(RecordNotFoundError):
            delete_expense(loaded_store, flags("--id 42"))

        assert storage_file.read_bytes() == before


class TestSummarize:
    """Test the summary operation."""

    def test_total_of_all_expenses(self, loaded_store):
        """Test the unfiltered total equals the sum of amounts."""
        result = summarize(loaded_store, flags(""))

        assert result.scope == "all"
        assert result.total == Money.from_cents(2000 + 1250 + 425)
        assert result.total == total_of(loaded_store.expenses)

    def test_total_of_empty_store(self, store):
        """Test an empty store sums to zero."""
        assert summarize(store, flags("")).total == Money.zero()

    def test_month_filter(self, loaded_store):
        """Test filtering on the creation month."""
        result = summarize(loaded_store, flags("--month 1"))

        assert result.scope == "month"
        assert result.label == "January"
        assert result.count == 2
        assert result.total == Money.from_cents(3250)

    def test_month_filter_without_matches(self, loaded_store):
        """Test an empty month."""
        result = summarize(loaded_store, flags("--month 3"))

        assert result.count == 0
        assert result.label == "March"

    def test_month_filter_spans_years(self, write_csv, storage_file):
        """Test the month filter ignores the year."""
        write_csv(
            "1,A,10,X,2023-07-01T00:00:00.000Z,2023-07-01T00:00:00.000Z",
            "2,B,5,X,2024-07-31T23:59:59.999Z,2024-07-31T23:59:59.999Z",
        )

        result = summarize(ExpenseStore.open(storage_file), flags("--month 7"))

        assert result.total == Money.from_cents(1500)

    @pytest.mark.parametrize("month", ["0", "13"])
    def test_month_out_of_range_is_validation_error(self, loaded_store, month):
        """Test months outside 1-12 are rejected outright."""
        with pytest.raises(ValidationError, match="range 1-12"):
            summarize(loaded_store, flags(f"--month {month}"))

    def test_category_filter_is_exact_and_case_sensitive(self, loaded_store):
        """Test exact string matching on category."""
        drinks = summarize(loaded_store, flags("--category Drinks"))
        lower = summarize(loaded_store, flags("--category drinks"))

        assert drinks.total == Money.from_cents(2425)
        assert drinks.count == 2
        assert lower.count == 0

    def test_month_takes_precedence_over_category(self, loaded_store):
        """Test only one filter applies."""
        result = summarize(loaded_store, flags("--month 7 --category Food"))

        assert result.scope == "month"
        assert result.total == Money.from_cents(425)

    def test_unusable_flags_are_usage_error(self, loaded_store):
        """Test flags that are neither month nor category."""
        with pytest.raises(FlagError, match="Invalid format. summary"):
            summarize(loaded_store, flags("--description Tea"))

    def test_stray_words_are_usage_error(self, loaded_store):
        """Test words without a flag do not fall back to the grand total."""
        with pytest.raises(FlagError, match="Invalid format. summary"):
            summarize(loaded_store, flags("foo"))

    def test_month_name(self):
        """Test month names."""
        assert month_name(1) == "January"
        assert month_name(12) == "December"


class TestBreakdown:
    """Test grouped totals."""

    def test_breakdown_by_category_is_default(self, loaded_store):
        """Test grouping by category."""
        rows = breakdown(loaded_store, flags(""))

        assert [(row.key, row.total.to_cents(), row.count) for row in rows] == [
            ("Drinks", 2425, 2),
            ("Food", 1250, 1),
        ]

    def test_breakdown_by_month_matches_month_summaries(self, loaded_store):
        """Test per-month totals agree with summary --month."""
        rows = breakdown(loaded_store, flags("--by month"))

        assert [row.key for row in rows] == ["2024-01", "2024-07"]
        assert rows[0].total == summarize(loaded_store, flags("--month 1")).total
        assert rows[1].total == summarize(loaded_store, flags("--month 7")).total

    def test_blank_category_is_labelled(self, store):
        """Test expenses without a category get a placeholder group."""
        store.add("Tea", Money.from_cents(200), "")

        rows = breakdown(store, flags("--by category"))

        assert rows[0].key == "(uncategorized)"

    def test_empty_store(self, store):
        """Test no rows for an empty store."""
        assert breakdown(store, flags("--by month")) == []

    def test_unknown_grouping(self, loaded_store):
        """Test invalid --by values."""
        with pytest.raises(FlagError, match="Invalid format. breakdown"):
            breakdown(loaded_store, flags("--by payee"))


class TestExportExpenses:
    """Test the JSON export."""

    def test_export_matches_collection(self, loaded_store, storage_file, data_dir):
        """Test the parsed document equals the in-memory collection."""
        csv_before = storage_file.read_bytes()

        export_file = export_expenses(loaded_store, data_dir / "expenses.json")

        assert read_json(export_file) == [expense.to_dict() for expense in loaded_store.expenses]
        assert storage_file.read_bytes() == csv_before

    def test_export_is_pretty_printed(self, loaded_store, data_dir):
        """Test two-space indentation."""
        export_file = export_expenses(loaded_store, data_dir / "expenses.json")

        text = export_file.read_text(encoding="utf-8")
        assert text.startswith("[\n  {\n    \"id\": 1,")

    def test_export_overwrites_previous_document(self, store, data_dir):
        """Test the export is written wholesale."""
        target = data_dir / "expenses.json"
        target.write_text("stale", encoding="utf-8")

        export_expenses(store, target)

        assert read_json(target) == []

    def test_export_write_failure(self, loaded_store, data_dir):
        """Test an unwritable target raises StorageError."""
        target = data_dir / "expenses.json"
        target.mkdir()

        with pytest.raises(StorageError, match="Error writing to expenses.json"):
            export_expenses(loaded_store, target)

    def test_export_values(self, loaded_store, data_dir):
        """Test field values in the exported document."""
        data = read_json(export_expenses(loaded_store, data_dir / "expenses.json"))

        assert data[1] == {
            "id": 2,
            "description": "Lunch",
            "amount": 12.5,
            "category": "Food",
            "createdAt": "2024-01-20T12:30:00.000Z",
            "updatedAt": "2024-01-21T08:00:00.000Z",
        }
        assert datetime.fromisoformat(data[0]["createdAt"].replace("Z", "+00:00")) == datetime(
            2024, 1, 5, 10, tzinfo=UTC
        )
