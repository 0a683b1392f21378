#!/usr/bin/env python3
"""
Expense Operations

Each operation takes the store plus the parsed flags of one command, reads or
mutates the collection, and returns plain data for the presenter. Rule
violations are raised as ExpenseTrackerError subclasses and never mutate the
store.
"""

import calendar
import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from .core.exceptions import FlagError, StorageError, ValidationError
from .core.json_utils import write_json
from .core.models import Expense
from .core.money import Money
from .flags import ParsedFlags
from .store import ExpenseStore

logger = logging.getLogger(__name__)

ADD_USAGE = "Invalid format. add --description Tea --amount 20 --category Drinks"
UPDATE_USAGE = "Invalid format. update --id 1 --description Pay a fee --amount 5 --category Administrative"
DELETE_USAGE = "Invalid format. delete --id 1"
SUMMARY_USAGE = "Invalid format. summary --month 7"
BREAKDOWN_USAGE = "Invalid format. breakdown --by month"

BREAKDOWN_KEYS = ("category", "month")
UNCATEGORIZED = "(uncategorized)"


@dataclass
class SummaryResult:
    """Total over an optionally filtered subset of expenses."""

    scope: str  # "all", "month" or "category"
    label: str  # month name or category; empty for "all"
    total: Money
    count: int


@dataclass
class BreakdownRow:
    """One group of a breakdown report."""

    key: str
    total: Money
    count: int


def month_name(month: int) -> str:
    """
    English month name for 1-12.

    Raises:
        ValidationError: If month is outside 1-12
    """
    if month < 1 or month > 12:
        raise ValidationError("You can't see a total for non existing month. Try entering month in range 1-12!")
    return calendar.month_name[month]


def total_of(expenses: list[Expense]) -> Money:
    """Sum the amounts of a list of expenses."""
    total = Money.zero()
    for expense in expenses:
        total = total + expense.amount
    return total


def add_expense(store: ExpenseStore, flags: ParsedFlags) -> Expense:
    """
    Create a new expense from --amount and optional --description/--category.

    Raises:
        FlagError: If the payload is empty or --amount is missing/invalid
        ValidationError: If the amount is zero or negative
        StorageError: If the backing store cannot be written
    """
    if flags.is_empty():
        raise FlagError(ADD_USAGE)

    amount = flags.amount()
    if amount is None:
        raise FlagError("You must at least write an amount of an expense!")
    if not amount.is_positive():
        raise ValidationError("You can't add an expense with a negative number or that equals to zero!")

    return store.add(flags.text("description"), amount, flags.text("category"))


def update_expense(store: ExpenseStore, flags: ParsedFlags) -> Expense:
    """
    Overwrite the supplied fields of the expense named by --id.

    Requires --id plus at least one of --description or --amount; --category
    is applied when given alongside them.

    Raises:
        FlagError: If the required flag combination is missing
        RecordNotFoundError: If no expense has the id
        StorageError: If the backing store cannot be written
    """
    expense_id = flags.integer("id")
    if expense_id is None or not (flags.has("description") or flags.has("amount")):
        raise FlagError(UPDATE_USAGE)

    amount = flags.amount()
    if amount is not None and not amount.is_positive():
        raise ValidationError("You can't set an expense amount to a negative number or zero!")

    return store.update(
        expense_id,
        description=flags.text("description"),
        amount=amount,
        category=flags.text("category"),
    )


def delete_expense(store: ExpenseStore, flags: ParsedFlags) -> Expense:
    """
    Remove the expense named by --id.

    Raises:
        FlagError: If --id is missing
        RecordNotFoundError: If no expense has the id
        StorageError: If the backing store cannot be written
    """
    expense_id = flags.integer("id")
    if expense_id is None:
        raise FlagError(DELETE_USAGE)
    return store.delete(expense_id)


def summarize(store: ExpenseStore, flags: ParsedFlags) -> SummaryResult:
    """
    Total all expenses, or those of one month (--month) or category (--category).

    --month takes precedence when both flags are given. The month filter
    compares against the zero-padded month of each expense's creation date.

    Raises:
        FlagError: If a payload is given but neither filter is usable
        ValidationError: If --month is outside 1-12
    """
    expenses = store.expenses

    if flags.is_empty():
        return SummaryResult(scope="all", label="", total=total_of(expenses), count=len(expenses))

    month = flags.integer("month")
    if month is not None:
        label = month_name(month)
        month_str = f"{month:02d}"
        matching = [expense for expense in expenses if expense.created_month == month_str]
        return SummaryResult(scope="month", label=label, total=total_of(matching), count=len(matching))

    if flags.has("category"):
        category = flags.text("category")
        matching = [expense for expense in expenses if expense.category == category]
        return SummaryResult(scope="category", label=category, total=total_of(matching), count=len(matching))

    raise FlagError(SUMMARY_USAGE)


def breakdown(store: ExpenseStore, flags: ParsedFlags) -> list[BreakdownRow]:
    """
    Group totals by category (default) or by creation month (YYYY-MM).

    Raises:
        FlagError: If --by names an unknown grouping
    """
    by = flags.text("by").lower() or "category"
    if by not in BREAKDOWN_KEYS:
        raise FlagError(BREAKDOWN_USAGE)

    expenses = store.expenses
    if not expenses:
        return []

    df = pd.DataFrame(
        {
            "category": [expense.category or UNCATEGORIZED for expense in expenses],
            "month": [expense.created_date[:7] for expense in expenses],
            "cents": [expense.amount.to_cents() for expense in expenses],
        }
    )
    grouped = df.groupby(by)["cents"].agg(["sum", "count"])

    return [
        BreakdownRow(key=str(key), total=Money.from_cents(int(row["sum"])), count=int(row["count"]))
        for key, row in grouped.iterrows()
    ]


def export_expenses(store: ExpenseStore, export_file: Path) -> Path:
    """
    Write the whole collection to a pretty-printed JSON document.

    The CSV backing store is not touched.

    Raises:
        StorageError: If the export file cannot be written
    """
    data = [expense.to_dict() for expense in store.expenses]
    try:
        write_json(export_file, data)
    except OSError as e:
        raise StorageError(f"Error writing to {export_file.name}: {e}") from e

    logger.info("Exported %d expenses to %s", len(data), export_file)
    return export_file
