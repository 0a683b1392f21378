#!/usr/bin/env python3
"""
Terminal Presenter

Formats operation results as the text printed by the CLI.
"""

from .core.models import Expense
from .core.money import Money
from .operations import BreakdownRow, SummaryResult

EMPTY_LIST_MESSAGE = "Your current expense list is empty. Try adding one using add command!"

# Column widths of the list table
ID_WIDTH = 4
DATE_WIDTH = 13
DESCRIPTION_WIDTH = 18
AMOUNT_WIDTH = 12
CATEGORY_WIDTH = 12


def format_expense_table(expenses: list[Expense]) -> list[str]:
    """
    Fixed-width table of expenses in the given order.

    Returns the single empty-list message (no header) when there is nothing
    to show.
    """
    if not expenses:
        return [EMPTY_LIST_MESSAGE]

    header = (
        f"{'ID':<{ID_WIDTH}}{'Date':<{DATE_WIDTH}}{'Description':<{DESCRIPTION_WIDTH}}"
        f"{'Amount':<{AMOUNT_WIDTH}}{'Category':<{CATEGORY_WIDTH}}"
    )
    lines = [header.rstrip()]
    for expense in expenses:
        row = (
            f"{expense.id!s:<{ID_WIDTH}}{expense.created_date:<{DATE_WIDTH}}"
            f"{expense.description:<{DESCRIPTION_WIDTH}}{str(expense.amount):<{AMOUNT_WIDTH}}"
            f"{expense.category:<{CATEGORY_WIDTH}}"
        )
        lines.append(row.rstrip())
    return lines


def format_summary(result: SummaryResult) -> str:
    """One-line total, or the no-match message for an empty filtered set."""
    if result.scope == "all":
        return f"Total expenses: {result.total}"

    if result.scope == "month":
        if result.count == 0:
            return f"No expenses found for {result.label}!"
        return f"Total expenses for {result.label}: {result.total}"

    if result.count == 0:
        return f"No expenses found for category {result.label}!"
    return f"Total expenses for category {result.label}: {result.total}"


def format_breakdown(rows: list[BreakdownRow], by: str) -> list[str]:
    """Grouped totals table with a grand total line."""
    if not rows:
        return [EMPTY_LIST_MESSAGE]

    heading = "Month" if by == "month" else "Category"
    key_width = max(len(heading), *(len(row.key) for row in rows)) + 2

    lines = [f"{heading:<{key_width}}{'Count':<8}{'Total'}", "-" * (key_width + 20)]
    for row in rows:
        lines.append(f"{row.key:<{key_width}}{row.count:<8}{row.total}")

    grand_total = Money.from_cents(sum(row.total.to_cents() for row in rows))
    grand_count = sum(row.count for row in rows)
    lines.append("-" * (key_width + 20))
    lines.append(f"{'Total':<{key_width}}{grand_count:<8}{grand_total}")
    return lines


HELP_TEXT = """Expense tracker CLI - Supported Commands

Usage:
    etracker <command> [options]

Commands:

    add                          Add a new expense
      --description <text>         Description of the expense
      --amount <number>            Expense amount
      --category <text>            Expense category

      Example:
      etracker add --description Tea --amount 10 --category Drinks

    update --id <id>             Update an existing expense by ID
      --description <text>         (Optional) New description
      --amount <number>            (Optional) New amount
      --category <text>            (Optional) New category

      Example:
      etracker update --id 1 --description Pay a fee --amount 5 --category Admin

    delete --id <id>             Delete an expense by ID

      Example:
      etracker delete --id 1

    list                         List all expenses

      Example:
      etracker list

    summary                      Show total of all expenses

      Example:
      etracker summary

    summary --month <1-12>       Show total expenses for a specific month

      Example:
      etracker summary --month 7

    summary --category <text>    Show total expenses for a category

      Example:
      etracker summary --category Food

    breakdown [--by <field>]     Show totals grouped by category or month

      Example:
      etracker breakdown --by month

    export                       Export all expenses to a JSON file

      Example:
      etracker export

    version                      Show version information

    config                       Show current configuration

    help                         Show this help message

      Example:
      etracker help

    - Dates are recorded automatically at the time of entry."""
