"""
Expense Tracker - Personal Expense Bookkeeping from the Command Line

Records, edits, removes, lists and summarizes expenses kept in a flat CSV
file, with a JSON export.

Packages:
- core: Currency handling, data model, configuration, errors
- cli: Command-line entry point and dispatcher

Example Usage:
    from etracker import ExpenseStore, Money
    store = ExpenseStore.open(Path("expenses.csv"))
    store.add("Tea", Money.from_dollars("20"), "Drinks")
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Developers"

from .core.models import Expense
from .core.money import Money
from .store import ExpenseStore

__all__ = [
    "Expense",
    "ExpenseStore",
    "Money",
]
