#!/usr/bin/env python3
"""
Expense Store

Holds the full expense collection in memory for one invocation and keeps the
CSV backing store in sync with it. The file is read wholesale at load time
and rewritten wholesale after every mutation; there is no locking, so
concurrent invocations against the same file are last-writer-wins.
"""

import csv
import logging
from datetime import datetime
from pathlib import Path

from .core.exceptions import RecordNotFoundError, StorageError
from .core.models import FIELDS, Expense
from .core.money import Money

logger = logging.getLogger(__name__)


class ExpenseStore:
    """
    CSV-backed expense collection.

    Records keep insertion order. Every mutating method persists before
    returning; a failed write raises StorageError but the in-memory change is
    kept.
    """

    def __init__(self, storage_file: Path):
        """
        Initialize the store.

        Args:
            storage_file: Path of the CSV backing store (need not exist yet)
        """
        self.storage_file = storage_file
        self._expenses: list[Expense] = []
        self._next_id = 1

    @classmethod
    def open(cls, storage_file: Path) -> "ExpenseStore":
        """Create a store and load whatever is on disk."""
        store = cls(storage_file)
        store.load()
        return store

    def load(self) -> list[Expense]:
        """
        Load all expenses from the backing store.

        A missing or unreadable file yields an empty collection. The first
        line is always treated as the header. Rows that cannot be parsed are
        skipped with a warning.

        Returns:
            The loaded expenses, in file order
        """
        self._expenses = []

        try:
            with open(self.storage_file, encoding="utf-8", newline="") as f:
                rows = list(csv.reader(f))
        except FileNotFoundError:
            logger.debug("No backing store at %s, starting empty", self.storage_file)
            rows = []
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.debug("Could not read %s (%s), starting empty", self.storage_file, e)
            rows = []

        seen_ids: set[int] = set()
        for line_number, row in enumerate(rows[1:], start=2):
            if not row or all(not value.strip() for value in row):
                continue
            try:
                expense = Expense.from_row(row)
            except ValueError as e:
                logger.warning("Skipping malformed row %d in %s: %s", line_number, self.storage_file, e)
                continue
            if expense.id in seen_ids:
                logger.warning("Skipping row %d in %s: duplicate id %d", line_number, self.storage_file, expense.id)
                continue
            seen_ids.add(expense.id)
            self._expenses.append(expense)

        self._next_id = self._compute_next_id()
        logger.debug("Loaded %d expenses from %s", len(self._expenses), self.storage_file)
        return list(self._expenses)

    def _compute_next_id(self) -> int:
        if not self._expenses:
            return 1
        return max(expense.id for expense in self._expenses) + 1

    def next_id(self) -> int:
        """Id that the next added expense will receive."""
        return self._next_id

    def persist(self) -> None:
        """
        Write the full collection to the backing store, header first.

        Raises:
            StorageError: If the file cannot be written
        """
        try:
            self.storage_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.storage_file, "w", encoding="utf-8", newline="") as f:
                writer = csv.writer(f, lineterminator="\n")
                writer.writerow(FIELDS)
                writer.writerows(expense.to_row() for expense in self._expenses)
        except OSError as e:
            raise StorageError(f"Error writing to {self.storage_file.name}: {e}") from e

        logger.debug("Persisted %d expenses to %s", len(self._expenses), self.storage_file)

    # Collection access

    @property
    def expenses(self) -> list[Expense]:
        """All expenses in insertion order."""
        return list(self._expenses)

    def __len__(self) -> int:
        return len(self._expenses)

    def get(self, expense_id: int) -> Expense | None:
        """Find an expense by id."""
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    # Mutations

    def add(self, description: str, amount: Money, category: str) -> Expense:
        """
        Append a new expense with the next id and persist.

        Amount validation is the caller's job; the store accepts what it is
        given.
        """
        expense = Expense.create(self._next_id, description, amount, category)
        self._expenses.append(expense)
        self._next_id += 1
        logger.info("Added expense %d (%s)", expense.id, expense.amount)
        self.persist()
        return expense

    def update(
        self,
        expense_id: int,
        description: str | None = None,
        amount: Money | None = None,
        category: str | None = None,
    ) -> Expense:
        """
        Overwrite the supplied fields of an expense and persist.

        None or empty-string values leave the existing field untouched.

        Raises:
            RecordNotFoundError: If no expense has the id
        """
        expense = self.get(expense_id)
        if expense is None:
            raise RecordNotFoundError(expense_id)

        if description:
            expense.description = description
        if amount is not None:
            expense.amount = amount
        if category:
            expense.category = category
        expense.touch()

        logger.info("Updated expense %d", expense_id)
        self.persist()
        return expense

    def delete(self, expense_id: int) -> Expense:
        """
        Remove an expense and persist.

        Raises:
            RecordNotFoundError: If no expense has the id
        """
        expense = self.get(expense_id)
        if expense is None:
            raise RecordNotFoundError(expense_id)

        self._expenses.remove(expense)
        logger.info("Deleted expense %d", expense_id)
        self.persist()
        return expense

    # Metadata

    def exists(self) -> bool:
        """Check if the backing store file exists."""
        return self.storage_file.exists()

    def item_count(self) -> int | None:
        """Number of loaded expenses, or None if there is no backing store."""
        if not self.exists():
            return None
        return len(self._expenses)

    def last_modified(self) -> datetime | None:
        """Modification time of the backing store file."""
        if not self.exists():
            return None
        return datetime.fromtimestamp(self.storage_file.stat().st_mtime)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        count = self.item_count()
        if count is None:
            return f"No expenses recorded yet ({self.storage_file.name} not found)"
        return f"{count} expense(s) in {self.storage_file.name}"
