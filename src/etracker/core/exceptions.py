"""Domain-specific exceptions for the expense tracker."""


class ExpenseTrackerError(Exception):
    """Base class for errors reported back to the command line."""


class ValidationError(ExpenseTrackerError, ValueError):
    """Raised when provided data does not meet validation requirements."""


class FlagError(ExpenseTrackerError, ValueError):
    """Raised when a command-line flag is missing or holds an unusable value."""


class RecordNotFoundError(ExpenseTrackerError, LookupError):
    """Raised when an expense with the requested id does not exist."""

    def __init__(self, expense_id: int):
        super().__init__(f"Expense with ID {expense_id} not found!")
        self.expense_id = expense_id


class StorageError(ExpenseTrackerError, OSError):
    """Raised when the backing store or export file cannot be written."""
