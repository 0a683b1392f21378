"""
Core Utilities Package

Shared building blocks for the expense tracker.

This package provides:
- Currency handling with integer arithmetic for precision
- The Expense data model and its timestamp format
- Configuration management for environment-specific settings
- Domain exceptions and JSON helpers
"""

from .config import Config, Environment, get_config, reload_config
from .currency import cents_to_dollars_str, format_cents, parse_dollars_to_cents
from .exceptions import (
    ExpenseTrackerError,
    FlagError,
    RecordNotFoundError,
    StorageError,
    ValidationError,
)
from .models import FIELDS, Expense, format_timestamp, parse_timestamp
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "reload_config",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "parse_dollars_to_cents",
    "Money",
    # Data model
    "FIELDS",
    "Expense",
    "format_timestamp",
    "parse_timestamp",
    # Errors
    "ExpenseTrackerError",
    "FlagError",
    "RecordNotFoundError",
    "StorageError",
    "ValidationError",
]
