#!/usr/bin/env python3
"""
Core Data Models for the Expense Tracker

The Expense entity plus the timestamp helpers that define its on-disk
representation.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from .money import Money

# Column order of the CSV backing store and keys of the JSON export
FIELDS = ("id", "description", "amount", "category", "createdAt", "updatedAt")


def utc_now() -> datetime:
    """Current time in UTC, truncated to millisecond precision."""
    now = datetime.now(UTC)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


def format_timestamp(value: datetime) -> str:
    """
    Format a datetime as ISO 8601 with milliseconds and a Z suffix.

    Example:
        format_timestamp(datetime(2024, 1, 1, 10, tzinfo=UTC)) -> "2024-01-01T10:00:00.000Z"
    """
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp as written by format_timestamp.

    Naive timestamps are taken to be UTC.

    Raises:
        ValueError: If the value is not an ISO 8601 timestamp
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


@dataclass
class Expense:
    """
    A single recorded expense.

    ``created_at`` is set once; ``updated_at`` is refreshed by every update
    and never moves backwards.
    """

    id: int
    description: str
    amount: Money
    category: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def create(cls, expense_id: int, description: str, amount: Money, category: str) -> "Expense":
        """Create a new expense stamped with the current time."""
        now = utc_now()
        return cls(
            id=expense_id,
            description=description,
            amount=amount,
            category=category,
            created_at=now,
            updated_at=now,
        )

    @property
    def created_date(self) -> str:
        """Date portion (YYYY-MM-DD) of the creation timestamp."""
        return format_timestamp(self.created_at).split("T")[0]

    @property
    def created_month(self) -> str:
        """Zero-padded month (01-12) of the creation timestamp."""
        return self.created_date.split("-")[1]

    def touch(self) -> None:
        """Refresh updated_at, keeping it non-decreasing."""
        self.updated_at = max(utc_now(), self.updated_at)

    def to_row(self) -> list[str]:
        """Serialize to a CSV row in FIELDS order."""
        return [
            str(self.id),
            self.description,
            self.amount.to_storage_str(),
            self.category,
            format_timestamp(self.created_at),
            format_timestamp(self.updated_at),
        ]

    @classmethod
    def from_row(cls, row: list[str]) -> "Expense":
        """
        Parse a CSV row in FIELDS order.

        Raises:
            ValueError: If the row has the wrong number of fields or a field
                cannot be parsed
        """
        if len(row) != len(FIELDS):
            raise ValueError(f"expected {len(FIELDS)} fields, got {len(row)}")

        raw_id = row[0].strip()
        if not (raw_id.isascii() and raw_id.isdigit()) or int(raw_id) < 1:
            raise ValueError(f"invalid id {row[0]!r}")

        return cls(
            id=int(raw_id),
            description=row[1],
            amount=Money.from_dollars(row[2]),
            category=row[3],
            created_at=parse_timestamp(row[4]),
            updated_at=parse_timestamp(row[5]),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return {
            "id": self.id,
            "description": self.description,
            "amount": self.amount.to_dollars(),
            "category": self.category,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }
