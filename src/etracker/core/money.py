#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point errors and provides type-safe currency operations.
"""

from dataclasses import dataclass

from .currency import cents_to_dollars, cents_to_dollars_str, format_cents, parse_dollars_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents (USD).

    Examples:
        >>> tea = Money.from_dollars("20")
        >>> str(tea)
        '$20.00'
        >>> (tea + Money.from_cents(250)).to_cents()
        2250
        >>> Money.zero().is_positive()
        False
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_dollars(cls, dollars: str | int) -> "Money":
        """
        Parse from dollar string like '$123.45' or integer dollars.

        Raises:
            ValueError: If the string is not a decimal amount
        """
        if isinstance(dollars, int):
            return cls(cents=dollars * 100)
        return cls(cents=parse_dollars_to_cents(dollars))

    @classmethod
    def zero(cls) -> "Money":
        """Money value of $0.00."""
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_dollars(self) -> float:
        """Get value as a dollar number (for JSON export)."""
        return cents_to_dollars(self.cents)

    def to_storage_str(self) -> str:
        """Dollar string without currency symbol, as written to the CSV."""
        return cents_to_dollars_str(self.cents)

    def is_positive(self) -> bool:
        """True when the amount is strictly greater than zero."""
        return self.cents > 0

    def __add__(self, other: "Money") -> "Money":
        """Add two Money objects."""
        return Money(cents=self.cents + other.cents)

    def __str__(self) -> str:
        """Format as dollar string."""
        return format_cents(self.cents)

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
