#!/usr/bin/env python3
"""
Currency Parsing and Formatting Utilities

All amounts are handled as integer cents to avoid floating-point errors.

Currency Systems:
- Internal calculations use cents: 100 cents = $1.00
- Storage and display use dollar strings: "12.34" / "$12.34"
- The JSON export uses dollar numbers: 12.34
"""

import re

_AMOUNT_PATTERN = re.compile(r"^-?(\d{1,3}(,\d{3})+|\d+)(\.\d*)?$|^-?\.\d+$", re.ASCII)


def cents_to_dollars_str(cents: int) -> str:
    """
    Convert cents to dollar string using pure integer arithmetic.

    Example:
        cents_to_dollars_str(4599) -> "45.99"
    """
    is_negative = cents < 0
    abs_cents = abs(int(cents))

    dollars = abs_cents // 100
    remainder = abs_cents % 100

    if is_negative:
        return f"-{dollars}.{remainder:02d}"
    return f"{dollars}.{remainder:02d}"


def is_valid_amount(amount_str: str) -> bool:
    """
    Check whether a string is a decimal amount like '20', '12.5' or '-3'.

    Commas are only accepted as thousands separators ('1,234.56').
    """
    clean = amount_str.replace("$", "").strip()
    return bool(_AMOUNT_PATTERN.match(clean))


def parse_dollars_to_cents(dollars_str: str) -> int:
    """
    Parse dollar string to cents using integer arithmetic only.

    Fractions beyond two decimal places are truncated.

    Args:
        dollars_str: String representation of dollar amount

    Returns:
        Amount in cents

    Raises:
        ValueError: If the string is not a decimal amount

    Examples:
        parse_dollars_to_cents("12.34") -> 1234
        parse_dollars_to_cents("$12.34") -> 1234
        parse_dollars_to_cents("1,234.56") -> 123456
        parse_dollars_to_cents("12") -> 1200
        parse_dollars_to_cents("12.5") -> 1250
    """
    if not is_valid_amount(dollars_str):
        raise ValueError(f"Not a valid amount: {dollars_str!r}")

    clean = dollars_str.replace("$", "").replace(",", "").strip()

    is_negative = clean.startswith("-")
    if is_negative:
        clean = clean[1:]

    if "." in clean:
        whole, fraction = clean.split(".")
        dollars = int(whole) if whole else 0
        cents = int(fraction.ljust(2, "0")[:2])
        total = dollars * 100 + cents
    else:
        total = int(clean) * 100

    return -total if is_negative else total


def cents_to_dollars(cents: int) -> float:
    """Convert cents to a dollar number for structured exports."""
    return cents / 100


def format_cents(cents: int) -> str:
    """Format cents as dollar string with $ prefix."""
    return f"${cents_to_dollars_str(cents)}"
