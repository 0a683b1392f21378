#!/usr/bin/env python3
"""
Flag Tokenizer

Parses the free-form argument payload that follows a command word, e.g.::

    --description Pay a fee --amount 5 --category Admin

Grammar: the payload is split on whitespace; a token of the form ``--name``
opens a flag and every following token up to the next ``--name`` token (or
the end) is its value, re-joined with single spaces. Values are therefore
allowed to contain words that look like anything except another flag,
including hyphenated words and negative numbers.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from .core.exceptions import FlagError
from .core.money import Money

FLAG_TOKEN = re.compile(r"^--([A-Za-z][A-Za-z0-9_-]*)$")


def join_payload(args: Iterable[str]) -> str:
    """Join raw CLI arguments into a single trimmed payload string."""
    return " ".join(args).strip()


def tokenize(payload: str) -> dict[str, str]:
    """
    Split a payload into a mapping of flag name to raw value.

    Tokens before the first flag are ignored. A repeated flag keeps its last
    value. A flag with no following tokens maps to an empty string.

    Example:
        tokenize("--description Pay a fee --amount 5") -> {"description": "Pay a fee", "amount": "5"}
    """
    flags: dict[str, str] = {}
    current: str | None = None
    words: list[str] = []

    for token in payload.split():
        match = FLAG_TOKEN.match(token)
        if match:
            if current is not None:
                flags[current] = " ".join(words).strip()
            current = match.group(1).lower()
            words = []
        elif current is not None:
            words.append(token)

    if current is not None:
        flags[current] = " ".join(words).strip()

    return flags


@dataclass
class ParsedFlags:
    """Typed view over the flags of one command payload."""

    raw: dict[str, str] = field(default_factory=dict)
    payload: str = ""

    @classmethod
    def parse(cls, payload: str) -> "ParsedFlags":
        payload = payload.strip()
        return cls(raw=tokenize(payload), payload=payload)

    def is_empty(self) -> bool:
        """True when nothing at all followed the command word."""
        return not self.payload

    def has(self, name: str) -> bool:
        """True when the flag was given with a non-empty value."""
        return bool(self.raw.get(name, ""))

    def text(self, name: str) -> str:
        """Trimmed text value, or empty string when absent."""
        return self.raw.get(name, "").strip()

    def integer(self, name: str) -> int | None:
        """
        Value made of one or more digits, or None when absent.

        Raises:
            FlagError: If the value is present but not all digits
        """
        if not self.has(name):
            return None
        value = self.text(name)
        if not (value.isascii() and value.isdigit()):
            raise FlagError(f"--{name} must be a whole number, got '{value}'")
        return int(value)

    def amount(self, name: str = "amount") -> Money | None:
        """
        Decimal amount converted to Money, or None when absent.

        Raises:
            FlagError: If the value is present but not a decimal number
        """
        if not self.has(name):
            return None
        value = self.text(name)
        try:
            return Money.from_dollars(value)
        except ValueError as e:
            raise FlagError(f"--{name} must be a number, got '{value}'") from e
