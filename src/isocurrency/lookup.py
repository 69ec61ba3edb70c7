"""Type guards over the closed set of currencies.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TypeIs

from ._isodata import Currency
from .currency import CurrencyCode

__all__ = [
    "is_valid_currency_code",
    "is_valid_numeric_code",
]


def is_valid_currency_code(value: object) -> TypeIs[CurrencyCode]:
    """Check if value is the alphabetic code of a known currency.

    Exact, case-sensitive: "usd" is not valid.

    Args:
        value: Value to check.

    Returns:
        True if Currency.from_code(value) would find a member.
    """
    return Currency.from_code(value) is not None


def is_valid_numeric_code(value: object) -> TypeIs[int]:
    """Check if value is the numeric code of a known currency.

    Args:
        value: Value to check.

    Returns:
        True if Currency.from_numeric(value) would find a member.
    """
    return Currency.from_numeric(value) is not None
