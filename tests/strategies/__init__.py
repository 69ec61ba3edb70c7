"""Hypothesis strategies for isocurrency property-based testing.

Usage:
    from tests.strategies import currencies, unknown_alpha_codes
    from tests.strategies.currencies import currency_tables, record_to_row

Event-Emitting Strategies:
    - currency_by_exponent
    - currency_tables
"""

from .currencies import (
    currencies,
    currency_by_exponent,
    currency_codes,
    currency_records,
    currency_tables,
    numeric_codes,
    record_to_row,
    unknown_alpha_codes,
    unknown_numeric_codes,
)

__all__ = [
    "currencies",
    "currency_by_exponent",
    "currency_codes",
    "currency_records",
    "currency_tables",
    "numeric_codes",
    "record_to_row",
    "unknown_alpha_codes",
    "unknown_numeric_codes",
]
