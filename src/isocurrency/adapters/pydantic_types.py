"""pydantic field types for Currency.

CurrencyField validates an alphabetic code (or a Currency) into a Currency,
serializes back to the code, and publishes a JSON schema listing every code.
NumericCurrencyField does the same keyed by numeric code.

Example:
    >>> from pydantic import BaseModel
    >>> class Price(BaseModel):
    ...     currency: CurrencyField
    >>> Price.model_validate({"currency": "EUR"}).currency is Currency.EUR
    True
    >>> Price(currency=Currency.EUR).model_dump_json()
    '{"currency":"EUR"}'

Requires pydantic installation:
    pip install isocurrency[pydantic]

Python 3.13+.
"""

from __future__ import annotations

from typing import Annotated, Any

from isocurrency.compat import require

require("pydantic", "isocurrency.adapters.pydantic_types", "pydantic")

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema  # noqa: E402

from isocurrency._isodata import Currency  # noqa: E402
from isocurrency.errors import ParseCurrencyError  # noqa: E402

__all__ = [
    "CurrencyField",
    "NumericCurrencyField",
    "currency_json_schema",
    "numeric_currency_json_schema",
]


def currency_json_schema() -> dict[str, Any]:
    """JSON schema of a currency serialized by alphabetic code."""
    return {
        "type": "string",
        "title": "Currency",
        "description": "ISO 4217 alphabetic currency code",
        "enum": [currency.code for currency in Currency],
    }


def numeric_currency_json_schema() -> dict[str, Any]:
    """JSON schema of a currency serialized by numeric code."""
    return {
        "type": "integer",
        "title": "Currency",
        "description": "ISO 4217 numeric currency code",
        "enum": [currency.numeric for currency in Currency],
    }


def _validate_code(value: Any) -> Currency:
    """Accept a Currency or its exact alphabetic code.

    ParseCurrencyError is a ValueError, which pydantic reports as a
    validation error for the field.
    """
    if isinstance(value, Currency):
        return value
    return Currency.parse(value)


def _validate_numeric(value: Any) -> Currency:
    """Accept a Currency or its numeric code."""
    if isinstance(value, Currency):
        return value
    currency = Currency.from_numeric(value)
    if currency is None:
        raise ParseCurrencyError(value)
    return currency


def _serialize_code(currency: Currency) -> str:
    return currency.code


def _serialize_numeric(currency: Currency) -> int:
    return currency.numeric


CurrencyField = Annotated[
    Currency,
    PlainValidator(_validate_code),
    PlainSerializer(_serialize_code, return_type=str),
    WithJsonSchema(currency_json_schema()),
]
"""Currency stored and serialized as its alphabetic code ("EUR")."""

NumericCurrencyField = Annotated[
    Currency,
    PlainValidator(_validate_numeric),
    PlainSerializer(_serialize_numeric, return_type=int),
    WithJsonSchema(numeric_currency_json_schema()),
]
"""Currency stored and serialized as its numeric code (978)."""
