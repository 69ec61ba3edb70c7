"""SQLAlchemy column types for Currency.

Contract:
    CurrencyType stores a Currency as its 3-letter alphabetic code in a
    String(3) column; NumericCurrencyType stores the ISO numeric code in a
    SmallInteger column. Both decode back to the Currency member.

Guarantees:
    - process_bind_param: Currency (or valid code) -> code on INSERT/UPDATE.
    - process_result_value: stored code -> Currency on SELECT.
    - NULL passes through as None in both directions.
    - A stored code that names no currency raises ParseCurrencyError
      instead of loading a wrong or missing value.
    - cache_ok=True enables SQLAlchemy statement caching.

Example:
    class Account(Base):
        __tablename__ = "account"
        currency: Mapped[Currency] = mapped_column(CurrencyType())

Requires SQLAlchemy installation:
    pip install isocurrency[sqlalchemy]

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

from isocurrency.compat import require

require("sqlalchemy", "isocurrency.adapters.sqlalchemy_types", "sqlalchemy")

from sqlalchemy import SmallInteger, String  # noqa: E402
from sqlalchemy.engine import Dialect  # noqa: E402
from sqlalchemy.types import TypeDecorator  # noqa: E402

from isocurrency._isodata import Currency  # noqa: E402
from isocurrency.constants import ALPHA_CODE_LENGTH  # noqa: E402
from isocurrency.errors import ParseCurrencyError  # noqa: E402

__all__ = ["CurrencyType", "NumericCurrencyType"]


class CurrencyType(TypeDecorator[Currency]):
    """Currency stored as String(3) alphabetic code."""

    impl = String(ALPHA_CODE_LENGTH)
    cache_ok = True

    @property
    def python_type(self) -> type[Currency]:
        return Currency

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        """Convert Currency to its code when storing.

        Preconditions: value is a Currency, an exact alphabetic code, or None.
        Postconditions: Returns the code or None.
        """
        if value is None:
            return None
        return Currency.parse(value).code

    def process_result_value(self, value: Any, dialect: Dialect) -> Currency | None:
        """Convert stored code back to Currency when loading.

        Preconditions: value is a 3-letter code or None.
        Postconditions: Returns the Currency or None.
        """
        if value is None:
            return None
        return Currency.parse(value)


class NumericCurrencyType(TypeDecorator[Currency]):
    """Currency stored as SmallInteger numeric code."""

    impl = SmallInteger
    cache_ok = True

    @property
    def python_type(self) -> type[Currency]:
        return Currency

    def process_bind_param(self, value: Any, dialect: Dialect) -> int | None:
        """Convert Currency to its numeric code when storing."""
        if value is None:
            return None
        if isinstance(value, Currency):
            return value.numeric
        currency = Currency.from_numeric(value)
        if currency is None:
            raise ParseCurrencyError(value)
        return currency.numeric

    def process_result_value(self, value: Any, dialect: Dialect) -> Currency | None:
        """Convert stored numeric code back to Currency when loading."""
        if value is None:
            return None
        currency = Currency.from_numeric(value)
        if currency is None:
            raise ParseCurrencyError(value)
        return currency
