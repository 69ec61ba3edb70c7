"""Behavior shared by the generated Currency enumeration.

CurrencyEnum declares no members. The generated module subclasses it and
declares one member per table row, each with a CurrencyRecord as its value;
CurrencyEnum.__new__ turns that record into a StrEnum member whose value is
the alphabetic code and keeps the record for the accessors below.

Every accessor is a dictionary or attribute lookup over data fixed when the
enum is created: O(1), no table scan, thread-safe. Lookups by code or number
return None on a miss; only parse() raises.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from enum import StrEnum
from functools import cache
from typing import Self

from .errors import ParseCurrencyError
from .record import CurrencyRecord
from .symbol import CurrencySymbol
from .territory import Territory

__all__ = ["CurrencyCode", "CurrencyEnum"]

type CurrencyCode = str
"""ISO 4217 alphabetic currency code (e.g., 'USD', 'EUR', 'GBP')."""


class CurrencyEnum(StrEnum):
    """ISO 4217 currency enumeration base.

    Members compare equal to, hash like, and format as their alphabetic code,
    so they can be used anywhere a code string is expected. `name` is the
    enum member name, which is also the alphabetic code; the English name is
    `english_name`.
    """

    _record: CurrencyRecord
    _symbol: CurrencySymbol
    _used_by: tuple[Territory, ...]

    def __new__(cls, record: CurrencyRecord) -> Self:
        member = str.__new__(cls, record.alpha_code)
        member._value_ = record.alpha_code
        member._record = record
        member._symbol = CurrencySymbol(record.display_symbol, record.subunit_symbol)
        member._used_by = tuple(Territory(code) for code in record.territories)
        return member

    # ========================================================================
    # ACCESSORS
    # ========================================================================

    @property
    def record(self) -> CurrencyRecord:
        """Source-table row this member was generated from."""
        return self._record

    @property
    def code(self) -> CurrencyCode:
        """ISO 4217 alphabetic code.

        Example:
            >>> Currency.EUR.code
            'EUR'
        """
        return self._record.alpha_code

    @property
    def english_name(self) -> str:
        """English name of the currency.

        Example:
            >>> Currency.EUR.english_name
            'Euro'
        """
        return self._record.name

    @property
    def numeric(self) -> int:
        """ISO 4217 numeric code.

        Example:
            >>> Currency.EUR.numeric
            978
        """
        return self._record.numeric_code

    @property
    def symbol(self) -> CurrencySymbol:
        """Symbol commonly used to represent the currency.

        When no symbol is associated with the currency, the alphabetic code
        stands in for it.

        Example:
            >>> str(Currency.EUR.symbol)
            '€'
            >>> str(Currency.XAU.symbol)
            'XAU'
        """
        return self._symbol

    @property
    def exponent(self) -> int | None:
        """Number of decimal places of the minor unit.

        None for currencies without a decimal subunit (precious metals, SDR,
        testing and no-currency codes). Zero-decimal currencies return 0.

        Example:
            >>> Currency.EUR.exponent
            2
            >>> Currency.JPY.exponent
            0
        """
        return self._record.exponent

    @property
    def subunit_fraction(self) -> int | None:
        """How many minor units make one main unit (10 ** exponent).

        Example:
            >>> Currency.EUR.subunit_fraction
            100
            >>> Currency.XAU.subunit_fraction is None
            True
        """
        return self._record.subunit_fraction

    @property
    def used_by(self) -> tuple[Territory, ...]:
        """Territories using the currency, in source-table order.

        The use is non-exclusive: a territory may use other currencies too.
        Empty for special codes and superseded currencies.

        Example:
            >>> [t.alpha2 for t in Currency.CHF.used_by]
            ['LI', 'CH']
        """
        return self._used_by

    @property
    def is_fund(self) -> bool:
        """True for fund and index units (e.g., BOV, CHE, USN)."""
        return self._record.is_fund

    @property
    def is_special(self) -> bool:
        """True for special codes.

        Examples of special currencies are gold, silver, the IMF's Special
        Drawing Rights (XDR), the testing code and "no currency" (XXX).
        """
        return self._record.is_special

    @property
    def superseded_by(self) -> Self | None:
        """Currency that replaced this one, None if it is current.

        Example:
            >>> Currency.HRK.superseded_by
            <Currency.EUR: 'EUR'>
        """
        code = self._record.superseded_by
        if code is None:
            return None
        return type(self).__members__[code]

    # ========================================================================
    # CONSTRUCTORS
    # ========================================================================

    @classmethod
    def from_code(cls, code: object) -> Self | None:
        """Look up a currency by alphabetic code.

        Exact, case-sensitive match: "eur" is not EUR.

        Args:
            code: ISO 4217 alphabetic code (e.g., 'EUR')

        Returns:
            The member, or None if no currency has that code.

        Example:
            >>> Currency.from_code("EUR")
            <Currency.EUR: 'EUR'>
            >>> Currency.from_code("ZZZ") is None
            True
        """
        if not isinstance(code, str):
            return None
        return cls.__members__.get(code)

    @classmethod
    def from_numeric(cls, numeric: object) -> Self | None:
        """Look up a currency by numeric code.

        Args:
            numeric: ISO 4217 numeric code (e.g., 978). bool is rejected.

        Returns:
            The member, or None if no currency has that number.

        Example:
            >>> Currency.from_numeric(978)
            <Currency.EUR: 'EUR'>
            >>> Currency.from_numeric(-1) is None
            True
        """
        if isinstance(numeric, bool) or not isinstance(numeric, int):
            return None
        return _numeric_index(cls).get(numeric)

    @classmethod
    def parse(cls, code: object) -> Self:
        """Look up a currency by alphabetic code, raising on a miss.

        Args:
            code: ISO 4217 alphabetic code

        Returns:
            The member.

        Raises:
            ParseCurrencyError: If no currency has that code
        """
        currency = cls.from_code(code)
        if currency is None:
            raise ParseCurrencyError(code)
        return currency


@cache
def _numeric_index[E: CurrencyEnum](enum_class: type[E]) -> dict[int, E]:
    """Numeric code to member, built once per enum class."""
    return {member.numeric: member for member in enum_class}
