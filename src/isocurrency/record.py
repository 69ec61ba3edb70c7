"""Currency record: the data behind one Currency member.

The table loader produces CurrencyRecord values from the source table; the
generated Currency enum is declared with one CurrencyRecord per member.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["CurrencyRecord"]


@dataclass(frozen=True, slots=True)
class CurrencyRecord:
    """One row of the currency source table.

    Immutable, thread-safe, hashable.

    Attributes:
        alpha_code: ISO 4217 alphabetic code (e.g., 'EUR').
        numeric_code: ISO 4217 numeric code (e.g., 978).
        name: English name (e.g., 'Euro').
        symbol: Main unit symbol, None if the table has none.
        exponent: Minor unit digits, None for currencies without a decimal subunit.
        territories: Alpha-2 codes of territories using the currency, in table order.
        subunit_symbol: Minor unit symbol, None if unknown.
        is_fund: Fund or index unit rather than circulating money.
        is_special: Precious metal, bond-market unit, SDR, testing or no-currency code.
        superseded_by: Alpha code of the replacing currency, None if current.
    """

    alpha_code: str
    numeric_code: int
    name: str
    symbol: str | None = None
    exponent: int | None = None
    territories: tuple[str, ...] = ()
    subunit_symbol: str | None = None
    is_fund: bool = False
    is_special: bool = False
    superseded_by: str | None = None

    @property
    def display_symbol(self) -> str:
        """Symbol with the alpha code standing in when the table has none."""
        return self.symbol if self.symbol is not None else self.alpha_code

    @property
    def subunit_fraction(self) -> int | None:
        """Minor units per main unit (10 ** exponent), None without exponent."""
        return None if self.exponent is None else 10**self.exponent
