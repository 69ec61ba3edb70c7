"""Currency symbol value type.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["CurrencySymbol"]


@dataclass(frozen=True, slots=True)
class CurrencySymbol:
    """Symbol commonly used to represent a currency.

    When the source table has no symbol for a currency, the alpha code
    stands in for it, so `symbol` is never empty.

    Attributes:
        symbol: Main unit symbol (e.g., '€', 'Fr.', 'XAU').
        subunit_symbol: Minor unit symbol (e.g., 'c', 'Rp.'), None if unknown.
    """

    symbol: str
    subunit_symbol: str | None = None

    def __str__(self) -> str:
        return self.symbol
