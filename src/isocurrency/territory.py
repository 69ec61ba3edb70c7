"""ISO 3166-1 territories referenced by currencies.

Territory is a thin, hashable handle on an alpha-2 code. The list of
territories and their names belong to the CLDR data shipped with Babel;
isocurrency stores only the codes each currency row names.

Requires Babel installation for names:
    pip install isocurrency[babel]

Without Babel, name lookups raise BabelImportError with installation guidance.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache

from .compat import require_babel
from .constants import (
    DEFAULT_LOCALE,
    MAX_TERRITORY_NAME_CACHE_SIZE,
    TERRITORY_CODE_LENGTH,
    UNKNOWN_REGION_CODE,
)

__all__ = [
    "Territory",
    "TerritoryCode",
    "clear_territory_cache",
    "is_territory_code",
    "known_territory_codes",
]

logger = logging.getLogger(__name__)

type TerritoryCode = str
"""ISO 3166-1 alpha-2 territory code (e.g., 'CH', 'LI', 'DE')."""


def is_territory_code(value: object) -> bool:
    """Check the shape of an alpha-2 code: two uppercase ASCII letters.

    Shape only; whether CLDR knows the territory is a Babel question.
    """
    return (
        isinstance(value, str)
        and len(value) == TERRITORY_CODE_LENGTH
        and value.isascii()
        and value.isalpha()
        and value.isupper()
    )


@dataclass(frozen=True, slots=True, order=True)
class Territory:
    """Territory that uses a currency.

    Immutable, thread-safe, hashable, ordered by code. Two Territory values
    are equal when their codes are equal.

    Attributes:
        alpha2: ISO 3166-1 alpha-2 code (e.g., 'CH').
    """

    alpha2: TerritoryCode

    def __post_init__(self) -> None:
        """Reject anything that is not an uppercase alpha-2 code.

        Raises:
            ValueError: If alpha2 is not two uppercase ASCII letters
        """
        if not is_territory_code(self.alpha2):
            msg = f"Territory code must be two uppercase ASCII letters, got {self.alpha2!r}"
            raise ValueError(msg)

    def __str__(self) -> str:
        return self.alpha2

    @property
    def name(self) -> str:
        """English territory name from CLDR (e.g., 'Switzerland').

        Raises:
            BabelImportError: If Babel not installed.
        """
        return self.display_name(DEFAULT_LOCALE)

    def display_name(self, locale: str = DEFAULT_LOCALE) -> str:
        """Territory name localized for `locale`.

        Args:
            locale: Locale identifier. Accepts BCP-47 (de-CH) or POSIX (de_CH)
                formats; normalized internally.

        Returns:
            CLDR display name, or the alpha-2 code when CLDR has no entry.

        Raises:
            BabelImportError: If Babel not installed.
            babel.UnknownLocaleError: If Babel has no data for `locale`.

        Thread-safe. Results cached per (code, normalized locale) pair.
        """
        require_babel("Territory.display_name")
        return _territory_name(self.alpha2, _normalize_locale(locale))


def _normalize_locale(locale: str) -> str:
    """Normalize BCP-47 separators to the POSIX form Babel parses by default."""
    return locale.replace("-", "_")


@lru_cache(maxsize=MAX_TERRITORY_NAME_CACHE_SIZE)
def _territory_name(alpha2: str, locale_norm: str) -> str:
    """Internal cached implementation for Territory.display_name."""
    from babel import Locale  # noqa: PLC0415

    names: dict[str, str] = Locale.parse(locale_norm).territories
    name = names.get(alpha2)
    if name is None:
        logger.debug("No CLDR name for territory %s in locale %s", alpha2, locale_norm)
        return alpha2
    return name


def known_territory_codes() -> frozenset[TerritoryCode]:
    """Alpha-2 codes of every territory CLDR names.

    Numeric region codes (e.g., '001', '419') and the unknown-region
    placeholder 'ZZ' are excluded.

    Raises:
        BabelImportError: If Babel not installed.

    Thread-safe. Computed once.
    """
    require_babel("known_territory_codes")
    return _known_territory_codes()


@lru_cache(maxsize=1)
def _known_territory_codes() -> frozenset[str]:
    from babel import Locale  # noqa: PLC0415

    territories: dict[str, str] = Locale.parse(DEFAULT_LOCALE).territories
    return frozenset(
        code
        for code in territories
        if is_territory_code(code) and code != UNKNOWN_REGION_CODE
    )


def clear_territory_cache() -> None:
    """Clear the territory name cache.

    Call this if you need to free memory. Thread-safe.
    """
    _territory_name.cache_clear()
