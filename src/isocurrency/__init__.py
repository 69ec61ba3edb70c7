"""isocurrency - ISO 4217 currencies as a Python enumeration.

Every ISO 4217 currency is a member of the Currency enum, generated from a
tab-separated table at build time. Accessors map between the representations
of a currency without any I/O or mutable state.

Example:
    >>> from isocurrency import Currency
    >>> Currency.EUR.english_name
    'Euro'
    >>> Currency.EUR.numeric
    978
    >>> Currency.from_numeric(978) is Currency.from_code("EUR")
    True
    >>> str(Currency.EUR.symbol)
    '€'
    >>> Currency.EUR.subunit_fraction
    100
    >>> [territory.alpha2 for territory in Currency.CHF.used_by]
    ['LI', 'CH']

Public API:
    Currency - The enumeration, one member per ISO 4217 currency
    CurrencySymbol - Symbol and subunit symbol of a currency
    Territory - Territory using a currency (names via Babel)
    is_valid_currency_code / is_valid_numeric_code - Type guards

Exceptions:
    IsoCurrencyError - Base exception class
    ParseCurrencyError - Currency.parse() or adapter decode miss
    TableFormatError - Malformed source table (generator only)
    OptionalDependencyError / BabelImportError - Missing optional extra

Submodules:
    isocurrency.codegen - Table loader and module generator (build time)
    isocurrency.adapters.pydantic_types - pydantic field types and JSON schema
    isocurrency.adapters.sqlalchemy_types - SQLAlchemy column types
"""

from ._isodata import Currency
from .currency import CurrencyCode
from .errors import (
    BabelImportError,
    IsoCurrencyError,
    OptionalDependencyError,
    ParseCurrencyError,
    TableFormatError,
)
from .lookup import is_valid_currency_code, is_valid_numeric_code
from .record import CurrencyRecord
from .symbol import CurrencySymbol
from .territory import Territory, TerritoryCode

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("isocurrency")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"


__all__ = [
    "BabelImportError",
    "Currency",
    "CurrencyCode",
    "CurrencyRecord",
    "CurrencySymbol",
    "IsoCurrencyError",
    "OptionalDependencyError",
    "ParseCurrencyError",
    "TableFormatError",
    "Territory",
    "TerritoryCode",
    "__version__",
    "is_valid_currency_code",
    "is_valid_numeric_code",
]
