"""Shared constants for isocurrency.

Centralizes the source-table layout and generator defaults so the loader,
the renderer and the CLI agree on a single definition.

Constants are grouped by domain:
- Table layout: column names, separators, flag vocabulary
- Code shapes: alpha/numeric/territory code limits
- Paths: packaged table and generated module locations
- Cache limits: memory bounds for Babel-backed name lookups

Python 3.13+. Zero external dependencies.
"""

from pathlib import Path

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Table layout
    "TABLE_COLUMNS",
    "TABLE_COLUMN_COUNT",
    "FIELD_SEPARATOR",
    "TERRITORY_SEPARATOR",
    "FLAG_SEPARATOR",
    "FLAG_FUND",
    "FLAG_SPECIAL",
    "FLAG_SUPERSEDED",
    # Code shapes
    "ALPHA_CODE_LENGTH",
    "TERRITORY_CODE_LENGTH",
    "UNKNOWN_REGION_CODE",
    "MAX_NUMERIC_CODE",
    "MAX_EXPONENT",
    # Paths
    "PACKAGE_DIR",
    "DEFAULT_TABLE_PATH",
    "GENERATED_MODULE_PATH",
    # Cache limits
    "MAX_TERRITORY_NAME_CACHE_SIZE",
    # Locale
    "DEFAULT_LOCALE",
]

# ============================================================================
# TABLE LAYOUT
# ============================================================================
#
# The first six columns are the canonical currency record. The trailing two
# carry the subunit symbol and the classification flags. Every row, header
# included, has exactly TABLE_COLUMN_COUNT fields; an absent optional value is
# an empty string between two separators, never a missing column.
#
# ============================================================================

TABLE_COLUMNS: tuple[str, ...] = (
    "code",
    "numeric",
    "name",
    "symbol",
    "exponent",
    "territories",
    "subunit_symbol",
    "flags",
)

TABLE_COLUMN_COUNT: int = len(TABLE_COLUMNS)

# Rows split on tab; there are no quoting rules.
FIELD_SEPARATOR: str = "\t"

# "LI;CH" - no trailing separator.
TERRITORY_SEPARATOR: str = ";"

# "fund", "special", "superseded(EUR)" joined with commas.
FLAG_SEPARATOR: str = ","

FLAG_FUND: str = "fund"
FLAG_SPECIAL: str = "special"
FLAG_SUPERSEDED: str = "superseded"

# ============================================================================
# CODE SHAPES
# ============================================================================

# ISO 4217 alphabetic code: three uppercase ASCII letters.
ALPHA_CODE_LENGTH: int = 3

# ISO 3166-1 alpha-2 territory code.
TERRITORY_CODE_LENGTH: int = 2

# CLDR placeholder for an unknown region; never a valid currency territory.
UNKNOWN_REGION_CODE: str = "ZZ"

# ISO 4217 numeric codes are three decimal digits (000-999).
MAX_NUMERIC_CODE: int = 999

# Largest minor-unit exponent in the standard (CLF, UYW).
MAX_EXPONENT: int = 4

# ============================================================================
# PATHS
# ============================================================================

PACKAGE_DIR: Path = Path(__file__).resolve().parent

# Single source of truth, editable without touching Python.
DEFAULT_TABLE_PATH: Path = PACKAGE_DIR / "data" / "isodata.tsv"

# Output of `python -m isocurrency.codegen`. Checked into the repository.
GENERATED_MODULE_PATH: Path = PACKAGE_DIR / "_isodata.py"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Territory display names are cached per (code, locale) pair.
# ~250 territories times a handful of locales stays well under this bound.
MAX_TERRITORY_NAME_CACHE_SIZE: int = 2048

# ============================================================================
# LOCALE
# ============================================================================

# Currency names in the table are English; territory names default to match.
DEFAULT_LOCALE: str = "en"
