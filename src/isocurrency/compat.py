"""Optional dependency handling.

Provides centralized, lazy import infrastructure for the libraries behind the
optional extras, so every feature reports a missing dependency the same way.

Design Rationale:
    isocurrency supports several installation modes:
    - Core: `pip install isocurrency` (no external dependencies)
    - Territory names: `pip install isocurrency[babel]`
    - pydantic fields and JSON schema: `pip install isocurrency[pydantic]`
    - SQLAlchemy column types: `pip install isocurrency[sqlalchemy]`

    This module ensures that:
    1. Core installations never trigger optional imports
    2. Optional features raise OptionalDependencyError naming the extra
    3. Library types stay available for TYPE_CHECKING without runtime import

Usage Pattern:
    from isocurrency.compat import require_babel

    def territory_name(code: str) -> str:
        require_babel("territory_name")  # Raises BabelImportError if missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

import importlib.util
from functools import lru_cache

from .errors import BabelImportError, OptionalDependencyError

__all__ = [
    "is_available",
    "is_babel_available",
    "require",
    "require_babel",
]


@lru_cache(maxsize=8)
def is_available(module: str) -> bool:
    """Check if a top-level module is importable (computed once per module).

    Args:
        module: Import name, e.g. "babel", "pydantic", "sqlalchemy"

    Returns:
        True if the module can be imported, False otherwise.
    """
    return importlib.util.find_spec(module) is not None


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Example:
        >>> if is_babel_available():
        ...     print(Currency.CHF.used_by[0].name)
    """
    return is_available("babel")


def require(module: str, feature: str, extra: str) -> None:
    """Assert that an optional module is importable.

    Args:
        module: Import name of the dependency
        feature: Name of the feature requiring it (for error message)
        extra: isocurrency extra that installs it

    Raises:
        OptionalDependencyError: If the module is not installed
    """
    if not is_available(module):
        raise OptionalDependencyError(feature, extra)


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not is_babel_available():
        raise BabelImportError(feature)
