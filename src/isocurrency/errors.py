"""isocurrency exception hierarchy.

Runtime lookups never raise on a miss: Currency.from_code and
Currency.from_numeric return None. Exceptions are reserved for explicit
parsing (Currency.parse, adapter decoding), for generation failures, and for
optional features whose dependency is not installed.

Python 3.13+. Zero external dependencies.
"""

from .diagnostics import TableDiagnostic

__all__ = [
    "BabelImportError",
    "IsoCurrencyError",
    "OptionalDependencyError",
    "ParseCurrencyError",
    "TableFormatError",
]


class IsoCurrencyError(Exception):
    """Base exception for all isocurrency errors."""


class ParseCurrencyError(IsoCurrencyError, ValueError):
    """Value is not a valid ISO 4217 currency code.

    Attributes:
        value: The rejected input, unchanged
    """

    def __init__(self, value: object) -> None:
        """Initialize ParseCurrencyError.

        Args:
            value: The input that did not name a known currency
        """
        super().__init__(f"{value!r} is not a valid ISO 4217 currency code")
        self.value = value


class TableFormatError(IsoCurrencyError, ValueError):
    """The currency source table is malformed.

    Raised by the generator only; generation halts on the first problem.

    Attributes:
        diagnostic: Structured location and error code
    """

    def __init__(self, diagnostic: TableDiagnostic) -> None:
        """Initialize TableFormatError.

        Args:
            diagnostic: What went wrong and where
        """
        super().__init__(diagnostic.format_error())
        self.diagnostic = diagnostic


class OptionalDependencyError(IsoCurrencyError, ImportError):
    """Raised when a feature needs a library from an optional extra.

    Provides installation guidance to users.
    """

    def __init__(self, feature: str, extra: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring the dependency
            extra: Name of the isocurrency extra that installs it
        """
        message = (
            f"{feature} requires the '{extra}' extra. "
            f"Install with: pip install isocurrency[{extra}]"
        )
        super().__init__(message)
        self.feature = feature
        self.extra = extra


class BabelImportError(OptionalDependencyError):
    """Raised when Babel is required for territory names but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error for a Babel-backed feature.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        super().__init__(feature, "babel")
