"""Diagnostic codes and data structures for source-table validation.

The generator reports every malformed row through a TableDiagnostic so that
the CLI, the log and the raised TableFormatError all show the same location
and wording.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "TableDiagnostic",
    "TableErrorCode",
]


class TableErrorCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Row shape errors (column count, header)
        2000-2999: Field value errors (codes, numbers, flags)
        3000-3999: Table consistency errors (duplicates, cross references)
    """

    # Row shape errors (1000-1999)
    WRONG_COLUMN_COUNT = 1001
    INVALID_HEADER = 1002
    EMPTY_TABLE = 1003

    # Field value errors (2000-2999)
    INVALID_ALPHA_CODE = 2001
    INVALID_NUMERIC_CODE = 2002
    NUMERIC_CODE_OUT_OF_RANGE = 2003
    EMPTY_NAME = 2004
    INVALID_EXPONENT = 2005
    INVALID_TERRITORY_CODE = 2006
    UNKNOWN_FLAG = 2007
    MALFORMED_SUPERSEDED_FLAG = 2008
    SURROUNDING_WHITESPACE = 2009
    UNKNOWN_TERRITORY = 2010

    # Table consistency errors (3000-3999)
    DUPLICATE_ALPHA_CODE = 3001
    DUPLICATE_NUMERIC_CODE = 3002
    UNKNOWN_SUPERSEDING_CURRENCY = 3003
    SELF_SUPERSEDED = 3004


@dataclass(frozen=True, slots=True)
class TableDiagnostic:
    """Structured diagnostic for one table problem.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        source: Table file name or other label for the text being parsed
        line: Line number (1-indexed, header is line 1), None for whole-table errors
        column: Column number (1-indexed field position), None when not tied to a field
        hint: Suggestion for fixing the row
    """

    code: TableErrorCode
    message: str
    source: str = "<table>"
    line: int | None = None
    column: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[DUPLICATE_NUMERIC_CODE]: Numeric code 978 already used by EUR
              --> isodata.tsv:12, column 2
              = help: Every numeric code must appear on exactly one row

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.line is not None:
            location = f"{self.source}:{self.line}"
            if self.column is not None:
                location += f", column {self.column}"
            lines.append(f"  --> {location}")
        else:
            lines.append(f"  --> {self.source}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so a hostile row cannot forge log lines."""
    return text.encode("unicode_escape").decode("ascii") if not text.isprintable() else text
