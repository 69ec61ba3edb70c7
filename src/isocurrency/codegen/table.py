"""Currency source-table loader.

Parses the tab-separated ISO 4217 table into CurrencyRecord rows and checks
it strictly. The table is the single source of truth; anything the loader
cannot read unambiguously stops generation with a TableFormatError instead of
being dropped, padded or coerced.

Table layout (one header row, then one row per currency):

    code  numeric  name  symbol  exponent  territories  subunit_symbol  flags
    CHF   756      Swiss franc  Fr.  2     LI;CH        Rp.

Territory codes are checked against CLDR, so the generator needs Babel:
    pip install isocurrency[babel]

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from isocurrency.constants import (
    ALPHA_CODE_LENGTH,
    DEFAULT_TABLE_PATH,
    FIELD_SEPARATOR,
    FLAG_FUND,
    FLAG_SEPARATOR,
    FLAG_SPECIAL,
    FLAG_SUPERSEDED,
    MAX_EXPONENT,
    MAX_NUMERIC_CODE,
    TABLE_COLUMN_COUNT,
    TABLE_COLUMNS,
    TERRITORY_SEPARATOR,
)
from isocurrency.diagnostics import TableDiagnostic, TableErrorCode
from isocurrency.errors import TableFormatError
from isocurrency.record import CurrencyRecord
from isocurrency.compat import require_babel
from isocurrency.territory import is_territory_code, known_territory_codes

__all__ = [
    "load_table",
    "parse_flags",
    "parse_row",
    "parse_table",
    "validate_records",
]

logger = logging.getLogger(__name__)

_SUPERSEDED_PATTERN = re.compile(rf"{FLAG_SUPERSEDED}\((?P<code>[A-Z]{{3}})\)")

# 1-indexed field positions, used for diagnostics.
_COLUMN = {name: index for index, name in enumerate(TABLE_COLUMNS, start=1)}


# ============================================================================
# ROW PARSING
# ============================================================================


def _fail(
    code: TableErrorCode,
    message: str,
    *,
    source: str,
    line: int | None = None,
    column: str | None = None,
    hint: str | None = None,
) -> TableFormatError:
    """Build the TableFormatError for one problem (caller raises it)."""
    return TableFormatError(
        TableDiagnostic(
            code=code,
            message=message,
            source=source,
            line=line,
            column=_COLUMN[column] if column is not None else None,
            hint=hint,
        )
    )


def _is_alpha_code(value: str) -> bool:
    return (
        len(value) == ALPHA_CODE_LENGTH
        and value.isascii()
        and value.isalpha()
        and value.isupper()
    )


def _parse_digits(value: str) -> int | None:
    """Parse a plain ASCII decimal number; None for anything else ('+1', '١', '')."""
    if not value or not value.isascii() or not value.isdigit():
        return None
    return int(value)


def parse_flags(
    text: str,
    *,
    source: str = "<table>",
    line: int | None = None,
) -> tuple[bool, bool, str | None]:
    """Parse the flags column.

    Args:
        text: Comma-separated flags, e.g. "fund" or "special,superseded(EUR)"
        source: Label used in diagnostics
        line: Line number used in diagnostics

    Returns:
        (is_fund, is_special, superseded_by)

    Raises:
        TableFormatError: On an unknown or malformed flag
    """
    is_fund = False
    is_special = False
    superseded_by: str | None = None

    if not text:
        return is_fund, is_special, superseded_by

    for flag in text.split(FLAG_SEPARATOR):
        if flag == FLAG_FUND:
            is_fund = True
        elif flag == FLAG_SPECIAL:
            is_special = True
        elif flag.startswith(FLAG_SUPERSEDED):
            match = _SUPERSEDED_PATTERN.fullmatch(flag)
            if match is None:
                raise _fail(
                    TableErrorCode.MALFORMED_SUPERSEDED_FLAG,
                    f"Malformed flag {flag!r}",
                    source=source,
                    line=line,
                    column="flags",
                    hint="Write the replacement as superseded(XXX) with a 3-letter code",
                )
            superseded_by = match.group("code")
        else:
            raise _fail(
                TableErrorCode.UNKNOWN_FLAG,
                f"Unknown flag {flag!r}",
                source=source,
                line=line,
                column="flags",
                hint=f"Known flags: {FLAG_FUND}, {FLAG_SPECIAL}, {FLAG_SUPERSEDED}(XXX)",
            )

    return is_fund, is_special, superseded_by


def parse_row(line: str, line_number: int, *, source: str = "<table>") -> CurrencyRecord:
    """Parse one data row of the table.

    Args:
        line: Row text without its line terminator
        line_number: 1-indexed line number (header is line 1)
        source: Label used in diagnostics

    Returns:
        The parsed CurrencyRecord.

    Raises:
        TableFormatError: If the row has the wrong column count or any field
            is malformed
    """
    fields = line.split(FIELD_SEPARATOR)
    if len(fields) != TABLE_COLUMN_COUNT:
        raise _fail(
            TableErrorCode.WRONG_COLUMN_COUNT,
            f"Expected {TABLE_COLUMN_COUNT} columns, found {len(fields)}",
            source=source,
            line=line_number,
            hint="Keep empty optional fields as empty strings between tabs",
        )

    for name, value in zip(TABLE_COLUMNS, fields, strict=True):
        if value != value.strip():
            raise _fail(
                TableErrorCode.SURROUNDING_WHITESPACE,
                f"Field '{name}' has leading or trailing whitespace: {value!r}",
                source=source,
                line=line_number,
                column=name,
            )

    (
        alpha_code,
        numeric_text,
        name,
        symbol,
        exponent_text,
        territories_text,
        subunit_symbol,
        flags_text,
    ) = fields

    if not _is_alpha_code(alpha_code):
        raise _fail(
            TableErrorCode.INVALID_ALPHA_CODE,
            f"Invalid alphabetic code {alpha_code!r}",
            source=source,
            line=line_number,
            column="code",
            hint="Alphabetic codes are three uppercase ASCII letters",
        )

    numeric_code = _parse_digits(numeric_text)
    if numeric_code is None:
        raise _fail(
            TableErrorCode.INVALID_NUMERIC_CODE,
            f"Could not parse numeric code {numeric_text!r} for {alpha_code}",
            source=source,
            line=line_number,
            column="numeric",
        )
    if numeric_code > MAX_NUMERIC_CODE:
        raise _fail(
            TableErrorCode.NUMERIC_CODE_OUT_OF_RANGE,
            f"Numeric code {numeric_code} for {alpha_code} exceeds {MAX_NUMERIC_CODE}",
            source=source,
            line=line_number,
            column="numeric",
        )

    if not name:
        raise _fail(
            TableErrorCode.EMPTY_NAME,
            f"Missing name for {alpha_code}",
            source=source,
            line=line_number,
            column="name",
        )

    exponent: int | None = None
    if exponent_text:
        exponent = _parse_digits(exponent_text)
        if exponent is None or exponent > MAX_EXPONENT:
            raise _fail(
                TableErrorCode.INVALID_EXPONENT,
                f"Could not parse exponent {exponent_text!r} for {alpha_code}",
                source=source,
                line=line_number,
                column="exponent",
                hint=f"Use 0-{MAX_EXPONENT}, or leave empty for no minor unit",
            )

    territories: tuple[str, ...] = ()
    if territories_text:
        territories = tuple(territories_text.split(TERRITORY_SEPARATOR))
        for territory in territories:
            if not is_territory_code(territory):
                raise _fail(
                    TableErrorCode.INVALID_TERRITORY_CODE,
                    f"Invalid territory code {territory!r} for {alpha_code}",
                    source=source,
                    line=line_number,
                    column="territories",
                    hint="Separate alpha-2 codes with ';' and no trailing separator",
                )
            if territory not in known_territory_codes():
                raise _fail(
                    TableErrorCode.UNKNOWN_TERRITORY,
                    f"Unknown territory code {territory!r} for {alpha_code}",
                    source=source,
                    line=line_number,
                    column="territories",
                    hint="Use an ISO 3166-1 alpha-2 code known to CLDR",
                )

    is_fund, is_special, superseded_by = parse_flags(
        flags_text, source=source, line=line_number
    )

    record = CurrencyRecord(
        alpha_code=alpha_code,
        numeric_code=numeric_code,
        name=name,
        symbol=symbol or None,
        exponent=exponent,
        territories=territories,
        subunit_symbol=subunit_symbol or None,
        is_fund=is_fund,
        is_special=is_special,
        superseded_by=superseded_by,
    )
    logger.debug("Parsed currency %s (%03d) at line %d", alpha_code, numeric_code, line_number)
    return record


# ============================================================================
# TABLE PARSING
# ============================================================================


def validate_records(
    records: tuple[CurrencyRecord, ...],
    *,
    source: str = "<table>",
    line_numbers: tuple[int, ...] | None = None,
) -> None:
    """Check table-wide invariants.

    - alphabetic codes are unique
    - numeric codes are unique
    - superseded(XXX) names another row, and not the row itself

    Args:
        records: Parsed rows in table order
        source: Label used in diagnostics
        line_numbers: Line of each record, parallel to `records`

    Raises:
        TableFormatError: On the first violated invariant
    """
    lines = line_numbers if line_numbers is not None else (None,) * len(records)
    by_alpha: dict[str, CurrencyRecord] = {}
    by_numeric: dict[int, CurrencyRecord] = {}

    for record, line in zip(records, lines, strict=True):
        if record.alpha_code in by_alpha:
            raise _fail(
                TableErrorCode.DUPLICATE_ALPHA_CODE,
                f"Alphabetic code {record.alpha_code} appears more than once",
                source=source,
                line=line,
                column="code",
            )
        other = by_numeric.get(record.numeric_code)
        if other is not None:
            raise _fail(
                TableErrorCode.DUPLICATE_NUMERIC_CODE,
                f"Numeric code {record.numeric_code:03d} already used by {other.alpha_code}",
                source=source,
                line=line,
                column="numeric",
                hint="Every numeric code must appear on exactly one row",
            )
        by_alpha[record.alpha_code] = record
        by_numeric[record.numeric_code] = record

    for record, line in zip(records, lines, strict=True):
        if record.superseded_by is None:
            continue
        if record.superseded_by == record.alpha_code:
            raise _fail(
                TableErrorCode.SELF_SUPERSEDED,
                f"{record.alpha_code} cannot supersede itself",
                source=source,
                line=line,
                column="flags",
            )
        if record.superseded_by not in by_alpha:
            raise _fail(
                TableErrorCode.UNKNOWN_SUPERSEDING_CURRENCY,
                f"{record.alpha_code} is superseded by {record.superseded_by}, "
                "which is not in the table",
                source=source,
                line=line,
                column="flags",
            )


def parse_table(text: str, *, source: str = "<table>") -> tuple[CurrencyRecord, ...]:
    """Parse the full table text.

    The first line must be the header. Completely empty lines are skipped
    (the trailing newline included); every other line is a currency row.

    Args:
        text: Table contents
        source: Label used in diagnostics (usually the file name)

    Returns:
        Records in table order.

    Raises:
        TableFormatError: On any malformed row or violated table invariant
        BabelImportError: If Babel, which supplies the territory codes, is not
            installed
    """
    require_babel("isocurrency.codegen")
    lines = text.removeprefix("\ufeff").split("\n")
    header = lines[0].rstrip("\r")
    if tuple(header.split(FIELD_SEPARATOR)) != TABLE_COLUMNS:
        raise _fail(
            TableErrorCode.INVALID_HEADER,
            f"Header does not match expected columns: {header!r}",
            source=source,
            line=1,
            hint="Expected: " + " <TAB> ".join(TABLE_COLUMNS),
        )

    records: list[CurrencyRecord] = []
    line_numbers: list[int] = []
    for line_number, raw in enumerate(lines[1:], start=2):
        line = raw.rstrip("\r")
        if not line:
            continue
        records.append(parse_row(line, line_number, source=source))
        line_numbers.append(line_number)

    if not records:
        raise _fail(
            TableErrorCode.EMPTY_TABLE,
            "Table has no currency rows",
            source=source,
        )

    result = tuple(records)
    validate_records(result, source=source, line_numbers=tuple(line_numbers))
    return result


def load_table(path: Path | str | None = None) -> tuple[CurrencyRecord, ...]:
    """Read and parse a table file.

    Args:
        path: Table file; defaults to the table packaged with isocurrency

    Returns:
        Records in table order.

    Raises:
        OSError: If the file cannot be read
        TableFormatError: On any malformed row or violated table invariant
    """
    table_path = Path(path) if path is not None else DEFAULT_TABLE_PATH
    logger.info("Loading currency table from %s", table_path)
    records = parse_table(table_path.read_text(encoding="utf-8"), source=table_path.name)
    logger.info("Loaded %d currencies from %s", len(records), table_path.name)
    return records
