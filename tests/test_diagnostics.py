"""Tests for table diagnostics and the exception hierarchy."""

from __future__ import annotations

import pytest

from isocurrency.diagnostics import TableDiagnostic, TableErrorCode
from isocurrency.errors import IsoCurrencyError, ParseCurrencyError, TableFormatError


class TestTableErrorCode:
    """Tests for error code numbering."""

    def test_codes_unique(self) -> None:
        values = [code.value for code in TableErrorCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (TableErrorCode.WRONG_COLUMN_COUNT, 1000, 1999),
            (TableErrorCode.INVALID_NUMERIC_CODE, 2000, 2999),
            (TableErrorCode.DUPLICATE_NUMERIC_CODE, 3000, 3999),
        ],
    )
    def test_categories(self, code: TableErrorCode, low: int, high: int) -> None:
        assert low <= code.value <= high


class TestTableDiagnostic:
    """Tests for diagnostic formatting."""

    def test_str_is_message(self) -> None:
        diagnostic = TableDiagnostic(TableErrorCode.EMPTY_TABLE, "Table has no currency rows")
        assert str(diagnostic) == "Table has no currency rows"

    def test_format_full(self) -> None:
        diagnostic = TableDiagnostic(
            code=TableErrorCode.DUPLICATE_NUMERIC_CODE,
            message="Numeric code 978 already used by EUR",
            source="isodata.tsv",
            line=12,
            column=2,
            hint="Every numeric code must appear on exactly one row",
        )
        assert diagnostic.format_error() == (
            "error[DUPLICATE_NUMERIC_CODE]: Numeric code 978 already used by EUR\n"
            "  --> isodata.tsv:12, column 2\n"
            "  = help: Every numeric code must appear on exactly one row"
        )

    def test_format_line_without_column(self) -> None:
        diagnostic = TableDiagnostic(
            TableErrorCode.WRONG_COLUMN_COUNT, "Expected 8 columns, found 3", line=4
        )
        assert diagnostic.format_error().splitlines()[1] == "  --> <table>:4"

    def test_format_whole_table(self) -> None:
        """Whole-table errors point at the source only."""
        diagnostic = TableDiagnostic(TableErrorCode.EMPTY_TABLE, "Empty", source="isodata.tsv")
        assert diagnostic.format_error() == "error[EMPTY_TABLE]: Empty\n  --> isodata.tsv"

    def test_control_characters_escaped(self) -> None:
        """A message echoing a hostile field stays on one line."""
        diagnostic = TableDiagnostic(TableErrorCode.UNKNOWN_FLAG, "Unknown flag 'a\nerror[X]'")
        first_line = diagnostic.format_error().splitlines()[0]
        assert first_line == "error[UNKNOWN_FLAG]: Unknown flag 'a\\nerror[X]'"

    def test_frozen(self) -> None:
        diagnostic = TableDiagnostic(TableErrorCode.EMPTY_TABLE, "Empty")
        with pytest.raises(AttributeError):
            diagnostic.line = 3  # type: ignore[misc]


class TestErrors:
    """Tests for the exception hierarchy."""

    def test_parse_error(self) -> None:
        error = ParseCurrencyError("eur")
        assert str(error) == "'eur' is not a valid ISO 4217 currency code"
        assert error.value == "eur"
        assert isinstance(error, ValueError)
        assert isinstance(error, IsoCurrencyError)

    def test_parse_error_keeps_non_string_value(self) -> None:
        assert ParseCurrencyError(978).value == 978

    def test_table_format_error(self) -> None:
        diagnostic = TableDiagnostic(TableErrorCode.EMPTY_TABLE, "Empty", source="t.tsv")
        error = TableFormatError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert isinstance(error, ValueError)
        assert isinstance(error, IsoCurrencyError)
