"""Performance benchmarks for currency lookups and generation.

Python 3.13+.
"""

from __future__ import annotations

from isocurrency import Currency
from isocurrency.codegen import load_table, parse_table, render_module
from isocurrency.constants import DEFAULT_TABLE_PATH


class TestLookupBenchmarks:
    """Benchmark runtime lookups."""

    def test_from_code(self, benchmark) -> None:
        """Benchmark lookup by alphabetic code."""
        result = benchmark(Currency.from_code, "EUR")

        assert result is Currency.EUR

    def test_from_code_miss(self, benchmark) -> None:
        """Benchmark a lookup miss."""
        result = benchmark(Currency.from_code, "ZZZ")

        assert result is None

    def test_from_numeric(self, benchmark) -> None:
        """Benchmark lookup by numeric code."""
        result = benchmark(Currency.from_numeric, 924)

        assert result is Currency.ZWG

    def test_used_by(self, benchmark) -> None:
        """Benchmark the territory accessor for the widest currency."""
        result = benchmark(lambda: Currency.EUR.used_by)

        assert len(result) > 20

    def test_iterate_all(self, benchmark) -> None:
        """Benchmark a full pass over every member."""
        result = benchmark(lambda: [c.numeric for c in Currency])

        assert len(result) == len(Currency)


class TestGeneratorBenchmarks:
    """Benchmark the build-time generator."""

    def test_parse_table(self, benchmark) -> None:
        """Benchmark parsing the packaged table."""
        text = DEFAULT_TABLE_PATH.read_text(encoding="utf-8")

        result = benchmark(parse_table, text)

        assert len(result) == len(Currency)

    def test_render_module(self, benchmark) -> None:
        """Benchmark rendering the generated module."""
        records = load_table()

        result = benchmark(render_module, records)

        assert result.count("= CurrencyRecord(") == len(records)
