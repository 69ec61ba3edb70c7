"""pytest-benchmark configuration for isocurrency benchmarks."""

from __future__ import annotations

from isocurrency import Currency


def pytest_benchmark_update_json(config, benchmarks, output_json):  # noqa: ARG001
    """Record the enumeration size with the results, so runs on different tables compare."""
    output_json["project"] = "isocurrency"
    output_json["currency_count"] = len(Currency)
