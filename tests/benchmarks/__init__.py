"""Performance benchmarks for isocurrency.

Benchmarks use pytest-benchmark to track lookup cost and generator speed.
Lookups are dictionary hits and should stay flat as the table grows.

Python 3.13+.
"""

from __future__ import annotations

__all__: list[str] = []
