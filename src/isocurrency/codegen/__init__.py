"""Build-time generator for the Currency enumeration.

Turns the tab-separated ISO 4217 table into isocurrency/_isodata.py. Runs
before release, never at import time of isocurrency itself:

    python -m isocurrency.codegen           # regenerate
    python -m isocurrency.codegen --check   # verify the checked-in module

Requires Babel for territory validation:
    pip install isocurrency[babel]

Python 3.13+.
"""

from isocurrency.record import CurrencyRecord

from .cli import main
from .render import check_module, render_member, render_module, write_module
from .table import load_table, parse_flags, parse_row, parse_table, validate_records

__all__ = [
    "CurrencyRecord",
    "check_module",
    "load_table",
    "main",
    "parse_flags",
    "parse_row",
    "parse_table",
    "render_member",
    "render_module",
    "validate_records",
    "write_module",
]
