"""Render the generated Currency module.

Turns CurrencyRecord rows into the Python source of isocurrency/_isodata.py:
one Currency member per row, declared with its CurrencyRecord and documented
with the English name. Output is deterministic so that `--check` can compare
it byte for byte with the file in the repository.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from isocurrency.record import CurrencyRecord

__all__ = [
    "check_module",
    "render_member",
    "render_module",
    "write_module",
]

logger = logging.getLogger(__name__)

_MODULE_HEADER = '''\
# Generated by `python -m isocurrency.codegen` from {source}. Do not edit.
"""ISO 4217 currency enumeration.

One member per row of the source table. Edit the table, then regenerate:

    python -m isocurrency.codegen

Python 3.13+.
"""

from isocurrency.currency import CurrencyEnum
from isocurrency.record import CurrencyRecord

__all__ = ["Currency"]


class Currency(CurrencyEnum):
    """ISO 4217 currency.

    Members are named by alphabetic code and compare equal to it:

        >>> Currency.EUR == "EUR"
        True
        >>> Currency.from_numeric(978) is Currency.EUR
        True
    """

'''


def _literal(value: str) -> str:
    """Double-quoted Python string literal.

    JSON string escapes are a subset of Python's, and ensure_ascii=False
    keeps symbols such as '€' readable in the generated file.
    """
    return json.dumps(value, ensure_ascii=False)


def _docstring(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"""{escaped}"""'


def _tuple(values: tuple[str, ...]) -> str:
    if len(values) == 1:
        return f"({_literal(values[0])},)"
    return "(" + ", ".join(_literal(value) for value in values) + ")"


def render_member(record: CurrencyRecord) -> str:
    """Render one enum member and its docstring.

    Only fields that differ from the CurrencyRecord defaults are written,
    so a plain row stays on one short line.
    """
    args = [_literal(record.alpha_code), str(record.numeric_code), _literal(record.name)]
    if record.symbol is not None:
        args.append(f"symbol={_literal(record.symbol)}")
    if record.exponent is not None:
        args.append(f"exponent={record.exponent}")
    if record.territories:
        args.append(f"territories={_tuple(record.territories)}")
    if record.subunit_symbol is not None:
        args.append(f"subunit_symbol={_literal(record.subunit_symbol)}")
    if record.is_fund:
        args.append("is_fund=True")
    if record.is_special:
        args.append("is_special=True")
    if record.superseded_by is not None:
        args.append(f"superseded_by={_literal(record.superseded_by)}")

    return (
        f"    {record.alpha_code} = CurrencyRecord({', '.join(args)})\n"
        f"    {_docstring(record.name)}\n"
    )


def render_module(records: tuple[CurrencyRecord, ...], *, source: str = "isodata.tsv") -> str:
    """Render the complete generated module.

    Args:
        records: Validated rows in table order
        source: Table file name recorded in the header comment

    Returns:
        Python source text, newline-terminated.
    """
    members = "\n".join(render_member(record) for record in records)
    return _MODULE_HEADER.format(source=source) + members


def write_module(
    records: tuple[CurrencyRecord, ...],
    path: Path,
    *,
    source: str = "isodata.tsv",
) -> None:
    """Render and write the generated module.

    Raises:
        OSError: If the file cannot be written
    """
    text = render_module(records, source=source)
    path.write_text(text, encoding="utf-8", newline="\n")
    logger.info("Wrote %d currencies to %s", len(records), path)


def check_module(
    records: tuple[CurrencyRecord, ...],
    path: Path,
    *,
    source: str = "isodata.tsv",
) -> bool:
    """Check that the module on disk matches what the table renders to.

    Returns:
        True if up to date, False if missing or stale.
    """
    expected = render_module(records, source=source)
    try:
        actual = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.warning("Generated module %s does not exist", path)
        return False
    if actual != expected:
        logger.warning("Generated module %s is out of date with %s", path, source)
        return False
    return True
