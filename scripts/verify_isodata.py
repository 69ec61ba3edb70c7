#!/usr/bin/env python3
"""Verify the currency source table against Babel CLDR data.

Loads src/isocurrency/data/isodata.tsv through the generator's own loader
and cross-checks it with babel.numbers and babel's territory data.

This script is informational for exponents: Babel's CLDR precision reflects
common usage (e.g., CLDR says 0 for some currencies whose ISO 4217 minor
unit is 2). The table is authoritative for ISO 4217 compliance.

Checks:
    1. Structural: Territory codes Babel does not know, and circulating
       (non-special) currencies Babel does not recognize.
    2. Discrepancies: Table exponent differs from Babel precision.
    3. Coverage gaps: Babel lists a currency as in use today in a territory
       the table names, but the table has no row for that currency.

Exit codes:
    0: All checks passed (discrepancies are warnings, not failures).
    1: Structural errors, table errors, or Babel missing.

Usage:
    verify_isodata.py [--table PATH] [--verbose]

Python 3.13+. Requires Babel.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from isocurrency.record import CurrencyRecord

logger = logging.getLogger("verify_isodata")


def _check_unrecognized(
    records: tuple[CurrencyRecord, ...], babel_currencies: set[str], babel_territories: set[str]
) -> list[str]:
    """Check table entries Babel cannot resolve."""
    errors: list[str] = []
    for record in records:
        if not record.is_special and record.alpha_code not in babel_currencies:
            errors.append(f"  {record.alpha_code}: In isodata.tsv but not recognized by Babel")
        errors.extend(
            f"  {record.alpha_code}: Territory {territory} unknown to Babel"
            for territory in record.territories
            if territory not in babel_territories
        )
    return errors


def _check_discrepancies(records: tuple[CurrencyRecord, ...]) -> list[str]:
    """Compare table exponents against Babel precision."""
    from babel.numbers import get_currency_precision  # noqa: PLC0415

    result: list[str] = []
    for record in records:
        if record.exponent is None:
            continue
        babel_val = get_currency_precision(record.alpha_code)
        if record.exponent != babel_val:
            result.append(
                f"  {record.alpha_code}: isodata.tsv={record.exponent}, Babel CLDR={babel_val}"
            )
    return result


def _check_coverage_gaps(records: tuple[CurrencyRecord, ...], today: date) -> list[str]:
    """Find currencies Babel says are in use in a table territory but missing from the table."""
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    known = {record.alpha_code for record in records}
    territories = sorted({t for record in records for t in record.territories})

    gaps: list[str] = []
    for territory in territories:
        for code in get_territory_currencies(territory, start_date=today, tender=True):
            if code not in known:
                gaps.append(f"  {territory}: Babel lists {code} in use, isodata.tsv has no row")
    return gaps


def _print_section(header: str, explanation: str, lines: list[str]) -> None:
    """Print a report section if non-empty."""
    if not lines:
        return
    print(f"{header} ({len(lines)}):")
    print(f"  ({explanation})")
    for line in lines:
        print(line)
    print()


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Verify the ISO 4217 source table against Babel CLDR data.",
    )
    parser.add_argument(
        "--table",
        type=Path,
        default=None,
        help="Table to verify (default: packaged isodata.tsv).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log table loading.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run source-table verification checks."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        from babel import Locale  # noqa: PLC0415
        from babel.numbers import list_currencies  # noqa: PLC0415
    except ImportError:
        print("[ERROR] Babel not installed. Install with: pip install isocurrency[babel]")
        return 1

    from isocurrency.codegen import load_table  # noqa: PLC0415
    from isocurrency.errors import TableFormatError  # noqa: PLC0415

    try:
        records = load_table(args.table)
    except TableFormatError as e:
        logger.error("Currency table rejected:\n%s", e.diagnostic.format_error())
        print("[FAIL] Table errors found.")
        print("[EXIT-CODE] 1")
        return 1

    babel_currencies = list_currencies()
    babel_territories = set(Locale.parse("en").territories)

    errors = _check_unrecognized(records, babel_currencies, babel_territories)
    discrepancies = _check_discrepancies(records)
    gaps = _check_coverage_gaps(records, date.today())

    print("ISO 4217 Source Table Verification")
    print("=" * 50)
    print(f"Table entries:    {len(records)}")
    print(f"Babel currencies: {len(babel_currencies)}")
    print()

    _print_section("[ERROR] Structural errors", "Table entry Babel cannot resolve", errors)
    _print_section(
        "[WARN] ISO 4217 vs Babel discrepancies",
        "Table exponent is authoritative; Babel CLDR may reflect usage",
        discrepancies,
    )
    _print_section(
        "[WARN] Potential coverage gaps",
        "Babel lists a tender currency the table does not have",
        gaps,
    )

    if errors:
        print(f"[FAIL] {len(errors)} structural error(s) found.")
        print("[EXIT-CODE] 1")
        return 1

    if discrepancies or gaps:
        print(f"[PASS] {len(discrepancies)} discrepancy(ies), {len(gaps)} gap(s).")
    else:
        print("[PASS] All checks passed.")
    print("[EXIT-CODE] 0")
    return 0


if __name__ == "__main__":
    sys.exit(main())
