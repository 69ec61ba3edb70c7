"""Command-line entry point for the currency module generator.

Reads the source table, validates it, and writes the generated Currency
module, or with --check verifies that the checked-in module is current.

Exit codes:
    0: Module written, or up to date with --check
    1: Table errors, unreadable files, missing Babel, or stale module with --check

Usage:
    python -m isocurrency.codegen [--table PATH] [--output PATH] [--check] [-v]

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from isocurrency.constants import DEFAULT_TABLE_PATH, GENERATED_MODULE_PATH
from isocurrency.errors import OptionalDependencyError, TableFormatError

from .render import check_module, write_module
from .table import load_table

__all__ = ["main"]

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="python -m isocurrency.codegen",
        description="Generate the ISO 4217 Currency enum from the source table.",
    )
    parser.add_argument(
        "--table",
        type=Path,
        default=DEFAULT_TABLE_PATH,
        help="Tab-separated source table (default: packaged isodata.tsv).",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=GENERATED_MODULE_PATH,
        help="Generated module path (default: isocurrency/_isodata.py).",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write; fail if the output is missing or out of date.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every parsed row.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the generator."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        records = load_table(args.table)
    except TableFormatError as e:
        logger.error("Currency table rejected:\n%s", e.diagnostic.format_error())
        print("[FAIL] Table errors found; nothing generated.")
        return 1
    except OptionalDependencyError as e:
        logger.error("%s", e)
        print("[FAIL] Missing dependency; nothing generated.")
        return 1
    except OSError as e:
        logger.error("Cannot read currency table %s: %s", args.table, e)
        return 1

    source = args.table.name
    if args.check:
        if check_module(records, args.output, source=source):
            print(f"[OK] {args.output.name} is up to date ({len(records)} currencies).")
            return 0
        print(f"[FAIL] {args.output.name} is stale. Run: python -m isocurrency.codegen")
        return 1

    try:
        write_module(records, args.output, source=source)
    except OSError as e:
        logger.error("Cannot write generated module %s: %s", args.output, e)
        return 1
    print(f"[OK] Generated {len(records)} currencies into {args.output.name}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
