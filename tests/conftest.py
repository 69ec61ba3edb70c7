"""Shared fixtures and Hypothesis settings for the isocurrency tests.

The enumeration has under two hundred members, so a few hundred examples
already revisit every currency. Two profiles:
- dev: 200 examples, the default
- ci: 50 derandomized examples, selected when CI=true

HYPOTHESIS_PROFILE=<name> picks a profile explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import settings

from tests.helpers.tables import make_table

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)
settings.load_profile(
    os.environ.get("HYPOTHESIS_PROFILE")
    or ("ci" if os.environ.get("CI") == "true" else "dev")
)


@pytest.fixture
def small_table() -> str:
    """Five-row table covering symbol fallback, empty exponent and flags."""
    return make_table(
        "CHF|756|Swiss franc|Fr.|2|LI;CH|Rp.|",
        "HRK|191|Croatian kuna|kn|2|||superseded(EUR)",
        "EUR|978|Euro|€|2|DE;FR|c|",
        "XAU|959|Gold (one troy ounce)|||||special",
        "CHE|947|WIR euro||2|CH||fund",
    )


@pytest.fixture
def table_file(tmp_path: Path, small_table: str) -> Path:
    """small_table written to a UTF-8 file."""
    path = tmp_path / "isodata.tsv"
    path.write_text(small_table, encoding="utf-8")
    return path
