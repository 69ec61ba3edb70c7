"""Consistency between the packaged table and the generated module.

The generated module is checked in, so these tests fail when someone edits
the table without regenerating, or edits the generated file by hand.
"""

from __future__ import annotations

from isocurrency import Currency
from isocurrency.codegen import check_module, load_table
from isocurrency.constants import DEFAULT_TABLE_PATH, GENERATED_MODULE_PATH


class TestGeneratedModule:
    """Tests comparing isodata.tsv with _isodata.py."""

    def test_module_is_current(self) -> None:
        assert check_module(load_table(), GENERATED_MODULE_PATH, source=DEFAULT_TABLE_PATH.name)

    def test_one_member_per_row(self) -> None:
        records = load_table()
        assert tuple(currency.record for currency in Currency) == records

    def test_member_names_are_codes(self) -> None:
        for currency in Currency:
            assert currency.name == currency.code == currency.value

    def test_codes_unique(self) -> None:
        numerics = [currency.numeric for currency in Currency]
        assert len(numerics) == len(set(numerics))

    def test_superseded_targets_are_current(self) -> None:
        """A replacement currency is not itself superseded."""
        for currency in Currency:
            replacement = currency.superseded_by
            if replacement is not None:
                assert replacement.superseded_by is None

    def test_special_codes_start_with_x(self) -> None:
        for currency in Currency:
            if currency.is_special:
                assert currency.code.startswith("X")
