"""Tests for the pydantic field types."""

from __future__ import annotations

import pytest

pydantic = pytest.importorskip("pydantic")

from pydantic import BaseModel, ValidationError  # noqa: E402

from isocurrency import Currency  # noqa: E402
from isocurrency.adapters.pydantic_types import (  # noqa: E402
    CurrencyField,
    NumericCurrencyField,
    currency_json_schema,
)


class Price(BaseModel):
    amount_minor: int
    currency: CurrencyField


class NumericPrice(BaseModel):
    currency: NumericCurrencyField


class TestCurrencyField:
    """Tests for alphabetic-code fields."""

    def test_validate_code(self) -> None:
        assert Price.model_validate({"amount_minor": 1, "currency": "EUR"}).currency is Currency.EUR

    def test_validate_member(self) -> None:
        assert Price(amount_minor=1, currency=Currency.JPY).currency is Currency.JPY

    @pytest.mark.parametrize("value", ["eur", "ZZZ", 978, None])
    def test_reject(self, value: object) -> None:
        with pytest.raises(ValidationError, match="not a valid ISO 4217 currency code"):
            Price.model_validate({"amount_minor": 1, "currency": value})

    def test_dump(self) -> None:
        price = Price(amount_minor=150, currency=Currency.CHF)
        assert price.model_dump() == {"amount_minor": 150, "currency": "CHF"}
        assert price.model_dump_json() == '{"amount_minor":150,"currency":"CHF"}'

    def test_json_round_trip(self) -> None:
        price = Price(amount_minor=5, currency=Currency.EUR)
        assert Price.model_validate_json(price.model_dump_json()) == price

    def test_json_schema(self) -> None:
        schema = Price.model_json_schema()["properties"]["currency"]
        assert schema["type"] == "string"
        assert "EUR" in schema["enum"]
        assert len(schema["enum"]) == len(Currency)

    def test_schema_helper(self) -> None:
        assert currency_json_schema()["enum"] == [currency.code for currency in Currency]


class TestNumericCurrencyField:
    """Tests for numeric-code fields."""

    def test_validate_numeric(self) -> None:
        assert NumericPrice.model_validate({"currency": 978}).currency is Currency.EUR

    @pytest.mark.parametrize("value", [123, "978", True])
    def test_reject(self, value: object) -> None:
        with pytest.raises(ValidationError):
            NumericPrice.model_validate({"currency": value})

    def test_dump(self) -> None:
        assert NumericPrice(currency=Currency.BBD).model_dump() == {"currency": 52}

    def test_json_schema(self) -> None:
        schema = NumericPrice.model_json_schema()["properties"]["currency"]
        assert schema["type"] == "integer"
        assert 978 in schema["enum"]
