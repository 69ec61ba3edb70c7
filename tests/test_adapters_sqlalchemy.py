"""Tests for the SQLAlchemy column types, against in-memory SQLite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

sqlalchemy = pytest.importorskip("sqlalchemy")

from sqlalchemy import create_engine, select, text  # noqa: E402
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column  # noqa: E402

from isocurrency import Currency, ParseCurrencyError  # noqa: E402
from isocurrency.adapters.sqlalchemy_types import (  # noqa: E402
    CurrencyType,
    NumericCurrencyType,
)


class Base(DeclarativeBase):
    pass


class Account(Base):
    __tablename__ = "account"

    id: Mapped[int] = mapped_column(primary_key=True)
    currency: Mapped[Currency] = mapped_column(CurrencyType())
    settlement: Mapped[Currency | None] = mapped_column(NumericCurrencyType(), nullable=True)


@pytest.fixture
def session() -> Iterator[Session]:
    engine = create_engine("sqlite://")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


class TestCurrencyType:
    """Tests for String(3) storage."""

    def test_round_trip(self, session: Session) -> None:
        session.add(Account(id=1, currency=Currency.EUR, settlement=Currency.CHF))
        session.commit()
        session.expunge_all()

        account = session.get(Account, 1)
        assert account is not None
        assert account.currency is Currency.EUR
        assert account.settlement is Currency.CHF

    def test_stored_as_code(self, session: Session) -> None:
        session.add(Account(id=1, currency=Currency.JPY, settlement=Currency.JPY))
        session.commit()
        row = session.execute(text("SELECT currency, settlement FROM account")).one()
        assert tuple(row) == ("JPY", 392)

    def test_null_settlement(self, session: Session) -> None:
        session.add(Account(id=1, currency=Currency.USD, settlement=None))
        session.commit()
        session.expunge_all()
        account = session.get(Account, 1)
        assert account is not None
        assert account.settlement is None

    def test_query_by_currency(self, session: Session) -> None:
        session.add_all(
            [Account(id=1, currency=Currency.EUR), Account(id=2, currency=Currency.USD)]
        )
        session.commit()
        ids = session.scalars(select(Account.id).where(Account.currency == Currency.USD)).all()
        assert ids == [2]

    def test_unknown_stored_code_raises(self, session: Session) -> None:
        session.execute(text("INSERT INTO account (id, currency) VALUES (1, 'ZZZ')"))
        with pytest.raises(ParseCurrencyError):
            session.scalars(select(Account.currency)).all()

    def test_bind_rejects_unknown_code(self) -> None:
        with pytest.raises(ParseCurrencyError):
            CurrencyType().process_bind_param("eur", None)  # type: ignore[arg-type]

    def test_bind_accepts_code_string(self) -> None:
        assert CurrencyType().process_bind_param("EUR", None) == "EUR"  # type: ignore[arg-type]


class TestNumericCurrencyType:
    """Tests for SmallInteger storage."""

    def test_unknown_stored_number_raises(self, session: Session) -> None:
        session.execute(
            text("INSERT INTO account (id, currency, settlement) VALUES (1, 'EUR', 123)")
        )
        with pytest.raises(ParseCurrencyError):
            session.scalars(select(Account.settlement)).all()

    def test_bind_number(self) -> None:
        assert NumericCurrencyType().process_bind_param(978, None) == 978  # type: ignore[arg-type]

    def test_python_type(self) -> None:
        assert NumericCurrencyType().python_type is Currency
        assert CurrencyType().python_type is Currency
