import datetime as dt
import pytest

from atm.domain.money import Money
from atm.domain.transaction import TransactionKind, TransactionRecord


def m(s: str) -> Money:
    return Money.from_str(s)


def test_create_captures_now_without_microseconds():
    before = dt.datetime.now().replace(microsecond=0)
    rec = TransactionRecord.create(
        kind=TransactionKind.DEPOSIT,
        amount=m("100"),
        balance_after=m("100"),
    )
    after = dt.datetime.now()

    assert before <= rec.timestamp <= after
    assert rec.timestamp.microsecond == 0
    assert rec.kind == TransactionKind.DEPOSIT
    assert rec.balance_after == m("100.00")


def test_create_keeps_given_timestamp():
    ts = dt.datetime(2026, 1, 10, 9, 30, 0, 123)
    rec = TransactionRecord.create(
        kind=TransactionKind.WITHDRAW,
        amount=m("5"),
        balance_after=m("95"),
        timestamp=ts,
    )
    assert rec.timestamp == dt.datetime(2026, 1, 10, 9, 30, 0)


def test_record_is_immutable():
    rec = TransactionRecord.create(kind=TransactionKind.DEPOSIT, amount=m("1"), balance_after=m("1"))
    with pytest.raises(AttributeError):
        rec.amount = m("2")


def test_amount_cannot_be_zero():
    with pytest.raises(ValueError):
        TransactionRecord.create(kind=TransactionKind.DEPOSIT, amount=m("0"), balance_after=m("0"))


def test_kind_must_be_transaction_kind():
    with pytest.raises(ValueError):
        TransactionRecord.create(kind="DEPOSIT", amount=m("1"), balance_after=m("1"))


def test_amount_must_be_money():
    with pytest.raises(ValueError):
        TransactionRecord.create(kind=TransactionKind.DEPOSIT, amount="1", balance_after=m("1"))
