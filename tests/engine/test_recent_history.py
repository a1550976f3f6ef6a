import datetime as dt
import pytest

from atm.domain.money import Money
from atm.domain.transaction import TransactionKind, TransactionRecord
from atm.engine.history import recent_history


def _deposits(n: int) -> list[TransactionRecord]:
    """
    n deposits of 1.00 each, one minute apart, oldest first.
    """
    start = dt.datetime(2026, 1, 1, 8, 0, 0)
    return [
        TransactionRecord.create(
            kind=TransactionKind.DEPOSIT,
            amount=Money.from_str("1"),
            balance_after=Money.from_str(str(i + 1)),
            timestamp=start + dt.timedelta(minutes=i),
        )
        for i in range(n)
    ]


def test_empty_history():
    page = recent_history([])
    assert page.is_empty
    assert page.records == []
    assert not page.truncated


def test_fewer_than_limit_returns_all_newest_first():
    records = _deposits(3)
    page = recent_history(records)

    assert page.records == list(reversed(records))
    assert page.total == 3
    assert not page.truncated


def test_more_than_limit_returns_last_ten_newest_first():
    records = _deposits(15)
    page = recent_history(records)

    assert len(page.records) == 10
    assert page.records[0] == records[-1]
    assert page.records[-1] == records[5]
    assert page.total == 15
    assert page.truncated


def test_exactly_limit_is_not_truncated():
    page = recent_history(_deposits(10))
    assert len(page.records) == 10
    assert not page.truncated


def test_custom_limit():
    records = _deposits(4)
    page = recent_history(records, limit=2)
    assert [r.balance_after.amount for r in page.records] == [records[3].balance_after.amount, records[2].balance_after.amount]


def test_limit_must_be_positive():
    with pytest.raises(ValueError):
        recent_history(_deposits(1), limit=0)
