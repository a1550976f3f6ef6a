"""
Fixed text layout of one transaction record.

    DEPOSIT    | $  100.00 | 2026-01-10 09:30:00 | Balance: $100.00
"""
from __future__ import annotations

import datetime as dt

from atm.domain.money import Money
from atm.domain.transaction import TransactionKind, TransactionRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = "|"
BALANCE_PREFIX = "Balance:"

HEADER = "Type       | Amount   | Date & Time         | Balance After"


class RecordFormatError(ValueError):
    """The line does not hold a valid record."""


class ShortRecordError(RecordFormatError):
    """The line has fewer than four fields."""


def format_record(record: TransactionRecord) -> str:
    return (
        f"{record.kind.value:<10} {SEPARATOR} "
        f"${record.amount.amount:8.2f} {SEPARATOR} "
        f"{record.timestamp.strftime(TIMESTAMP_FORMAT)} {SEPARATOR} "
        f"{BALANCE_PREFIX} ${record.balance_after.amount:.2f}"
    )


def parse_record(line: str) -> TransactionRecord:
    parts = line.split(SEPARATOR)
    if len(parts) < 4:
        raise ShortRecordError(f"expected 4 fields, got {len(parts)}")

    kind_str = parts[0].strip()
    try:
        kind = TransactionKind(kind_str)
    except ValueError as e:
        raise RecordFormatError(f"unknown transaction kind {kind_str!r}") from e

    amount = _parse_money(parts[1].strip().removeprefix("$"), field="amount")

    ts_str = parts[2].strip()
    try:
        timestamp = dt.datetime.strptime(ts_str, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise RecordFormatError(f"invalid timestamp {ts_str!r}") from e

    balance_field = parts[3].strip()
    if not balance_field.startswith(BALANCE_PREFIX):
        raise RecordFormatError(f"missing '{BALANCE_PREFIX}' in {balance_field!r}")
    balance_str = balance_field[len(BALANCE_PREFIX):].strip().removeprefix("$")
    balance_after = _parse_money(balance_str, field="balance")

    try:
        return TransactionRecord.create(
            kind=kind,
            amount=amount,
            balance_after=balance_after,
            timestamp=timestamp,
        )
    except ValueError as e:
        raise RecordFormatError(str(e)) from e


def _parse_money(value: str, *, field: str) -> Money:
    try:
        return Money.from_str(value)
    except (TypeError, ValueError) as e:
        raise RecordFormatError(f"invalid {field} {value!r}") from e
