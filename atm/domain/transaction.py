from __future__ import annotations

from dataclasses import dataclass
import datetime as dt
from enum import Enum
from typing import Optional

from atm.domain.money import Money


class TransactionKind(str, Enum):
    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"


@dataclass(frozen=True)
class TransactionRecord:
    kind: TransactionKind
    amount: Money
    timestamp: dt.datetime
    balance_after: Money

    @staticmethod
    def create(
        *,
        kind: TransactionKind,
        amount: Money,
        balance_after: Money,
        timestamp: Optional[dt.datetime] = None,
    ) -> "TransactionRecord":
        if not isinstance(kind, TransactionKind):
            raise ValueError("kind must be a TransactionKind")

        if not isinstance(amount, Money):
            raise ValueError("amount must be a Money")

        if amount.is_zero():
            raise ValueError("Transaction amount cannot be zero")

        if not isinstance(balance_after, Money):
            raise ValueError("balance_after must be a Money")

        if timestamp is None:
            final_timestamp = dt.datetime.now()
        else:
            if not isinstance(timestamp, dt.datetime):
                raise ValueError("timestamp must be a datetime")
            final_timestamp = timestamp

        # the text layout only keeps whole seconds
        final_timestamp = final_timestamp.replace(microsecond=0)

        return TransactionRecord(
            kind=kind,
            amount=amount,
            timestamp=final_timestamp,
            balance_after=balance_after,
        )
