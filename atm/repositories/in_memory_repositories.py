from __future__ import annotations

from dataclasses import dataclass, field

from atm.domain.money import Money
from atm.domain.transaction import TransactionRecord


@dataclass
class InMemoryBalanceRepository:
    """
    In-memory balance.
    - Deterministic
    - Easy to test
    """
    _balance: Money | None = None
    saves: int = 0

    def load(self) -> Money:
        if self._balance is None:
            return Money.zero()
        return self._balance

    def save(self, balance: Money) -> None:
        self._balance = balance
        self.saves += 1


@dataclass
class InMemoryTransactionRepository:
    _items: list[TransactionRecord] = field(default_factory=list)
    saves: int = 0

    def list(self) -> list[TransactionRecord]:
        return list(self._items)

    def save_all(self, records: list[TransactionRecord]) -> None:
        self._items = list(records)
        self.saves += 1
