from __future__ import annotations

from typing import Protocol

from atm.domain.money import Money


class BalanceRepository(Protocol):
    def load(self) -> Money:
        """Zero when nothing was saved yet. Raises ValueError/OSError on bad data."""
        ...

    def save(self, balance: Money) -> None:
        ...
