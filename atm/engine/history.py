from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from atm.domain.transaction import TransactionRecord

DEFAULT_HISTORY_LIMIT = 10


@dataclass(frozen=True)
class HistoryPage:
    records: list[TransactionRecord]  # newest first
    total: int

    @property
    def is_empty(self) -> bool:
        return self.total == 0

    @property
    def truncated(self) -> bool:
        return self.total > len(self.records)


def recent_history(
    records: Sequence[TransactionRecord],
    *,
    limit: int = DEFAULT_HISTORY_LIMIT,
) -> HistoryPage:
    """
    Last `limit` records of an oldest-first sequence, newest first.
    """
    if not isinstance(limit, int) or limit < 1:
        raise ValueError("limit must be an integer >= 1")

    total = len(records)
    start = max(0, total - limit)
    page = [records[i] for i in range(total - 1, start - 1, -1)]
    return HistoryPage(records=page, total=total)
