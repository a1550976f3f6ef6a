from __future__ import annotations

from typing import Protocol, Sequence

from atm.domain.transaction import TransactionRecord


class HistoryReadError(ValueError):
    """
    Some stored lines could not be read.
    `records` holds every line that did parse, oldest first.
    """

    def __init__(self, message: str, *, records: Sequence[TransactionRecord], bad_lines: Sequence[int]) -> None:
        super().__init__(message)
        self.records = list(records)
        self.bad_lines = list(bad_lines)


class TransactionRepository(Protocol):
    def list(self) -> list[TransactionRecord]:
        """Oldest first. Empty when nothing was saved yet.

        Raises HistoryReadError (with the readable records) on bad lines.
        """
        ...

    def save_all(self, records: list[TransactionRecord]) -> None:
        """Replace the stored history with `records`."""
        ...
