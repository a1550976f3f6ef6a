from __future__ import annotations

from pathlib import Path

from atm.domain.money import Money


class TextBalanceRepository:
    """
    balance.txt holds a single value, e.g. "70.00".
    Missing or blank file => 0.00.
    """

    def __init__(self, *, balance_path: Path) -> None:
        self._path = balance_path

    def load(self) -> Money:
        if not self._path.exists():
            return Money.zero()

        with self._path.open("r", encoding="utf-8") as f:
            first = f.readline().strip()

        if not first:
            return Money.zero()

        try:
            return Money.from_str(first)
        except ValueError as e:
            raise ValueError(f"{self._path.name}: invalid balance {first!r} ({e})") from e

    def save(self, balance: Money) -> None:
        # full rewrite through a temp file, like the other file repos
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8", newline="\n") as f:
                f.write(f"{balance.amount:.2f}")
            tmp_path.replace(self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
