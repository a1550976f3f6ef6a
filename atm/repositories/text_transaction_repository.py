from __future__ import annotations

import logging
from pathlib import Path

from atm.domain.record_line import (
    RecordFormatError,
    ShortRecordError,
    format_record,
    parse_record,
)
from atm.domain.transaction import TransactionRecord
from atm.repositories.transaction_repository import HistoryReadError

logger = logging.getLogger(__name__)


class TextTransactionRepository:
    """
    transactions.txt: one record per line, oldest first (see record_line).

    Lines with fewer than four fields are skipped. Lines whose values do not
    parse are skipped too, but the read then ends with HistoryReadError,
    which carries the records that did parse.
    """

    def __init__(self, *, tx_path: Path) -> None:
        self._path = tx_path

    def list(self) -> list[TransactionRecord]:
        # missing file => first run
        if not self._path.exists():
            return []

        out: list[TransactionRecord] = []
        bad_lines: list[int] = []
        with self._path.open("r", encoding="utf-8") as f:
            for line_no, raw in enumerate(f, start=1):
                raw = raw.rstrip("\r\n")
                if not raw.strip():
                    continue

                try:
                    rec = parse_record(raw)
                except ShortRecordError as e:
                    logger.warning("%s line %d skipped: %s", self._path.name, line_no, e)
                    continue
                except RecordFormatError as e:
                    logger.warning("%s line %d unreadable: %s (%r)", self._path.name, line_no, e, raw)
                    bad_lines.append(line_no)
                    continue

                out.append(rec)

        if bad_lines:
            lines = ", ".join(str(n) for n in bad_lines)
            raise HistoryReadError(
                f"{self._path.name}: unreadable line(s) {lines}",
                records=out,
                bad_lines=bad_lines,
            )

        return out

    def save_all(self, records: list[TransactionRecord]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            with tmp_path.open("w", encoding="utf-8", newline="\n") as f:
                for rec in records:
                    f.write(format_record(rec) + "\n")
            tmp_path.replace(self._path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
