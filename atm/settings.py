from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from atm.engine.history import DEFAULT_HISTORY_LIMIT

BALANCE_FILE = "balance.txt"
TRANSACTIONS_FILE = "transactions.txt"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    history_limit: int = DEFAULT_HISTORY_LIMIT
    log_level: str = "WARNING"

    @property
    def balance_path(self) -> Path:
        return self.data_dir / BALANCE_FILE

    @property
    def transactions_path(self) -> Path:
        return self.data_dir / TRANSACTIONS_FILE


def get_settings() -> Settings:
    # 1) env var
    env = os.getenv("ATM_DATA_DIR")
    if env and env.strip():
        p = Path(env.strip()).expanduser()
    else:
        # 2) default: files sit next to where the terminal runs
        p = Path.cwd()

    p.mkdir(parents=True, exist_ok=True)

    return Settings(
        data_dir=p,
        history_limit=_history_limit_from_env(),
        log_level=(os.getenv("ATM_LOG_LEVEL") or "WARNING").strip().upper(),
    )


def _history_limit_from_env() -> int:
    raw = os.getenv("ATM_HISTORY_LIMIT")
    if raw is None or not raw.strip():
        return DEFAULT_HISTORY_LIMIT
    try:
        limit = int(raw.strip())
    except ValueError as e:
        raise ValueError(f"ATM_HISTORY_LIMIT must be an integer (got {raw!r})") from e
    if limit < 1:
        raise ValueError("ATM_HISTORY_LIMIT must be >= 1")
    return limit
