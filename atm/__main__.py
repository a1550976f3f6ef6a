from __future__ import annotations

import logging

from atm.cli.deps import open_account_store
from atm.cli.session import SessionController
from atm.settings import get_settings


def main() -> int:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = SessionController(
        store_factory=lambda account: open_account_store(account, settings),
        history_limit=settings.history_limit,
    )
    session.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
