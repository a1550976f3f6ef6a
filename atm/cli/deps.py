from __future__ import annotations

from atm.domain.account import Account
from atm.repositories.text_balance_repository import TextBalanceRepository
from atm.repositories.text_transaction_repository import TextTransactionRepository
from atm.services.account_store import AccountStore
from atm.settings import Settings


def get_balance_repo(settings: Settings) -> TextBalanceRepository:
    return TextBalanceRepository(balance_path=settings.balance_path)


def get_tx_repo(settings: Settings) -> TextTransactionRepository:
    return TextTransactionRepository(tx_path=settings.transactions_path)


def open_account_store(account: Account, settings: Settings) -> AccountStore:
    return AccountStore(
        account=account,
        balance_repo=get_balance_repo(settings),
        tx_repo=get_tx_repo(settings),
    )
