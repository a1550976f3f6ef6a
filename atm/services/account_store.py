from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from atm.domain.account import Account
from atm.domain.money import Money, _quantize_money
from atm.domain.transaction import TransactionKind, TransactionRecord
from atm.engine.history import DEFAULT_HISTORY_LIMIT, HistoryPage, recent_history
from atm.repositories.balance_repository import BalanceRepository
from atm.repositories.transaction_repository import HistoryReadError, TransactionRepository

logger = logging.getLogger(__name__)

INVALID_AMOUNT = "Invalid amount. Please enter a positive value."
BALANCE_LOAD_FAILED = "Error loading balance. Starting with $0.00"
HISTORY_LOAD_FAILED = "Error loading transaction history."
BALANCE_SAVE_FAILED = "Error saving balance to file."
HISTORY_SAVE_FAILED = "Error saving transaction history."
BALANCE_LIMIT = "Invalid amount. Balance limit exceeded."


@dataclass(frozen=True)
class OperationResult:
    ok: bool
    message: str
    balance: Money
    warnings: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return self.ok


class AccountStore:
    """
    Balance and history of one account, in memory and on disk.

    Every mutation goes through deposit()/withdraw(), which save the balance
    and then the full history. The two saves are independent: a failure
    between them leaves the files out of step.
    """

    def __init__(
        self,
        *,
        account: Account,
        balance_repo: BalanceRepository,
        tx_repo: TransactionRepository,
    ) -> None:
        self._account = account
        self._balances = balance_repo
        self._txs = tx_repo
        self.warnings: list[str] = []

        self._balance = self._load_balance()
        self._history = self._load_history()

    @property
    def account(self) -> Account:
        return self._account

    # ---------- queries ----------
    def get_balance(self) -> Money:
        return self._balance

    def get_history(self) -> list[TransactionRecord]:
        return list(self._history)

    def recent_history(self, limit: int = DEFAULT_HISTORY_LIMIT) -> HistoryPage:
        return recent_history(self._history, limit=limit)

    # ---------- mutations ----------
    def deposit(self, amount: Decimal) -> OperationResult:
        value = self._positive_amount(amount)
        if value is None:
            return OperationResult(ok=False, message=INVALID_AMOUNT, balance=self._balance)

        try:
            new_balance = self._balance + value
        except ValueError:
            # past what a two-decimal Money can hold
            logger.warning("Deposit of %s would overflow balance %s", value, self._balance)
            return OperationResult(ok=False, message=BALANCE_LIMIT, balance=self._balance)

        warnings = self._commit(TransactionKind.DEPOSIT, value, new_balance)
        return OperationResult(
            ok=True,
            message=f"Successfully deposited ${value}",
            balance=new_balance,
            warnings=warnings,
        )

    def withdraw(self, amount: Decimal) -> OperationResult:
        value = self._positive_amount(amount)
        if value is None:
            return OperationResult(ok=False, message=INVALID_AMOUNT, balance=self._balance)

        if value.amount > self._balance.amount:
            return OperationResult(
                ok=False,
                message=f"Insufficient funds. Current balance: ${self._balance}",
                balance=self._balance,
            )

        new_balance = self._balance - value
        warnings = self._commit(TransactionKind.WITHDRAW, value, new_balance)
        return OperationResult(
            ok=True,
            message=f"Successfully withdrew ${value}",
            balance=new_balance,
            warnings=warnings,
        )

    # ---------- internals ----------
    @staticmethod
    def _positive_amount(amount: Decimal) -> Money | None:
        if not isinstance(amount, Decimal):
            raise TypeError("amount must be a Decimal")
        try:
            q = _quantize_money(amount)
        except ValueError:
            return None
        if not q.is_finite() or q <= 0:
            return None
        return Money(amount=q)

    def _commit(self, kind: TransactionKind, amount: Money, new_balance: Money) -> tuple[str, ...]:
        rec = TransactionRecord.create(kind=kind, amount=amount, balance_after=new_balance)
        self._balance = new_balance
        self._history.append(rec)

        warnings: list[str] = []
        try:
            self._balances.save(self._balance)
        except OSError:
            logger.exception("Failed to save balance")
            warnings.append(BALANCE_SAVE_FAILED)

        try:
            self._txs.save_all(self._history)
        except OSError:
            logger.exception("Failed to save transaction history")
            warnings.append(HISTORY_SAVE_FAILED)

        return tuple(warnings)

    def _load_balance(self) -> Money:
        try:
            return self._balances.load()
        except (OSError, ValueError) as e:
            logger.warning("Failed to load balance, defaulting to 0.00: %s", e)
            self.warnings.append(BALANCE_LOAD_FAILED)
            return Money.zero()

    def _load_history(self) -> list[TransactionRecord]:
        try:
            return self._txs.list()
        except HistoryReadError as e:
            logger.warning("Transaction history partly unreadable, kept %d record(s): %s", len(e.records), e)
            self.warnings.append(HISTORY_LOAD_FAILED)
            return list(e.records)
        except (OSError, ValueError) as e:
            logger.warning("Failed to load transaction history, starting empty: %s", e)
            self.warnings.append(HISTORY_LOAD_FAILED)
            return []
