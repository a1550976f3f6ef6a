from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable

from pydantic import ValidationError

from atm.cli import views
from atm.cli.schemas import AmountEntry, MenuChoice, MenuOption
from atm.domain.account import Account
from atm.engine.history import DEFAULT_HISTORY_LIMIT
from atm.services.account_store import AccountStore, OperationResult

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]
StoreFactory = Callable[[Account], AccountStore]

_RANGE_ERRORS = {"greater_than_equal", "less_than_equal"}


class SessionState(str, Enum):
    AUTHENTICATING = "AUTHENTICATING"
    MENU = "MENU"
    AWAITING_CHOICE = "AWAITING_CHOICE"
    EXECUTING_ACTION = "EXECUTING_ACTION"
    TERMINATED = "TERMINATED"


class SessionController:
    """
    One run of the terminal: authenticate, then menu loop until Exit.

    Console I/O goes through `input_fn` / `output_fn` so a session can be
    scripted. End of input at any prompt ends the session.
    """

    def __init__(
        self,
        *,
        store_factory: StoreFactory,
        input_fn: InputFn = input,
        output_fn: OutputFn = print,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        self._store_factory = store_factory
        self._input = input_fn
        self._output = output_fn
        self._history_limit = history_limit

        self.state = SessionState.AUTHENTICATING
        self.store: AccountStore | None = None
        self._choice: MenuOption | None = None

    def run(self) -> None:
        try:
            self._authenticate()
            while self.state != SessionState.TERMINATED:
                self._step()
        except EOFError:
            logger.info("Input closed, ending session")
            self.state = SessionState.TERMINATED

        self._say(views.FAREWELL)

    # ---------- states ----------
    def _step(self) -> None:
        if self.state == SessionState.MENU:
            self._emit(views.menu())
            self.state = SessionState.AWAITING_CHOICE
        elif self.state == SessionState.AWAITING_CHOICE:
            self._choice = self._read_choice()
            self.state = SessionState.EXECUTING_ACTION
        elif self.state == SessionState.EXECUTING_ACTION:
            self._execute(self._choice)
        else:
            raise RuntimeError(f"unexpected session state {self.state}")

    def _authenticate(self) -> None:
        self._emit(views.banner())
        account_id = self._input("Enter Account Number: ")
        holder = self._input("Enter Account Holder Name: ")

        # no verification: whatever was typed is the account
        account = Account(id=account_id, holder=holder)
        self.store = self._store_factory(account)
        self._emit(self.store.warnings)

        self._emit(views.greeting(holder))
        self.state = SessionState.MENU

    def _read_choice(self) -> MenuOption:
        while True:
            raw = self._input(views.PROMPT_CHOICE)
            try:
                return MenuChoice(option=raw).as_option()
            except ValidationError as e:
                if e.errors()[0]["type"] in _RANGE_ERRORS:
                    self._say("Invalid choice. Please select 1-5.")
                else:
                    self._say("Invalid input. Please enter a number.")

    def _execute(self, choice: MenuOption | None) -> None:
        self._say("")

        if choice == MenuOption.EXIT:
            self.state = SessionState.TERMINATED
            return

        if choice == MenuOption.CHECK_BALANCE:
            self._check_balance()
        elif choice == MenuOption.DEPOSIT:
            self._deposit()
        elif choice == MenuOption.WITHDRAW:
            self._withdraw()
        elif choice == MenuOption.HISTORY:
            self._show_history()
        else:
            raise RuntimeError(f"unexpected menu choice {choice!r}")

        self._input(views.PROMPT_CONTINUE)
        self.state = SessionState.MENU

    # ---------- actions ----------
    def _check_balance(self) -> None:
        store = self._require_store()
        self._emit(views.balance_report(store.account, store.get_balance()))

    def _deposit(self) -> None:
        store = self._require_store()
        self._emit(views.block_title("DEPOSIT MONEY"))
        entry = self._read_amount("Enter deposit amount: $")
        if entry is not None:
            self._report(store.deposit(entry.to_decimal()))
        self._say(views.block_end())

    def _withdraw(self) -> None:
        store = self._require_store()
        self._emit(views.block_title("WITHDRAW MONEY"))
        self._say(f"Current Balance: ${store.get_balance()}")
        entry = self._read_amount("Enter withdrawal amount: $")
        if entry is not None:
            self._report(store.withdraw(entry.to_decimal()))
        self._say(views.block_end())

    def _show_history(self) -> None:
        store = self._require_store()
        page = store.recent_history(self._history_limit)
        self._emit(views.history_report(page, limit=self._history_limit))

    # ---------- helpers ----------
    def _read_amount(self, prompt: str) -> AmountEntry | None:
        raw = self._input(prompt)
        try:
            return AmountEntry(amount=raw)
        except ValidationError:
            self._say("Invalid amount. Please enter a valid number.")
            return None

    def _report(self, result: OperationResult) -> None:
        self._say(result.message)
        self._emit(result.warnings)
        if result.ok:
            self._say(f"Current balance: ${result.balance}")

    def _require_store(self) -> AccountStore:
        if self.store is None:
            raise RuntimeError("session is not authenticated")
        return self.store

    def _say(self, line: str) -> None:
        self._output(line)

    def _emit(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._output(line)
