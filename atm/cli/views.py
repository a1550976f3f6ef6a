from __future__ import annotations

from atm.domain.account import Account
from atm.domain.money import Money
from atm.domain.record_line import HEADER, format_record
from atm.engine.history import HistoryPage

BANNER_WIDTH = 50
MENU_WIDTH = 40
BLOCK_WIDTH = 30
HISTORY_WIDTH = 70

PROMPT_CHOICE = "Please select an option (1-5): "
PROMPT_CONTINUE = "\nPress Enter to continue..."
FAREWELL = "Thank you for using our ATM. Have a great day!"


def banner() -> list[str]:
    return [
        "*" * BANNER_WIDTH,
        "*" + " " * 12 + "WELCOME TO MINI ATM" + " " * 12 + "*",
        "*" * BANNER_WIDTH,
        "",
    ]


def greeting(holder: str) -> list[str]:
    return [
        "\nAuthentication successful!",
        f"Welcome, {holder}!",
        "-" * MENU_WIDTH,
    ]


def menu() -> list[str]:
    return [
        "\n" + "=" * MENU_WIDTH,
        "           ATM MAIN MENU",
        "=" * MENU_WIDTH,
        "1. Check Balance",
        "2. Deposit Money",
        "3. Withdraw Money",
        "4. Transaction History",
        "5. Exit",
        "=" * MENU_WIDTH,
    ]


def block_title(title: str) -> list[str]:
    return [
        "-" * BLOCK_WIDTH,
        title.center(BLOCK_WIDTH).rstrip(),
        "-" * BLOCK_WIDTH,
    ]


def block_end() -> str:
    return "-" * BLOCK_WIDTH


def balance_report(account: Account, balance: Money) -> list[str]:
    return [
        *block_title("BALANCE INQUIRY"),
        f"Account: {account.id}",
        f"Holder: {account.holder}",
        f"Current Balance: ${balance}",
        block_end(),
    ]


def history_report(page: HistoryPage, *, limit: int) -> list[str]:
    lines = [
        "-" * HISTORY_WIDTH,
        "TRANSACTION HISTORY".center(HISTORY_WIDTH).rstrip(),
        "-" * HISTORY_WIDTH,
    ]

    if page.is_empty:
        lines.append("No transactions found.")
    else:
        lines.append(HEADER)
        lines.append("-" * HISTORY_WIDTH)
        lines.extend(format_record(r) for r in page.records)
        if page.truncated:
            lines.append(f"\n(Showing last {limit} transactions)")

    lines.append("-" * HISTORY_WIDTH)
    return lines
