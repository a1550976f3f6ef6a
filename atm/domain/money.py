from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

_QUANT = Decimal("0.01")


def _parse_decimal(value: str) -> Decimal:
    """
    Parse from a string.
    Accepts "12.34", "-12.34", "12" and "12,34".
    """
    if not isinstance(value, str):
        raise TypeError("Amount must be provided as a string")

    raw = value.strip()
    if raw == "":
        raise ValueError("Amount cannot be empty")

    raw = raw.replace(",", ".")

    try:
        dec = Decimal(raw)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal amount: {value!r}") from exc

    if not dec.is_finite():
        raise ValueError(f"Invalid decimal amount: {value!r}")
    return dec


def _quantize_money(amount: Decimal) -> Decimal:
    try:
        return amount.quantize(_QUANT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {amount}") from exc


@dataclass(frozen=True)
class Money:
    """
    Non-negative amount of money, two decimals.
    Used for balances and for transaction amounts.
    """
    amount: Decimal

    @classmethod
    def from_str(cls, amount: str) -> "Money":
        return cls(amount=_quantize_money(_parse_decimal(amount)))

    @classmethod
    def zero(cls) -> "Money":
        return cls(amount=Decimal("0.00"))

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise TypeError("Money.amount must be a Decimal")
        if not self.amount.is_finite():
            raise ValueError("Money amount must be finite")

        q = _quantize_money(self.amount)
        object.__setattr__(self, "amount", q)

        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    def is_zero(self) -> bool:
        return self.amount == Decimal("0.00")

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        return Money(amount=self.amount + other.amount)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        # raises ValueError if the result would be negative
        return Money(amount=self.amount - other.amount)

    def __str__(self) -> str:
        return f"{self.amount:.2f}"
