from __future__ import annotations

from decimal import Decimal
from enum import IntEnum

from pydantic import BaseModel, Field, field_validator

from atm.domain.money import _parse_decimal


class MenuOption(IntEnum):
    CHECK_BALANCE = 1
    DEPOSIT = 2
    WITHDRAW = 3
    HISTORY = 4
    EXIT = 5


class MenuChoice(BaseModel):
    option: int = Field(..., ge=1, le=5)

    @field_validator("option", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    def as_option(self) -> MenuOption:
        return MenuOption(self.option)


class AmountEntry(BaseModel):
    amount: str = Field(
        ...,
        min_length=1,
        pattern=r"^-?(\d+([.,]\d*)?|[.,]\d+)$",
    )

    @field_validator("amount", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        return v.strip() if isinstance(v, str) else v

    def to_decimal(self) -> Decimal:
        return _parse_decimal(self.amount)
