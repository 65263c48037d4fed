"""Non-negative money amounts in minor units (cents, pence; yen as-is).

INVARIANT: ``amount`` is never negative and fits an unsigned 64-bit
integer. Additions are checked: mixing currencies raises
CurrencyMismatchError, exceeding the upper bound raises AmountOverflowError.
"""

from __future__ import annotations

from typing import assert_never

from pydantic import BaseModel, Field, field_validator

from trainshed.domain.currency import Currency
from trainshed.domain.errors import (
    AmountOverflowError,
    CurrencyMismatchError,
    NegativeAmountError,
)

MAX_AMOUNT = 2**64 - 1


class MonetaryAmount(BaseModel):
    """Amount in minor units; JSON form is ``{"amount": 1050, "currency": "EUR"}``."""

    model_config = {"frozen": True}

    amount: int = Field(ge=0)
    currency: Currency

    @field_validator("amount")
    @classmethod
    def check_upper_bound(cls, value: int) -> int:
        if value > MAX_AMOUNT:
            raise AmountOverflowError()
        return value

    @classmethod
    def new(cls, amount: int, currency: Currency) -> MonetaryAmount:
        if amount < 0:
            raise NegativeAmountError(amount)
        if amount > MAX_AMOUNT:
            raise AmountOverflowError()
        return cls(amount=amount, currency=currency)

    @classmethod
    def from_db(cls, amount: int | None, currency_code: str | None) -> MonetaryAmount | None:
        """Rebuild an amount from its column pair.

        A missing currency (or amount) means the value is absent, not zero.
        Negative stored amounts are rejected.
        """
        if currency_code is None or amount is None:
            return None
        if amount < 0:
            raise NegativeAmountError(amount)
        return cls.new(amount, Currency.from_code(currency_code))

    def add_same_currency(self, other: MonetaryAmount) -> MonetaryAmount:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        total = self.amount + other.amount
        if total > MAX_AMOUNT:
            raise AmountOverflowError()
        return MonetaryAmount(amount=total, currency=self.currency)

    @staticmethod
    def add_optional(
        a: MonetaryAmount | None, b: MonetaryAmount | None
    ) -> MonetaryAmount | None:
        if a is None:
            return b
        if b is None:
            return a
        return a.add_same_currency(b)

    def __str__(self) -> str:
        symbol = self.currency.symbol
        major, minor = divmod(self.amount, 100)
        match self.currency:
            case Currency.JPY:
                return f"{symbol}{self.amount}"
            case Currency.EUR:
                return f"{major}.{minor:02} {symbol}"
            case Currency.USD | Currency.GBP:
                return f"{symbol}{major}.{minor:02}"
            case _:
                assert_never(self.currency)
