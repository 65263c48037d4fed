"""Supported currencies (ISO 4217 codes)."""

from __future__ import annotations

from enum import StrEnum
from typing import assert_never

from trainshed.domain.errors import UnsupportedCurrencyError


class Currency(StrEnum):
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
    JPY = "JPY"

    @classmethod
    def from_code(cls, code: str) -> Currency:
        """Look up a currency by code, ignoring case."""
        try:
            return cls(code.upper())
        except ValueError:
            raise UnsupportedCurrencyError(code) from None

    @property
    def symbol(self) -> str:
        match self:
            case Currency.EUR:
                return "€"
            case Currency.USD:
                return "$"
            case Currency.GBP:
                return "£"
            case Currency.JPY:
                return "¥"
            case _:
                assert_never(self)

    @property
    def minor_units(self) -> int:
        """Number of decimal places of the minor unit (JPY has none)."""
        return 0 if self is Currency.JPY else 2
