"""How a collection item was acquired: purchased, sold on, or pre-ordered.

``PurchaseInfo`` is a closed union of three wrappers, each tagged by a
``kind`` field and carrying the variant's payload under ``details``::

    {"kind": "sold", "details": {"id": "...", "sale_price": {...}, ...}}

Only pre-orders carry a cross-field invariant (deposit and total price in
the same currency); it is checked by the assembling layer through
:meth:`PreOrderInfo.validate_currencies_match`.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, Field

from trainshed.domain.errors import CurrencyMismatchError
from trainshed.domain.monetary_amount import MonetaryAmount


class PurchasedInfo(BaseModel):
    model_config = {"frozen": True}

    id: str
    purchase_date: date
    price: MonetaryAmount | None = None
    seller: str | None = None


class SoldInfo(BaseModel):
    """A model bought and later sold. ``seller`` is who it was bought from."""

    model_config = {"frozen": True}

    id: str
    purchase_date: date
    purchase_price: MonetaryAmount | None = None
    sale_date: date
    sale_price: MonetaryAmount
    buyer: str | None = None
    seller: str | None = None


class PreOrderInfo(BaseModel):
    model_config = {"frozen": True}

    id: str
    order_date: date
    deposit: MonetaryAmount
    total_price: MonetaryAmount
    seller: str | None = None
    expected_date: date | None = None

    def validate_currencies_match(self) -> None:
        if self.deposit.currency != self.total_price.currency:
            raise CurrencyMismatchError(self.deposit.currency, self.total_price.currency)


class Purchased(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["purchased"] = "purchased"
    details: PurchasedInfo


class Sold(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["sold"] = "sold"
    details: SoldInfo


class PreOrdered(BaseModel):
    model_config = {"frozen": True}

    kind: Literal["pre_ordered"] = "pre_ordered"
    details: PreOrderInfo


PurchaseInfo = Annotated[Purchased | Sold | PreOrdered, Field(discriminator="kind")]


def purchase_id(info: Purchased | Sold | PreOrdered) -> str:
    match info:
        case Purchased(details=details) | Sold(details=details) | PreOrdered(details=details):
            return details.id
        case _:
            assert_never(info)


def purchase_seller(info: Purchased | Sold | PreOrdered) -> str | None:
    match info:
        case Purchased(details=details) | Sold(details=details) | PreOrdered(details=details):
            return details.seller
        case _:
            assert_never(info)
