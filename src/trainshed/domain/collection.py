"""Collection items and the total-value aggregation over them.

INVARIANT: sold items never contribute to the collection value; they are
kept for provenance only. Pre-ordered items count at their total price.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from pydantic import BaseModel, Field

from trainshed.domain.currency import Currency
from trainshed.domain.delivery_date import DeliveryDateField
from trainshed.domain.epoch import Epoch
from trainshed.domain.monetary_amount import MonetaryAmount
from trainshed.domain.purchase_info import PreOrdered, Purchased, PurchaseInfo, Sold
from trainshed.domain.scale import Scale


class CollectionItem(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    manufacturer: str
    product_code: str
    scale: Scale
    epoch: Epoch | None = None
    delivery_date: DeliveryDateField | None = None
    purchase: PurchaseInfo | None = None


class CollectionValue(BaseModel):
    """Result of :func:`collection_value`.

    ``skipped`` lists the ids of items priced in a different currency.
    """

    model_config = {"frozen": True}

    total: MonetaryAmount
    counted: int = 0
    skipped: list[str] = Field(default_factory=list)


def _item_price(purchase: Purchased | Sold | PreOrdered | None) -> MonetaryAmount | None:
    match purchase:
        case None:
            return None
        case Purchased(details=details):
            return details.price
        case Sold():
            return None
        case PreOrdered(details=details):
            return details.total_price
        case _:
            assert_never(purchase)


def collection_value(items: Iterable[CollectionItem], currency: Currency) -> CollectionValue:
    """Sum the prices of owned and pre-ordered items in *currency*."""
    total = MonetaryAmount.new(0, currency)
    counted = 0
    skipped: list[str] = []
    for item in items:
        price = _item_price(item.purchase)
        if price is None:
            continue
        if price.currency != currency:
            skipped.append(item.id)
            continue
        total = total.add_same_currency(price)
        counted += 1
    return CollectionValue(total=total, counted=counted, skipped=skipped)
