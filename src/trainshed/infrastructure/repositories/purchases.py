"""Row mapping between ``purchase_infos`` rows and PurchaseInfo values.

Rows written before purchase types existed have a NULL ``purchase_type``
and are read back as plain purchases.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, assert_never

from trainshed.domain.errors import (
    AmountOutOfStorageRangeError,
    InvalidPurchaseRecordError,
    MissingSalePriceError,
)
from trainshed.domain.monetary_amount import MonetaryAmount
from trainshed.domain.purchase_info import (
    PreOrdered,
    PreOrderInfo,
    Purchased,
    PurchasedInfo,
    Sold,
    SoldInfo,
)

# Column prefixes of the amount/currency pairs.
PURCHASED_PRICE = "purchased_price"
SALE_PRICE = "sale_price"
DEPOSIT = "deposit"
PREORDER_TOTAL = "preorder_total"
_AMOUNT_PREFIXES = (PURCHASED_PRICE, SALE_PRICE, DEPOSIT, PREORDER_TOTAL)

# Amount columns are signed 64-bit; MonetaryAmount allows up to 2**64-1.
MAX_STORED_AMOUNT = 2**63 - 1


def _amount_columns(prefix: str, amount: MonetaryAmount | None) -> dict[str, Any]:
    if amount is None:
        return {f"{prefix}_amount": None, f"{prefix}_currency": None}
    if amount.amount > MAX_STORED_AMOUNT:
        raise AmountOutOfStorageRangeError(amount.amount)
    return {f"{prefix}_amount": amount.amount, f"{prefix}_currency": str(amount.currency)}


def _amount(row: Mapping[str, Any], prefix: str) -> MonetaryAmount | None:
    return MonetaryAmount.from_db(row[f"{prefix}_amount"], row[f"{prefix}_currency"])


def _iso(value: date | None) -> str | None:
    return value.isoformat() if value is not None else None


def _date(value: str | None) -> date | None:
    return date.fromisoformat(value) if value is not None else None


def purchase_info_to_row(info: Purchased | Sold | PreOrdered, item_id: str) -> dict[str, Any]:
    """Flatten *info* into a full ``purchase_infos`` row for *item_id*.

    Raises AmountOutOfStorageRangeError for amounts above the signed 64-bit
    column range.
    """
    row: dict[str, Any] = {
        "collection_item_id": item_id,
        "purchase_type": info.kind,
        "seller_id": info.details.seller,
        "buyer_id": None,
        "sale_date": None,
        "expected_date": None,
    }
    for prefix in _AMOUNT_PREFIXES:
        row.update(_amount_columns(prefix, None))

    match info:
        case Purchased(details=details):
            row["purchase_id"] = details.id
            row["purchase_date"] = details.purchase_date.isoformat()
            row.update(_amount_columns(PURCHASED_PRICE, details.price))
        case Sold(details=details):
            row["purchase_id"] = details.id
            row["purchase_date"] = details.purchase_date.isoformat()
            row["sale_date"] = details.sale_date.isoformat()
            row["buyer_id"] = details.buyer
            row.update(_amount_columns(PURCHASED_PRICE, details.purchase_price))
            row.update(_amount_columns(SALE_PRICE, details.sale_price))
        case PreOrdered(details=details):
            row["purchase_id"] = details.id
            row["purchase_date"] = details.order_date.isoformat()
            row["expected_date"] = _iso(details.expected_date)
            row.update(_amount_columns(DEPOSIT, details.deposit))
            row.update(_amount_columns(PREORDER_TOTAL, details.total_price))
        case _:
            assert_never(info)
    return row


def purchase_info_from_row(row: Mapping[str, Any]) -> Purchased | Sold | PreOrdered:
    """Rebuild a PurchaseInfo from a ``purchase_infos`` row.

    Raises MissingSalePriceError for a sold row without a sale price, and
    CurrencyMismatchError for a pre-order whose deposit and total differ.
    """
    purchase_id = str(row["purchase_id"])
    kind = row["purchase_type"] or "purchased"
    purchase_date = date.fromisoformat(row["purchase_date"])
    seller = row["seller_id"]

    if kind == "purchased":
        return Purchased(
            details=PurchasedInfo(
                id=purchase_id,
                purchase_date=purchase_date,
                price=_amount(row, PURCHASED_PRICE),
                seller=seller,
            )
        )

    if kind == "sold":
        sale_price = _amount(row, SALE_PRICE)
        if sale_price is None:
            raise MissingSalePriceError(purchase_id)
        sale_date = _date(row["sale_date"])
        if sale_date is None:
            raise InvalidPurchaseRecordError(purchase_id, "missing sale date")
        return Sold(
            details=SoldInfo(
                id=purchase_id,
                purchase_date=purchase_date,
                purchase_price=_amount(row, PURCHASED_PRICE),
                sale_date=sale_date,
                sale_price=sale_price,
                buyer=row["buyer_id"],
                seller=seller,
            )
        )

    if kind == "pre_ordered":
        deposit = _amount(row, DEPOSIT)
        total_price = _amount(row, PREORDER_TOTAL)
        if deposit is None or total_price is None:
            raise InvalidPurchaseRecordError(purchase_id, "missing deposit or total price")
        info = PreOrderInfo(
            id=purchase_id,
            order_date=purchase_date,
            deposit=deposit,
            total_price=total_price,
            seller=seller,
            expected_date=_date(row["expected_date"]),
        )
        info.validate_currencies_match()
        return PreOrdered(details=info)

    raise InvalidPurchaseRecordError(purchase_id, f"unknown purchase type {kind!r}")
