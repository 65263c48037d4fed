"""CollectionService: items, their purchase records, and collection value."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Any

from trainshed.domain.collection import CollectionItem, collection_value
from trainshed.domain.currency import Currency
from trainshed.domain.delivery_date import parse_delivery_date
from trainshed.domain.epoch import Epoch
from trainshed.domain.errors import DomainError
from trainshed.domain.monetary_amount import MonetaryAmount
from trainshed.domain.purchase_info import (
    PreOrdered,
    PreOrderInfo,
    Purchased,
    PurchasedInfo,
    Sold,
    SoldInfo,
    purchase_id,
)
from trainshed.domain.scale import Scale
from trainshed.services.base import BaseService, domain_failure
from trainshed.services.result import (
    ID_COLLISION,
    MISSING_FIELD,
    NOT_FOUND,
    UNKNOWN_KIND,
    ServiceResult,
)

logger = logging.getLogger(__name__)

PURCHASE_KINDS = ("purchased", "sold", "pre_ordered")


def _new_id() -> str:
    return uuid.uuid4().hex


def _not_found(op: str, item_id: str) -> ServiceResult:
    return ServiceResult.failure(op, NOT_FOUND, f"No collection item with ID '{item_id}'")


class CollectionService(BaseService):
    """Manage collection items stored in the :class:`Store`."""

    def add_item(
        self,
        *,
        name: str,
        manufacturer: str,
        product_code: str,
        scale: str,
        epoch: str | None = None,
        delivery_date: str | None = None,
        item_id: str | None = None,
    ) -> ServiceResult:
        op = "add_item"
        try:
            item = CollectionItem(
                id=item_id or _new_id(),
                name=name,
                manufacturer=manufacturer,
                product_code=product_code,
                scale=Scale.parse(scale),
                epoch=Epoch(epoch) if epoch else None,
                delivery_date=parse_delivery_date(delivery_date) if delivery_date else None,
            )
        except DomainError as exc:
            return domain_failure(op, exc)

        with self._store.transaction() as conn:
            if self._store.items.item_exists(conn, item.id):
                return ServiceResult.failure(
                    op, ID_COLLISION, f"Collection item with ID '{item.id}' already exists"
                )
            self._store.items.insert_item(conn, item)

        logger.debug("added item %s (%s %s)", item.id, item.manufacturer, item.product_code)
        return ServiceResult(ok=True, op=op, data={"item": item.model_dump(mode="json")})

    def record_purchase(
        self,
        item_id: str,
        kind: str,
        *,
        purchase_date: date,
        currency: str,
        price: int | None = None,
        seller: str | None = None,
        sale_date: date | None = None,
        sale_price: int | None = None,
        buyer: str | None = None,
        deposit: int | None = None,
        expected_date: date | None = None,
        purchase_ref: str | None = None,
    ) -> ServiceResult:
        """Attach a purchase record to an item, replacing any previous one.

        All amounts are minor units in *currency*. ``price`` is the purchase
        price for purchased and sold items and the total price of a
        pre-order.
        """
        op = "record_purchase"
        ref = purchase_ref or _new_id()
        try:
            money = Currency.from_code(currency)

            def amount(value: int | None) -> MonetaryAmount | None:
                return MonetaryAmount.new(value, money) if value is not None else None

            info: Purchased | Sold | PreOrdered
            if kind == "purchased":
                info = Purchased(
                    details=PurchasedInfo(
                        id=ref, purchase_date=purchase_date, price=amount(price), seller=seller
                    )
                )
            elif kind == "sold":
                sold_for = amount(sale_price)
                if sale_date is None or sold_for is None:
                    return self._missing(op, "a sold item needs a sale date and a sale price")
                info = Sold(
                    details=SoldInfo(
                        id=ref,
                        purchase_date=purchase_date,
                        purchase_price=amount(price),
                        sale_date=sale_date,
                        sale_price=sold_for,
                        buyer=buyer,
                        seller=seller,
                    )
                )
            elif kind == "pre_ordered":
                paid = amount(deposit)
                total = amount(price)
                if paid is None or total is None:
                    return self._missing(op, "a pre-order needs a deposit and a total price")
                preorder = PreOrderInfo(
                    id=ref,
                    order_date=purchase_date,
                    deposit=paid,
                    total_price=total,
                    seller=seller,
                    expected_date=expected_date,
                )
                preorder.validate_currencies_match()
                info = PreOrdered(details=preorder)
            else:
                return ServiceResult.failure(
                    op,
                    UNKNOWN_KIND,
                    f"Unknown purchase kind: {kind!r}",
                    allowed=list(PURCHASE_KINDS),
                )
        except DomainError as exc:
            return domain_failure(op, exc)

        try:
            with self._store.transaction() as conn:
                if not self._store.items.item_exists(conn, item_id):
                    return _not_found(op, item_id)
                self._store.items.replace_purchase(conn, item_id, info)
        except DomainError as exc:
            return domain_failure(op, exc)

        logger.debug("recorded %s purchase %s for item %s", kind, purchase_id(info), item_id)
        return ServiceResult(
            ok=True,
            op=op,
            data={"item_id": item_id, "purchase": info.model_dump(mode="json")},
        )

    def get_item(self, item_id: str) -> ServiceResult:
        op = "get_item"
        try:
            item = self._store.items.get_item(item_id)
        except DomainError as exc:
            return domain_failure(op, exc)
        if item is None:
            return _not_found(op, item_id)
        return ServiceResult(ok=True, op=op, data={"item": item.model_dump(mode="json")})

    def list_items(self, *, scale: str | None = None) -> ServiceResult:
        op = "list_items"
        try:
            wanted = Scale.parse(scale) if scale else None
            items = self._store.items.list_items(scale=wanted)
        except DomainError as exc:
            return domain_failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": [item.model_dump(mode="json") for item in items]},
            meta={"count": len(items)},
        )

    def collection_value(self, currency: str | None = None) -> ServiceResult:
        """Total value of owned and pre-ordered items; sold items never count."""
        op = "collection_value"
        try:
            target = (
                Currency.from_code(currency)
                if currency
                else self._store.settings.display.default_currency
            )
            value = collection_value(self._store.items.list_items(), target)
        except DomainError as exc:
            return domain_failure(op, exc)

        warnings = [
            f"Item {item_id} is priced in another currency and was not counted"
            for item_id in value.skipped
        ]
        data: dict[str, Any] = {
            "display": str(value.total),
            "total": value.total.model_dump(mode="json"),
            "counted": value.counted,
            "skipped": value.skipped,
        }
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    @staticmethod
    def _missing(op: str, message: str) -> ServiceResult:
        return ServiceResult.failure(op, MISSING_FIELD, message)
