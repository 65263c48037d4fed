"""Tests for purchase_infos row mapping."""

from datetime import date
from typing import Any

import pytest

from trainshed.domain.currency import Currency
from trainshed.domain.errors import (
    AmountOutOfStorageRangeError,
    CurrencyMismatchError,
    InvalidPurchaseRecordError,
    MissingSalePriceError,
    NegativeAmountError,
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
from trainshed.infrastructure.repositories.purchases import (
    purchase_info_from_row,
    purchase_info_to_row,
)


def _eur(amount: int) -> MonetaryAmount:
    return MonetaryAmount.new(amount, Currency.EUR)


def _row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "purchase_id": "p-1",
        "collection_item_id": "item-1",
        "purchase_type": "purchased",
        "purchase_date": "2024-05-01",
        "seller_id": None,
        "buyer_id": None,
        "sale_date": None,
        "purchased_price_amount": None,
        "purchased_price_currency": None,
        "sale_price_amount": None,
        "sale_price_currency": None,
        "deposit_amount": None,
        "deposit_currency": None,
        "preorder_total_amount": None,
        "preorder_total_currency": None,
        "expected_date": None,
    }
    row.update(overrides)
    return row


_SAMPLES = [
    Purchased(
        details=PurchasedInfo(
            id="p-1", purchase_date=date(2024, 5, 1), price=_eur(18990), seller="shop"
        )
    ),
    Purchased(details=PurchasedInfo(id="p-2", purchase_date=date(2024, 5, 2))),
    Sold(
        details=SoldInfo(
            id="s-1",
            purchase_date=date(2019, 3, 1),
            purchase_price=_eur(10000),
            sale_date=date(2024, 6, 1),
            sale_price=_eur(15000),
            buyer="alice",
            seller="bob",
        )
    ),
    PreOrdered(
        details=PreOrderInfo(
            id="po-1",
            order_date=date(2025, 2, 1),
            deposit=_eur(5000),
            total_price=_eur(32900),
            expected_date=date(2026, 9, 30),
        )
    ),
]


class TestToRow:
    def test_purchased(self) -> None:
        row = purchase_info_to_row(_SAMPLES[0], "item-1")
        assert row["purchase_type"] == "purchased"
        assert row["purchase_date"] == "2024-05-01"
        assert row["purchased_price_amount"] == 18990
        assert row["purchased_price_currency"] == "EUR"
        assert row["sale_price_currency"] is None
        assert row["seller_id"] == "shop"

    def test_pre_ordered_uses_order_date(self) -> None:
        row = purchase_info_to_row(_SAMPLES[3], "item-1")
        assert row["purchase_date"] == "2025-02-01"
        assert row["deposit_amount"] == 5000
        assert row["preorder_total_amount"] == 32900
        assert row["expected_date"] == "2026-09-30"

    def test_amount_beyond_signed_column_range(self) -> None:
        info = Purchased(
            details=PurchasedInfo(
                id="p-9", purchase_date=date(2024, 1, 1), price=_eur(2**63)
            )
        )
        with pytest.raises(AmountOutOfStorageRangeError):
            purchase_info_to_row(info, "item-1")

    @pytest.mark.parametrize("info", _SAMPLES)
    def test_row_reads_back(self, info: Purchased | Sold | PreOrdered) -> None:
        assert purchase_info_from_row(purchase_info_to_row(info, "item-1")) == info


class TestFromRow:
    def test_legacy_row_without_type_is_purchase(self) -> None:
        info = purchase_info_from_row(_row(purchase_type=None))
        assert isinstance(info, Purchased)

    def test_missing_currency_means_no_price(self) -> None:
        info = purchase_info_from_row(_row(purchased_price_amount=100))
        assert isinstance(info, Purchased)
        assert info.details.price is None

    def test_negative_amount_rejected(self) -> None:
        with pytest.raises(NegativeAmountError):
            purchase_info_from_row(
                _row(purchased_price_amount=-1, purchased_price_currency="EUR")
            )

    def test_sold_without_sale_price_is_an_error(self) -> None:
        with pytest.raises(MissingSalePriceError):
            purchase_info_from_row(_row(purchase_type="sold", sale_date="2024-01-01"))

    def test_sold_without_sale_date(self) -> None:
        with pytest.raises(InvalidPurchaseRecordError):
            purchase_info_from_row(
                _row(purchase_type="sold", sale_price_amount=1, sale_price_currency="EUR")
            )

    def test_preorder_currency_mismatch(self) -> None:
        with pytest.raises(CurrencyMismatchError):
            purchase_info_from_row(
                _row(
                    purchase_type="pre_ordered",
                    deposit_amount=500,
                    deposit_currency="EUR",
                    preorder_total_amount=5000,
                    preorder_total_currency="USD",
                )
            )

    def test_preorder_without_deposit(self) -> None:
        with pytest.raises(InvalidPurchaseRecordError):
            purchase_info_from_row(
                _row(
                    purchase_type="pre_ordered",
                    preorder_total_amount=5000,
                    preorder_total_currency="USD",
                )
            )

    def test_unknown_type(self) -> None:
        with pytest.raises(InvalidPurchaseRecordError, match="unknown purchase type"):
            purchase_info_from_row(_row(purchase_type="stolen"))
