"""Tests for CollectionService."""

from datetime import date
from pathlib import Path

import pytest

from tests.conftest import add_item
from trainshed.config.settings import TrainshedSettings
from trainshed.infrastructure.store import Store
from trainshed.services.base import INVALID_VALUE
from trainshed.services.collection import CollectionService


@pytest.fixture
def svc(store: Store) -> CollectionService:
    return CollectionService(store)


class TestAddItem:
    def test_add_minimal(self, svc: CollectionService) -> None:
        result = svc.add_item(name="BR 50", manufacturer="Roco", product_code="72241", scale="H0")
        assert result.ok
        item = result.data["item"]
        assert item["scale"] == "H0"
        assert item["epoch"] is None
        assert item["purchase"] is None
        assert len(item["id"]) == 32

    def test_add_normalizes_values(self, store: Store) -> None:
        item = add_item(store, epoch="IIIB", delivery_date="2026/q2", scale="N (1:160)")
        assert item["epoch"] == "IIIb"
        assert item["delivery_date"] == "2026/Q2"
        assert item["scale"] == "N"

    def test_explicit_id(self, store: Store) -> None:
        assert add_item(store, item_id="br50")["id"] == "br50"

    def test_id_collision(self, svc: CollectionService, store: Store) -> None:
        add_item(store, item_id="br50")
        result = svc.add_item(
            name="Other", manufacturer="Fleischmann", product_code="1", scale="H0", item_id="br50"
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ID_COLLISION"

    @pytest.mark.parametrize(
        "fields",
        [{"scale": "H1"}, {"epoch": "VII"}, {"delivery_date": "next year"}],
    )
    def test_invalid_values(self, svc: CollectionService, fields: dict[str, str]) -> None:
        kwargs = {"name": "BR 50", "manufacturer": "Roco", "product_code": "1", "scale": "H0"}
        kwargs.update(fields)
        result = svc.add_item(**kwargs)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_VALUE
        assert svc.list_items().meta == {"count": 0}


class TestRecordPurchase:
    def test_purchased(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id,
            "purchased",
            purchase_date=date(2024, 5, 1),
            currency="EUR",
            price=18990,
            seller="Modellbahn Shop",
        )
        assert result.ok
        purchase = result.data["purchase"]
        assert purchase["kind"] == "purchased"
        assert purchase["details"]["price"] == {"amount": 18990, "currency": "EUR"}
        assert purchase["details"]["purchase_date"] == "2024-05-01"

    def test_replaces_previous_record(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        svc.record_purchase(
            item_id, "purchased", purchase_date=date(2020, 1, 1), currency="EUR", price=100
        )
        svc.record_purchase(
            item_id,
            "sold",
            purchase_date=date(2020, 1, 1),
            currency="EUR",
            price=100,
            sale_date=date(2024, 1, 1),
            sale_price=150,
            buyer="alice",
        )
        item = svc.get_item(item_id).data["item"]
        assert item["purchase"]["kind"] == "sold"
        assert item["purchase"]["details"]["sale_price"]["amount"] == 150

    def test_pre_order(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id,
            "pre_ordered",
            purchase_date=date(2025, 2, 1),
            currency="GBP",
            price=32900,
            deposit=5000,
            expected_date=date(2026, 9, 30),
        )
        assert result.ok
        details = result.data["purchase"]["details"]
        assert details["deposit"]["currency"] == "GBP"
        assert details["expected_date"] == "2026-09-30"

    def test_sold_needs_sale_price(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "sold", purchase_date=date(2020, 1, 1), currency="EUR", sale_date=date.today()
        )
        assert result.error is not None
        assert result.error.code == "MISSING_FIELD"

    def test_pre_order_needs_deposit(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "pre_ordered", purchase_date=date(2025, 1, 1), currency="EUR", price=100
        )
        assert result.error is not None
        assert result.error.code == "MISSING_FIELD"

    def test_unknown_kind(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "gifted", purchase_date=date(2025, 1, 1), currency="EUR"
        )
        assert result.error is not None
        assert result.error.code == "UNKNOWN_KIND"
        assert result.error.detail["allowed"] == ["purchased", "sold", "pre_ordered"]

    def test_unsupported_currency(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "purchased", purchase_date=date(2025, 1, 1), currency="CHF", price=1
        )
        assert result.error is not None
        assert result.error.code == INVALID_VALUE

    def test_unknown_item(self, svc: CollectionService) -> None:
        result = svc.record_purchase(
            "ghost", "purchased", purchase_date=date(2025, 1, 1), currency="EUR"
        )
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestQueries:
    def test_get_item(self, svc: CollectionService, store: Store) -> None:
        item = add_item(store, item_id="br50")
        result = svc.get_item("br50")
        assert result.ok
        assert result.data["item"] == item

    def test_get_missing(self, svc: CollectionService) -> None:
        result = svc.get_item("ghost")
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_list_items(self, svc: CollectionService, store: Store) -> None:
        add_item(store, name="V 200")
        add_item(store, name="BR 01", scale="N")
        result = svc.list_items()
        assert [item["name"] for item in result.data["items"]] == ["BR 01", "V 200"]
        assert result.meta == {"count": 2}

    def test_list_by_scale(self, svc: CollectionService, store: Store) -> None:
        add_item(store, name="V 200")
        add_item(store, name="BR 01", scale="N")
        result = svc.list_items(scale="N")
        assert [item["name"] for item in result.data["items"]] == ["BR 01"]

    def test_list_invalid_scale(self, svc: CollectionService) -> None:
        assert not svc.list_items(scale="XX").ok


class TestCollectionValue:
    def _buy(self, svc: CollectionService, store: Store, currency: str, price: int) -> str:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "purchased", purchase_date=date(2024, 1, 1), currency=currency, price=price
        )
        assert result.ok
        return item_id

    def test_sums_owned_and_pre_ordered(self, svc: CollectionService, store: Store) -> None:
        self._buy(svc, store, "EUR", 10000)
        item_id = add_item(store)["id"]
        svc.record_purchase(
            item_id,
            "pre_ordered",
            purchase_date=date(2025, 1, 1),
            currency="EUR",
            price=25000,
            deposit=5000,
        )
        result = svc.collection_value("EUR")
        assert result.ok
        assert result.data["total"] == {"amount": 35000, "currency": "EUR"}
        assert result.data["display"] == "350.00 €"
        assert result.data["counted"] == 2

    def test_sold_items_excluded(self, svc: CollectionService, store: Store) -> None:
        item_id = self._buy(svc, store, "EUR", 10000)
        svc.record_purchase(
            item_id,
            "sold",
            purchase_date=date(2024, 1, 1),
            currency="EUR",
            price=10000,
            sale_date=date(2025, 1, 1),
            sale_price=12000,
        )
        result = svc.collection_value("EUR")
        assert result.data["total"]["amount"] == 0
        assert result.data["counted"] == 0

    def test_other_currency_skipped_with_warning(
        self, svc: CollectionService, store: Store
    ) -> None:
        self._buy(svc, store, "EUR", 100)
        usd_id = self._buy(svc, store, "USD", 100)
        result = svc.collection_value("EUR")
        assert result.data["skipped"] == [usd_id]
        assert len(result.warnings) == 1
        assert usd_id in result.warnings[0]

    def test_defaults_to_configured_currency(self, tmp_path: Path) -> None:
        (tmp_path / "trainshed.toml").write_text('[display]\ndefault_currency = "GBP"\n')
        store = Store(TrainshedSettings.from_cli(data_root=tmp_path))
        try:
            result = CollectionService(store).collection_value()
            assert result.data["total"] == {"amount": 0, "currency": "GBP"}
        finally:
            store.close()


class TestStorageRange:
    def test_amount_above_column_range_rejected(
        self, svc: CollectionService, store: Store
    ) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "purchased", purchase_date=date(2024, 1, 1), currency="EUR", price=2**63
        )
        assert not result.ok
        assert result.error is not None
        assert result.error.code == INVALID_VALUE
        assert str(2**63) in result.error.message

    def test_rejected_write_keeps_previous_record(
        self, svc: CollectionService, store: Store
    ) -> None:
        item_id = add_item(store)["id"]
        svc.record_purchase(
            item_id, "purchased", purchase_date=date(2024, 1, 1), currency="EUR", price=100
        )
        svc.record_purchase(
            item_id,
            "pre_ordered",
            purchase_date=date(2025, 1, 1),
            currency="EUR",
            price=2**64 - 1,
            deposit=1,
        )
        purchase = svc.get_item(item_id).data["item"]["purchase"]
        assert purchase["kind"] == "purchased"
        assert purchase["details"]["price"]["amount"] == 100

    def test_largest_storable_amount(self, svc: CollectionService, store: Store) -> None:
        item_id = add_item(store)["id"]
        result = svc.record_purchase(
            item_id, "purchased", purchase_date=date(2024, 1, 1), currency="EUR", price=2**63 - 1
        )
        assert result.ok
        item = svc.get_item(item_id).data["item"]
        assert item["purchase"]["details"]["price"]["amount"] == 2**63 - 1
