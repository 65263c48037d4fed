"""Read and write access to collection items and their purchase records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import Connection, delete, insert, select
from sqlalchemy.engine import Engine

from trainshed.domain.collection import CollectionItem
from trainshed.domain.delivery_date import parse_delivery_date
from trainshed.domain.epoch import Epoch
from trainshed.domain.purchase_info import PreOrdered, Purchased, Sold
from trainshed.domain.scale import Scale
from trainshed.infrastructure.database.schema import collection_items, purchase_infos
from trainshed.infrastructure.repositories.purchases import (
    purchase_info_from_row,
    purchase_info_to_row,
)


def item_to_row(item: CollectionItem) -> dict[str, Any]:
    return {
        "id": item.id,
        "name": item.name,
        "manufacturer": item.manufacturer,
        "product_code": item.product_code,
        "scale": item.scale.label,
        "epoch": str(item.epoch) if item.epoch is not None else None,
        "delivery_date": str(item.delivery_date) if item.delivery_date is not None else None,
    }


def item_from_row(
    row: Mapping[str, Any], purchase: Purchased | Sold | PreOrdered | None = None
) -> CollectionItem:
    """Rebuild an item, re-parsing every stored display string."""
    epoch = row["epoch"]
    delivery_date = row["delivery_date"]
    return CollectionItem(
        id=row["id"],
        name=row["name"],
        manufacturer=row["manufacturer"],
        product_code=row["product_code"],
        scale=Scale.parse(row["scale"]),
        epoch=Epoch(epoch) if epoch is not None else None,
        delivery_date=parse_delivery_date(delivery_date) if delivery_date is not None else None,
        purchase=purchase,
    )


class CollectionRepository:
    """Encapsulates SQL for collection items.

    Writes take the caller's connection so they join its transaction;
    reads open their own connection on the engine.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    # --- writes ---

    @staticmethod
    def insert_item(conn: Connection, item: CollectionItem) -> None:
        conn.execute(insert(collection_items).values(**item_to_row(item)))
        if item.purchase is not None:
            CollectionRepository.replace_purchase(conn, item.id, item.purchase)

    @staticmethod
    def replace_purchase(
        conn: Connection, item_id: str, info: Purchased | Sold | PreOrdered
    ) -> None:
        """Store *info* as the only purchase record of *item_id*."""
        conn.execute(delete(purchase_infos).where(purchase_infos.c.collection_item_id == item_id))
        conn.execute(insert(purchase_infos).values(**purchase_info_to_row(info, item_id)))

    @staticmethod
    def item_exists(conn: Connection, item_id: str) -> bool:
        row = conn.execute(
            select(collection_items.c.id).where(collection_items.c.id == item_id)
        ).first()
        return row is not None

    # --- reads ---

    def get_item(self, item_id: str) -> CollectionItem | None:
        with self._engine.connect() as conn:
            row = (
                conn.execute(select(collection_items).where(collection_items.c.id == item_id))
                .mappings()
                .first()
            )
            if row is None:
                return None
            purchase_row = (
                conn.execute(
                    select(purchase_infos).where(purchase_infos.c.collection_item_id == item_id)
                )
                .mappings()
                .first()
            )
        purchase = purchase_info_from_row(purchase_row) if purchase_row is not None else None
        return item_from_row(row, purchase)

    def list_items(self, *, scale: Scale | None = None) -> list[CollectionItem]:
        """Return all items ordered by name, optionally filtered by scale."""
        stmt = select(collection_items).order_by(collection_items.c.name, collection_items.c.id)
        item_ids = select(collection_items.c.id)
        if scale is not None:
            stmt = stmt.where(collection_items.c.scale == scale.label)
            item_ids = item_ids.where(collection_items.c.scale == scale.label)
        purchase_stmt = select(purchase_infos).where(
            purchase_infos.c.collection_item_id.in_(item_ids)
        )

        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
            purchase_rows = conn.execute(purchase_stmt).mappings().all()

        purchases = {
            str(row["collection_item_id"]): purchase_info_from_row(row) for row in purchase_rows
        }
        return [item_from_row(row, purchases.get(str(row["id"]))) for row in rows]
