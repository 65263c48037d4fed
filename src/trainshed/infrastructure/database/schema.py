"""SQLAlchemy Core table definitions for the trainshed database.

Amount columns are signed 64-bit integers paired with a nullable
currency-code column; a NULL currency means the amount is absent. Dates
are ISO ``YYYY-MM-DD`` text. Scale, epoch and delivery date columns hold
the canonical display strings of those values.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, ForeignKey, Index, MetaData, Table, Text

metadata = MetaData()

collection_items = Table(
    "collection_items",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", Text, nullable=False),
    Column("manufacturer", Text, nullable=False),
    Column("product_code", Text, nullable=False),
    Column("scale", Text, nullable=False),  # "H0", "N", ...
    Column("epoch", Text),  # "IVa", "III/IV", "Vm"
    Column("delivery_date", Text),  # "2026", "2026/07", "2026/Q3"
)

purchase_infos = Table(
    "purchase_infos",
    metadata,
    Column("purchase_id", Text, primary_key=True),
    Column(
        "collection_item_id",
        Text,
        ForeignKey("collection_items.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("purchase_type", Text),  # purchased | sold | pre_ordered
    Column("purchase_date", Text, nullable=False),
    Column("seller_id", Text),
    Column("buyer_id", Text),
    Column("sale_date", Text),
    Column("purchased_price_amount", BigInteger),
    Column("purchased_price_currency", Text),
    Column("sale_price_amount", BigInteger),
    Column("sale_price_currency", Text),
    Column("deposit_amount", BigInteger),
    Column("deposit_currency", Text),
    Column("preorder_total_amount", BigInteger),
    Column("preorder_total_currency", Text),
    Column("expected_date", Text),
)

Index("idx_purchase_infos_collection_item", purchase_infos.c.collection_item_id)
Index("idx_purchase_infos_type", purchase_infos.c.purchase_type)
