"""Command group: collection items, purchases and total value."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

import click

from trainshed.commands._base import ShedGroup
from trainshed.services.collection import PURCHASE_KINDS, CollectionService

if TYPE_CHECKING:
    from trainshed.commands._context import AppContext

_COLLECTION_EXAMPLES = """\
  trainshed collection add "BR 50" --manufacturer Roco --product-code 72241 --scale H0
  trainshed collection purchase ITEM_ID purchased --date 2024-05-01 --price 18990
  trainshed collection list --scale N
  trainshed collection value --currency EUR"""

_ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _as_date(value: datetime | None) -> date | None:
    return value.date() if value is not None else None


@click.group(cls=ShedGroup, examples=_COLLECTION_EXAMPLES)
def collection() -> None:
    """Manage the items of the model railway collection."""


@collection.command(
    examples="""\
  trainshed collection add "BR 50" --manufacturer Roco --product-code 72241 --scale H0
  trainshed collection add "Re 460" --manufacturer Kato --product-code 10-1234 \\
      --scale N --epoch V --delivery-date 2026/Q3"""
)
@click.argument("name")
@click.option("--manufacturer", required=True, help="Manufacturer name.")
@click.option("--product-code", required=True, help="Manufacturer product code.")
@click.option("--scale", "scale_text", required=True, help="Scale, e.g. H0 or N.")
@click.option("--epoch", "epoch_text", default=None, help="Epoch, e.g. IVa or III/IV.")
@click.option("--delivery-date", default=None, help="Announced delivery: 2026, 2026/07 or 2026/Q3.")
@click.option("--id", "item_id", default=None, help="Explicit item ID (default: generated).")
@click.pass_obj
def add(
    app: AppContext,
    name: str,
    manufacturer: str,
    product_code: str,
    scale_text: str,
    epoch_text: str | None,
    delivery_date: str | None,
    item_id: str | None,
) -> None:
    """Add an item to the collection."""
    app.emit(
        CollectionService(app.store).add_item(
            name=name,
            manufacturer=manufacturer,
            product_code=product_code,
            scale=scale_text,
            epoch=epoch_text,
            delivery_date=delivery_date,
            item_id=item_id,
        )
    )


@collection.command(
    examples="""\
  trainshed collection purchase ITEM_ID purchased --date 2024-05-01 --price 18990 --seller shop
  trainshed collection purchase ITEM_ID sold --date 2020-01-10 --sale-date 2024-06-01 \\
      --sale-price 15000 --buyer alice
  trainshed collection purchase ITEM_ID pre_ordered --date 2025-02-01 --deposit 5000 \\
      --price 32900 --currency EUR"""
)
@click.argument("item_id")
@click.argument("kind", type=click.Choice(PURCHASE_KINDS))
@click.option(
    "--date", "purchase_date", type=_ISO_DATE, required=True, help="Purchase or order date."
)
@click.option("--currency", default=None, help="Currency code (default from config).")
@click.option("--price", type=int, default=None, help="Purchase price (total for pre-orders).")
@click.option("--seller", default=None, help="Seller name.")
@click.option("--sale-date", type=_ISO_DATE, default=None, help="Sale date (sold items).")
@click.option("--sale-price", type=int, default=None, help="Sale price (sold items).")
@click.option("--buyer", default=None, help="Buyer name (sold items).")
@click.option("--deposit", type=int, default=None, help="Deposit paid (pre-orders).")
@click.option("--expected-date", type=_ISO_DATE, default=None, help="Expected delivery.")
@click.pass_obj
def purchase(
    app: AppContext,
    item_id: str,
    kind: str,
    purchase_date: datetime,
    currency: str | None,
    price: int | None,
    seller: str | None,
    sale_date: datetime | None,
    sale_price: int | None,
    buyer: str | None,
    deposit: int | None,
    expected_date: datetime | None,
) -> None:
    """Record how an item was acquired. Amounts are minor units (cents)."""
    app.emit(
        CollectionService(app.store).record_purchase(
            item_id,
            kind,
            purchase_date=purchase_date.date(),
            currency=currency or app.settings.display.default_currency,
            price=price,
            seller=seller,
            sale_date=_as_date(sale_date),
            sale_price=sale_price,
            buyer=buyer,
            deposit=deposit,
            expected_date=_as_date(expected_date),
        )
    )


@collection.command(
    examples="""\
  trainshed collection show ITEM_ID
  trainshed --json collection show ITEM_ID"""
)
@click.argument("item_id")
@click.pass_obj
def show(app: AppContext, item_id: str) -> None:
    """Show one item with its purchase record."""
    app.emit(CollectionService(app.store).get_item(item_id))


@collection.command(
    "list",
    examples="""\
  trainshed collection list
  trainshed collection list --scale H0""",
)
@click.option("--scale", "scale_text", default=None, help="Only items of this scale.")
@click.pass_obj
def list_cmd(app: AppContext, scale_text: str | None) -> None:
    """List collection items ordered by name."""
    app.emit(CollectionService(app.store).list_items(scale=scale_text))


@collection.command(
    examples="""\
  trainshed collection value
  trainshed collection value --currency USD"""
)
@click.option("--currency", default=None, help="Currency code (default from config).")
@click.pass_obj
def value(app: AppContext, currency: str | None) -> None:
    """Total value of owned and pre-ordered items (sold items excluded)."""
    app.emit(CollectionService(app.store).collection_value(currency))
