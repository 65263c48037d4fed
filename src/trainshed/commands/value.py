"""Command group: parse and convert standalone values."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from trainshed.commands._base import ShedGroup
from trainshed.services.values import ValueService

if TYPE_CHECKING:
    from trainshed.commands._context import AppContext

_VALUE_EXAMPLES = """\
  trainshed value epoch IVa
  trainshed value delivery-date 2026/q3
  trainshed value scale "H0 (1:87)"
  trainshed value length 16.5 mm in
  trainshed value money 1050 EUR"""


@click.group(cls=ShedGroup, examples=_VALUE_EXAMPLES)
def value() -> None:
    """Parse, normalize and convert catalog values."""


@value.command(
    examples="""\
  trainshed value epoch IV
  trainshed value epoch "III/IV"
  trainshed --json value epoch vm"""
)
@click.argument("text")
@click.pass_obj
def epoch(app: AppContext, text: str) -> None:
    """Parse an epoch (I..VI, halves like IVa, ranges like III/IV, Vm)."""
    app.emit(ValueService().parse_epoch(text))


@value.command(
    "delivery-date",
    examples="""\
  trainshed value delivery-date 2026
  trainshed value delivery-date 2026/7
  trainshed value delivery-date 2026/Q3""",
)
@click.argument("text")
@click.pass_obj
def delivery_date(app: AppContext, text: str) -> None:
    """Parse a delivery date (year, year/month or year/quarter)."""
    app.emit(ValueService().parse_delivery_date(text))


@value.command(
    examples="""\
  trainshed value scale H0
  trainshed value scale "G (1:22.5)" """
)
@click.argument("text")
@click.pass_obj
def scale(app: AppContext, text: str) -> None:
    """Show the ratio and track gauge of a scale."""
    app.emit(ValueService().parse_scale(text))


@value.command(
    examples="""\
  trainshed value length 16.5 mm in
  trainshed value length 1 miles km"""
)
@click.argument("quantity")
@click.argument("from_unit")
@click.argument("to_unit")
@click.pass_obj
def length(app: AppContext, quantity: str, from_unit: str, to_unit: str) -> None:
    """Convert a length between units (name or symbol: mm, in, m, mi, km)."""
    app.emit(ValueService().convert_length(quantity, from_unit, to_unit))


@value.command(
    examples="""\
  trainshed value money 1050 EUR
  trainshed value money 1000 jpy"""
)
@click.argument("amount", type=int)
@click.argument("currency")
@click.pass_obj
def money(app: AppContext, amount: int, currency: str) -> None:
    """Render an amount given in minor units (cents) for display."""
    app.emit(ValueService().format_amount(amount, currency))
