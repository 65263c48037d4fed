"""ValueService: parse, normalize and convert standalone domain values.

No persistence involved. Each operation returns the canonical rendering of
its value plus a small structured breakdown.
"""

from __future__ import annotations

from typing import Any, assert_never

from trainshed.domain.currency import Currency
from trainshed.domain.delivery_date import Year, YearMonth, YearQuarter, parse_delivery_date
from trainshed.domain.epoch import EpochRange, MuseumEpoch, SingleEpoch, parse_epoch
from trainshed.domain.errors import DomainError
from trainshed.domain.length import Length
from trainshed.domain.measure_units import MeasureUnit
from trainshed.domain.monetary_amount import MonetaryAmount
from trainshed.domain.scale import Scale
from trainshed.services.base import domain_failure
from trainshed.services.result import ServiceResult


class ValueService:
    """Stateless operations over single values."""

    def parse_epoch(self, text: str) -> ServiceResult:
        op = "parse_epoch"
        try:
            kind = parse_epoch(text)
        except DomainError as exc:
            return domain_failure(op, exc)

        data: dict[str, Any] = {"epoch": str(kind)}
        match kind:
            case SingleEpoch(base=base, half=half):
                data |= {"kind": "single", "base": str(base), "half": half}
            case EpochRange(start=start, end=end):
                data |= {"kind": "range", "start": str(start), "end": str(end)}
            case MuseumEpoch():
                data |= {"kind": "museum"}
            case _:
                assert_never(kind)
        return ServiceResult(ok=True, op=op, data=data)

    def parse_delivery_date(self, text: str) -> ServiceResult:
        op = "parse_delivery_date"
        try:
            value = parse_delivery_date(text)
        except DomainError as exc:
            return domain_failure(op, exc)

        data: dict[str, Any] = {"delivery_date": str(value), "year": value.year}
        match value:
            case Year():
                data["granularity"] = "year"
            case YearMonth(month=month):
                data |= {"granularity": "month", "month": month}
            case YearQuarter(quarter=quarter):
                data |= {"granularity": "quarter", "quarter": int(quarter)}
            case _:
                assert_never(value)
        return ServiceResult(ok=True, op=op, data=data)

    def parse_scale(self, text: str) -> ServiceResult:
        op = "parse_scale"
        try:
            scale = Scale.parse(text)
        except DomainError as exc:
            return domain_failure(op, exc)

        gauge = scale.gauge()
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "scale": scale.label,
                "display": str(scale),
                "ratio": float(scale.ratio()),
                "gauge": gauge.model_dump(mode="json"),
            },
        )

    def convert_length(self, quantity: str, from_unit: str, to_unit: str) -> ServiceResult:
        op = "convert_length"
        try:
            source = MeasureUnit.parse(from_unit)
            target = MeasureUnit.parse(to_unit)
            length = Length.of(quantity, source)
        except DomainError as exc:
            return domain_failure(op, exc)

        converted = length.to(target)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "from": str(length),
                "to": str(converted),
                "value": str(converted.quantity),
                "unit": str(target),
            },
        )

    def format_amount(self, amount: int, currency_code: str) -> ServiceResult:
        op = "format_amount"
        try:
            money = MonetaryAmount.new(amount, Currency.from_code(currency_code))
        except DomainError as exc:
            return domain_failure(op, exc)

        return ServiceResult(
            ok=True,
            op=op,
            data={"display": str(money), **money.model_dump(mode="json")},
        )
