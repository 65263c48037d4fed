"""Physical lengths paired with their measure unit.

INVARIANT: a Length quantity is never negative (zero is allowed).

Equality and ordering convert the right operand into the left operand's
unit before comparing, so ``Length.of(1, METERS) > Length.of(20, MILLIMETERS)``.
Because cross-unit equality depends on the conversion direction, Length
values are unhashable.

The ``*Length`` annotated aliases at the bottom pin a pydantic field to one
unit: it serializes as a bare JSON number and re-validates on input.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from trainshed.domain._values import as_decimal, value_schema
from trainshed.domain.errors import NegativeValueError
from trainshed.domain.measure_units import MeasureUnit


@total_ordering
@dataclass(frozen=True, eq=False)
class Length:
    """A non-negative decimal quantity in a given measure unit."""

    quantity: Decimal
    unit: MeasureUnit

    def __post_init__(self) -> None:
        quantity = as_decimal(self.quantity)
        if quantity < 0:
            raise NegativeValueError(quantity)
        object.__setattr__(self, "quantity", quantity)
        object.__setattr__(self, "unit", MeasureUnit(self.unit))

    @classmethod
    def of(cls, quantity: Any, unit: MeasureUnit) -> Length:
        """Shorthand for trusted literals, e.g. ``Length.of("16.5", MILLIMETERS)``.

        Raises NegativeValueError like the constructor; do not feed it
        unchecked input from storage or IPC without handling that error.
        """
        return cls(as_decimal(quantity), unit)

    @classmethod
    def millimeters(cls, quantity: Any) -> Length:
        return cls(as_decimal(quantity), MeasureUnit.MILLIMETERS)

    @classmethod
    def inches(cls, quantity: Any) -> Length:
        return cls(as_decimal(quantity), MeasureUnit.INCHES)

    def get_value_as(self, unit: MeasureUnit) -> Decimal:
        """Return this quantity expressed in *unit*."""
        return self.unit.to(unit).convert(self.quantity)

    def to(self, unit: MeasureUnit) -> Length:
        """Return an equivalent Length expressed in *unit*."""
        return Length(self.get_value_as(unit), unit)

    def __add__(self, other: object) -> Length:
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self.quantity + other.get_value_as(self.unit), self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.quantity == other.get_value_as(self.unit)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Length):
            return NotImplemented
        return self.quantity < other.get_value_as(self.unit)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"{self.quantity} {self.unit.symbol}"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def parse(value: Any) -> Length:
            if isinstance(value, dict):
                return cls(as_decimal(value.get("quantity")), MeasureUnit(value.get("unit")))
            raise ValueError(f"invalid length value: {value!r}")

        return value_schema(
            cls,
            parse,
            lambda length: {"quantity": float(length.quantity), "unit": str(length.unit)},
        )


@dataclass(frozen=True)
class InUnit:
    """Pydantic marker fixing a Length field to one unit (bare-number JSON)."""

    unit: MeasureUnit

    def __get_pydantic_core_schema__(
        self, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        unit = self.unit

        def parse(value: Any) -> Length:
            return Length(as_decimal(value), unit)

        def coerce(value: Any) -> Length:
            length = value if isinstance(value, Length) else parse(value)
            return length if length.unit is unit else length.to(unit)

        return core_schema.no_info_plain_validator_function(
            coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda length: float(length.get_value_as(unit)), when_used="json"
            ),
        )


MillimetersLength = Annotated[Length, InUnit(MeasureUnit.MILLIMETERS)]
InchesLength = Annotated[Length, InUnit(MeasureUnit.INCHES)]
MetersLength = Annotated[Length, InUnit(MeasureUnit.METERS)]
MilesLength = Annotated[Length, InUnit(MeasureUnit.MILES)]
KilometersLength = Annotated[Length, InUnit(MeasureUnit.KILOMETERS)]
