"""Measure units and the conversion ratios between them.

The ratio table is process-wide immutable data. Pairs without a direct
ratio are converted through millimeters (the length units) or kilometers
(the distance units), so every pair of units has a converter.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum

from trainshed.domain.errors import UnknownMeasureUnitError

# Two values expressed in different units are "the same" below this delta.
SAME_VALUE_EPSILON = Decimal("0.01")

INCHES_TO_MILLIMETERS = Decimal("25.4")
MILLIMETERS_TO_INCHES = Decimal("0.0393701")
MILES_TO_KILOMETERS = Decimal("1.60934")
KILOMETERS_TO_MILES = Decimal("0.621371")
METERS_TO_MILLIMETERS = Decimal("1000")
MILLIMETERS_TO_METERS = Decimal("0.001")
KILOMETERS_TO_MILLIMETERS = Decimal("1000000")
MILLIMETERS_TO_KILOMETERS = Decimal("0.000001")


class MeasureUnit(StrEnum):
    """Units a :class:`~trainshed.domain.length.Length` can be expressed in."""

    MILLIMETERS = "millimeters"
    INCHES = "inches"
    METERS = "meters"
    MILES = "miles"
    KILOMETERS = "kilometers"

    @classmethod
    def parse(cls, value: str) -> MeasureUnit:
        """Look up a unit by name (``"inches"``) or symbol (``"in"``), ignoring case."""
        text = value.strip().lower()
        for unit in cls:
            if text in (unit.value, unit.symbol):
                return unit
        raise UnknownMeasureUnitError(value)

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]

    def to(self, other: MeasureUnit) -> MeasureUnitConverter:
        """Return the converter from this unit to *other*."""
        if self is other:
            return MeasureUnitConverter(self, other, Decimal(1))
        direct = _RATIOS.get((self, other))
        if direct is not None:
            return MeasureUnitConverter(self, other, direct)
        pivot = MeasureUnit.MILLIMETERS
        if self is pivot or other is pivot:
            pivot = MeasureUnit.KILOMETERS
        ratio = self.to(pivot).ratio * pivot.to(other).ratio
        return MeasureUnitConverter(self, other, ratio)

    def same_as(self, value: Decimal, other_unit: MeasureUnit, other_value: Decimal) -> bool:
        """Check whether *value* in this unit matches *other_value* in *other_unit*."""
        converted = self.to(other_unit).convert(value)
        return abs(other_value - converted) < SAME_VALUE_EPSILON


_SYMBOLS: dict[MeasureUnit, str] = {
    MeasureUnit.MILLIMETERS: "mm",
    MeasureUnit.INCHES: "in",
    MeasureUnit.METERS: "m",
    MeasureUnit.MILES: "mi",
    MeasureUnit.KILOMETERS: "km",
}

_RATIOS: dict[tuple[MeasureUnit, MeasureUnit], Decimal] = {
    (MeasureUnit.INCHES, MeasureUnit.MILLIMETERS): INCHES_TO_MILLIMETERS,
    (MeasureUnit.MILLIMETERS, MeasureUnit.INCHES): MILLIMETERS_TO_INCHES,
    (MeasureUnit.METERS, MeasureUnit.MILLIMETERS): METERS_TO_MILLIMETERS,
    (MeasureUnit.MILLIMETERS, MeasureUnit.METERS): MILLIMETERS_TO_METERS,
    (MeasureUnit.MILES, MeasureUnit.KILOMETERS): MILES_TO_KILOMETERS,
    (MeasureUnit.KILOMETERS, MeasureUnit.MILES): KILOMETERS_TO_MILES,
    (MeasureUnit.KILOMETERS, MeasureUnit.MILLIMETERS): KILOMETERS_TO_MILLIMETERS,
    (MeasureUnit.MILLIMETERS, MeasureUnit.KILOMETERS): MILLIMETERS_TO_KILOMETERS,
}


@dataclass(frozen=True)
class MeasureUnitConverter:
    """Multiplies a quantity by a fixed ratio to move between two units."""

    from_unit: MeasureUnit
    to_unit: MeasureUnit
    ratio: Decimal

    @property
    def is_identity(self) -> bool:
        return self.from_unit is self.to_unit

    def convert(self, value: Decimal) -> Decimal:
        if self.is_identity:
            return value
        return value * self.ratio

    def __str__(self) -> str:
        return f"Converter from {self.from_unit.name} to {self.to_unit.name}"
