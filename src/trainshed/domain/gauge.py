"""Track gauge of a modelling scale, kept in both millimeters and inches.

INVARIANT: both distances are strictly positive and describe the same
physical distance (within 0.01 after converting millimeters to inches).
Both units are stored so presentation and storage round-trip exactly.
"""

from __future__ import annotations

from decimal import Decimal
from functools import total_ordering
from typing import Any, ClassVar

from pydantic import BaseModel, model_validator

from trainshed.domain._values import as_decimal
from trainshed.domain.errors import GaugeMismatchError, NegativeRailsDistanceError
from trainshed.domain.length import InchesLength, Length, MillimetersLength
from trainshed.domain.measure_units import MeasureUnit
from trainshed.domain.track_gauge import TrackGauge

_MILLIMETERS_PRECISION = Decimal("0.1")
_INCHES_PRECISION = Decimal("0.001")


def _check_rails_distance(millimeters: Decimal, inches: Decimal) -> None:
    if millimeters <= 0:
        raise NegativeRailsDistanceError(millimeters, MeasureUnit.MILLIMETERS.symbol)
    if inches <= 0:
        raise NegativeRailsDistanceError(inches, MeasureUnit.INCHES.symbol)
    if not MeasureUnit.MILLIMETERS.same_as(millimeters, MeasureUnit.INCHES, inches):
        raise GaugeMismatchError(millimeters, inches)


@total_ordering
class Gauge(BaseModel):
    """Distance between the rails plus its :class:`TrackGauge` category.

    Ordered by the millimeter distance. Named constants (``Gauge.H0``,
    ``Gauge.N``, ...) are defined at module import time.
    """

    model_config = {"frozen": True}

    millimeters: MillimetersLength
    inches: InchesLength
    track_gauge: TrackGauge = TrackGauge.STANDARD

    H0: ClassVar[Gauge]
    H0M: ClassVar[Gauge]
    H0E: ClassVar[Gauge]
    N: ClassVar[Gauge]
    TT: ClassVar[Gauge]
    Z: ClassVar[Gauge]
    G: ClassVar[Gauge]
    ONE: ClassVar[Gauge]
    ZERO: ClassVar[Gauge]
    DOUBLE_ZERO: ClassVar[Gauge]

    @model_validator(mode="after")
    def validate_distances(self) -> Gauge:
        _check_rails_distance(self.millimeters.quantity, self.inches.quantity)
        return self

    @classmethod
    def new(cls, track_gauge: TrackGauge, millimeters: Any, inches: Any) -> Gauge:
        """Validate and build a gauge; raises GaugeError subclasses directly."""
        mm = as_decimal(millimeters)
        ins = as_decimal(inches)
        _check_rails_distance(mm, ins)
        return cls(
            millimeters=Length(mm, MeasureUnit.MILLIMETERS),
            inches=Length(ins, MeasureUnit.INCHES),
            track_gauge=track_gauge,
        )

    @classmethod
    def from_millimeters(cls, track_gauge: TrackGauge, millimeters: Any) -> Gauge:
        """Build a gauge from millimeters, deriving inches rounded to 3 places."""
        mm = as_decimal(millimeters)
        inches = MeasureUnit.MILLIMETERS.to(MeasureUnit.INCHES).convert(mm)
        return cls.new(track_gauge, mm, inches.quantize(_INCHES_PRECISION))

    @classmethod
    def from_inches(cls, track_gauge: TrackGauge, inches: Any) -> Gauge:
        """Build a gauge from inches, deriving millimeters rounded to 1 place."""
        ins = as_decimal(inches)
        mm = MeasureUnit.INCHES.to(MeasureUnit.MILLIMETERS).convert(ins)
        return cls.new(track_gauge, mm.quantize(_MILLIMETERS_PRECISION), ins)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Gauge):
            return NotImplemented
        return self.millimeters < other.millimeters

    def __hash__(self) -> int:
        # Both lengths are pinned to one unit, so their quantities are stable.
        return hash((self.millimeters.quantity, self.inches.quantity, self.track_gauge))

    def __str__(self) -> str:
        return f"{self.millimeters} ({self.inches}, {self.track_gauge})"


Gauge.H0 = Gauge.new(TrackGauge.STANDARD, "16.5", "0.65")
Gauge.N = Gauge.new(TrackGauge.STANDARD, "9.0", "0.354")
Gauge.H0M = Gauge.new(TrackGauge.NARROW, "12.0", "0.472")
Gauge.H0E = Gauge.new(TrackGauge.NARROW, "9.0", "0.354")
Gauge.TT = Gauge.new(TrackGauge.STANDARD, "12.0", "0.472")
Gauge.Z = Gauge.new(TrackGauge.MINIMUM, "6.5", "0.256")
Gauge.G = Gauge.new(TrackGauge.BROAD, "45.0", "1.772")
Gauge.ONE = Gauge.new(TrackGauge.BROAD, "45.0", "1.772")
Gauge.ZERO = Gauge.new(TrackGauge.BROAD, "33.0", "1.299")
Gauge.DOUBLE_ZERO = Gauge.new(TrackGauge.STANDARD, "16.5", "0.65")
