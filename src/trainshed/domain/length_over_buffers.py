"""Length over buffers: a rail vehicle's overall length.

Either unit may be missing. When both are present they must describe the
same length (within 0.01 after conversion); present values are strictly
positive.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, model_validator

from trainshed.domain._values import as_decimal
from trainshed.domain.errors import (
    LengthOverBuffersMismatchError,
    NonPositiveLengthOverBuffersError,
)
from trainshed.domain.length import InchesLength, Length, MillimetersLength
from trainshed.domain.measure_units import MeasureUnit


def _check(inches: Decimal | None, millimeters: Decimal | None) -> None:
    for value in (inches, millimeters):
        if value is not None and value <= 0:
            raise NonPositiveLengthOverBuffersError(value)
    if (
        inches is not None
        and millimeters is not None
        and not MeasureUnit.MILLIMETERS.same_as(millimeters, MeasureUnit.INCHES, inches)
    ):
        raise LengthOverBuffersMismatchError(millimeters, inches)


class LengthOverBuffers(BaseModel):
    """Overall vehicle length in inches and/or millimeters."""

    model_config = {"frozen": True}

    inches: InchesLength | None = None
    millimeters: MillimetersLength | None = None

    @model_validator(mode="after")
    def validate_lengths(self) -> LengthOverBuffers:
        _check(
            self.inches.quantity if self.inches is not None else None,
            self.millimeters.quantity if self.millimeters is not None else None,
        )
        return self

    @classmethod
    def new(cls, inches: Any = None, millimeters: Any = None) -> LengthOverBuffers:
        ins = as_decimal(inches) if inches is not None else None
        mm = as_decimal(millimeters) if millimeters is not None else None
        _check(ins, mm)
        return cls(
            inches=Length(ins, MeasureUnit.INCHES) if ins is not None else None,
            millimeters=Length(mm, MeasureUnit.MILLIMETERS) if mm is not None else None,
        )

    @classmethod
    def from_millimeters(cls, millimeters: Length) -> LengthOverBuffers:
        mm = millimeters.get_value_as(MeasureUnit.MILLIMETERS)
        inches = MeasureUnit.MILLIMETERS.to(MeasureUnit.INCHES).convert(mm)
        return cls.new(inches=inches, millimeters=mm)

    @classmethod
    def from_inches(cls, inches: Length) -> LengthOverBuffers:
        ins = inches.get_value_as(MeasureUnit.INCHES)
        millimeters = MeasureUnit.INCHES.to(MeasureUnit.MILLIMETERS).convert(ins)
        return cls.new(inches=ins, millimeters=millimeters)
