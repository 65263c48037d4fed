"""Minimum drivable radius of a model, in millimeters."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from trainshed.domain._values import as_decimal, value_schema
from trainshed.domain.errors import NegativeRadiusError
from trainshed.domain.length import Length
from trainshed.domain.measure_units import MeasureUnit


@dataclass(frozen=True)
class Radius:
    """A strictly positive radius; zero is rejected unlike a plain Length."""

    value: Length

    @classmethod
    def from_millimeters(cls, value: Any) -> Radius:
        quantity = as_decimal(value)
        if quantity <= 0:
            raise NegativeRadiusError(quantity)
        return cls(Length(quantity, MeasureUnit.MILLIMETERS))

    @property
    def millimeters(self) -> Decimal:
        return self.value.get_value_as(MeasureUnit.MILLIMETERS)

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return value_schema(cls, cls.from_millimeters, lambda radius: float(radius.millimeters))
