"""Scale ratio between a model and its real-world prototype.

A ratio of 87 reads ``1:87``. Ordering is inverted relative to the number:
a smaller denominator is a larger model, so ``1:87 > 1:160``.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from trainshed.domain._values import as_decimal, value_schema
from trainshed.domain.errors import NonPositiveRatioError, RatioOutOfRangeError

MIN_RATIO = Decimal(1)
MAX_RATIO = Decimal(220)


@total_ordering
@dataclass(frozen=True, eq=False)
class Ratio:
    """A validated ratio denominator in the closed range [1, 220]."""

    value: Decimal

    R87: ClassVar[Ratio]
    R160: ClassVar[Ratio]
    R120: ClassVar[Ratio]
    R220: ClassVar[Ratio]
    R22_5: ClassVar[Ratio]
    R32: ClassVar[Ratio]
    R43_5: ClassVar[Ratio]
    R76_2: ClassVar[Ratio]

    def __post_init__(self) -> None:
        value = as_decimal(self.value)
        if value <= 0:
            raise NonPositiveRatioError(value)
        if value < MIN_RATIO or value > MAX_RATIO:
            raise RatioOutOfRangeError(value)
        object.__setattr__(self, "value", value)

    @classmethod
    def parse(cls, text: str) -> Ratio:
        """Parse ``"87"`` or the rendered ``"1:87"`` form."""
        raw = text.strip()
        if raw.startswith("1:"):
            raw = raw[2:]
        return cls(as_decimal(raw))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ratio):
            return NotImplemented
        return other.value < self.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return f"1:{self.value}"

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return value_schema(cls, lambda raw: cls(as_decimal(raw)), float)


Ratio.R87 = Ratio(Decimal("87"))
Ratio.R160 = Ratio(Decimal("160"))
Ratio.R120 = Ratio(Decimal("120"))
Ratio.R220 = Ratio(Decimal("220"))
Ratio.R22_5 = Ratio(Decimal("22.5"))
Ratio.R32 = Ratio(Decimal("32"))
Ratio.R43_5 = Ratio(Decimal("43.5"))
Ratio.R76_2 = Ratio(Decimal("76.2"))
