"""Announced delivery timeframe of a model: a year, a month or a quarter.

Accepted text forms (after trimming the whole string):

* ``2026``: a year
* ``2026/Q3`` (``q`` also accepted): a quarter
* ``2026/7`` or ``2026/07``: a month

Whitespace inside the value (``"2026/ 7"``) is rejected. Years are always
four digits in the range 1000-9999; months and quarters are re-rendered in
canonical form (``2026/07``, ``2026/Q3``).
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator

from trainshed.domain.errors import InvalidDeliveryDateError

MIN_YEAR = 1000
MAX_YEAR = 9999

_YEAR = re.compile(r"^[0-9]{4}$")
_YEAR_QUARTER = re.compile(r"^([0-9]{4})/[Qq]([1-4])$")
_YEAR_MONTH = re.compile(r"^([0-9]{4})/([0-9]{1,2})$")


class Quarter(IntEnum):
    Q1 = 1
    Q2 = 2
    Q3 = 3
    Q4 = 4

    def __str__(self) -> str:
        return self.name


def _check_year(year: int, original: str) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDeliveryDateError(original)


@dataclass(frozen=True)
class Year:
    year: int

    def __post_init__(self) -> None:
        _check_year(self.year, str(self.year))

    def __str__(self) -> str:
        return f"{self.year:04}"


@dataclass(frozen=True)
class YearMonth:
    year: int
    month: int

    def __post_init__(self) -> None:
        original = f"{self.year}/{self.month}"
        _check_year(self.year, original)
        if not 1 <= self.month <= 12:
            raise InvalidDeliveryDateError(original)

    def __str__(self) -> str:
        return f"{self.year:04}/{self.month:02}"


@dataclass(frozen=True)
class YearQuarter:
    year: int
    quarter: Quarter

    def __post_init__(self) -> None:
        _check_year(self.year, f"{self.year}/{self.quarter}")
        object.__setattr__(self, "quarter", Quarter(self.quarter))

    def __str__(self) -> str:
        return f"{self.year:04}/{self.quarter}"


DeliveryDate = Year | YearMonth | YearQuarter


def parse_delivery_date(value: str) -> DeliveryDate:
    """Parse a delivery date; the error message carries the original input."""
    text = value.strip()
    if not text:
        raise InvalidDeliveryDateError(value)

    try:
        if _YEAR.match(text):
            return Year(int(text))
        if match := _YEAR_QUARTER.match(text):
            return YearQuarter(int(match[1]), Quarter(int(match[2])))
        if match := _YEAR_MONTH.match(text):
            return YearMonth(int(match[1]), int(match[2]))
    except InvalidDeliveryDateError:
        raise InvalidDeliveryDateError(value) from None
    raise InvalidDeliveryDateError(value)


def _validate(raw: Any) -> DeliveryDate:
    if isinstance(raw, Year | YearMonth | YearQuarter):
        return raw
    if isinstance(raw, str):
        return parse_delivery_date(raw)
    raise ValueError(f"invalid delivery date value: {raw!r}")


def _display(value: DeliveryDate) -> str:
    return str(value)


# Pydantic field type for a DeliveryDate stored as its display string.
DeliveryDateField = Annotated[
    DeliveryDate,
    PlainValidator(_validate),
    PlainSerializer(_display, when_used="json"),
]
