"""Operating eras of railway models.

Grammar (surrounding whitespace ignored):

* ``Vm`` (any case): museum piece
* ``<base>/<base>``: a range of two contiguous base epochs, e.g. ``II/III``
* ``<base>a`` / ``<base>b`` (either case): half of a base epoch, e.g. ``IVb``
* ``<base>``: a bare base epoch, ``I`` through ``VI``

INVARIANT: ``parse_epoch(str(kind)) == kind`` for every constructed kind.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Annotated, Any

from pydantic import GetCoreSchemaHandler, PlainSerializer, PlainValidator
from pydantic_core import core_schema

from trainshed.domain._values import value_schema
from trainshed.domain.errors import InvalidEpochError

_MUSEUM = "Vm"


class BaseEpoch(Enum):
    I = "I"  # noqa: E741
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"

    @property
    def ordinal(self) -> int:
        return list(BaseEpoch).index(self) + 1

    def __str__(self) -> str:
        return self.value


class Half(StrEnum):
    A = "a"
    B = "b"


@dataclass(frozen=True)
class SingleEpoch:
    base: BaseEpoch
    half: Half | None = None

    def __str__(self) -> str:
        return f"{self.base}{self.half or ''}"


@dataclass(frozen=True)
class EpochRange:
    """Two contiguous base epochs, e.g. ``III/IV``."""

    start: BaseEpoch
    end: BaseEpoch

    def __post_init__(self) -> None:
        if self.end.ordinal != self.start.ordinal + 1:
            raise InvalidEpochError(f"{self.start}/{self.end}")

    def __str__(self) -> str:
        return f"{self.start}/{self.end}"


@dataclass(frozen=True)
class MuseumEpoch:
    def __str__(self) -> str:
        return _MUSEUM


EpochKind = SingleEpoch | EpochRange | MuseumEpoch


def _parse_base(text: str, original: str) -> BaseEpoch:
    try:
        return BaseEpoch(text.strip())
    except ValueError:
        raise InvalidEpochError(original) from None


def parse_epoch(value: str) -> EpochKind:
    """Parse an epoch string; raises InvalidEpochError on any other shape."""
    text = value.strip()
    if text.lower() == _MUSEUM.lower():
        return MuseumEpoch()

    if "/" in text:
        parts = text.split("/")
        if len(parts) != 2:
            raise InvalidEpochError(value)
        start = _parse_base(parts[0], value)
        end = _parse_base(parts[1], value)
        if end.ordinal != start.ordinal + 1:
            raise InvalidEpochError(value)
        return EpochRange(start, end)

    if len(text) >= 2 and text[-1].lower() in (Half.A, Half.B):
        return SingleEpoch(_parse_base(text[:-1], value), Half(text[-1].lower()))

    return SingleEpoch(_parse_base(text, value))


@dataclass(frozen=True)
class Epoch:
    """String wrapper kept for stored records; always holds a canonical epoch."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", str(parse_epoch(self.value)))

    @classmethod
    def from_kind(cls, kind: EpochKind) -> Epoch:
        return cls(str(kind))

    def kind(self) -> EpochKind:
        return parse_epoch(self.value)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def parse(raw: Any) -> Epoch:
            if isinstance(raw, str):
                return cls(raw)
            if isinstance(raw, SingleEpoch | EpochRange | MuseumEpoch):
                return cls.from_kind(raw)
            raise ValueError(f"invalid epoch value: {raw!r}")

        return value_schema(cls, parse, str)


def _validate_kind(raw: Any) -> EpochKind:
    if isinstance(raw, SingleEpoch | EpochRange | MuseumEpoch):
        return raw
    if isinstance(raw, Epoch):
        return raw.kind()
    if isinstance(raw, str):
        return parse_epoch(raw)
    raise ValueError(f"invalid epoch value: {raw!r}")


def _display(kind: EpochKind) -> str:
    return str(kind)


# Pydantic field type for an EpochKind stored as its display string.
EpochField = Annotated[
    EpochKind,
    PlainValidator(_validate_kind),
    PlainSerializer(_display, when_used="json"),
]
