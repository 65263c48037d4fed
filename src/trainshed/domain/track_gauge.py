"""Track gauge classification.

Track gauge is the distance between the two rails of a railway track;
this enum is the broad category a concrete gauge belongs to.
"""

from __future__ import annotations

from enum import StrEnum


class TrackGauge(StrEnum):
    """Categorical label attached to a physical gauge measurement."""

    BROAD = "BROAD"
    MEDIUM = "MEDIUM"
    MINIMUM = "MINIMUM"
    NARROW = "NARROW"
    STANDARD = "STANDARD"

    @classmethod
    def default(cls) -> TrackGauge:
        return cls.STANDARD

    @classmethod
    def parse(cls, value: str) -> TrackGauge:
        """Parse a gauge label, ignoring case and surrounding whitespace."""
        return cls(value.strip().upper())
