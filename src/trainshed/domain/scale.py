"""Model railway scales.

Each scale maps to a fixed :class:`Ratio` and :class:`Gauge`. Both mappings
are exhaustive ``match`` statements ending in ``assert_never`` so adding a
member without a mapping is reported by the type checker.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import assert_never

from trainshed.domain.errors import InvalidScaleError
from trainshed.domain.gauge import Gauge
from trainshed.domain.ratio import Ratio

# Leading label of a rendered scale, e.g. "H0" in "H0 (1:87)".
_LEADING_LABEL = re.compile(r"[ (]")


class Scale(Enum):
    """Hobbyist scale identified by its short label (``"H0"``, ``"00"``)."""

    H0 = "H0"
    H0M = "H0m"
    H0E = "H0e"
    N = "N"
    TT = "TT"
    Z = "Z"
    G = "G"
    SCALE_1 = "1"
    SCALE_0 = "0"
    SCALE_00 = "00"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Scale:
        """Parse the short label (``"H0"``) or the rendered form (``"H0 (1:87)"``)."""
        text = value.strip()
        try:
            return cls(text)
        except ValueError:
            pass
        leading = _LEADING_LABEL.split(text, maxsplit=1)[0].strip()
        try:
            return cls(leading)
        except ValueError:
            raise InvalidScaleError(value) from None

    def ratio(self) -> Ratio:
        match self:
            case Scale.H0 | Scale.H0M | Scale.H0E:
                return Ratio.R87
            case Scale.N:
                return Ratio.R160
            case Scale.TT:
                return Ratio.R120
            case Scale.Z:
                return Ratio.R220
            case Scale.G:
                return Ratio.R22_5
            case Scale.SCALE_1:
                return Ratio.R32
            case Scale.SCALE_0:
                return Ratio.R43_5
            case Scale.SCALE_00:
                return Ratio.R76_2
            case _:
                assert_never(self)

    def gauge(self) -> Gauge:
        match self:
            case Scale.H0:
                return Gauge.H0
            case Scale.H0M:
                return Gauge.H0M
            case Scale.H0E:
                return Gauge.H0E
            case Scale.N:
                return Gauge.N
            case Scale.TT:
                return Gauge.TT
            case Scale.Z:
                return Gauge.Z
            case Scale.G:
                return Gauge.G
            case Scale.SCALE_1:
                return Gauge.ONE
            case Scale.SCALE_0:
                return Gauge.ZERO
            case Scale.SCALE_00:
                return Gauge.DOUBLE_ZERO
            case _:
                assert_never(self)

    def __str__(self) -> str:
        ratio = self.ratio().value
        if ratio == ratio.to_integral_value():
            ratio_text = str(int(ratio))
        else:
            ratio_text = f"{ratio:.1f}"
        return f"{self.label} (1:{ratio_text})"
