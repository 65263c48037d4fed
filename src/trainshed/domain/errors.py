"""Domain exception taxonomy.

One exception class per violated invariant. Every class derives from
:class:`DomainError`, which is a ``ValueError`` so pydantic reports it as a
validation error when it is raised during deserialization.

Each error carries a stable machine-readable ``code`` and a ``detail`` dict
so callers can log the structured error before flattening it for transport.
"""

from __future__ import annotations

from typing import Any


class DomainError(ValueError):
    """Base class for all value-type validation failures."""

    code = "DOMAIN_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class InvalidNumberError(DomainError):
    code = "INVALID_NUMBER"

    def __init__(self, value: Any) -> None:
        super().__init__(f"invalid decimal value: {value!r}", value=repr(value))


# --- Measurements ---


class LengthError(DomainError):
    code = "INVALID_LENGTH"


class NegativeValueError(LengthError):
    code = "NEGATIVE_LENGTH"

    def __init__(self, value: Any) -> None:
        super().__init__("length values cannot be negative", value=str(value))


class UnknownMeasureUnitError(LengthError):
    code = "UNKNOWN_MEASURE_UNIT"

    def __init__(self, value: str) -> None:
        super().__init__(f"unknown measure unit: {value}", value=value)


class RadiusError(DomainError):
    code = "INVALID_RADIUS"


class NegativeRadiusError(RadiusError):
    code = "NEGATIVE_RADIUS"

    def __init__(self, value: Any) -> None:
        super().__init__("radius must be positive", value=str(value))


class GaugeError(DomainError):
    code = "INVALID_GAUGE"


class NegativeRailsDistanceError(GaugeError):
    code = "NEGATIVE_RAILS_DISTANCE"

    def __init__(self, value: Any, unit: str) -> None:
        super().__init__(
            f"the distance between rails must be positive ({value} {unit})",
            value=str(value),
            unit=unit,
        )


class GaugeMismatchError(GaugeError):
    code = "GAUGE_VALUES_MISMATCH"

    def __init__(self, millimeters: Any, inches: Any) -> None:
        super().__init__(
            "the value in millimeters is not matching the one in inches",
            millimeters=str(millimeters),
            inches=str(inches),
        )


class LengthOverBuffersError(DomainError):
    code = "INVALID_LENGTH_OVER_BUFFERS"


class NonPositiveLengthOverBuffersError(LengthOverBuffersError):
    code = "NON_POSITIVE_LENGTH_OVER_BUFFERS"

    def __init__(self, value: Any) -> None:
        super().__init__("the length over buffers must be positive", value=str(value))


class LengthOverBuffersMismatchError(LengthOverBuffersError):
    code = "LENGTH_OVER_BUFFERS_MISMATCH"

    def __init__(self, millimeters: Any, inches: Any) -> None:
        super().__init__(
            "the value in millimeters is not matching the one in inches",
            millimeters=str(millimeters),
            inches=str(inches),
        )


# --- Scales ---


class RatioError(DomainError):
    code = "INVALID_RATIO"


class NonPositiveRatioError(RatioError):
    code = "NON_POSITIVE_RATIO"

    def __init__(self, value: Any) -> None:
        super().__init__(f"scale ratios must be positive (value: {value})", value=str(value))


class RatioOutOfRangeError(RatioError):
    code = "RATIO_OUT_OF_RANGE"

    def __init__(self, value: Any) -> None:
        super().__init__("scale ratios must be included in the 1-220 range", value=str(value))


class InvalidScaleError(DomainError):
    code = "INVALID_SCALE"

    def __init__(self, value: str) -> None:
        super().__init__("invalid scale", value=value)


# --- Text grammars ---


class InvalidEpochError(DomainError):
    code = "INVALID_EPOCH"

    def __init__(self, value: str) -> None:
        super().__init__("invalid epoch", value=value)


class InvalidDeliveryDateError(DomainError):
    code = "INVALID_DELIVERY_DATE"

    def __init__(self, value: str) -> None:
        super().__init__(f"could not parse delivery date: {value}", value=value)


# --- Money ---


class UnsupportedCurrencyError(DomainError):
    code = "UNSUPPORTED_CURRENCY"

    def __init__(self, currency_code: str) -> None:
        super().__init__(f"Unsupported currency code: {currency_code}", currency=currency_code)


class NegativeAmountError(DomainError):
    code = "NEGATIVE_AMOUNT"

    def __init__(self, amount: int) -> None:
        super().__init__(f"Negative monetary amount: {amount}", amount=amount)


class CurrencyMismatchError(DomainError):
    code = "CURRENCY_MISMATCH"

    def __init__(self, left: str, right: str) -> None:
        super().__init__(
            "Cannot combine monetary amounts with different currencies",
            left=left,
            right=right,
        )


class AmountOverflowError(DomainError):
    code = "AMOUNT_OVERFLOW"

    def __init__(self) -> None:
        super().__init__("Monetary amount overflow when adding")


class AmountOutOfStorageRangeError(DomainError):
    code = "AMOUNT_OUT_OF_STORAGE_RANGE"

    def __init__(self, amount: int) -> None:
        super().__init__(f"Monetary amount too large to store: {amount}", amount=amount)


# --- Purchases ---


class MissingSalePriceError(DomainError):
    code = "MISSING_SALE_PRICE"

    def __init__(self, purchase_id: str) -> None:
        super().__init__(
            f"sold purchase {purchase_id} has no sale price",
            purchase_id=purchase_id,
        )


class InvalidPurchaseRecordError(DomainError):
    code = "INVALID_PURCHASE_RECORD"

    def __init__(self, purchase_id: str, reason: str) -> None:
        super().__init__(
            f"purchase {purchase_id} is malformed: {reason}",
            purchase_id=purchase_id,
            reason=reason,
        )
