"""Shared helpers for value types: decimal coercion and pydantic hooks.

Value types are plain immutable classes, not pydantic models. They plug
into pydantic through :func:`value_schema`, which accepts either an
existing instance or raw input (number or text) and re-runs the type's
own validating constructor on the raw input.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic_core import core_schema

from trainshed.domain.errors import InvalidNumberError


def as_decimal(value: Any) -> Decimal:
    """Coerce *value* to a finite ``Decimal``.

    Floats go through ``repr`` so ``43.5`` becomes ``Decimal("43.5")`` rather
    than its binary expansion. Anything else raises InvalidNumberError.
    """
    if isinstance(value, bool):
        raise InvalidNumberError(value)
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except InvalidOperation as exc:
            raise InvalidNumberError(value) from exc
    else:
        raise InvalidNumberError(value)
    if not result.is_finite():
        raise InvalidNumberError(value)
    return result


def value_schema(
    cls: type,
    parse: Callable[[Any], Any],
    dump: Callable[[Any], Any],
) -> core_schema.CoreSchema:
    """Build a core schema for a self-validating value type.

    Instances of *cls* pass through untouched; any other input is handed to
    *parse*, whose domain errors surface as pydantic validation errors.
    JSON serialization uses *dump*; Python-mode dumps keep the instance.
    """

    def validate(value: Any) -> Any:
        if isinstance(value, cls):
            return value
        return parse(value)

    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(dump, when_used="json"),
    )
