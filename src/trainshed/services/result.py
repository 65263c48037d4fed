"""Return types shared by every service operation.

Services never raise for expected failures: a rejected value, a missing
item or an unknown purchase kind all come back as a ``ServiceResult``
with ``ok=False`` and a :class:`ServiceError` whose ``code`` is stable.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

# Failure codes produced by the services.
INVALID_VALUE = "INVALID_VALUE"
NOT_FOUND = "NOT_FOUND"
ID_COLLISION = "ID_COLLISION"
MISSING_FIELD = "MISSING_FIELD"
UNKNOWN_KIND = "UNKNOWN_KIND"


class ServiceError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation named by ``op``.

    ``data`` holds the JSON-ready payload on success, ``warnings`` lists
    non-fatal notes (e.g. items skipped by a valuation) and ``meta``
    carries counts for list operations.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))
