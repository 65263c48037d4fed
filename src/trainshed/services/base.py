"""BaseService and the domain-error boundary shared by all services.

Domain exceptions carry a structured ``code`` and ``detail``. At the
service boundary they are logged in full and then flattened into one
opaque ``INVALID_VALUE`` error, so interfaces never depend on the
internal error variants.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from trainshed.services.result import INVALID_VALUE, ServiceResult

if TYPE_CHECKING:
    from trainshed.domain.errors import DomainError
    from trainshed.infrastructure.store import Store

logger = logging.getLogger(__name__)


def domain_failure(op: str, exc: DomainError) -> ServiceResult:
    """Log *exc* with its structured detail, then return an opaque failure."""
    logger.info("%s rejected: %s %s", op, exc.code, exc.detail)
    return ServiceResult.failure(op, INVALID_VALUE, str(exc))


class BaseService:
    """Base for services that read or write the collection database.

    Services own their transaction boundaries via ``self._store.transaction()``.
    """

    def __init__(self, store: Store) -> None:
        self._store = store
