"""Store: owns the database engine and hands out transactions.

The Store is the single dependency injected into every service that
touches persistent data. It is constructed lazily by the CLI context from
:class:`TrainshedSettings`.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

from trainshed.infrastructure.database.engine import init_database
from trainshed.infrastructure.repositories.collection import CollectionRepository

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from sqlalchemy import Connection
    from sqlalchemy.engine import Engine

    from trainshed.config.settings import TrainshedSettings

logger = logging.getLogger(__name__)


class Store:
    """Database access for one collection file."""

    def __init__(self, settings: TrainshedSettings) -> None:
        self._settings = settings
        self._engine: Engine = init_database(self.path)
        self._items = CollectionRepository(self._engine)

    @property
    def path(self) -> Path:
        return self._settings.database_path

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def settings(self) -> TrainshedSettings:
        return self._settings

    @property
    def items(self) -> CollectionRepository:
        return self._items

    @contextmanager
    def transaction(self) -> Iterator[Connection]:
        """Yield a connection inside a transaction.

        Commits on success, rolls back if the block raises.
        """
        with self._engine.begin() as conn:
            yield conn

    def close(self) -> None:
        self._engine.dispose()
        logger.debug("store closed: %s", self.path)
