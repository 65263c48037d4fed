"""Shared pytest fixtures and test helpers for trainshed tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from trainshed.config.settings import TrainshedSettings
from trainshed.infrastructure.database.engine import init_database
from trainshed.infrastructure.store import Store


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's TRAINSHED_* environment out of the tests."""
    monkeypatch.delenv("TRAINSHED_CONFIG", raising=False)
    monkeypatch.delenv("TRAINSHED_DISPLAY__DEFAULT_CURRENCY", raising=False)
    monkeypatch.delenv("TRAINSHED_DATABASE__FILENAME", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "trainshed.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def store(tmp_path: Path) -> Iterator[Store]:
    """Store backed by a fresh database in a temp directory."""
    settings = TrainshedSettings.from_cli(data_root=tmp_path)
    s = Store(settings)
    try:
        yield s
    finally:
        s.close()


@pytest.fixture
def _isolated_shed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp directory so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_shed")`` on command test
    classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers (used across service and command test modules)
# ---------------------------------------------------------------------------


def add_item(store: Store, name: str = "BR 50", **kwargs: Any) -> dict[str, Any]:
    """Add an item via CollectionService, asserting success."""
    from trainshed.services.collection import CollectionService

    fields: dict[str, Any] = {
        "manufacturer": "Roco",
        "product_code": "72241",
        "scale": "H0",
    }
    fields.update(kwargs)
    result = CollectionService(store).add_item(name=name, **fields)
    assert result.ok, result.error
    return result.data["item"]
