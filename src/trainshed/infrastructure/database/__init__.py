"""SQLite database engine and schema via SQLAlchemy Core."""

from trainshed.infrastructure.database.engine import create_db_engine, init_database
from trainshed.infrastructure.database.schema import collection_items, metadata, purchase_infos

__all__ = [
    "collection_items",
    "create_db_engine",
    "init_database",
    "metadata",
    "purchase_infos",
]
