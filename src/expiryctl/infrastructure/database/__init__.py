"""SQLite database engine and schema via SQLAlchemy Core."""

from expiryctl.infrastructure.database.engine import create_db_engine, init_database
from expiryctl.infrastructure.database.schema import domain_expiry, metadata, settings

__all__ = [
    "create_db_engine",
    "domain_expiry",
    "init_database",
    "metadata",
    "settings",
]
