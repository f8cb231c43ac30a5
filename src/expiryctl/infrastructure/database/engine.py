"""Database engine setup for SQLite with WAL mode.

Several monitor checks may run in worker threads at once, so WAL mode is
enabled for concurrent readers and a busy timeout lets writers queue
instead of failing on a locked database.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine

from expiryctl.infrastructure.database.schema import domain_expiry, metadata


def sqlite_url(db_path: Path) -> str:
    return f"sqlite:///{db_path}"


def set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def create_db_engine(db_path: Path) -> Engine:
    """Create a SQLite engine with WAL mode enabled."""
    engine = create_engine(sqlite_url(db_path), echo=False)
    event.listen(engine, "connect", set_sqlite_pragma)
    return engine


def init_database(db_path: Path, *, migrate: bool = True) -> Engine:
    """Initialize the database at *db_path*.

    A fresh database gets every table from :data:`schema.metadata` and is
    stamped at the Alembic head revision. An existing database is brought
    to head with Alembic when *migrate* is True; with ``migrate=False`` it
    is opened as-is (used by ``expiryctl upgrade`` to inspect and migrate
    it explicitly).

    Idempotent — safe to call on an existing database.

    Returns the engine ready for use.
    """
    from expiryctl.infrastructure.database.migrations import stamp_head, upgrade_head

    db_path.parent.mkdir(parents=True, exist_ok=True)
    engine = create_db_engine(db_path)

    fresh = domain_expiry.name not in inspect(engine).get_table_names()
    if fresh:
        metadata.create_all(engine)
        stamp_head(sqlite_url(db_path))
    elif migrate:
        upgrade_head(sqlite_url(db_path))
    return engine
