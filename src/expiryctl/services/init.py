"""InitService — create the expiry database at the head revision."""

from __future__ import annotations

from typing import TYPE_CHECKING

from alembic.runtime.migration import MigrationContext
from sqlalchemy.exc import SQLAlchemyError

from expiryctl.infrastructure.database.engine import init_database
from expiryctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from expiryctl.config.settings import ExpirySettings


class InitService:
    """Database bootstrap; runs before any Workspace exists."""

    @staticmethod
    def init_database(settings: ExpirySettings) -> ServiceResult:
        """Create (or migrate) the database at ``settings.db_path``.

        Idempotent: an existing database is upgraded to head and reported
        with ``created=False``.
        """
        op = "init"
        db_path = settings.db_path
        existed = db_path.exists()
        try:
            engine = init_database(db_path)
        except (OSError, SQLAlchemyError) as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INIT_FAILED",
                    message=f"Cannot initialize database at {db_path}: {exc}",
                    detail={"db_path": str(db_path)},
                ),
            )
        try:
            with engine.connect() as conn:
                revision = MigrationContext.configure(conn).get_current_revision()
        finally:
            engine.dispose()

        return ServiceResult(
            ok=True,
            op=op,
            data={"db_path": str(db_path), "revision": revision, "created": not existed},
        )
