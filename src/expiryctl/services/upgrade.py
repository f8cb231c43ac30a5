"""UpgradeService — database migration with Alembic.

Pipeline: BACKUP → MIGRATE → REPORT
"""

from __future__ import annotations

import logging
import shutil
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from expiryctl.infrastructure.database.engine import sqlite_url
from expiryctl.infrastructure.database.migrations import build_config
from expiryctl.services.base import BaseService
from expiryctl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class UpgradeService(BaseService):
    """Handles database schema migrations via Alembic."""

    def _db_url(self) -> str:
        return sqlite_url(self._workspace.settings.db_path)

    def _backup_db(self) -> Path:
        """Copy the database file into ``backups/`` next to it."""
        db_path = self._workspace.settings.db_path
        backup_dir = db_path.parent / "backups"
        backup_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
        backup_path = backup_dir / f"{db_path.stem}-{stamp}{db_path.suffix}"
        shutil.copy2(db_path, backup_path)
        logger.debug("Backed up %s to %s", db_path, backup_path)
        return backup_path

    def check_pending(self) -> ServiceResult:
        """List pending migrations without applying."""
        op = "upgrade"

        try:
            cfg = build_config(self._db_url())
            script = ScriptDirectory.from_config(cfg)
            head = script.get_current_head()

            with self._workspace.engine.connect() as conn:
                ctx = MigrationContext.configure(conn)
                current = ctx.get_current_revision()

            # Collect pending revisions by walking from head down to current
            pending: list[dict[str, Any]] = []
            if current != head and head is not None:
                rev_obj = script.get_revision(head)
                while rev_obj is not None and rev_obj.revision != current:
                    pending.append(
                        {
                            "revision": rev_obj.revision,
                            "description": rev_obj.doc or "",
                        }
                    )
                    down = rev_obj.down_revision
                    if down is None:
                        break
                    rev_obj = script.get_revision(str(down))

            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "pending_count": len(pending),
                    "pending": pending,
                    "current": current,
                    "head": head,
                },
            )
        except Exception as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CHECK_FAILED",
                    message=f"Failed to check migrations: {exc}",
                ),
            )

    def apply(self) -> ServiceResult:
        """BACKUP → MIGRATE → REPORT pipeline."""
        op = "upgrade"

        check_result = self.check_pending()
        if not check_result.ok:
            return check_result

        pending_count = check_result.data["pending_count"]
        if pending_count == 0:
            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "applied_count": 0,
                    "current": check_result.data["head"],
                    "message": "Database is already up to date",
                },
            )

        try:
            backup_path = self._backup_db()
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="BACKUP_FAILED", message=f"Backup failed: {exc}"),
            )

        try:
            command.upgrade(build_config(self._db_url()), "head")
        except Exception as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="MIGRATION_FAILED",
                    message=f"Migration failed: {exc}. Backup at: {backup_path}",
                    detail={"backup_path": str(backup_path)},
                ),
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "applied_count": pending_count,
                "current": check_result.data["head"],
                "backup_path": str(backup_path),
            },
        )

    def downgrade(self, revision: str) -> ServiceResult:
        """Revert the schema to *revision* after backing up the database."""
        op = "downgrade"

        try:
            backup_path = self._backup_db()
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="BACKUP_FAILED", message=f"Backup failed: {exc}"),
            )

        try:
            command.downgrade(build_config(self._db_url()), revision)
        except Exception as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="MIGRATION_FAILED",
                    message=f"Downgrade failed: {exc}. Backup at: {backup_path}",
                    detail={"backup_path": str(backup_path)},
                ),
            )

        with self._workspace.engine.connect() as conn:
            current = MigrationContext.configure(conn).get_current_revision()

        return ServiceResult(
            ok=True,
            op=op,
            data={"current": current, "backup_path": str(backup_path)},
        )
