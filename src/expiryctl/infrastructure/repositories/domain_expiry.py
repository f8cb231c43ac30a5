"""Repository for ``domain_expiry`` rows."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Engine

from expiryctl.domain.models import ExpiryRecord
from expiryctl.domain.thresholds import as_utc
from expiryctl.infrastructure.database.schema import domain_expiry

logger = logging.getLogger(__name__)


def _to_text(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def _from_text(value: str | None) -> datetime | None:
    if not value:
        return None
    try:
        return as_utc(datetime.fromisoformat(value))
    except ValueError:
        logger.warning("Ignoring unreadable timestamp %r in domain_expiry", value)
        return None


def _load_info(value: str | None) -> dict[str, str] | None:
    if not value:
        return None
    try:
        info = json.loads(value)
    except json.JSONDecodeError:
        logger.warning("Ignoring unreadable whois_info payload in domain_expiry")
        return None
    return info if isinstance(info, dict) else None


class DomainExpiryRepository:
    """Encapsulates SQL for per-domain expiry records."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    @staticmethod
    def _row_to_record(row: Any) -> ExpiryRecord:
        return ExpiryRecord(
            id=row["id"],
            domain=row["domain"],
            expiry=_from_text(row["expiry"]),
            last_check=_from_text(row["last_check"]),
            registry_info=_load_info(row["whois_info"]),
            last_notification_threshold=row["last_expiry_notification_sent"],
        )

    def find_by_domain(self, domain: str) -> ExpiryRecord | None:
        """Return the record for *domain*, or None if it was never stored."""
        stmt = select(domain_expiry).where(domain_expiry.c.domain == domain)
        with self._engine.connect() as conn:
            row = conn.execute(stmt).mappings().first()
        return self._row_to_record(row) if row is not None else None

    def list_all(self) -> list[ExpiryRecord]:
        stmt = select(domain_expiry).order_by(domain_expiry.c.domain)
        with self._engine.connect() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [self._row_to_record(row) for row in rows]

    def save(self, record: ExpiryRecord) -> ExpiryRecord:
        """Insert or update *record*, keyed on its domain.

        Sets ``record.id`` after the first write.
        """
        values: dict[str, Any] = {
            "expiry": _to_text(record.expiry),
            "last_check": _to_text(record.last_check),
            "last_expiry_notification_sent": record.last_notification_threshold,
            "whois_info": (
                json.dumps(record.registry_info) if record.registry_info is not None else None
            ),
        }
        stmt = (
            insert(domain_expiry)
            .values(domain=record.domain, **values)
            .on_conflict_do_update(index_elements=[domain_expiry.c.domain], set_=values)
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)
            if record.id is None:
                record.id = conn.execute(
                    select(domain_expiry.c.id).where(domain_expiry.c.domain == record.domain)
                ).scalar_one()
        return record
