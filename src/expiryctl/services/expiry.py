"""ExpiryStore — per-domain expiry state with a recheck throttle.

The registry is asked at most once per ``registry.recheck_days`` per
domain; between queries the stored expiry is served. Renewal detection
lives here too because it compares the stored expiry, before it is
overwritten, with the freshly extracted one.
"""

from __future__ import annotations

import logging
from datetime import datetime

from expiryctl.domain.extract import extract_expiry
from expiryctl.domain.models import ExpiryRecord
from expiryctl.domain.thresholds import whole_days_between
from expiryctl.services.base import BaseService

logger = logging.getLogger(__name__)


class ExpiryStore(BaseService):
    """Find, refresh, and persist :class:`ExpiryRecord` rows."""

    def find_or_create(self, domain: str) -> ExpiryRecord:
        """Return the stored record for *domain*, or a fresh unsaved one.

        Never queries the registry.
        """
        if not domain:
            msg = "domain must not be empty"
            raise ValueError(msg)
        record = self._workspace.records.find_by_domain(domain)
        if record is None:
            record = ExpiryRecord(domain=domain)
        return record

    def days_remaining(self, record: ExpiryRecord) -> int | None:
        """Whole days until ``record.expiry`` (negative once expired), or None."""
        if record.expiry is None:
            return None
        return whole_days_between(self._workspace.clock(), record.expiry)

    def check_expiry(self, domain: str) -> datetime | None:
        """Return the expiry date of *domain*, querying WHOIS when stale.

        A record checked less than ``recheck_days`` whole days ago returns
        its stored expiry without a query. Otherwise the registry is
        queried, the result stored, and the freshly extracted date
        returned; None means this query produced no usable date (the
        previously stored expiry is kept).
        """
        recheck_days = self._workspace.settings.registry.recheck_days

        with self._workspace.domain_locks.hold(domain):
            record = self.find_or_create(domain)
            now = self._workspace.clock()

            if (
                record.last_check is not None
                and whole_days_between(record.last_check, now) < recheck_days
            ):
                logger.debug("Expiry of %s already checked recently, not re-checking", domain)
                return record.expiry

            raw = self._workspace.registry.query(domain)
            extraction = extract_expiry(raw)
            expiry_date = extraction.expiry_date

            if expiry_date is not None:
                if record.expiry is None or expiry_date > record.expiry:
                    if record.last_notification_threshold is not None:
                        logger.info(
                            "%s renewed until %s, resetting notifications",
                            domain,
                            expiry_date.isoformat(),
                        )
                    record.last_notification_threshold = None
                record.expiry = expiry_date
            else:
                logger.debug("No expiry date found in registry response for %s", domain)

            record.last_check = now
            if raw is not None:
                record.registry_info = extraction.registry_info
            self._workspace.records.save(record)

        return expiry_date
