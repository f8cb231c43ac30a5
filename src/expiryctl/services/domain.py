"""DomainService — CLI-facing domain expiry operations.

Wraps the support check, the monitor tick, notifications, and record
inspection into :class:`ServiceResult` values. A whole tick (expiry check
followed by the notification decision) holds the per-domain lock, so two
concurrent ticks for monitors sharing a domain cannot both query the
registry or both send the same threshold.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from expiryctl.domain.errors import DomainExpired, MonitorCheckFailed, UnsupportedError
from expiryctl.domain.models import Heartbeat
from expiryctl.domain.normalize import check_support
from expiryctl.domain.types import HeartbeatStatus
from expiryctl.services.base import BaseService
from expiryctl.services.expiry import ExpiryStore
from expiryctl.services.monitor import get_monitor_check
from expiryctl.services.notifications import NotificationEngine
from expiryctl.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from expiryctl.domain.models import ExpiryRecord, Monitor, NotificationProvider
    from expiryctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


def _unsupported_result(op: str, exc: UnsupportedError) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=exc.code, message=str(exc), detail=exc.to_dict()),
    )


def record_to_dict(record: ExpiryRecord, days_remaining: int | None) -> dict[str, Any]:
    return {
        "domain": record.domain,
        "expiry": record.expiry.isoformat() if record.expiry else None,
        "days_remaining": days_remaining,
        "last_check": record.last_check.isoformat() if record.last_check else None,
        "last_notification_threshold": record.last_notification_threshold,
        "whois_info": record.registry_info,
    }


class DomainService(BaseService):
    """Support checks, monitor ticks, and record inspection."""

    def __init__(
        self,
        workspace: Workspace,
        *,
        notifications: NotificationEngine | None = None,
    ) -> None:
        super().__init__(workspace)
        self._store = ExpiryStore(workspace)
        self._notifications = notifications or NotificationEngine(workspace)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def support(self, monitor: Monitor) -> ServiceResult:
        """Report the registrable domain and TLD of *monitor*'s target."""
        try:
            support = check_support(monitor, extractor=self._workspace.suffix_extractor)
        except UnsupportedError as exc:
            return _unsupported_result("support", exc)
        return ServiceResult(ok=True, op="support", data=support.model_dump())

    def check(
        self,
        monitor: Monitor,
        *,
        providers: Sequence[NotificationProvider] | None = None,
        notify: bool = True,
    ) -> ServiceResult:
        """Run one monitor tick: expiry check, heartbeat, notifications."""
        op = "check"
        try:
            support = check_support(monitor, extractor=self._workspace.suffix_extractor)
        except UnsupportedError as exc:
            return _unsupported_result(op, exc)

        if providers is None:
            providers = self._workspace.settings.notifications.providers

        heartbeat = Heartbeat()
        failure: MonitorCheckFailed | None = None
        sent: int | None = None
        warnings: list[str] = []

        with self._workspace.domain_locks.hold(support.domain):
            try:
                get_monitor_check(monitor.type, self._workspace).check(monitor, heartbeat)
            except MonitorCheckFailed as exc:
                failure = exc
                heartbeat.status = HeartbeatStatus.DOWN
                heartbeat.msg = str(exc)

            # Expired domains still get warnings; unknown expiry does not.
            if notify and (failure is None or isinstance(failure, DomainExpired)):
                sent = self._notifications.send_notifications(support.domain, providers)

            record = self._store.find_or_create(support.domain)
            days_remaining = self._store.days_remaining(record)

        self._dispatch_post_check(support.domain, record, days_remaining, heartbeat, warnings)

        data: dict[str, Any] = {
            "monitor": monitor.name,
            "domain": support.domain,
            "tld": support.tld,
            "status": heartbeat.status.value,
            "message": heartbeat.msg,
            "expiry": record.expiry.isoformat() if record.expiry else None,
            "days_remaining": days_remaining,
            "notification_sent": sent,
        }
        if failure is not None:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                warnings=warnings,
                error=ServiceError(code=failure.code, message=str(failure), detail=data),
            )
        return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

    def run(
        self,
        monitors: Sequence[Monitor],
        *,
        providers: Sequence[NotificationProvider] | None = None,
        notify: bool = True,
    ) -> ServiceResult:
        """Tick every monitor concurrently; fails if any monitor is not UP."""
        op = "run"
        workers = self._workspace.settings.runner.max_workers
        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(
                executor.map(
                    lambda m: self.check(m, providers=providers, notify=notify),
                    monitors,
                )
            )

        rows: list[dict[str, Any]] = []
        for result in results:
            row = {"ok": result.ok, **result.data}
            if result.error is not None:
                row["error"] = result.error.message
            rows.append(row)
        failed = sum(1 for r in results if not r.ok)
        data = {"results": rows, "count": len(results), "failed": failed}
        if failed:
            return ServiceResult(
                ok=False,
                op=op,
                data=data,
                error=ServiceError(
                    code="CHECKS_FAILED",
                    message=f"{failed} of {len(results)} monitors failed",
                ),
            )
        return ServiceResult(ok=True, op=op, data=data)

    def show(self, domain: str) -> ServiceResult:
        """Show the stored record for *domain*, including WHOIS attributes."""
        op = "show"
        record = self._workspace.records.find_by_domain(domain)
        if record is None:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="NOT_FOUND",
                    message=f"No expiry record for {domain}",
                    detail={"domain": domain},
                ),
            )
        return ServiceResult(
            ok=True,
            op=op,
            data=record_to_dict(record, self._store.days_remaining(record)),
        )

    def list_records(self) -> ServiceResult:
        """List every stored record (without WHOIS attributes)."""
        items = []
        for record in self._workspace.records.list_all():
            row = record_to_dict(record, self._store.days_remaining(record))
            row.pop("whois_info")
            items.append(row)
        return ServiceResult(ok=True, op="list", data={"items": items, "count": len(items)})

    def thresholds(self, days: Sequence[int] | None = None) -> ServiceResult:
        """Read, or replace with *days*, the notification thresholds."""
        op = "thresholds"
        if days is not None:
            if not days or any(d < 0 for d in days):
                return ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="INVALID_THRESHOLDS",
                        message="Thresholds must be a non-empty list of non-negative days",
                        detail={"days": list(days)},
                    ),
                )
            current = self._notifications.set_notify_days(days)
        else:
            current = sorted(self._notifications.notify_days())
        return ServiceResult(ok=True, op=op, data={"days": current})

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _dispatch_post_check(
        self,
        domain: str,
        record: ExpiryRecord,
        days_remaining: int | None,
        heartbeat: Heartbeat,
        warnings: list[str],
    ) -> None:
        """Fire the ``post_domain_check`` hook.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        try:
            self._workspace.plugin_manager.hook.post_domain_check(
                domain=domain,
                expiry=record.expiry.isoformat() if record.expiry else None,
                days_remaining=days_remaining,
                status=heartbeat.status.value,
            )
        except Exception:
            logger.debug("post_domain_check hook failed for %s", domain, exc_info=True)
            warnings.append(f"post_domain_check hook failed for {domain}")
