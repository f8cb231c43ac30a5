"""Monitor types — one check per monitor tick, dispatched on the type tag.

A monitor type implements :class:`MonitorCheck`: it sets the heartbeat
status and message on success and raises on failure. The caller turns a
raised error into a DOWN heartbeat.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from expiryctl.domain.errors import DomainExpired, ExpiryUnavailable
from expiryctl.domain.normalize import check_support
from expiryctl.domain.types import HeartbeatStatus, MonitorKind
from expiryctl.services.expiry import ExpiryStore

if TYPE_CHECKING:
    from expiryctl.domain.models import Heartbeat, Monitor
    from expiryctl.infrastructure.workspace import Workspace


class MonitorCheck(Protocol):
    """A monitor variant's check."""

    name: str

    def check(self, monitor: Monitor, heartbeat: Heartbeat) -> None: ...


class DomainExpiryMonitorType:
    """Check that a monitor's domain registration has not expired.

    Raises:
        UnsupportedError: the monitor has no checkable domain.
        ExpiryUnavailable: no expiry date could be resolved.
        DomainExpired: the expiry date has passed.
    """

    name = MonitorKind.DOMAIN_EXPIRY.value

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace
        self._store = ExpiryStore(workspace)

    def check(self, monitor: Monitor, heartbeat: Heartbeat) -> None:
        support = check_support(monitor, extractor=self._workspace.suffix_extractor)
        expiry_date = self._store.check_expiry(support.domain)
        if expiry_date is None:
            raise ExpiryUnavailable(support.domain)

        record = self._store.find_or_create(support.domain)
        days_remaining = self._store.days_remaining(record)
        if days_remaining is None:
            raise ExpiryUnavailable(support.domain)
        if days_remaining < 0:
            raise DomainExpired(support.domain, abs(days_remaining))

        heartbeat.status = HeartbeatStatus.UP
        heartbeat.msg = (
            f"{support.domain} expires in {days_remaining} days ({expiry_date.isoformat()})"
        )


MONITOR_TYPES: dict[str, type[DomainExpiryMonitorType]] = {
    DomainExpiryMonitorType.name: DomainExpiryMonitorType,
}


def get_monitor_check(monitor_type: str, workspace: Workspace) -> MonitorCheck:
    """Instantiate the :class:`MonitorCheck` for *monitor_type*.

    Every monitor with a hostname or URL can have its domain expiry
    checked, so types without a dedicated check get the domain expiry
    check; its support check rejects types that carry no domain.
    """
    check_cls = MONITOR_TYPES.get(monitor_type, DomainExpiryMonitorType)
    return check_cls(workspace)
