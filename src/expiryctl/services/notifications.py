"""NotificationEngine — threshold-based expiry warnings without duplicates.

Each call sends at most one notification: the smallest configured
threshold that is due and not yet covered by an earlier send. The sent
threshold is persisted on the record and only cleared by renewal
detection in :class:`~expiryctl.services.expiry.ExpiryStore`.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from expiryctl.domain.thresholds import coerce_thresholds, eligible_thresholds
from expiryctl.services.base import BaseService
from expiryctl.services.expiry import ExpiryStore

if TYPE_CHECKING:
    from expiryctl.domain.models import NotificationProvider
    from expiryctl.infrastructure.workspace import Workspace
    from expiryctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)

NOTIFY_DAYS_SETTING = "domainExpiryNotifyDays"
NOTIFY_DAYS_CATEGORY = "general"


def expiry_message(domain: str, days_remaining: int) -> str:
    if days_remaining < 0:
        days_ago = abs(days_remaining)
        unit = "day" if days_ago == 1 else "days"
        return f"Domain name {domain} expired {days_ago} {unit} ago"
    return f"Domain name {domain} will expire in {days_remaining} days"


class NotificationDispatcher:
    """Deliver a message to one provider through the plugin hook."""

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager

    def send(self, provider: NotificationProvider, message: str) -> bool:
        """Return True if a plugin delivered *message* for *provider*.

        Exceptions raised by the plugin propagate to the caller.
        """
        delivered = self._pm.hook.deliver_notification(
            provider=provider.name,
            config=dict(provider.config),
            message=message,
        )
        if delivered is None:
            logger.error("No plugin delivers notifications for provider %s", provider.name)
            return False
        return bool(delivered)


class NotificationEngine(BaseService):
    """Decide whether an expiry warning is due and send it."""

    def __init__(
        self,
        workspace: Workspace,
        *,
        dispatcher: NotificationDispatcher | None = None,
    ) -> None:
        super().__init__(workspace)
        self._store = ExpiryStore(workspace)
        self._dispatcher = dispatcher

    @property
    def dispatcher(self) -> NotificationDispatcher:
        if self._dispatcher is None:
            self._dispatcher = NotificationDispatcher(self._workspace.plugin_manager)
        return self._dispatcher

    def notify_days(self) -> list[int]:
        """Configured thresholds in days.

        A missing or malformed setting is reset to the configured default
        (``[7, 14, 21]`` unless overridden) and that default is persisted.
        """
        store = self._workspace.settings_store
        days = coerce_thresholds(store.get(NOTIFY_DAYS_SETTING))
        if days is None:
            days = list(self._workspace.settings.notifications.default_days)
            store.set(NOTIFY_DAYS_SETTING, days, NOTIFY_DAYS_CATEGORY)
        return days

    def set_notify_days(self, days: Sequence[int]) -> list[int]:
        """Persist a new threshold list, sorted and de-duplicated."""
        cleaned = sorted(set(days))
        self._workspace.settings_store.set(NOTIFY_DAYS_SETTING, cleaned, NOTIFY_DAYS_CATEGORY)
        return cleaned

    def send_notifications(
        self,
        domain: str,
        providers: Sequence[NotificationProvider],
    ) -> int | None:
        """Send the expiry warning for *domain* if a threshold is due.

        Returns the threshold (in days) that was sent, or None when nothing
        was sent.
        """
        with self._workspace.domain_locks.hold(domain):
            record = self._store.find_or_create(domain)
            if not providers:
                logger.debug("No notification providers, not sending expiry notification")
                return None

            days_remaining = self._store.days_remaining(record)
            if days_remaining is None:
                # Callers only notify after a successful check.
                logger.warning(
                    "No valid expiry date for %s, skipping expiry notification",
                    domain,
                )
                return None

            logger.debug("%s expires in %d days", domain, days_remaining)
            last_sent = record.last_notification_threshold
            thresholds = self.notify_days()

            for target in eligible_thresholds(days_remaining, thresholds, last_sent):
                if self._send_to_providers(domain, days_remaining, target, providers):
                    record.last_notification_threshold = target
                    self._workspace.records.save(record)
                    return target

            logger.debug(
                "No expiry notification due for %s (%d days left, last sent at %s)",
                domain,
                days_remaining,
                last_sent,
            )
            return None

    def _send_to_providers(
        self,
        domain: str,
        days_remaining: int,
        target: int,
        providers: Sequence[NotificationProvider],
    ) -> bool:
        """Send to every provider; True if at least one delivered."""
        logger.debug("Sending expiry notification for %s on %d day deadline", domain, target)
        message = expiry_message(domain, days_remaining)
        sent = False
        for provider in providers:
            try:
                if self.dispatcher.send(provider, message):
                    sent = True
                else:
                    logger.error("Provider %s did not deliver notification", provider.name)
            except Exception:
                logger.error(
                    "Cannot send expiry notification for %s to %s",
                    domain,
                    provider.name,
                    exc_info=True,
                )
        return sent
