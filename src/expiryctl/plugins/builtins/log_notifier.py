"""Built-in ``log`` provider.

Writes each notification to the ``expiryctl.notify`` logger at WARNING so
it shows up without ``--verbose``. Useful on its own for cron jobs whose
output is mailed, and as the fallback provider in tests.
"""

from __future__ import annotations

import logging
from typing import Any

import pluggy

hookimpl = pluggy.HookimplMarker("expiryctl")

notify_logger = logging.getLogger("expiryctl.notify")

PROVIDER_NAME = "log"


class LogNotifierPlugin:
    """Deliver notifications by logging them."""

    @hookimpl
    def deliver_notification(
        self,
        provider: str,
        config: dict[str, Any],
        message: str,
    ) -> bool | None:
        if provider != PROVIDER_NAME:
            return None
        prefix = config.get("prefix")
        if prefix:
            message = f"{prefix} {message}"
        notify_logger.warning("%s", message)
        return True
