"""Pluggy hook specifications for expiryctl notification delivery."""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("expiryctl")


class ExpiryctlHookSpec:
    """Hook specifications for the expiryctl plugin system."""

    @hookspec(firstresult=True)
    def deliver_notification(
        self,
        provider: str,
        config: dict[str, Any],
        message: str,
    ) -> bool | None:
        """Deliver *message* through the provider named *provider*.

        Return True on success, False on a handled failure, or None when
        this plugin does not implement *provider*. Raising is treated as a
        failed delivery.
        """

    @hookspec
    def post_domain_check(
        self,
        domain: str,
        expiry: str | None,
        days_remaining: int | None,
        status: str,
    ) -> None:
        """Called after every monitor tick that resolved a domain."""
