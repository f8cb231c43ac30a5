"""Typed failures raised by the domain expiry checks.

Configuration errors are user-facing: they carry a translation ``key`` and
the ``params`` needed to render it, so the UI can localize them. They are
expected while a user is still editing a monitor and are never logged as
warnings.
"""

from __future__ import annotations

from typing import Any


class TranslatableError(Exception):
    """An error whose message is looked up by ``key`` and rendered with ``params``."""

    key: str = "domain_expiry_error"
    template: str = "Domain expiry check failed"

    def __init__(self, **params: Any) -> None:
        self.params = params
        super().__init__(self.template.format(**params))

    def to_dict(self) -> dict[str, Any]:
        return {"key": self.key, "params": self.params, "message": str(self)}


class UnsupportedError(TranslatableError):
    """Domain expiry cannot be checked for this monitor (yet)."""

    code: str = "UNSUPPORTED"


class UnsupportedMonitorType(UnsupportedError):
    key = "domain_expiry_unsupported_monitor_type"
    template = "Monitor type {monitor_type!r} has no domain to check"
    code = "UNSUPPORTED_MONITOR_TYPE"


class MissingTarget(UnsupportedError):
    key = "domain_expiry_unsupported_missing_target"
    template = "Monitor has no hostname or URL to derive a domain from"
    code = "MISSING_TARGET"


class TargetIsIP(UnsupportedError):
    key = "domain_expiry_unsupported_is_ip"
    template = "{hostname} is an IP address; IP addresses do not expire"
    code = "TARGET_IS_IP"


class SuffixTooShort(UnsupportedError):
    key = "domain_expiry_public_suffix_too_short"
    template = "Public suffix {public_suffix!r} is too short"
    code = "SUFFIX_TOO_SHORT"


class MonitorCheckFailed(Exception):
    """The monitor tick itself failed; the heartbeat goes DOWN."""

    code: str = "CHECK_FAILED"


class ExpiryUnavailable(MonitorCheckFailed):
    code = "EXPIRY_UNAVAILABLE"

    def __init__(self, domain: str) -> None:
        self.domain = domain
        super().__init__(f"No registry expiry date was found for domain {domain}")


class DomainExpired(MonitorCheckFailed):
    code = "DOMAIN_EXPIRED"

    def __init__(self, domain: str, days_ago: int) -> None:
        self.domain = domain
        self.days_ago = days_ago
        unit = "day" if days_ago == 1 else "days"
        super().__init__(f"Domain {domain} expired {days_ago} {unit} ago")
