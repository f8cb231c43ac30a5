"""Monitor target → registrable domain.

Targets are whatever the user typed into a monitor: full URLs, bare
hostnames, host:port pairs, IP literals, or half-typed names. The public
suffix list (via tldextract) splits a hostname into its registrable domain
and suffix.
"""

from __future__ import annotations

import functools
import ipaddress
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import tldextract

from expiryctl.domain.errors import (
    MissingTarget,
    SuffixTooShort,
    TargetIsIP,
    UnsupportedMonitorType,
)
from expiryctl.domain.models import DomainSupport
from expiryctl.domain.types import DOMAIN_TARGET_FIELDS

if TYPE_CHECKING:
    from expiryctl.domain.models import Monitor

# No one-letter public suffix exists.
MIN_SUFFIX_LENGTH = 2


def make_suffix_extractor(
    *, fetch_remote: bool = False, cache_dir: str | None = None
) -> tldextract.TLDExtract:
    """Build a public-suffix extractor.

    With ``fetch_remote=False`` only the suffix-list snapshot bundled with
    tldextract is used, so lookups never touch the network.
    """
    if fetch_remote:
        return tldextract.TLDExtract(cache_dir=cache_dir)
    return tldextract.TLDExtract(cache_dir=cache_dir, suffix_list_urls=())


@functools.cache
def default_suffix_extractor() -> tldextract.TLDExtract:
    return make_suffix_extractor()


def normalize_domain(raw: str | None) -> str:
    """Return the lowercased hostname of *raw*, a URL or a bare host.

    Bare hosts have no scheme, so a second parse with ``http://`` prepended
    is tried when the first yields no host. Returns ``""`` when nothing
    usable is found.

    Examples:
        >>> normalize_domain("https://www.example.com/path")
        'www.example.com'
        >>> normalize_domain("example.com:8080")
        'example.com'
        >>> normalize_domain("")
        ''
    """
    if not raw:
        return ""
    value = raw.strip()
    for candidate in (value, f"http://{value}"):
        try:
            host = urlsplit(candidate).hostname
        except ValueError:
            continue
        if host:
            return host
    return ""


def is_ip_address(host: str) -> bool:
    try:
        ipaddress.ip_address(host.strip("[]"))
    except ValueError:
        return False
    return True


def split_registrable(
    hostname: str,
    *,
    extractor: tldextract.TLDExtract | None = None,
) -> tuple[str, str]:
    """Split *hostname* into its registrable label and public suffix.

    A suffix missing from the suffix list falls back to the implicit
    ``*`` rule: the last label is the suffix.

    Examples:
        >>> split_registrable("www.example.co.uk")
        ('example', 'co.uk')
        >>> split_registrable("myhost.internal")
        ('myhost', 'internal')
    """
    parts = (extractor or default_suffix_extractor())(hostname)
    if parts.suffix:
        return parts.domain, parts.suffix
    labels = [label for label in hostname.strip(".").split(".") if label]
    if not labels:
        return "", ""
    return (labels[-2] if len(labels) > 1 else ""), labels[-1]


def derive_support(
    monitor_type: str,
    target: Any,
    *,
    extractor: tldextract.TLDExtract | None = None,
) -> DomainSupport:
    """Resolve the registrable domain and root TLD of a monitor target.

    Raises:
        UnsupportedMonitorType: *monitor_type* has no domain-bearing field.
        MissingTarget: *target* is empty, not a string, or has no
            registrable part (e.g. a bare public suffix such as ``co.uk``).
        TargetIsIP: the target host is an IP literal.
        SuffixTooShort: the public suffix is shorter than two characters,
            which is what a hostname looks like while it is still being typed.
    """
    if monitor_type not in DOMAIN_TARGET_FIELDS:
        raise UnsupportedMonitorType(monitor_type=monitor_type)
    if not isinstance(target, str) or not target.strip():
        raise MissingTarget()

    hostname = normalize_domain(target) or target.strip()
    if is_ip_address(hostname):
        raise TargetIsIP(hostname=hostname.strip("[]"))

    domain, suffix = split_registrable(hostname, extractor=extractor)
    if len(suffix) < MIN_SUFFIX_LENGTH:
        raise SuffixTooShort(public_suffix=suffix)
    if not domain:
        raise MissingTarget(hostname=hostname)

    return DomainSupport(
        domain=f"{domain}.{suffix}",
        tld=suffix.rsplit(".", 1)[-1],
    )


def check_support(
    monitor: Monitor,
    *,
    extractor: tldextract.TLDExtract | None = None,
) -> DomainSupport:
    """:func:`derive_support` for a monitor, reading its type-specific target field."""
    field_name = DOMAIN_TARGET_FIELDS.get(monitor.type)
    if field_name is None:
        raise UnsupportedMonitorType(monitor_type=monitor.type)
    return derive_support(monitor.type, monitor.target_for(field_name), extractor=extractor)
