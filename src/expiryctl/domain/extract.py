"""Expiry date extraction from raw WHOIS responses.

WHOIS is not uniform across registries: each one formats its answer
differently, but nearly all of them emit ``key: value`` lines. Every pair
is kept in ``registry_info`` for diagnostics; the expiry date is taken from
the first pair whose key is one of :data:`WHOIS_EXPIRY_KEYS`. Field names
are matched exactly and never normalized.
"""

from __future__ import annotations

from datetime import UTC, datetime

from dateutil import parser as date_parser

from expiryctl.domain.models import Extraction

WHOIS_EXPIRY_KEYS: frozenset[str] = frozenset(
    {
        "Registrar Registration Expiration Date",
        "Registry Expiry Date",
        "Expiration Time",
        "paid-till",
    }
)

_COMMENT_PREFIXES = ("%", "#", ">>>")

# Distinct in every date field; see parse_expiry_value.
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def parse_whois_pairs(raw: str) -> list[tuple[str, str]]:
    """Split a WHOIS response into ordered ``(attribute, value)`` pairs.

    Comment lines, the ``>>> Last update ... <<<`` footer, and lines without
    a colon are skipped. Only the first colon separates key from value, so
    timestamps and URLs in values stay intact.

    Examples:
        >>> parse_whois_pairs("Domain Name: EXAMPLE.COM\\n% comment\\nRegistry Expiry Date: 2030-05-01T00:00:00Z")
        [('Domain Name', 'EXAMPLE.COM'), ('Registry Expiry Date', '2030-05-01T00:00:00Z')]
    """
    pairs: list[tuple[str, str]] = []
    for line in raw.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(_COMMENT_PREFIXES):
            continue
        key, sep, value = stripped.partition(":")
        key = key.strip()
        if not sep or not key:
            continue
        pairs.append((key, value.strip()))
    return pairs


def parse_expiry_value(value: str) -> datetime | None:
    """Parse a WHOIS date value as an aware UTC datetime, or None.

    Dates without an offset are taken to be UTC. The value must name a
    full calendar date: dateutil fills missing fields from its default, so
    the value is parsed against two defaults that differ in every date
    field and rejected when the results disagree.
    """
    if not value:
        return None
    try:
        parsed = date_parser.parse(value, default=_DEFAULT_A)
        check = date_parser.parse(value, default=_DEFAULT_B)
    except (ValueError, OverflowError):
        return None
    if parsed.date() != check.date():
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def extract_expiry(raw: str | None) -> Extraction:
    """Extract the expiry date and all attributes from a WHOIS response.

    Never raises: an empty response, no recognized expiry field, or an
    unparseable date all yield ``expiry_date=None``.
    """
    if not raw:
        return Extraction(expiry_date=None, registry_info={})

    registry_info: dict[str, str] = {}
    expiry_value: str | None = None
    for key, value in parse_whois_pairs(raw):
        if expiry_value is None and key in WHOIS_EXPIRY_KEYS:
            expiry_value = value
        registry_info[key] = value

    expiry_date = parse_expiry_value(expiry_value) if expiry_value is not None else None
    return Extraction(expiry_date=expiry_date, registry_info=registry_info)
