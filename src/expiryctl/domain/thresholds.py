"""Day arithmetic and notification-threshold rules.

Thresholds are evaluated smallest first so that a single check sends at
most one notification: the tightest warning window newly crossed. A sent
threshold suppresses itself and every larger one until the domain is
renewed; a smaller threshold is still sent once it is crossed.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from typing import Any

DEFAULT_NOTIFY_DAYS: tuple[int, ...] = (7, 14, 21)

_SECONDS_PER_DAY = 86400


def as_utc(value: datetime) -> datetime:
    """Return *value* as an aware UTC datetime (naive values are taken as UTC)."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def whole_days_between(start: datetime, end: datetime) -> int:
    """Whole days from *start* to *end*, truncated toward zero.

    Examples:
        >>> whole_days_between(datetime(2030, 4, 20, tzinfo=UTC), datetime(2030, 5, 1, tzinfo=UTC))
        11
        >>> whole_days_between(datetime(2030, 4, 20, 12, tzinfo=UTC), datetime(2030, 4, 20, tzinfo=UTC))
        0
    """
    delta = as_utc(end) - as_utc(start)
    return math.trunc(delta.total_seconds() / _SECONDS_PER_DAY)


def coerce_thresholds(value: Any) -> list[int] | None:
    """Validate a stored threshold setting; None when it is missing or malformed."""
    if not isinstance(value, list):
        return None
    days: list[int] = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int):
            return None
        days.append(item)
    return days


def eligible_thresholds(
    days_remaining: int,
    thresholds: list[int],
    last_sent: int | None,
) -> list[int]:
    """Thresholds that are due, smallest first.

    A threshold is due when ``days_remaining <= threshold`` and no
    notification has been sent for it or a smaller one since the last
    renewal (``last_sent`` is None or greater than the threshold).

    Examples:
        >>> eligible_thresholds(5, [21, 7, 14], None)
        [7, 14, 21]
        >>> eligible_thresholds(5, [7, 14, 21], 14)
        [7]
        >>> eligible_thresholds(10, [7, 14, 21], 14)
        []
    """
    due: list[int] = []
    for target in sorted(thresholds):
        if days_remaining > target:
            continue
        if last_sent is not None and last_sent <= target:
            continue
        due.append(target)
    return due
