"""Domain models — monitors, heartbeats, expiry records, and providers.

Monitors and providers arrive from outside (config, CLI) and are validated
with pydantic. ``ExpiryRecord`` and ``Heartbeat`` are mutable dataclasses
owned by the service layer for the duration of one check.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from expiryctl.domain.types import HeartbeatStatus


class Monitor(BaseModel):
    """A scheduled monitor, read-only here.

    Only the fields that can carry a domain are modeled; which one is used
    depends on ``type`` (see :data:`~expiryctl.domain.types.DOMAIN_TARGET_FIELDS`).
    """

    model_config = {"frozen": True, "extra": "ignore"}

    name: str = ""
    type: str
    url: str | None = None
    hostname: str | None = None
    grpc_url: str | None = None

    def target_for(self, field_name: str) -> Any:
        return getattr(self, field_name, None)


class NotificationProvider(BaseModel):
    """A configured notification channel: provider ``name`` plus its config."""

    model_config = {"frozen": True}

    name: str
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("config", mode="before")
    @classmethod
    def _parse_config(cls, value: Any) -> Any:
        # Stored provider configs are JSON strings.
        if isinstance(value, str):
            return json.loads(value) if value.strip() else {}
        return value


class DomainSupport(BaseModel):
    """Result of a successful support check."""

    model_config = {"frozen": True}

    domain: str
    tld: str


@dataclass
class Extraction:
    """Expiry date and full parsed WHOIS attributes of one registry response."""

    expiry_date: datetime | None
    registry_info: dict[str, str] = field(default_factory=dict)


@dataclass
class ExpiryRecord:
    """Durable per-domain state (one row of ``domain_expiry``).

    ``id`` is None until the record has been written once.
    """

    domain: str
    expiry: datetime | None = None
    last_check: datetime | None = None
    registry_info: dict[str, str] | None = None
    last_notification_threshold: int | None = None
    id: int | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


@dataclass
class Heartbeat:
    """Status and message of one monitor tick."""

    status: HeartbeatStatus = HeartbeatStatus.PENDING
    msg: str = ""
