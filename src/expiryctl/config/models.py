"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, expiryctl.toml only contains
overrides. A fresh setup needs no config file at all.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from expiryctl.domain.models import NotificationProvider
from expiryctl.domain.thresholds import DEFAULT_NOTIFY_DAYS

# --- expiryctl.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the settings root.
    path: Path = Path(".expiryctl") / "expiryctl.db"


class RegistryConfig(BaseModel):
    """[registry] section."""

    model_config = {"frozen": True}

    timeout: float = 10.0
    recheck_days: int = Field(default=1, ge=1)


class SuffixConfig(BaseModel):
    """[suffix] section — public suffix list source."""

    model_config = {"frozen": True}

    fetch_remote: bool = False
    cache_dir: str | None = None


class NotificationsConfig(BaseModel):
    """[notifications] section."""

    model_config = {"frozen": True}

    default_days: list[int] = Field(default_factory=lambda: list(DEFAULT_NOTIFY_DAYS))
    providers: list[NotificationProvider] = Field(default_factory=list)


class RunnerConfig(BaseModel):
    """[runner] section."""

    model_config = {"frozen": True}

    max_workers: int = Field(default=4, ge=1)
