"""Repositories encapsulating SQL for expiry records and settings."""

from expiryctl.infrastructure.repositories.domain_expiry import DomainExpiryRepository
from expiryctl.infrastructure.repositories.settings import SettingsRepository

__all__ = ["DomainExpiryRepository", "SettingsRepository"]
