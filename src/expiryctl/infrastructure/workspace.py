"""Workspace — the single dependency injected into every service.

Owns the database engine and repositories, the WHOIS client, the public
suffix extractor, the per-domain locks, the clock, and the plugin manager
used for notification delivery. Tests swap the registry client and clock
for fakes at construction time.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from expiryctl.domain.normalize import make_suffix_extractor
from expiryctl.infrastructure.database.engine import init_database
from expiryctl.infrastructure.locks import KeyedLock
from expiryctl.infrastructure.registry import WhoisClient
from expiryctl.infrastructure.repositories import DomainExpiryRepository, SettingsRepository

if TYPE_CHECKING:
    import tldextract
    from sqlalchemy.engine import Engine

    from expiryctl.config.settings import ExpirySettings
    from expiryctl.infrastructure.registry import RegistryClient
    from expiryctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(UTC)


class Workspace:
    """Database, registry, and plugin access for one expiryctl process.

    Parameters:
        settings: Resolved settings (database path, registry timeout, ...).
        registry: WHOIS client override; defaults to :class:`WhoisClient`.
        clock: Returns the current aware UTC time; defaults to the wall clock.
        plugin_manager: Notification plugin manager override; defaults to
            one with the built-in providers and entry-point plugins loaded.
        migrate: Apply pending migrations to an existing database on open.
    """

    def __init__(
        self,
        settings: ExpirySettings,
        *,
        registry: RegistryClient | None = None,
        clock: Callable[[], datetime] | None = None,
        plugin_manager: PluginManager | None = None,
        migrate: bool = True,
    ) -> None:
        self.settings = settings
        self._engine: Engine = init_database(settings.db_path, migrate=migrate)
        self.records = DomainExpiryRepository(self._engine)
        self.settings_store = SettingsRepository(self._engine)
        self.registry: RegistryClient = registry or WhoisClient(
            timeout=settings.registry.timeout
        )
        self.clock: Callable[[], datetime] = clock or utc_now
        self.domain_locks = KeyedLock()
        self._suffix_extractor: tldextract.TLDExtract | None = None
        self._plugin_manager = plugin_manager

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def suffix_extractor(self) -> tldextract.TLDExtract:
        """Public-suffix extractor, built on first use."""
        if self._suffix_extractor is None:
            self._suffix_extractor = make_suffix_extractor(
                fetch_remote=self.settings.suffix.fetch_remote,
                cache_dir=self.settings.suffix.cache_dir,
            )
        return self._suffix_extractor

    @property
    def plugin_manager(self) -> PluginManager:
        """Plugin manager with built-ins and entry-point plugins, loaded on first use."""
        if self._plugin_manager is None:
            from expiryctl.plugins.manager import PluginManager

            pm = PluginManager()
            pm.register_builtins()
            pm.discover_and_load()
            self._plugin_manager = pm
        return self._plugin_manager

    def close(self) -> None:
        """Dispose of the database engine."""
        self._engine.dispose()
