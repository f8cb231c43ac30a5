"""Tests for Workspace wiring and per-domain locks."""

from __future__ import annotations

import threading
import time

import pytest

from expiryctl.config.settings import ExpirySettings
from expiryctl.infrastructure.locks import KeyedLock
from expiryctl.infrastructure.registry import WhoisClient
from expiryctl.infrastructure.workspace import Workspace
from expiryctl.plugins.manager import PluginManager


class TestWorkspace:
    def test_creates_database(self, settings: ExpirySettings) -> None:
        ws = Workspace(settings)
        try:
            assert settings.db_path.exists()
            assert ws.records.list_all() == []
        finally:
            ws.close()

    def test_default_registry_uses_configured_timeout(self, tmp_path) -> None:
        settings = ExpirySettings.from_cli(root=tmp_path, registry={"timeout": 2.5})
        ws = Workspace(settings)
        try:
            assert isinstance(ws.registry, WhoisClient)
            assert ws.registry._timeout == 2.5
        finally:
            ws.close()

    def test_clock_is_aware_utc(self, settings: ExpirySettings) -> None:
        ws = Workspace(settings)
        try:
            assert ws.clock().utcoffset().total_seconds() == 0
        finally:
            ws.close()

    def test_lazy_plugin_manager_has_log_provider(self, settings: ExpirySettings) -> None:
        ws = Workspace(settings)
        try:
            pm = ws.plugin_manager
            assert isinstance(pm, PluginManager)
            assert "log" in pm.list_plugin_names()
            assert pm.is_loaded
        finally:
            ws.close()

    def test_suffix_extractor_cached(self, workspace: Workspace) -> None:
        assert workspace.suffix_extractor is workspace.suffix_extractor


class TestKeyedLock:
    def test_reentrant(self) -> None:
        locks = KeyedLock()
        with locks.hold("example.com"), locks.hold("example.com"):
            pass

    def test_same_key_serialized(self) -> None:
        locks = KeyedLock()
        active: list[int] = []
        overlap: list[bool] = []

        def worker() -> None:
            with locks.hold("example.com"):
                active.append(1)
                overlap.append(len(active) > 1)
                time.sleep(0.01)
                active.pop()

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert overlap == [False] * 5

    def test_different_keys_independent(self) -> None:
        locks = KeyedLock()
        acquired = threading.Event()

        def other() -> None:
            with locks.hold("example.org"):
                acquired.set()

        with locks.hold("example.com"):
            t = threading.Thread(target=other)
            t.start()
            assert acquired.wait(timeout=2)
            t.join()

    def test_entry_dropped_after_release(self) -> None:
        locks = KeyedLock()
        for i in range(50):
            with locks.hold(f"site{i}.example.com"):
                assert len(locks) == 1
        assert len(locks) == 0

    def test_nested_hold_keeps_entry_until_outer_exit(self) -> None:
        locks = KeyedLock()
        with locks.hold("example.com"):
            with locks.hold("example.com"):
                pass
            assert len(locks) == 1
        assert len(locks) == 0

    def test_entry_dropped_when_block_raises(self) -> None:
        locks = KeyedLock()
        with pytest.raises(RuntimeError), locks.hold("example.com"):
            raise RuntimeError("boom")
        assert len(locks) == 0
