"""Tests for InitService."""

from __future__ import annotations

from expiryctl.config.settings import ExpirySettings
from expiryctl.services.init import InitService


class TestInitDatabase:
    def test_creates_database(self, settings: ExpirySettings) -> None:
        result = InitService.init_database(settings)
        assert result.ok
        assert result.data["created"] is True
        assert result.data["revision"] == "002_domain_whois_info"
        assert settings.db_path.exists()

    def test_second_run_reports_existing(self, settings: ExpirySettings) -> None:
        InitService.init_database(settings)
        result = InitService.init_database(settings)
        assert result.ok
        assert result.data["created"] is False

    def test_unwritable_location(self, tmp_path) -> None:
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        settings = ExpirySettings.from_cli(root=tmp_path, database={"path": blocker / "x.db"})
        result = InitService.init_database(settings)
        assert not result.ok
        assert result.error.code == "INIT_FAILED"
