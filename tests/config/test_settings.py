"""Tests for ExpirySettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from expiryctl.config.settings import ExpirySettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("EXPIRYCTL_CONFIG", "EXPIRYCTL_REGISTRY__TIMEOUT", "EXPIRYCTL_QUIET"):
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = ExpirySettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.registry.timeout == 10.0
        assert settings.registry.recheck_days == 1
        assert settings.notifications.default_days == [7, 14, 21]
        assert settings.notifications.providers == []
        assert settings.suffix.fetch_remote is False
        assert settings.runner.max_workers == 4
        assert settings.monitors == []

    def test_db_path_relative_to_root(self, tmp_path: Path) -> None:
        settings = ExpirySettings.from_cli(root=tmp_path)
        assert settings.db_path == tmp_path / ".expiryctl" / "expiryctl.db"

    def test_absolute_db_path(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere" / "expiry.db"
        settings = ExpirySettings.from_cli(root=tmp_path, database={"path": target})
        assert settings.db_path == target

    def test_frozen(self, tmp_path: Path) -> None:
        settings = ExpirySettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "expiryctl.toml").write_text(
            "[registry]\n"
            "timeout = 4.5\n"
            "recheck_days = 2\n"
            "[notifications]\n"
            "default_days = [1, 3]\n"
            "[[notifications.providers]]\n"
            'name = "log"\n'
            'config = { prefix = "[expiry]" }\n'
            "[[monitors]]\n"
            'name = "shop"\n'
            'type = "http"\n'
            'url = "https://shop.example.com"\n'
        )
        settings = ExpirySettings.from_cli(root=tmp_path)
        assert settings.registry.timeout == 4.5
        assert settings.registry.recheck_days == 2
        assert settings.notifications.default_days == [1, 3]
        assert settings.notifications.providers[0].config == {"prefix": "[expiry]"}
        assert settings.monitors[0].url == "https://shop.example.com"
        assert settings.runner.max_workers == 4

    def test_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "expiryctl.toml").write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = ExpirySettings.from_cli()
        assert settings.root == tmp_path
        assert settings.config_path == tmp_path / "expiryctl.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[runner]\nmax_workers = 9\n")
        settings = ExpirySettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.runner.max_workers == 9
        assert settings.config_path == custom

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "expiryctl.toml").write_text("[registry\n")
        with pytest.raises(click.ClickException):
            ExpirySettings.from_cli(root=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "expiryctl.toml").write_text("[registry]\ntimeout = 4.5\n")
        monkeypatch.setenv("EXPIRYCTL_REGISTRY__TIMEOUT", "20")
        settings = ExpirySettings.from_cli(root=tmp_path)
        assert settings.registry.timeout == 20.0

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXPIRYCTL_QUIET", "false")
        settings = ExpirySettings.from_cli(root=tmp_path, quiet=True)
        assert settings.quiet is True
