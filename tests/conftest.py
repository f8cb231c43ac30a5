"""Shared pytest fixtures and test helpers for expiryctl tests."""

from __future__ import annotations

from collections.abc import Generator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

import pluggy
import pytest
from click.testing import CliRunner

from expiryctl.config.settings import ExpirySettings
from expiryctl.domain.models import NotificationProvider
from expiryctl.infrastructure.workspace import Workspace
from expiryctl.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("expiryctl")

NOW = datetime(2030, 4, 20, tzinfo=UTC)


def whois_response(expiry: str | None, *, domain: str = "EXAMPLE.COM", **extra: str) -> str:
    """Build a registry-style WHOIS answer with an optional expiry line."""
    lines = [
        "% IANA WHOIS server",
        f"Domain Name: {domain}",
        "Registrar WHOIS Server: whois.example-registrar.test",
        "Creation Date: 1995-08-14T04:00:00Z",
    ]
    if expiry is not None:
        lines.append(f"Registry Expiry Date: {expiry}")
    lines.extend(f"{key}: {value}" for key, value in extra.items())
    lines.append(">>> Last update of whois database: 2030-04-20T00:00:00Z <<<")
    return "\n".join(lines) + "\n"


class FakeRegistry:
    """In-memory registry client: canned answers per domain plus a call log."""

    def __init__(self, responses: dict[str, str | None] | None = None) -> None:
        self.responses: dict[str, str | None] = dict(responses or {})
        self.calls: list[str] = []

    def query(self, domain: str) -> str | None:
        self.calls.append(domain)
        return self.responses.get(domain)


class FixedClock:
    """Callable clock frozen at ``now`` until a test advances it."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


class RecordingNotifier:
    """Notification plugin for the ``record``, ``reject`` and ``broken`` providers."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    @hookimpl
    def deliver_notification(
        self, provider: str, config: dict[str, Any], message: str
    ) -> bool | None:
        if provider == "record":
            self.sent.append((config.get("channel", ""), message))
            return True
        if provider == "reject":
            return False
        if provider == "broken":
            msg = "provider endpoint unreachable"
            raise ConnectionError(msg)
        return None


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def plugin_manager(notifier: RecordingNotifier) -> PluginManager:
    pm = PluginManager()
    pm.register_builtins()
    pm.register_plugin(notifier, name="recorder")
    return pm


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ExpirySettings:
    """Settings rooted at a temp directory with no config file."""
    monkeypatch.delenv("EXPIRYCTL_CONFIG", raising=False)
    return ExpirySettings.from_cli(
        root=tmp_path,
        suffix={"cache_dir": str(tmp_path / "suffix-cache")},
    )


@pytest.fixture
def workspace(
    settings: ExpirySettings,
    registry: FakeRegistry,
    clock: FixedClock,
    plugin_manager: PluginManager,
) -> Generator[Workspace]:
    """Fully initialized workspace with a fake registry, clock, and notifier."""
    ws = Workspace(settings, registry=registry, clock=clock, plugin_manager=plugin_manager)
    try:
        yield ws
    finally:
        ws.close()


@pytest.fixture
def record_provider() -> list[NotificationProvider]:
    return [NotificationProvider(name="record", config={"channel": "ops"})]


@pytest.fixture
def _isolated_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp root so the CLI creates an isolated database.

    Use via ``@pytest.mark.usefixtures("_isolated_root")`` on command test
    classes.
    """
    monkeypatch.delenv("EXPIRYCTL_CONFIG", raising=False)
    monkeypatch.setenv("EXPIRYCTL_SUFFIX__CACHE_DIR", str(tmp_path / "suffix-cache"))
    monkeypatch.chdir(tmp_path)
