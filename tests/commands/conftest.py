"""Fixtures for CLI command tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from typing import Any

import pytest

from expiryctl.infrastructure import registry as registry_module


class StubNICClient:
    """Replaces python-whois' NICClient so no command reaches a WHOIS server."""

    answers: dict[str, str] = {}
    lookups: list[str] = []

    def whois_lookup(self, options: Any, query: str, flags: int, **kwargs: Any) -> str:
        type(self).lookups.append(query)
        return type(self).answers.get(query, "")


@pytest.fixture
def whois(monkeypatch: pytest.MonkeyPatch) -> type[StubNICClient]:
    StubNICClient.answers = {}
    StubNICClient.lookups = []
    monkeypatch.setattr(registry_module, "NICClient", StubNICClient)
    return StubNICClient


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """The CLI reconfigures the root logger; undo it after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
