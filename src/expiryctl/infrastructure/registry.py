"""WHOIS registry client.

The WHOIS wire protocol (server referral, port 43 socket I/O) is handled
by python-whois' ``NICClient``. This module only adapts it to a soft-fail
contract: every failure becomes ``None``, never an exception.
"""

from __future__ import annotations

import logging
from typing import Protocol

from whois import NICClient

logger = logging.getLogger(__name__)


class RegistryClient(Protocol):
    """Anything that can answer a registry query with raw text."""

    def query(self, domain: str) -> str | None: ...


class WhoisClient:
    """Query WHOIS for a domain and return the raw response text.

    Parameters:
        timeout: Socket timeout in seconds handed to ``NICClient``.
    """

    def __init__(self, *, timeout: float | None = 10.0) -> None:
        self._timeout = timeout

    def query(self, domain: str) -> str | None:
        """Return the raw WHOIS text for *domain*, or None on any failure.

        No retries are attempted; the caller's recheck throttle decides
        when to ask again.
        """
        if not domain:
            return None
        try:
            text = NICClient().whois_lookup(
                None,
                domain.encode("idna").decode("ascii"),
                0,
                ignore_socket_errors=False,
                timeout=self._timeout,
            )
        except Exception as exc:
            logger.debug("WHOIS lookup failed for %s: %s", domain, exc)
            return None
        if not text or not text.strip():
            logger.debug("WHOIS lookup for %s returned no data", domain)
            return None
        return text
