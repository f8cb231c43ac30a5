"""BaseService — abstract foundation for expiryctl services.

Every service receives a :class:`Workspace` at construction time. The
workspace provides the database repositories, registry client, clock,
per-domain locks, and plugin manager.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from expiryctl.infrastructure.workspace import Workspace

logger = logging.getLogger(__name__)


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class DomainService(BaseService):
            def check(self, monitor: Monitor) -> ServiceResult:
                record = self._workspace.records.find_by_domain(...)
                ...
    """

    def __init__(self, workspace: Workspace) -> None:
        self._workspace = workspace
