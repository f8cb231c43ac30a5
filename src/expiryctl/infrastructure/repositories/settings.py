"""Key/value settings store backed by the ``settings`` table.

Values are stored as JSON. A value that is not valid JSON is returned as
the raw string so hand-edited rows stay readable.
"""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.engine import Engine

from expiryctl.infrastructure.database.schema import settings


class SettingsRepository:
    """Encapsulates SQL for reading and writing settings."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self, key: str) -> Any:
        """Return the decoded value for *key*, or None if unset."""
        with self._engine.connect() as conn:
            raw = conn.execute(select(settings.c.value).where(settings.c.key == key)).scalar()
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            return raw

    def set(self, key: str, value: Any, category: str = "") -> None:
        """Store *value* under *key*, replacing any previous value."""
        encoded = json.dumps(value)
        stmt = (
            insert(settings)
            .values(key=key, value=encoded, type=category)
            .on_conflict_do_update(
                index_elements=[settings.c.key],
                set_={"value": encoded, "type": category},
            )
        )
        with self._engine.begin() as conn:
            conn.execute(stmt)
