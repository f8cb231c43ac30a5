"""SQLAlchemy Core table definitions for the expiryctl database.

Timestamps are stored as ISO 8601 text in UTC, JSON payloads as text,
matching what the repositories read and write.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, MetaData, Table, Text

metadata = MetaData()

domain_expiry = Table(
    "domain_expiry",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("domain", Text, nullable=False, unique=True),
    Column("expiry", Text),  # ISO 8601, UTC
    Column("last_check", Text),  # ISO 8601, UTC
    Column("last_expiry_notification_sent", Integer),  # days threshold
    Column("whois_info", Text),  # JSON object
)

settings = Table(
    "settings",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text),  # JSON
    Column("type", Text),  # category, e.g. "general"
)
