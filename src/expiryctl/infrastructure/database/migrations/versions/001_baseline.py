"""Baseline schema — domain expiry records and settings.

Revision ID: 001_baseline
Revises: None
Create Date: 2025-11-02
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "001_baseline"
down_revision: str | None = None
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.create_table(
        "domain_expiry",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("domain", sa.Text, nullable=False, unique=True),
        sa.Column("expiry", sa.Text),
        sa.Column("last_check", sa.Text),
        sa.Column("last_expiry_notification_sent", sa.Integer),
    )

    op.create_table(
        "settings",
        sa.Column("key", sa.Text, primary_key=True),
        sa.Column("value", sa.Text),
        sa.Column("type", sa.Text),
    )


def downgrade() -> None:
    op.drop_table("settings")
    op.drop_table("domain_expiry")
