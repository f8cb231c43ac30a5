"""Keep the full parsed WHOIS response per domain.

Revision ID: 002_domain_whois_info
Revises: 001_baseline
Create Date: 2026-01-17
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision: str = "002_domain_whois_info"
down_revision: str | None = "001_baseline"
branch_labels: tuple[str, ...] | None = None
depends_on: tuple[str, ...] | None = None


def upgrade() -> None:
    op.add_column(
        "domain_expiry",
        sa.Column("whois_info", sa.Text(), nullable=True, server_default=None),
    )


def downgrade() -> None:
    # SQLite cannot drop columns in place; batch mode copies the table.
    with op.batch_alter_table("domain_expiry") as batch_op:
        batch_op.drop_column("whois_info")
