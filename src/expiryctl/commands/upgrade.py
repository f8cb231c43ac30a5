"""Command: database schema migration."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import ExpCommand

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext


@click.command(
    cls=ExpCommand,
    examples="""\
  expiryctl upgrade
  expiryctl upgrade --check
  expiryctl upgrade --downgrade 001_baseline
  expiryctl --json upgrade --check""",
)
@click.option(
    "--check", "check_only", is_flag=True, help="Show pending migrations without applying."
)
@click.option("--downgrade", "revision", default=None, help="Revert the schema to REVISION.")
@click.pass_obj
def upgrade(app: AppContext, check_only: bool, revision: str | None) -> None:
    """Run pending database migrations."""
    from expiryctl.infrastructure.workspace import Workspace
    from expiryctl.services.upgrade import UpgradeService

    if check_only and revision:
        raise click.UsageError("--check and --downgrade are mutually exclusive")

    workspace = Workspace(app.settings, migrate=False)
    try:
        svc = UpgradeService(workspace)
        if revision:
            result = svc.downgrade(revision)
        elif check_only:
            result = svc.check_pending()
        else:
            result = svc.apply()
    finally:
        workspace.close()
    app.emit(result)
