"""Command: inspect stored expiry records."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import ExpCommand

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext


@click.command(
    cls=ExpCommand,
    examples="""\
  expiryctl show
  expiryctl show example.com
  expiryctl --json show example.co.uk""",
)
@click.argument("domain", required=False)
@click.pass_obj
def show(app: AppContext, domain: str | None) -> None:
    """Show the stored record for DOMAIN, or list all records."""
    from expiryctl.services.domain import DomainService

    svc = DomainService(app.workspace)
    app.emit(svc.show(domain.strip().lower()) if domain else svc.list_records())
