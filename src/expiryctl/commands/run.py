"""Command: check every configured monitor."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import ExpCommand

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext


@click.command(
    cls=ExpCommand,
    examples="""\
  expiryctl run
  expiryctl -q run
  expiryctl --json run --no-notify""",
)
@click.option("--no-notify", is_flag=True, help="Check expiry without sending notifications.")
@click.pass_obj
def run(app: AppContext, no_notify: bool) -> None:
    """Check all monitors listed under [[monitors]] in the config file."""
    from expiryctl.services.domain import DomainService

    monitors = app.settings.monitors
    if not monitors:
        raise click.UsageError("No monitors configured; add [[monitors]] entries to expiryctl.toml")
    app.emit(DomainService(app.workspace).run(monitors, notify=not no_notify))
