"""Command: report whether a target has a checkable domain."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import TYPE_OPTION_HELP, ExpCommand, build_monitor

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext


@click.command(
    cls=ExpCommand,
    examples="""\
  expiryctl support https://www.example.co.uk/status
  expiryctl support mail.example.com --type smtp
  expiryctl --json support 10.0.0.1 --type ping""",
)
@click.argument("target")
@click.option("--type", "monitor_type", default="http", show_default=True, help=TYPE_OPTION_HELP)
@click.pass_obj
def support(app: AppContext, target: str, monitor_type: str) -> None:
    """Show the registrable domain and TLD derived from TARGET."""
    from expiryctl.services.domain import DomainService

    app.emit(DomainService(app.workspace).support(build_monitor(target, monitor_type)))
