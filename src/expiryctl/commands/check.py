"""Command: run one domain expiry check."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import TYPE_OPTION_HELP, ExpCommand, build_monitor

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext


@click.command(
    cls=ExpCommand,
    examples="""\
  expiryctl check example.com --type domain-expiry
  expiryctl check https://shop.example.org/health
  expiryctl --json check example.net --type dns --no-notify""",
)
@click.argument("target")
@click.option("--type", "monitor_type", default="http", show_default=True, help=TYPE_OPTION_HELP)
@click.option("--name", default=None, help="Monitor name shown in output and notifications.")
@click.option("--no-notify", is_flag=True, help="Check expiry without sending notifications.")
@click.pass_obj
def check(
    app: AppContext,
    target: str,
    monitor_type: str,
    name: str | None,
    no_notify: bool,
) -> None:
    """Check the registration expiry of TARGET's domain and notify if due."""
    from expiryctl.services.domain import DomainService

    monitor = build_monitor(target, monitor_type, name=name)
    app.emit(DomainService(app.workspace).check(monitor, notify=not no_notify))
