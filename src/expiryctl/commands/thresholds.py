"""Command: read or replace the notification thresholds."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import ExpCommand

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext


def _parse_days(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> list[int] | None:
    if value is None:
        return None
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError as exc:
        raise click.BadParameter(f"expected comma-separated whole days, got {value!r}") from exc


@click.command(
    cls=ExpCommand,
    examples="""\
  expiryctl thresholds
  expiryctl thresholds --set 7,14,21
  expiryctl --json thresholds --set 1,3,7,30""",
)
@click.option(
    "--set",
    "days",
    default=None,
    callback=_parse_days,
    help="Comma-separated days before expiry to warn at.",
)
@click.pass_obj
def thresholds(app: AppContext, days: list[int] | None) -> None:
    """Show or set the days-before-expiry notification thresholds."""
    from expiryctl.services.domain import DomainService

    app.emit(DomainService(app.workspace).thresholds(days))
