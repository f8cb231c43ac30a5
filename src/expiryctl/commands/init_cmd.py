"""Command: database initialization (named init_cmd to avoid shadowing builtins)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from expiryctl.commands._base import ExpCommand

if TYPE_CHECKING:
    from expiryctl.commands._context import AppContext

_INIT_EXAMPLES = """\
  expiryctl init
  expiryctl -c /etc/expiryctl/expiryctl.toml init
  EXPIRYCTL_DATABASE__PATH=/tmp/expiry.db expiryctl --json init"""


@click.command("init", cls=ExpCommand, examples=_INIT_EXAMPLES)
@click.pass_obj
def init_cmd(app: AppContext) -> None:
    """Create the expiry database at the latest schema revision."""
    from expiryctl.services.init import InitService

    app.emit(InitService.init_database(app.settings))
