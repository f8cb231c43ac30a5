"""Subcommand modules for expiryctl.

Provides register_commands() which uses deferred imports to keep
``expiryctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from expiryctl.commands.check import check
    from expiryctl.commands.init_cmd import init_cmd
    from expiryctl.commands.run import run
    from expiryctl.commands.show import show
    from expiryctl.commands.support import support
    from expiryctl.commands.thresholds import thresholds
    from expiryctl.commands.upgrade import upgrade

    cli.add_command(init_cmd)
    cli.add_command(support)
    cli.add_command(check)
    cli.add_command(run)
    cli.add_command(show)
    cli.add_command(thresholds)
    cli.add_command(upgrade)
