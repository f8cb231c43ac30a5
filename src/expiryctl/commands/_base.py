"""Custom Click base classes with --examples support.

Provides ExpCommand and ExpGroup that accept an ``examples`` parameter.
When ``--examples`` is passed, the command prints usage examples and exits.
This keeps ``--help`` concise while making examples available on demand.
"""

from __future__ import annotations

from typing import Any

import click


def _add_examples_option(cmd: click.Command | click.Group, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class ExpCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


class ExpGroup(click.Group):
    """Click Group subclass that supports an ``--examples`` flag.

    Sets ``command_class = ExpCommand`` so all subcommands automatically
    accept the ``examples`` parameter without explicit ``cls=`` each time.
    """

    command_class = ExpCommand

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


TYPE_OPTION_HELP = "Monitor type the target belongs to (decides which field carries it)."


def build_monitor(target: str, monitor_type: str, *, name: str | None = None) -> Any:
    """Build a Monitor carrying *target* in the field its type reads."""
    from expiryctl.domain.models import Monitor
    from expiryctl.domain.types import DOMAIN_TARGET_FIELDS

    fields: dict[str, Any] = {}
    target_field = DOMAIN_TARGET_FIELDS.get(monitor_type)
    if target_field is not None:
        fields[target_field] = target
    return Monitor(name=name or target, type=monitor_type, **fields)
