"""Command base class for reachctl subcommands.

Usage examples live on the command object rather than in ``--help``;
``--examples`` prints them and exits before any edge source is read.
"""

from __future__ import annotations

from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    command = ctx.command
    click.echo(f"Examples for '{ctx.command_path}':\n")
    click.echo(getattr(command, "examples", None) or "  (none)")
    ctx.exit(0)


class ReachCommand(click.Command):
    """Click command with an optional eager ``--examples`` flag.

    Pass ``examples=`` through ``@click.command(cls=ReachCommand, ...)``.
    """

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )
