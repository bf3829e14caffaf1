"""Command: sample a random edge list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reachctl.commands._base import ReachCommand
from reachctl.services.generate import GenerateService

if TYPE_CHECKING:
    from reachctl.commands._context import AppContext


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl generate
  reachctl generate --count 10 --letters 4 --seed 42
  reachctl -q generate --seed 42 > edges.txt""",
)
@click.option("-n", "--count", type=click.IntRange(min=0), default=None, help="Number of edges.")
@click.option(
    "--letters",
    type=click.IntRange(min=1),
    default=None,
    help="Labels come from the first N letters (max 26).",
)
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.pass_obj
def generate(app: AppContext, count: int | None, letters: int | None, seed: int | None) -> None:
    """Print a random edge list without building matrices."""
    app.emit(GenerateService(app.make_generator(count, letters, seed)).generate())
