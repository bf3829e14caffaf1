"""Shared edge-source options for graph commands.

Every graph command reads edges from up to three sources, applied in
order: edge-list file, literal ``--edge`` tokens, then random edges.
With no source at all, a random graph is drawn from the ``[generate]``
config defaults.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TypeVar

import click

from reachctl.domain.edges import parse_edges, read_edge_file
from reachctl.domain.graph import Edge

_F = TypeVar("_F", bound=Callable[..., Any])


@dataclass(frozen=True)
class EdgeSource:
    """Edge inputs collected from the command line."""

    edges: tuple[Edge, ...] = ()
    file_edges: tuple[Edge, ...] | None = None
    random_count: int | None = None
    letters: int | None = None
    seed: int | None = None

    def __post_init__(self) -> None:
        given = self.edges or self.file_edges is not None
        tuning = self.letters is not None or self.seed is not None
        if given and tuning and self.random_count is None:
            msg = "--letters and --seed only apply to random edges; add --random N"
            raise click.UsageError(msg)

    @property
    def wants_random(self) -> bool:
        """Random edges are drawn when asked for, or when nothing else was given."""
        return self.random_count is not None or (not self.edges and self.file_edges is None)


def _parse_edge_tokens(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> tuple[Edge, ...]:
    try:
        return tuple(parse_edges(value))
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _read_edge_file(
    _ctx: click.Context, _param: click.Parameter, value: Path | None
) -> tuple[Edge, ...] | None:
    if value is None:
        return None
    try:
        return tuple(read_edge_file(value))
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def edge_source_options(func: _F) -> _F:
    """Decorator: add ``--edge``, ``--edges-file``, ``--random``, ``--letters``, ``--seed``."""
    options = [
        click.option(
            "-e",
            "--edge",
            "edge_tokens",
            multiple=True,
            callback=_parse_edge_tokens,
            help="Edge as SRC:DEST (repeatable).",
        ),
        click.option(
            "-f",
            "--edges-file",
            "file_edges",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            callback=_read_edge_file,
            help="File with one SRC DEST edge per line.",
        ),
        click.option(
            "-r",
            "--random",
            "random_count",
            type=click.IntRange(min=0),
            default=None,
            help="Add N random edges.",
        ),
        click.option(
            "--letters",
            type=click.IntRange(min=1),
            default=None,
            help="Random labels come from the first N letters (max 26).",
        ),
        click.option("--seed", type=int, default=None, help="Seed for random edges."),
    ]
    for option in reversed(options):
        func = option(func)
    return func
