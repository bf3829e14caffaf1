"""Graph commands: adjacency list, matrices, and single path queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from reachctl.commands._base import ReachCommand
from reachctl.commands._sources import EdgeSource, edge_source_options
from reachctl.domain.reachability import ReachStrategy
from reachctl.services.graph import GraphService

if TYPE_CHECKING:
    from reachctl.commands._context import AppContext
    from reachctl.domain.graph import Edge


def _service(app: AppContext, source: EdgeSource, strategy: str | None) -> GraphService:
    graph = app.load_graph(source)
    chosen = strategy or app.settings.reachability.strategy
    return GraphService(graph, strategy=chosen)


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl adjacency -e A:B -e B:C
  reachctl adjacency --random 25 --letters 15 --seed 7
  reachctl --json adjacency -f edges.txt""",
)
@edge_source_options
@click.pass_obj
def adjacency(
    app: AppContext,
    edge_tokens: tuple[Edge, ...],
    file_edges: tuple[Edge, ...] | None,
    random_count: int | None,
    letters: int | None,
    seed: int | None,
) -> None:
    """Print the adjacency list of the graph."""
    source = EdgeSource(edge_tokens, file_edges, random_count, letters, seed)
    app.emit(_service(app, source, None).adjacency_list())


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl matrix -e A:B -e B:C -e C:D -e D:A
  reachctl matrix --kind path -f edges.txt
  reachctl matrix --kind adjacency --random 10 --letters 5 --seed 1
  reachctl matrix --strategy per-pair -e A:B
  reachctl -q matrix -e A:B""",
)
@edge_source_options
@click.option(
    "--kind",
    type=click.Choice(["both", "path", "adjacency"]),
    default="both",
    show_default=True,
    help="Which matrix to print.",
)
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in ReachStrategy]),
    default=None,
    help="Path matrix algorithm (default from config).",
)
@click.pass_obj
def matrix(
    app: AppContext,
    edge_tokens: tuple[Edge, ...],
    file_edges: tuple[Edge, ...] | None,
    random_count: int | None,
    letters: int | None,
    seed: int | None,
    kind: str,
    strategy: str | None,
) -> None:
    """Print the path (reachability) and adjacency matrices."""
    source = EdgeSource(edge_tokens, file_edges, random_count, letters, seed)
    svc = _service(app, source, strategy)
    if kind == "path":
        app.emit(svc.path_matrix())
    elif kind == "adjacency":
        app.emit(svc.adjacency_matrix())
    else:
        app.emit(svc.matrices())


@click.command(
    cls=ReachCommand,
    examples="""\
  reachctl path A C -e A:B -e B:C
  reachctl -q path C A -e A:B -e B:C""",
)
@click.argument("source_label")
@click.argument("target_label")
@edge_source_options
@click.pass_obj
def path(
    app: AppContext,
    source_label: str,
    target_label: str,
    edge_tokens: tuple[Edge, ...],
    file_edges: tuple[Edge, ...] | None,
    random_count: int | None,
    letters: int | None,
    seed: int | None,
) -> None:
    """Check whether TARGET_LABEL is reachable from SOURCE_LABEL."""
    source = EdgeSource(edge_tokens, file_edges, random_count, letters, seed)
    app.emit(_service(app, source, None).has_path(source_label, target_label))
