"""Reachability engine — adjacency and path matrices over a Graph.

The engine only borrows the graph; every call returns a fresh
:class:`~reachctl.domain.matrix.Matrix` snapshot.

Diagonal semantics differ between the two matrices: the adjacency
matrix marks every vertex as adjacent to itself, the path matrix marks
every vertex as reachable from itself (a path of length zero). Both
hold for a vertex with no edges at all.

Three interchangeable strategies fill the path matrix:

* ``per-pair``   — one depth-first search per ordered (src, dest) pair.
* ``per-source`` — one depth-first search per source row (default).
* ``networkx``   — ``networkx.descendants`` on a DiGraph copy.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

import networkx as nx

from reachctl.domain.errors import UnknownVertexError
from reachctl.domain.matrix import Matrix

if TYPE_CHECKING:
    from reachctl.domain.graph import Graph, Label


class ReachStrategy(StrEnum):
    """Algorithm used to fill the path matrix. All give identical results."""

    PER_PAIR = "per-pair"
    PER_SOURCE = "per-source"
    NETWORKX = "networkx"


def _require(graph: Graph, *labels: Label) -> None:
    for label in labels:
        if label not in graph:
            raise UnknownVertexError(label)


# ------------------------------------------------------------------
# Traversal
# ------------------------------------------------------------------


def has_path(graph: Graph, src: Label, dest: Label) -> bool:
    """Return True if a directed path leads from *src* to *dest*.

    Iterative DFS with an explicit stack and a fresh visited set per
    call. Neighbors are pushed in reverse so they pop in stored order.
    """
    _require(graph, src, dest)
    if src == dest:
        return True

    adjacency = graph.adjacency
    visited: set[Label] = set()
    stack: list[Label] = [src]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        if current == dest:
            return True
        for neighbor in reversed(adjacency[current]):
            if neighbor not in visited:
                stack.append(neighbor)
    return False


def reachable_from(graph: Graph, src: Label) -> set[Label]:
    """Every vertex reachable from *src*, *src* included."""
    _require(graph, src)
    adjacency = graph.adjacency
    visited: set[Label] = set()
    stack: list[Label] = [src]
    while stack:
        current = stack.pop()
        if current in visited:
            continue
        visited.add(current)
        stack.extend(n for n in reversed(adjacency[current]) if n not in visited)
    return visited


def to_networkx(graph: Graph) -> nx.DiGraph[Any]:
    """Copy the graph into a NetworkX DiGraph (isolated vertices included)."""
    g: nx.DiGraph[Any] = nx.DiGraph()
    g.add_nodes_from(graph.vertex_labels())
    for src, neighbors in graph.adjacency.items():
        g.add_edges_from((src, dest) for dest in neighbors)
    return g


# ------------------------------------------------------------------
# Matrices
# ------------------------------------------------------------------


def direct_adjacency_matrix(graph: Graph) -> Matrix:
    """One-hop connectivity; the diagonal is always True."""
    adjacency = graph.adjacency
    return Matrix.from_predicate(
        graph.vertex_labels(),
        lambda row, col: row == col or col in adjacency[row],
    )


def reachability_matrix(
    graph: Graph,
    *,
    strategy: ReachStrategy | str = ReachStrategy.PER_SOURCE,
) -> Matrix:
    """Transitive closure; entry (src, dest) is True iff dest is reachable from src."""
    strategy = ReachStrategy(strategy)
    labels = graph.vertex_labels()

    if strategy is ReachStrategy.PER_PAIR:
        return Matrix.from_predicate(
            labels,
            lambda src, dest: src == dest or has_path(graph, src, dest),
        )

    if strategy is ReachStrategy.PER_SOURCE:
        closure = {src: reachable_from(graph, src) for src in labels}
    else:
        g = to_networkx(graph)
        closure = {src: nx.descendants(g, src) | {src} for src in labels}

    return Matrix.from_predicate(labels, lambda src, dest: dest in closure[src])
