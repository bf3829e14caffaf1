"""Graph store — vertex set and normalized adjacency relation.

The vertex set *is* the key set of the adjacency mapping. Every mutation
goes through :meth:`Graph.add_edge`, which keeps four invariants:

1. both endpoints of every edge seen are keys of the adjacency mapping,
2. no neighbor list holds duplicates,
3. no neighbor list holds its own vertex (self-loops are dropped),
4. ``vertex_count`` equals the number of adjacency keys.

Neighbor lists keep insertion order. Readers get tuple snapshots, so
the only way to change the relation is through ``add_edge``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any, NamedTuple, TypeAlias

from reachctl.domain.errors import GraphInvariantError, UnknownVertexError

logger = logging.getLogger(__name__)

# Labels must be hashable (adjacency keys) and orderable (matrix order).
Label: TypeAlias = Any


class Edge(NamedTuple):
    """An ordered (source, destination) pair fed into the graph."""

    src: Label
    dest: Label


class Graph:
    """Directed graph built from labeled edges.

    Usage::

        g = Graph.build([("A", "B"), ("B", "C")])
        g.add_edge("C", "A")
        g.vertex_labels()  # ['A', 'B', 'C']
    """

    __slots__ = ("_adjacency", "vertex_count")

    def __init__(self, edges: Iterable[tuple[Label, Label]] = ()) -> None:
        self._adjacency: dict[Label, list[Label]] = {}
        self.vertex_count = 0
        self.add_edges(edges)

    @classmethod
    def build(cls, edges: Iterable[tuple[Label, Label]]) -> Graph:
        """Build a graph from *edges* in input order. Empty input gives an empty graph."""
        return cls(edges)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_edge(self, src: Label, dest: Label) -> None:
        """Insert one edge, dropping self-loops and duplicates.

        Both endpoints become vertices even when the edge itself is
        dropped, so ``add_edge("C", "C")`` yields an isolated ``C``.
        """
        neighbors = self._adjacency.get(src)
        if neighbors is None:
            self._adjacency[src] = [] if dest == src else [dest]
        elif dest == src:
            logger.debug("Dropped self-loop on %r", src)
        elif dest in neighbors:
            logger.debug("Dropped duplicate edge %r -> %r", src, dest)
        else:
            neighbors.append(dest)

        if dest not in self._adjacency:
            self._adjacency[dest] = []

        self.vertex_count = len(self._adjacency)
        self._check_invariants(src, dest)

    def add_edges(self, edges: Iterable[tuple[Label, Label]]) -> None:
        """Insert every edge of *edges* in order."""
        for src, dest in edges:
            self.add_edge(src, dest)

    def _check_invariants(self, src: Label, dest: Label) -> None:
        """Verify the invariants touched by inserting ``src -> dest``."""
        if src not in self._adjacency or dest not in self._adjacency:
            raise GraphInvariantError(f"edge {src!r} -> {dest!r} left a dangling endpoint")
        neighbors = self._adjacency[src]
        if src in neighbors:
            raise GraphInvariantError(f"self-loop stored on {src!r}")
        if len(set(neighbors)) != len(neighbors):
            raise GraphInvariantError(f"duplicate neighbors stored on {src!r}")
        if self.vertex_count != len(self._adjacency):
            raise GraphInvariantError("vertex_count out of sync with adjacency")

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def adjacency(self) -> Mapping[Label, tuple[Label, ...]]:
        """Read-only snapshot of the adjacency mapping with tuple neighbor lists."""
        return MappingProxyType({label: tuple(n) for label, n in self._adjacency.items()})

    @property
    def edge_count(self) -> int:
        """Number of stored (deduplicated, non-loop) edges."""
        return sum(len(neighbors) for neighbors in self._adjacency.values())

    def vertex_labels(self) -> list[Label]:
        """All labels in sorted order; rows and columns of every matrix follow it."""
        return sorted(self._adjacency)

    def neighbors(self, label: Label) -> tuple[Label, ...]:
        """Direct successors of *label* in insertion order."""
        try:
            return tuple(self._adjacency[label])
        except KeyError:
            raise UnknownVertexError(label) from None

    def adjacency_list(self) -> dict[Label, list[Label]]:
        """Snapshot of the adjacency mapping keyed in label order."""
        return {label: list(self._adjacency[label]) for label in self.vertex_labels()}

    def __contains__(self, label: object) -> bool:
        return label in self._adjacency

    def __len__(self) -> int:
        return self.vertex_count

    def __iter__(self) -> Iterator[Label]:
        return iter(self.vertex_labels())

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
