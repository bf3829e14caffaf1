"""Domain exceptions.

Both signal programming-contract violations rather than recoverable
conditions: callers asked about a label the graph never saw, or the
graph store broke one of its own invariants.
"""

from __future__ import annotations

from typing import Any


class UnknownVertexError(LookupError):
    """Raised when a label is not a vertex of the graph."""

    def __init__(self, label: Any) -> None:
        super().__init__(f"vertex not found: {label!r}")
        self.label = label


class GraphInvariantError(AssertionError):
    """Raised when the adjacency mapping violates a normalization invariant."""
