"""Domain layer: graph store, matrix value, and reachability engine.

Pure Python, no infrastructure dependencies beyond NetworkX for the
cross-check strategy.
"""

from reachctl.domain.errors import GraphInvariantError, UnknownVertexError
from reachctl.domain.graph import Edge, Graph
from reachctl.domain.matrix import Matrix
from reachctl.domain.reachability import (
    ReachStrategy,
    direct_adjacency_matrix,
    has_path,
    reachability_matrix,
    reachable_from,
)

__all__ = [
    "Edge",
    "Graph",
    "GraphInvariantError",
    "Matrix",
    "ReachStrategy",
    "UnknownVertexError",
    "direct_adjacency_matrix",
    "has_path",
    "reachability_matrix",
    "reachable_from",
]
