"""GraphService — adjacency list, adjacency/path matrices, and path queries.

Thin adapter between the domain engine and the output layer: each
operation wraps engine results in a ServiceResult whose data is plain
JSON-ready structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from reachctl.domain.errors import UnknownVertexError
from reachctl.domain.reachability import (
    ReachStrategy,
    direct_adjacency_matrix,
    has_path,
    reachability_matrix,
)
from reachctl.services.base import BaseService
from reachctl.services.result import ServiceResult
from reachctl.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from reachctl.domain.graph import Graph
    from reachctl.domain.matrix import Matrix


class GraphService(BaseService):
    """Reachability queries over a borrowed graph."""

    def __init__(
        self,
        graph: Graph,
        *,
        strategy: ReachStrategy | str = ReachStrategy.PER_SOURCE,
    ) -> None:
        super().__init__(graph)
        self._strategy = ReachStrategy(strategy)

    @property
    def strategy(self) -> ReachStrategy:
        return self._strategy

    # ------------------------------------------------------------------
    # Shared helpers
    # ------------------------------------------------------------------

    def _adjacency_data(self) -> dict[str, list[str]]:
        return {
            str(label): [str(n) for n in neighbors]
            for label, neighbors in self._graph.adjacency_list().items()
        }

    def _size(self) -> dict[str, int]:
        return {"vertices": self._graph.vertex_count, "edges": self._graph.edge_count}

    def _build_adjacency_matrix(self) -> Matrix:
        with trace_span("adjacency_matrix", **self._size()):
            return direct_adjacency_matrix(self._graph)

    def _build_path_matrix(self) -> Matrix:
        with trace_span("path_matrix", strategy=str(self._strategy), **self._size()) as span:
            matrix = reachability_matrix(self._graph, strategy=self._strategy)
            if span:
                span.annotate(reachable_pairs=matrix.count_true())
            return matrix

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @traced
    def adjacency_list(self) -> ServiceResult:
        """Vertex count plus each vertex's successors in stored order."""
        return ServiceResult.success(
            "adjacency_list",
            {
                "vertex_count": self._graph.vertex_count,
                "edge_count": self._graph.edge_count,
                "adjacency": self._adjacency_data(),
            },
        )

    @traced
    def adjacency_matrix(self) -> ServiceResult:
        """Direct one-hop matrix (diagonal always set)."""
        matrix = self._build_adjacency_matrix()
        return ServiceResult.success(
            "adjacency_matrix",
            {"vertex_count": len(matrix), "matrix": matrix.to_data()},
        )

    @traced
    def path_matrix(self) -> ServiceResult:
        """Transitive reachability matrix computed with the configured strategy."""
        matrix = self._build_path_matrix()
        return ServiceResult.success(
            "path_matrix",
            {
                "vertex_count": len(matrix),
                "strategy": str(self._strategy),
                "matrix": matrix.to_data(),
            },
        )

    @traced
    def matrices(self) -> ServiceResult:
        """Full report: adjacency list, path matrix, then adjacency matrix."""
        warnings: list[str] = []
        if self._graph.vertex_count == 0:
            warnings.append("Graph has no vertices")
        path = self._build_path_matrix()
        adjacency = self._build_adjacency_matrix()
        return ServiceResult.success(
            "matrices",
            {
                "vertex_count": self._graph.vertex_count,
                "edge_count": self._graph.edge_count,
                "strategy": str(self._strategy),
                "adjacency_list": self._adjacency_data(),
                "path_matrix": path.to_data(),
                "adjacency_matrix": adjacency.to_data(),
            },
            warnings=warnings,
        )

    @traced
    def has_path(self, source: Any, target: Any) -> ServiceResult:
        """Whether *target* is reachable from *source*."""
        op = "has_path"
        for label, role in ((source, "source"), (target, "target")):
            if label not in self._graph:
                return self._not_found(op, UnknownVertexError(label), role=role)

        with trace_span("dfs") as span:
            reachable = has_path(self._graph, source, target)
            if span:
                span.annotate(reachable=reachable)

        return ServiceResult.success(
            op,
            {"source": str(source), "target": str(target), "reachable": reachable},
        )
