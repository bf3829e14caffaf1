"""BaseService — shared foundation for services operating on a Graph.

Every service borrows a :class:`~reachctl.domain.graph.Graph` at
construction time and never mutates it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from reachctl.services.result import ServiceResult

if TYPE_CHECKING:
    from reachctl.domain.errors import UnknownVertexError
    from reachctl.domain.graph import Graph


class BaseService:
    """Base for service-layer classes.

    Usage::

        class GraphService(BaseService):
            def adjacency_matrix(self) -> ServiceResult:
                matrix = direct_adjacency_matrix(self._graph)
                ...
    """

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    @staticmethod
    def _not_found(op: str, exc: UnknownVertexError, *, role: str) -> ServiceResult:
        """Failed result for a label the graph does not contain."""
        return ServiceResult.failure(
            op,
            "NOT_FOUND",
            f"Vertex '{exc.label}' ({role}) not found in graph",
            detail={"label": str(exc.label), "role": role},
        )
