"""Tests for the Graph store — construction and normalization."""

from __future__ import annotations

import pytest

from reachctl.domain.errors import GraphInvariantError, UnknownVertexError
from reachctl.domain.generator import EdgeGenerator
from reachctl.domain.graph import Edge, Graph

# Deterministic edge lists used for the property-style checks below.
EDGE_LISTS: list[list[tuple[str, str]]] = [
    [],
    [("A", "B")],
    [("A", "A")],
    [("A", "B"), ("A", "B"), ("B", "A")],
    [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")],
    [("X", "Y"), ("Y", "Y"), ("Z", "X"), ("X", "Z"), ("X", "Y")],
    EdgeGenerator(40, 6, seed=3).edges(),
    EdgeGenerator(60, 26, seed=11).edges(),
]


def _snapshot(g: Graph) -> dict[str, list[str]]:
    return {k: list(v) for k, v in g.adjacency.items()}


class TestBuild:
    def test_empty(self) -> None:
        g = Graph.build([])
        assert g.vertex_count == 0
        assert len(g) == 0
        assert g.vertex_labels() == []
        assert dict(g.adjacency) == {}

    def test_default_constructor_is_empty(self) -> None:
        assert Graph().vertex_count == 0

    def test_single_edge_creates_both_vertices(self) -> None:
        g = Graph.build([("A", "B")])
        assert g.vertex_count == 2
        assert g.neighbors("A") == ("B",)
        assert g.neighbors("B") == ()

    def test_keeps_insertion_order(self) -> None:
        g = Graph.build([("A", "C"), ("A", "B"), ("A", "D")])
        assert g.neighbors("A") == ("C", "B", "D")

    def test_duplicates_dropped(self) -> None:
        g = Graph.build([("A", "B"), ("A", "C"), ("A", "B")])
        assert g.neighbors("A") == ("B", "C")
        assert g.edge_count == 2

    def test_self_loop_on_new_source_starts_empty(self) -> None:
        g = Graph.build([("A", "A")])
        assert g.vertex_count == 1
        assert g.neighbors("A") == ()

    def test_self_loop_on_existing_source_dropped(self) -> None:
        g = Graph.build([("A", "B"), ("A", "A")])
        assert g.neighbors("A") == ("B",)

    def test_accepts_edge_tuples_and_generators(self) -> None:
        g = Graph.build(Edge("A", c) for c in "BC")
        assert g.neighbors("A") == ("B", "C")

    def test_constructor_matches_build(self) -> None:
        edges = [("B", "A"), ("A", "C")]
        assert _snapshot(Graph(edges)) == _snapshot(Graph.build(edges))

    def test_non_string_labels(self) -> None:
        g = Graph.build([(3, 1), (1, 2), (2, 2)])
        assert g.vertex_labels() == [1, 2, 3]
        assert g.neighbors(2) == ()


class TestAddEdge:
    def test_mutates_in_place(self) -> None:
        g = Graph.build([("A", "B")])
        g.add_edge("B", "C")
        assert g.vertex_count == 3
        assert g.neighbors("B") == ("C",)

    def test_returns_none(self) -> None:
        g = Graph()
        assert g.add_edge("A", "B") is None  # type: ignore[func-returns-value]

    def test_isolated_vertex_from_self_loop(self) -> None:
        g = Graph.build([("A", "B")])
        g.add_edge("C", "C")
        assert "C" in g
        assert g.neighbors("C") == ()
        assert g.vertex_count == 3

    def test_existing_destination_not_reset(self) -> None:
        g = Graph.build([("A", "B"), ("B", "C")])
        g.add_edge("A", "B")
        assert g.neighbors("B") == ("C",)

    def test_add_edges(self) -> None:
        g = Graph()
        g.add_edges([("A", "B"), ("B", "C")])
        assert g.vertex_labels() == ["A", "B", "C"]


class TestProperties:
    @pytest.mark.parametrize("edges", EDGE_LISTS)
    def test_idempotent_dedup(self, edges: list[tuple[str, str]]) -> None:
        g = Graph.build(edges)
        before = _snapshot(g)
        count = g.vertex_count
        for src, dest in edges:
            g.add_edge(src, dest)
        assert _snapshot(g) == before
        assert g.vertex_count == count

    @pytest.mark.parametrize("edges", EDGE_LISTS)
    def test_self_loops_suppressed(self, edges: list[tuple[str, str]]) -> None:
        g = Graph.build(edges)
        for label in list(g.vertex_labels()) + ["NEW"]:
            g.add_edge(label, label)
            assert label in g
            assert label not in g.neighbors(label)

    @pytest.mark.parametrize("edges", EDGE_LISTS)
    def test_completeness(self, edges: list[tuple[str, str]]) -> None:
        g = Graph.build(edges)
        for src, dest in edges:
            assert src in g.adjacency
            assert dest in g.adjacency

    @pytest.mark.parametrize("edges", EDGE_LISTS)
    def test_no_duplicate_neighbors(self, edges: list[tuple[str, str]]) -> None:
        g = Graph.build(edges)
        for neighbors in g.adjacency.values():
            assert len(neighbors) == len(set(neighbors))

    @pytest.mark.parametrize("edges", EDGE_LISTS)
    def test_vertex_count_matches_keys(self, edges: list[tuple[str, str]]) -> None:
        g = Graph.build(edges)
        assert g.vertex_count == len(g.adjacency)
        labels = {label for edge in edges for label in edge}
        assert g.vertex_count == len(labels)


class TestReadAccess:
    def test_vertex_labels_sorted(self) -> None:
        g = Graph.build([("D", "B"), ("C", "A")])
        assert g.vertex_labels() == ["A", "B", "C", "D"]
        assert list(g) == ["A", "B", "C", "D"]

    def test_adjacency_is_read_only(self) -> None:
        g = Graph.build([("A", "B")])
        with pytest.raises(TypeError):
            g.adjacency["Z"] = []  # type: ignore[index]

    def test_adjacency_neighbor_lists_are_immutable(self) -> None:
        g = Graph.build([("A", "B")])
        assert g.adjacency["A"] == ("B",)
        with pytest.raises(AttributeError):
            g.adjacency["A"].append("A")  # type: ignore[attr-defined]
        assert g.neighbors("A") == ("B",)

    def test_neighbors_unknown_vertex(self) -> None:
        g = Graph.build([("A", "B")])
        with pytest.raises(UnknownVertexError) as exc_info:
            g.neighbors("Z")
        assert exc_info.value.label == "Z"
        assert "vertex not found" in str(exc_info.value)

    def test_adjacency_list_sorted_snapshot(self) -> None:
        g = Graph.build([("B", "A"), ("A", "C")])
        snap = g.adjacency_list()
        assert list(snap) == ["A", "B", "C"]
        snap["A"].append("Z")
        assert g.neighbors("A") == ("C",)

    def test_edge_count(self, cycle_graph: Graph) -> None:
        assert cycle_graph.edge_count == 4

    def test_repr(self, cycle_graph: Graph) -> None:
        assert repr(cycle_graph) == "Graph(vertices=4, edges=4)"


class TestInvariantCheck:
    def test_corrupted_adjacency_detected(self) -> None:
        g = Graph.build([("A", "B")])
        g._adjacency["A"].append("A")
        with pytest.raises(GraphInvariantError, match="self-loop"):
            g.add_edge("A", "C")

    def test_corrupted_duplicates_detected(self) -> None:
        g = Graph.build([("A", "B")])
        g._adjacency["A"].append("B")
        with pytest.raises(GraphInvariantError, match="duplicate"):
            g.add_edge("A", "C")
