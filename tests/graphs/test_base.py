import pytest
from array_joiner import Edge, Vertex
from array_joiner.errors import GraphLookupError
from array_joiner.graphs import Graph, InMemoryGraph
from array_joiner.joiners import CacheHeuristic
from array_joiner.testing.graph_tests import (
    SAMPLE_EDGES,
    SAMPLE_WEIGHTS,
    GraphComplianceSuite,
)
from typing_extensions import override


class DictGraph(Graph):
    """Graph implementing only the abstract methods, over plain dicts."""

    def __init__(
        self, weights: dict[str, int], edges: list[tuple[str, str, int]], name: str
    ) -> None:
        self._name = name
        self._vertices = {id: Vertex(id, w) for id, w in weights.items()}
        self._edges = {frozenset((s, e)): Edge(s, e, w) for s, e, w in edges}

    @property
    @override
    def name(self) -> str:
        return self._name

    @override
    def all_vertex_ids(self) -> set[str]:
        return set(self._vertices)

    @override
    def vertex(self, id: str) -> Vertex:
        try:
            return self._vertices[id]
        except KeyError:
            raise self._missing_vertex(id) from None

    @override
    def edge(self, a: Vertex, b: Vertex) -> Edge:
        try:
            return self._edges[frozenset((a.id, b.id))]
        except KeyError:
            raise GraphLookupError(f"No edge between {a.id!r} and {b.id!r}") from None

    @override
    def all_edges(self) -> set[Edge]:
        return set(self._edges.values())

    @override
    def neighbors(self, vertex: Vertex) -> set[Vertex]:
        if vertex.id not in self._vertices:
            raise self._missing_vertex(vertex.id)
        return {
            self._vertices[e.end_differing_from(vertex.id)]
            for e in self._edges.values()
            if e.is_incident_to(vertex.id)
        }


class TestDefaultQueries(GraphComplianceSuite):
    @pytest.fixture(scope="class")
    def graph(self) -> Graph:
        return DictGraph(SAMPLE_WEIGHTS, SAMPLE_EDGES, name="sample")


def test_default_description():
    graph = DictGraph(SAMPLE_WEIGHTS, SAMPLE_EDGES, name="sample")
    assert graph.description() == "sample: 6 vertices, 4 edges"
    assert graph.edge_count() == 4


def test_join_matches_in_memory_graph():
    weights = dict.fromkeys(["L0", "L1", "R0", "R1", "R2"], 1)
    edges = [(left, right, 1) for left in ["L0", "L1"] for right in ["R0", "R1", "R2"]]
    expected = CacheHeuristic().join(InMemoryGraph.build(weights, edges))
    report = CacheHeuristic().join(DictGraph(weights, edges, name="graph"))

    assert report.visited_ids == ["R0", "L0", "R1", "R2", "L1", "R0", "R1"]
    assert report.visited_ids == expected.visited_ids
    assert report.evicted == expected.evicted
    assert report.edge_status == expected.edge_status
