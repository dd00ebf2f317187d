import pytest
from array_joiner import Edge, Vertex
from array_joiner.graphs import Graph, InMemoryGraph
from array_joiner.testing.graph_tests import (
    SAMPLE_EDGES,
    SAMPLE_WEIGHTS,
    GraphComplianceSuite,
)


class TestInMemoryGraph(GraphComplianceSuite):
    @pytest.fixture(scope="class")
    def graph(self) -> Graph:
        return InMemoryGraph.build(SAMPLE_WEIGHTS, SAMPLE_EDGES, name="sample")


def test_build_defaults():
    graph = InMemoryGraph.build({"a": 1, "b": 2}, [("a", "b")])
    assert graph.name == "graph"
    edge = graph.edge(Vertex("a", 1), Vertex("b", 2))
    assert edge == Edge("a", "b")
    assert edge.weight == 0


def test_keeps_given_objects():
    edge = Edge("a", "b", 3, id="ab")
    graph = InMemoryGraph([Vertex("a"), Vertex("b")], [edge])
    assert graph.edge(Vertex("a"), Vertex("b")) is edge
    assert graph.all_edges() == {edge}


def test_duplicate_vertex():
    with pytest.raises(ValueError, match="Duplicate vertex id 'a'"):
        InMemoryGraph([Vertex("a", 1), Vertex("a", 2)])


def test_unknown_endpoint():
    with pytest.raises(ValueError, match="unknown endpoint 'z'"):
        InMemoryGraph.build({"a": 1}, [("a", "z")])


def test_self_loop():
    with pytest.raises(ValueError, match="Self loops"):
        InMemoryGraph.build({"a": 1}, [("a", "a")])


@pytest.mark.parametrize("second", [("a", "b"), ("b", "a")], ids=["same", "reversed"])
def test_duplicate_edge(second: tuple[str, str]):
    with pytest.raises(ValueError, match="Duplicate edge"):
        InMemoryGraph.build({"a": 1, "b": 1}, [("a", "b"), second])


def test_duplicate_edge_id():
    vertices = [Vertex(id, 1) for id in "ABCD"]
    with pytest.raises(ValueError, match="Duplicate edge id 'e'"):
        InMemoryGraph(vertices, [Edge("A", "B", id="e"), Edge("C", "D", id="e")])


def test_description():
    square = InMemoryGraph.build(
        dict.fromkeys("ABCD", 1),
        [("A", "B"), ("B", "C"), ("C", "D"), ("D", "A")],
        name="square",
    )
    assert square.description() == "square: bipartite graph with 4 vertices and 4 edges"

    triangle = InMemoryGraph.build(
        dict.fromkeys("ABC", 1), [("A", "B"), ("B", "C"), ("C", "A")], name="triangle"
    )
    assert triangle.description() == "triangle: graph with 3 vertices and 3 edges"


def test_unknown_vertex_degree():
    graph = InMemoryGraph.build({"a": 1}, [])
    with pytest.raises(LookupError):
        graph.degree(Vertex("z"))
    assert not graph.are_directly_connected(Vertex("a"), Vertex("z"))
    assert graph.edge_surrounding([Vertex("z")]) == set()
