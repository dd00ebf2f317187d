from collections.abc import Iterable, Mapping

import networkx as nx
from typing_extensions import override

from array_joiner.errors import GraphLookupError
from array_joiner.graphs.base import Graph
from array_joiner.types import Edge, Vertex

_VERTEX = "vertex"
_EDGE = "edge"


class InMemoryGraph(Graph):
    """
    Graph held in memory as an undirected `networkx.Graph`.

    Each node carries its `Vertex` and each edge its `Edge` as attributes, so
    lookups return the objects the graph was built from.
    """

    def __init__(
        self,
        vertices: Iterable[Vertex],
        edges: Iterable[Edge] = (),
        *,
        name: str = "graph",
    ) -> None:
        """
        Initialize the graph.

        Parameters
        ----------
        vertices :
            The vertices of the graph.
        edges :
            The edges of the graph. Both endpoints must be among `vertices`.
        name :
            The name of the graph.

        Raises
        ------
        ValueError
            If a vertex ID repeats, an edge has an unknown endpoint, connects
            a vertex to itself, or duplicates the endpoints or ID of another
            edge.
        """
        self._name = name
        self._graph = nx.Graph()
        for vertex in vertices:
            if vertex.id in self._graph:
                raise ValueError(f"Duplicate vertex id {vertex.id!r}")
            self._graph.add_node(vertex.id, **{_VERTEX: vertex})
        edge_ids: set[str] = set()
        for edge in edges:
            for endpoint in edge.nibs():
                if endpoint not in self._graph:
                    raise ValueError(f"Edge {edge} has unknown endpoint {endpoint!r}")
            if edge.start == edge.end:
                raise ValueError(f"Self loops are not supported: {edge}")
            if self._graph.has_edge(edge.start, edge.end):
                raise ValueError(f"Duplicate edge {edge}")
            if edge.id in edge_ids:
                raise ValueError(f"Duplicate edge id {edge.id!r}")
            edge_ids.add(edge.id)
            self._graph.add_edge(edge.start, edge.end, **{_EDGE: edge})

    @staticmethod
    def build(
        weights: Mapping[str, int],
        pairs: Iterable[tuple[str, str] | tuple[str, str, int]],
        *,
        name: str = "graph",
    ) -> "InMemoryGraph":
        """
        Build a graph from plain data.

        Parameters
        ----------
        weights :
            Vertex weights by vertex ID. Every vertex must be listed.
        pairs :
            Edges as `(start, end)` or `(start, end, weight)` tuples.
        name :
            The name of the graph.

        Returns
        -------
        :
            The graph.
        """
        return InMemoryGraph(
            [Vertex(id, weight) for id, weight in weights.items()],
            [Edge(*pair) for pair in pairs],
            name=name,
        )

    @property
    @override
    def name(self) -> str:
        return self._name

    @override
    def all_vertex_ids(self) -> set[str]:
        return set(self._graph.nodes)

    @override
    def vertex(self, id: str) -> Vertex:
        if id not in self._graph:
            raise self._missing_vertex(id)
        return self._graph.nodes[id][_VERTEX]

    @override
    def edge(self, a: Vertex, b: Vertex) -> Edge:
        data = self._graph.get_edge_data(a.id, b.id)
        if data is None:
            raise GraphLookupError(f"No edge between {a.id!r} and {b.id!r}")
        return data[_EDGE]

    @override
    def all_edges(self) -> set[Edge]:
        return {edge for _, _, edge in self._graph.edges(data=_EDGE)}

    @override
    def neighbors(self, vertex: Vertex) -> set[Vertex]:
        if vertex.id not in self._graph:
            raise self._missing_vertex(vertex.id)
        nodes = self._graph.nodes
        return {nodes[n][_VERTEX] for n in self._graph.neighbors(vertex.id)}

    @override
    def edge_count(self) -> int:
        return self._graph.number_of_edges()

    @override
    def degree(self, vertex: Vertex) -> int:
        if vertex.id not in self._graph:
            raise self._missing_vertex(vertex.id)
        return self._graph.degree[vertex.id]

    @override
    def are_directly_connected(self, a: Vertex, b: Vertex) -> bool:
        return self._graph.has_edge(a.id, b.id)

    @override
    def edge_surrounding(self, anchors: Iterable[Vertex]) -> set[Edge]:
        anchor_ids = {a.id for a in anchors if a.id in self._graph}
        return {
            edge for _, _, edge in nx.edge_boundary(self._graph, anchor_ids, data=_EDGE)
        }

    @override
    def description(self) -> str:
        kind = "bipartite graph" if nx.is_bipartite(self._graph) else "graph"
        return (
            f"{self._name}: {kind} with {self._graph.number_of_nodes()} vertices "
            f"and {self._graph.number_of_edges()} edges"
        )
