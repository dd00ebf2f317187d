"""Defines the base class for graphs the joiners operate on."""

from __future__ import annotations

import abc
from collections.abc import Callable, Iterable

from array_joiner.errors import GraphLookupError
from array_joiner.types import Edge, Vertex


class Graph(abc.ABC):
    """
    Read-only view of a weighted graph used during a join.

    Implementations provide vertex, edge and adjacency lookups. The derived
    queries used by the joiners have default implementations in terms of
    those, which implementations may override with faster versions.

    A graph must not change while a join is running over it.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The name of the graph."""
        ...

    @abc.abstractmethod
    def all_vertex_ids(self) -> set[str]:
        """Return the IDs of every vertex."""
        ...

    @abc.abstractmethod
    def vertex(self, id: str) -> Vertex:
        """
        Return the vertex with the given ID.

        Parameters
        ----------
        id :
            The vertex ID.

        Returns
        -------
        :
            The vertex.

        Raises
        ------
        GraphLookupError
            If there is no such vertex.
        """
        ...

    @abc.abstractmethod
    def edge(self, a: Vertex, b: Vertex) -> Edge:
        """
        Return the edge between two vertices, in either orientation.

        Parameters
        ----------
        a :
            One endpoint.
        b :
            The other endpoint.

        Returns
        -------
        :
            The edge connecting `a` and `b`.

        Raises
        ------
        GraphLookupError
            If the vertices are not connected.
        """
        ...

    @abc.abstractmethod
    def all_edges(self) -> set[Edge]:
        """Return every edge."""
        ...

    @abc.abstractmethod
    def neighbors(self, vertex: Vertex) -> set[Vertex]:
        """
        Return the vertices sharing an edge with `vertex`.

        Raises
        ------
        GraphLookupError
            If there is no such vertex.
        """
        ...

    def vertices(self) -> list[Vertex]:
        """Return every vertex."""
        return [self.vertex(id) for id in self.all_vertex_ids()]

    def edge_count(self) -> int:
        return len(self.all_edges())

    def degree(self, vertex: Vertex) -> int:
        return len(self.neighbors(vertex))

    def are_directly_connected(self, a: Vertex, b: Vertex) -> bool:
        """Return whether an edge connects `a` and `b`."""
        return b in self.neighbors(a)

    def edges_around(self, vertex: Vertex, resident: Iterable[Vertex]) -> set[Edge]:
        """
        Return the edges at `vertex` whose endpoints are both resident.

        Parameters
        ----------
        vertex :
            The vertex the edges must touch.
        resident :
            The vertices currently held in a cache.

        Returns
        -------
        :
            Edges incident to `vertex` with the other endpoint in `resident`.
            Empty if `vertex` itself is not resident.
        """
        resident = set(resident)
        if vertex not in resident:
            return set()
        return {self.edge(vertex, n) for n in self.neighbors(vertex) if n in resident}

    def edge_surrounding(self, anchors: Iterable[Vertex]) -> set[Edge]:
        """
        Return the edges with exactly one endpoint among the `anchors`.

        Parameters
        ----------
        anchors :
            The vertices to find the boundary of.

        Returns
        -------
        :
            Edges leaving the anchor set.
        """
        anchors = set(anchors)
        return {
            self.edge(anchor, n)
            for anchor in anchors
            for n in self.neighbors(anchor)
            if n not in anchors
        }

    def neighbors_matching(
        self, predicate: Callable[[Vertex], bool], vertex: Vertex
    ) -> set[Vertex]:
        """Return the neighbors of `vertex` for which `predicate` holds."""
        return {n for n in self.neighbors(vertex) if predicate(n)}

    def description(self) -> str:
        """Return a short human readable description of the graph."""
        return (
            f"{self.name}: {len(self.all_vertex_ids())} vertices, "
            f"{self.edge_count()} edges"
        )

    def _missing_vertex(self, id: str) -> GraphLookupError:
        return GraphLookupError(f"No vertex {id!r} in graph {self.name!r}")
