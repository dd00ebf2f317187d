"""Defines the `Vertex` and `Edge` classes joined by the joiners."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

_READ_ONLY_EDGE_FIELDS = frozenset({"start", "end", "id"})


@dataclass(frozen=True)
class Vertex:
    """
    A vertex of the joined graph.

    The degree of a vertex is a property of the graph containing it and is
    not stored here.

    Parameters
    ----------
    id :
        The unique identifier of the vertex.
    weight :
        The weight of the vertex, accumulated when the vertex is visited.
    """

    id: str
    weight: int = 0

    def __str__(self) -> str:
        return f"{self.id}({self.weight})"


@dataclass(eq=False)
class Edge:
    """
    An edge between two vertices, identified by the vertex IDs.

    Everything except `weight` is read-only once the edge is created. Edges are
    equal (and hash) by `id`.

    Parameters
    ----------
    start :
        The ID of the start vertex.
    end :
        The ID of the end vertex.
    weight :
        The weight of the edge.
    id :
        The ID of the edge. Defaults to `"<start>--><end>"`.
    """

    start: str
    end: str
    weight: int = 0
    id: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            # `id` is read-only, so bypass `__setattr__` as a frozen dataclass would.
            object.__setattr__(self, "id", f"{self.start}-->{self.end}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in _READ_ONLY_EDGE_FIELDS and name in self.__dict__:
            raise dataclasses.FrozenInstanceError(f"cannot assign to field '{name}'")
        object.__setattr__(self, name, value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __str__(self) -> str:
        return f".{self.start}--{self.weight}-->{self.end}."

    def is_incident_to(self, vertex_id: str) -> bool:
        """Return whether the edge touches the vertex with the given ID."""
        return vertex_id in (self.start, self.end)

    def end_differing_from(self, vertex_id: str) -> str:
        """Return the endpoint ID that is not `vertex_id`."""
        return self.end if self.start == vertex_id else self.start

    def nibs(self) -> tuple[str, str]:
        """Return both endpoint IDs."""
        return (self.start, self.end)
