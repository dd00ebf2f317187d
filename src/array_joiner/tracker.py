"""Tracks the state of a single join traversal."""

from __future__ import annotations

import enum
from collections import Counter
from collections.abc import Callable, Iterable, Mapping
from types import MappingProxyType
from typing import TypeAlias

from array_joiner.errors import UnknownIdError
from array_joiner.types import Edge, Vertex

Combine: TypeAlias = Callable[[int, Vertex], int]
"""Folds a visited vertex into the running accumulator."""


class Status(enum.IntEnum):
    """Traversal status of a vertex or edge. `DONE` is terminal."""

    UNTOUCHED = 0
    DONE = 1


def add_weight(accumulator: int, vertex: Vertex) -> int:
    """Add the weight of `vertex` to the accumulator."""
    return accumulator + vertex.weight


class TraversalTracker:
    """
    Status, visit and accumulator bookkeeping for one join.

    Every vertex and edge ID must be registered before it is marked or looked
    up. Statuses only move forward: once an ID is `DONE` it stays `DONE`.

    This class should not be reused between joins.
    """

    def __init__(self, combine: Combine | None = None, initial: int = 0) -> None:
        self._combine: Combine | None = combine
        self._vertex_status: dict[str, Status] = {}
        self._edge_status: dict[str, Status] = {}
        self._visit_counts: Counter[str] = Counter()
        self._visit_result: list[Vertex] = []
        self._finished = False
        self.accumulator: int = initial

    def register_vertices(
        self, ids: Iterable[str], status: Status = Status.UNTOUCHED
    ) -> None:
        """Register every vertex ID with the given status."""
        self._vertex_status.update(dict.fromkeys(ids, status))

    def register_edges(
        self, ids: Iterable[str], status: Status = Status.UNTOUCHED
    ) -> None:
        """Register every edge ID with the given status."""
        self._edge_status.update(dict.fromkeys(ids, status))

    def set_accumulator_updater(self, combine: Combine) -> None:
        """Install the function folding visited vertices into the accumulator."""
        self._combine = combine

    def mark_vertex(self, vertex: Vertex, status: Status) -> None:
        """
        Set the status of a vertex.

        Raises
        ------
        UnknownIdError
            If the vertex was never registered.
        ValueError
            If this would move a `DONE` vertex back to `UNTOUCHED`.
        """
        _advance(self._vertex_status, vertex.id, status, "vertex")

    def mark_edge(self, edge: Edge, status: Status) -> None:
        """
        Set the status of an edge.

        Raises
        ------
        UnknownIdError
            If the edge was never registered.
        ValueError
            If this would move a `DONE` edge back to `UNTOUCHED`.
        """
        _advance(self._edge_status, edge.id, status, "edge")

    def status_of_vertex(self, vertex: Vertex) -> Status:
        """Return the status of a registered vertex."""
        return _lookup(self._vertex_status, vertex.id, "vertex")

    def status_of_edge(self, edge: Edge) -> Status:
        """Return the status of a registered edge."""
        return _lookup(self._edge_status, edge.id, "edge")

    def account_vertex_visit(self, vertex: Vertex) -> None:
        self._visit_counts[vertex.id] += 1

    def push_to_visit_result(self, vertex: Vertex) -> None:
        self._visit_result.append(vertex)

    def update_accumulator_by(self, vertex: Vertex) -> None:
        """
        Fold `vertex` into the accumulator.

        Raises
        ------
        RuntimeError
            If no accumulator updater has been installed.
        """
        if self._combine is None:
            raise RuntimeError("Accumulator updater must be set before visiting")
        self.accumulator = self._combine(self.accumulator, vertex)

    def count_edges_marked(self, status: Status) -> int:
        """Return the number of edges currently at `status`."""
        return sum(1 for s in self._edge_status.values() if s is status)

    def finish(self) -> None:
        self._finished = True

    def finish_if(self, condition: bool) -> None:
        if condition:
            self._finished = True

    def is_not_finished(self) -> bool:
        return not self._finished

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def visit_result(self) -> tuple[Vertex, ...]:
        """The visited vertices in visit order."""
        return tuple(self._visit_result)

    @property
    def visit_counts(self) -> Mapping[str, int]:
        """How often each visited vertex was visited."""
        return MappingProxyType(self._visit_counts)

    @property
    def vertex_status(self) -> Mapping[str, Status]:
        return MappingProxyType(self._vertex_status)

    @property
    def edge_status(self) -> Mapping[str, Status]:
        return MappingProxyType(self._edge_status)


def _lookup(statuses: dict[str, Status], id: str, kind: str) -> Status:
    try:
        return statuses[id]
    except KeyError:
        raise UnknownIdError(f"Unregistered {kind} id: {id!r}") from None


def _advance(statuses: dict[str, Status], id: str, status: Status, kind: str) -> None:
    current = _lookup(statuses, id, kind)
    if status < current:
        raise ValueError(
            f"Cannot move {kind} {id!r} from {current.name} to {status.name}"
        )
    statuses[id] = status
