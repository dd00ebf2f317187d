"""Defines the `JoinReport` produced by a finished join."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from immutabledict import immutabledict

from array_joiner.tracker import Status, TraversalTracker
from array_joiner.types import Vertex


@dataclass(frozen=True)
class JoinReport:
    """
    Snapshot of a finished join.

    Parameters
    ----------
    joiner :
        Name of the joiner that produced the report, including its capacity.
    graph_name :
        Name of the joined graph.
    graph_description :
        Description of the joined graph.
    visit_sequence :
        The visited vertices, one per iteration, in visit order.
    accumulator :
        The final accumulator value.
    vertex_visits :
        How many times each visited vertex was visited.
    edge_status :
        Final status of every edge, by edge ID.
    evicted :
        Vertices evicted from the cache, in eviction order.
    """

    joiner: str
    graph_name: str
    graph_description: str
    visit_sequence: tuple[Vertex, ...]
    accumulator: int
    vertex_visits: immutabledict[str, int] = field(default_factory=immutabledict)
    edge_status: immutabledict[str, Status] = field(default_factory=immutabledict)
    evicted: tuple[Vertex, ...] = ()

    @staticmethod
    def from_traversal(
        tracker: TraversalTracker,
        *,
        joiner: str,
        graph_name: str,
        graph_description: str,
        evicted: Iterable[Vertex] = (),
    ) -> JoinReport:
        """
        Create a report from the final state of a traversal.

        Parameters
        ----------
        tracker :
            The tracker of the finished traversal.
        joiner :
            Name of the joiner.
        graph_name :
            Name of the joined graph.
        graph_description :
            Description of the joined graph.
        evicted :
            Vertices evicted during the traversal, in eviction order.

        Returns
        -------
        :
            The report.
        """
        return JoinReport(
            joiner=joiner,
            graph_name=graph_name,
            graph_description=graph_description,
            visit_sequence=tracker.visit_result,
            accumulator=tracker.accumulator,
            vertex_visits=immutabledict(tracker.visit_counts),
            edge_status=immutabledict(tracker.edge_status),
            evicted=tuple(evicted),
        )

    @property
    def iterations(self) -> int:
        """Number of main-loop iterations."""
        return len(self.visit_sequence)

    @property
    def visited_ids(self) -> list[str]:
        return [v.id for v in self.visit_sequence]

    @property
    def total_visits(self) -> int:
        return sum(self.vertex_visits.values())

    @property
    def unfinished_edge_ids(self) -> list[str]:
        """IDs of the edges that did not reach `DONE`, sorted."""
        return sorted(id for id, s in self.edge_status.items() if s is not Status.DONE)
