"""Provide the cache-aware greedy joiner."""

import dataclasses
import logging
from collections.abc import Callable

from typing_extensions import override

from array_joiner.cache import BoundedCache, CacheEntry
from array_joiner.errors import (
    CacheStateError,
    IncompleteJoinError,
    NoStartVertexError,
)
from array_joiner.graphs import Graph
from array_joiner.joiners.base import Joiner
from array_joiner.report import JoinReport
from array_joiner.tracker import Combine, Status, TraversalTracker, add_weight
from array_joiner.types import Vertex

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 2

EvictionRank = Callable[[CacheEntry[Vertex]], tuple[int, int, str]]


@dataclasses.dataclass(kw_only=True)
class CacheHeuristic(Joiner):
    """
    Greedy joiner that keeps at most `capacity` vertices in a cache.

    Each iteration loads the current vertex into the cache and marks every edge
    between it and another resident vertex as done. The next vertex is chosen
    from the outer ends of the unfinished edges leaving the cache, preferring
    untouched vertices, then vertices with the fewest unfinished edges, then
    heavier vertices. If no unfinished edge leaves the cache, any endpoint of
    any unfinished edge is considered instead.

    When the cache is full one entry is evicted before moving on. Entries
    adjacent to the next vertex are kept; among the others the one with the
    fewest unfinished edges goes first.

    All choices break remaining ties by vertex ID, so joins are reproducible.

    Parameters
    ----------
    capacity :
        Number of vertices the cache holds. At least 2, since an edge is only
        processed while both of its endpoints are resident.
    max_iterations :
        Maximum number of vertex visits before giving up with an
        `IncompleteJoinError`. If `None`, there is no limit.
    accumulate :
        Folds each visited vertex into the report accumulator. Defaults to
        summing vertex weights.
    cache_factory :
        Creates the cache for a given capacity.
    """

    capacity: int = DEFAULT_CAPACITY
    max_iterations: int | None = None
    accumulate: Combine = add_weight
    cache_factory: Callable[[int], BoundedCache[Vertex]] = BoundedCache

    _cache: BoundedCache[Vertex] = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.capacity < 2:
            raise ValueError(f"Capacity must be at least 2, got {self.capacity}")
        if self.max_iterations is not None and self.max_iterations < 1:
            raise ValueError(
                f"max_iterations must be positive, got {self.max_iterations}"
            )
        self._cache = self.cache_factory(self.capacity)
        if self._cache.capacity != self.capacity:
            raise ValueError(
                f"cache_factory built a cache of capacity {self._cache.capacity}"
                f" for capacity {self.capacity}"
            )

    @property
    @override
    def name(self) -> str:
        return f"cacheHeuristic-joiner<{self.capacity}>"

    @override
    def join(self, graph: Graph) -> JoinReport:
        logger.info("%s is joining %s", self, graph.name)
        cache = self._cache
        cache.clear()

        tracker = TraversalTracker(combine=self.accumulate)
        tracker.register_vertices(graph.all_vertex_ids(), Status.UNTOUCHED)
        tracker.register_edges((e.id for e in graph.all_edges()), Status.UNTOUCHED)

        current = self._pick_first_vertex(graph)
        edge_count = graph.edge_count()
        processed_edges = 0
        iteration = 0
        evicted: list[Vertex] = []

        while tracker.is_not_finished():
            iteration += 1
            if self.max_iterations is not None and iteration > self.max_iterations:
                raise IncompleteJoinError(
                    f"{self} gave up on {graph.name} after {self.max_iterations}"
                    f" iterations with {edge_count - processed_edges} edges left"
                )
            logger.debug("Iteration %d: processing %s", iteration, current)
            tracker.mark_vertex(current, Status.DONE)
            tracker.account_vertex_visit(current)
            tracker.push_to_visit_result(current)
            tracker.update_accumulator_by(current)

            cache.load(current)
            for edge in graph.edges_around(current, cache.values()):
                tracker.mark_edge(edge, Status.DONE)

            next_vertex = self._pick_next(current, graph, tracker)
            if next_vertex is None:
                logger.debug("Finishing as there are no more next vertices")
                tracker.finish()
                continue

            if cache.is_full:
                victim = cache.evict(_eviction_rank(graph, tracker, next_vertex))
                evicted.append(victim)
                logger.debug("Evicted %s to make room for %s", victim, next_vertex)
            current = next_vertex
            tracker.finish_if(processed_edges == edge_count)
            processed_edges = tracker.count_edges_marked(Status.DONE)
            logger.debug("Edges left to process: %d", edge_count - processed_edges)

        remaining = [
            e for e in graph.all_edges() if tracker.status_of_edge(e) is not Status.DONE
        ]
        if remaining:
            raise IncompleteJoinError(
                f"Not all edges were processed: {sorted(str(e) for e in remaining)}"
            )
        processed_edges = tracker.count_edges_marked(Status.DONE)
        if processed_edges != edge_count:
            raise IncompleteJoinError(
                f"Processed {processed_edges} of {edge_count} edges of {graph.name}"
            )

        logger.info(
            "%s joined %s in %d iterations with %d evictions",
            self,
            graph.name,
            iteration,
            len(evicted),
        )
        return JoinReport.from_traversal(
            tracker,
            joiner=self.name,
            graph_name=graph.name,
            graph_description=graph.description(),
            evicted=evicted,
        )

    def _pick_first_vertex(self, graph: Graph) -> Vertex:
        """Pick the vertex with the lowest degree, then the lowest weight."""
        vertices = graph.vertices()
        if not vertices:
            raise NoStartVertexError(
                f"Graph {graph.name!r} has no vertices to start from"
            )
        return min(vertices, key=lambda v: (graph.degree(v), v.weight, v.id))

    def _pick_next(
        self, current: Vertex, graph: Graph, tracker: TraversalTracker
    ) -> Vertex | None:
        anchors = self._cache.values()
        if current not in anchors:
            raise CacheStateError(
                f"Current vertex {current} is not in {self._cache!r}"
            )
        anchor_ids = {a.id for a in anchors}

        # Outer ends of the unfinished edges leaving the cache.
        candidates = {
            graph.vertex(e.end if e.start in anchor_ids else e.start)
            for e in graph.edge_surrounding(anchors)
            if tracker.status_of_edge(e) is not Status.DONE
        }
        if not candidates and (
            tracker.count_edges_marked(Status.DONE) != graph.edge_count()
        ):
            logger.debug("No unfinished edge leaves the cache, searching whole graph")
            candidates = {
                graph.vertex(id)
                for e in graph.all_edges()
                if tracker.status_of_edge(e) is not Status.DONE
                for id in e.nibs()
            }

        return min(
            candidates,
            key=lambda v: (
                tracker.status_of_vertex(v),
                _degree_excluding_done(graph, tracker, v),
                -v.weight,
                v.id,
            ),
            default=None,
        )


def _degree_excluding_done(
    graph: Graph, tracker: TraversalTracker, vertex: Vertex
) -> int:
    """Return the number of edges at `vertex` that are not done yet."""
    done_neighbors = graph.neighbors_matching(
        lambda n: tracker.status_of_edge(graph.edge(n, vertex)) is Status.DONE,
        vertex,
    )
    return graph.degree(vertex) - len(done_neighbors)


def _eviction_rank(
    graph: Graph, tracker: TraversalTracker, next_vertex: Vertex
) -> EvictionRank:
    """
    Rank cache entries for eviction ahead of loading `next_vertex`.

    The cache evicts the lowest rank. Entries not adjacent to `next_vertex`
    rank below adjacent ones, so an edge to the next vertex is never given
    up to make room for it. Within each group, fewer unfinished edges rank
    lower.
    """

    def rank(entry: CacheEntry[Vertex]) -> tuple[int, int, str]:
        vertex = entry.value
        return (
            1 if graph.are_directly_connected(vertex, next_vertex) else 0,
            _degree_excluding_done(graph, tracker, vertex),
            vertex.id,
        )

    return rank
