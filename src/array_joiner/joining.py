"""Entry points running a joiner over a graph."""

import copy
from concurrent.futures import Executor
from typing import Any

from array_joiner.graphs import Graph
from array_joiner.joiners import Joiner
from array_joiner.report import JoinReport
from array_joiner.utils.run_in_executor import run_in_executor


def join(graph: Graph, *, joiner: Joiner, **kwargs: Any) -> JoinReport:
    """
    Join every edge of a graph.

    Parameters
    ----------
    graph :
        The graph to join. It must not change during the join.
    joiner :
        The joiner deciding the visit order. The join runs on a copy, so the
        same joiner may be passed to concurrent calls.
    kwargs :
        Fields of `joiner` to override for this join, as in `Joiner.build`.

    Returns
    -------
    :
        The report of the finished join.

    Raises
    ------
    JoinError
        If the join cannot process every edge.
    TypeError
        If an override is not a field of `joiner`.
    """
    return _prepare(joiner, kwargs).join(graph)


async def ajoin(
    graph: Graph,
    *,
    joiner: Joiner,
    executor: Executor | None = None,
    **kwargs: Any,
) -> JoinReport:
    """
    Asynchronously join every edge of a graph.

    The join itself is CPU bound and runs in `executor`.

    Parameters
    ----------
    graph :
        The graph to join. It must not change during the join.
    joiner :
        The joiner deciding the visit order. The join runs on a copy, so the
        same joiner may be passed to concurrent calls.
    executor :
        The executor to run the join in. If `None`, the event loop's default
        executor is used.
    kwargs :
        Fields of `joiner` to override for this join, as in `Joiner.build`.

    Returns
    -------
    :
        The report of the finished join.

    Raises
    ------
    JoinError
        If the join cannot process every edge.
    TypeError
        If an override is not a field of `joiner`.
    """
    return await run_in_executor(executor, _prepare(joiner, kwargs).join, graph)


def _prepare(joiner: Joiner, overrides: dict[str, Any]) -> Joiner:
    # `Joiner.build` returns a new instance with its own cache.
    if overrides:
        return Joiner.build(joiner, **overrides)
    return copy.deepcopy(joiner)
