"""Define the base joiner."""

from __future__ import annotations

import abc
import dataclasses
from typing import Any

from array_joiner.graphs import Graph
from array_joiner.report import JoinReport


@dataclasses.dataclass(kw_only=True)
class Joiner(abc.ABC):
    """
    Interface for algorithms choosing the order in which edges are joined.

    A joiner visits the vertices of a graph until every edge has been
    processed and reports the resulting visit order. Implementations are
    dataclasses so they can be configured with `Joiner.build`.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The name of the joiner, as it appears in reports."""
        ...

    @abc.abstractmethod
    def join(self, graph: Graph) -> JoinReport:
        """
        Join every edge of `graph`.

        Parameters
        ----------
        graph :
            The graph to join. It must not change during the join.

        Returns
        -------
        :
            The report of the finished join.

        Raises
        ------
        JoinError
            If the join cannot process every edge. A partial result is never
            returned.
        """
        ...

    def __str__(self) -> str:
        return self.name

    @staticmethod
    def build(
        base_joiner: Joiner,
        **kwargs: Any,
    ) -> Joiner:
        """
        Build a joiner for a join operation.

        Combines a base joiner with any provided keyword arguments to
        create a customized joiner.

        Parameters
        ----------
        base_joiner :
            The base joiner to start with.
        kwargs :
            Additional configuration options for the joiner. A `joiner`
            option, if present, must come first and replaces the base joiner.

        Returns
        -------
        :
            A configured joiner instance.

        Raises
        ------
        ValueError
            If 'joiner' is set incorrectly.
        TypeError
            If an option is not a field of the selected joiner.
        """
        joiner: Joiner
        if "joiner" in kwargs:
            if next(iter(kwargs.keys())) != "joiner":
                raise ValueError("Error: 'joiner' must be set before other args.")
            joiner = kwargs.pop("joiner")
            if not isinstance(joiner, Joiner):
                raise ValueError(
                    f"Unsupported 'joiner' type {type(joiner).__name__}."
                    " Must be a sub-class of Joiner"
                )
        elif base_joiner is not None:
            joiner = base_joiner
        else:
            raise ValueError("'joiner' must be set in `__init__` or invocation")

        return dataclasses.replace(joiner, **kwargs)
