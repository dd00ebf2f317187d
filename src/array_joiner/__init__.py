"""
Cache-aware join ordering over weighted graphs.

The main methods are [`join`][array_joiner.join] and
[`ajoin`][array_joiner.ajoin] which run a [`Joiner`][array_joiner.joiners.Joiner]
over a [`Graph`][array_joiner.graphs.Graph] synchronously and asynchronously.
"""

from .joining import ajoin, join
from .report import JoinReport
from .types import Edge, Vertex

__all__ = [
    "Edge",
    "JoinReport",
    "Vertex",
    "join",
    "ajoin",
]
