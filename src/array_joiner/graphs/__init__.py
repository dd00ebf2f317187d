"""Graphs the joiners operate on."""

from .base import Graph
from .in_memory import InMemoryGraph

__all__ = [
    "Graph",
    "InMemoryGraph",
]
