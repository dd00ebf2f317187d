"""Joiners decide the order in which the edges of a graph are processed."""

from .base import Joiner
from .cache_heuristic import CacheHeuristic

__all__ = [
    "CacheHeuristic",
    "Joiner",
]
