"""
Errors raised while joining.

These all indicate a defect in the joiner or a mismatch between a graph and
the traversal state built for it. None of them are retried.
"""


class JoinError(Exception):
    """Base class for failures of a join."""


class NoStartVertexError(JoinError):
    """The graph has no vertex to start the join from."""


class UnknownIdError(JoinError, LookupError):
    """A vertex or edge ID was never registered with the traversal tracker."""


class CapacityViolation(JoinError):
    """A value was loaded into a full cache without evicting first."""


class EmptyCacheError(JoinError):
    """Eviction was requested from an empty cache."""


class CacheStateError(JoinError):
    """The cache lost a vertex the join had just loaded."""


class IncompleteJoinError(JoinError):
    """The join stopped before every edge was processed."""


class GraphLookupError(LookupError):
    """A vertex or edge does not exist in the graph."""