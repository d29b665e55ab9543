"""
Exception hierarchy for labelgraph.

Missing labels, duplicates and rejected edges on mutation are reported through
boolean results; these exceptions cover structural faults and queries that
have no meaningful answer.
"""

from typing import Hashable


class GraphError(Exception):
    """Base exception for graph operations."""


class UnknownVertexError(GraphError, KeyError):
    """Raised when an algorithm is asked to start or stop at a missing label."""

    def __init__(self, label: Hashable) -> None:
        self.label = label
        super().__init__(f"Vertex not found: {label!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]


class NoPathError(GraphError):
    """Raised when the destination cannot be reached from the origin."""

    def __init__(self, begin: Hashable, end: Hashable) -> None:
        self.begin = begin
        self.end = end
        super().__init__(f"No path from {begin!r} to {end!r}")


class CyclicGraphError(GraphError, ValueError):
    """Raised when a topological order is requested for a graph with a cycle."""


class UnsupportedOperationError(GraphError, NotImplementedError):
    """Raised when an operation is not defined for a graph variant."""


class GraphSpecError(GraphError, ValueError):
    """Raised when a graph description cannot be turned into a graph."""
