"""
Algorithm interfaces for labelgraph.

Keeps the weighted search separate from the graph container so that the
container can be handed a different engine (e.g. an instrumented one).
"""

from abc import ABC, abstractmethod

from vertex import Vertex


class CheapestPathEngine(ABC):
    """
    Interface for single-pair least-cost search over vertex records.
    """

    @abstractmethod
    def search(self, begin: Vertex, end: Vertex) -> bool:
        """
        Search from begin until end is settled.

        Expects every vertex to have been reset beforehand. On return each
        settled vertex is marked visited with its final cost and predecessor,
        which is enough to walk back from end to begin.

        Returns:
            True if end was reached, False if it is unreachable from begin.
        """
        raise NotImplementedError
