"""
Label-addressed graph abstraction for labelgraph.

Vertices are identified by caller-supplied hashable labels.
Edges are directed: begin -> end with float weight. Undirected graphs
materialise every logical edge as a pair of directed edges.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Hashable, Iterator, List, Optional, Sequence, Tuple, Union

from config import DEFAULT_EDGE_WEIGHT, DEFAULT_WEIGHT_MIN

Label = Hashable


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a path search.

    cost: hop count (shortest_path) or total edge weight (cheapest_path).
    path: labels from begin to end inclusive.
    """

    cost: Union[int, float]
    path: Tuple[Label, ...]

    @property
    def begin(self) -> Label:
        return self.path[0]

    @property
    def end(self) -> Label:
        return self.path[-1]

    def stack(self) -> List[Label]:
        """
        Path as a stack: begin on top (popped first), end at the bottom.
        """
        return list(reversed(self.path))

    def __len__(self) -> int:
        return len(self.path)


class Graph(ABC):
    """Weighted graph over caller-supplied labels."""

    # --- Vertices ------------------------------------------------------------

    @abstractmethod
    def add_vertex(self, label: Label) -> bool:
        """Add a vertex; False if the label is already present."""
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, label: Label) -> bool:
        """Remove a vertex and every edge touching it; False if absent."""
        raise NotImplementedError

    @abstractmethod
    def has_vertex(self, label: Label) -> bool:
        raise NotImplementedError

    @abstractmethod
    def labels(self) -> List[Label]:
        """Labels of all vertices."""
        raise NotImplementedError

    # --- Edges ---------------------------------------------------------------

    @abstractmethod
    def add_edge(self, begin: Label, end: Label, weight: float = DEFAULT_EDGE_WEIGHT) -> bool:
        """
        Add an edge from begin to end.

        Returns False if either label is missing, begin == end, or the edge
        already exists.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_edge(self, begin: Label, end: Label) -> bool:
        """Remove the edge from begin to end; False if there is none."""
        raise NotImplementedError

    @abstractmethod
    def has_edge(self, begin: Label, end: Label) -> bool:
        raise NotImplementedError

    @abstractmethod
    def edge_weight(self, begin: Label, end: Label) -> Optional[float]:
        """Weight of the edge from begin to end, or None if there is none."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> List[Tuple[Label, Label, float]]:
        """All edges as (begin, end, weight) triples."""
        raise NotImplementedError

    @abstractmethod
    def get_neighbors(
        self, label: Label, weight_min: float = DEFAULT_WEIGHT_MIN
    ) -> Optional[List[Label]]:
        """
        Labels reachable over one outgoing edge of weight >= weight_min.

        Returns None (not an empty list) if label is not in the graph.
        """
        raise NotImplementedError

    def connect(self, begin: Label, end: Label, weight: float = DEFAULT_EDGE_WEIGHT) -> bool:
        """Alias of add_edge."""
        return self.add_edge(begin, end, weight)

    def disconnect(self, begin: Label, end: Label) -> bool:
        """Alias of remove_edge."""
        return self.remove_edge(begin, end)

    # --- Container queries ---------------------------------------------------

    @abstractmethod
    def is_empty(self) -> bool:
        raise NotImplementedError

    @abstractmethod
    def number_of_vertices(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def number_of_edges(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Remove all vertices and edges."""
        raise NotImplementedError

    def __len__(self) -> int:
        return self.number_of_vertices()

    def __contains__(self, label: object) -> bool:
        return self.has_vertex(label)

    def __iter__(self) -> Iterator[Label]:
        return iter(self.labels())

    # --- Algorithms ----------------------------------------------------------

    @abstractmethod
    def breadth_first_traversal(self, origin: Label) -> List[Label]:
        raise NotImplementedError

    @abstractmethod
    def depth_first_traversal(self, origin: Label) -> List[Label]:
        raise NotImplementedError

    @abstractmethod
    def shortest_path(self, begin: Label, end: Label) -> PathResult:
        """Fewest-hops path; cost is the hop count."""
        raise NotImplementedError

    @abstractmethod
    def cheapest_path(self, begin: Label, end: Label) -> PathResult:
        """Least total weight path; weights must be non-negative."""
        raise NotImplementedError

    @abstractmethod
    def topological_order(self) -> Sequence[Label]:
        """Labels ordered so that every edge points forward."""
        raise NotImplementedError
