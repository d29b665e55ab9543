"""
Vertex and edge records for labelgraph.

A Vertex owns its outgoing edges. Each Edge refers to (but does not own) the
vertex it points at. The visited / cost / predecessor fields are scratch space
for the graph algorithms and are reset before every run.
"""

from dataclasses import dataclass
from typing import Any, Generic, Hashable, Iterator, List, Optional, Tuple, TypeVar

from config import DEFAULT_EDGE_WEIGHT, DEFAULT_WEIGHT_MIN

L = TypeVar("L", bound=Hashable)

_MISSING = object()


@dataclass(frozen=True, eq=False)
class Edge(Generic[L]):
    """
    Directed, weighted connection to a destination vertex.
    """

    destination: "Vertex[L]"
    weight: float = DEFAULT_EDGE_WEIGHT


class Vertex(Generic[L]):
    """
    Graph node: a label plus its outgoing edges and transient search state.

    Vertices compare equal when their labels do.
    """

    def __init__(self, label: L) -> None:
        self._label = label
        self._edges: List[Edge[L]] = []
        self._visited = False
        self.cost = 0.0
        self.predecessor: Optional["Vertex[L]"] = None

    @property
    def label(self) -> L:
        return self._label

    # --- Transient state -----------------------------------------------------

    @property
    def visited(self) -> bool:
        return self._visited

    def visit(self) -> None:
        self._visited = True

    def unvisit(self) -> None:
        self._visited = False

    def has_predecessor(self) -> bool:
        return self.predecessor is not None

    def reset(self) -> None:
        """Clear visited flag, cost and predecessor before a new search."""
        self._visited = False
        self.cost = 0.0
        self.predecessor = None

    # --- Edges ---------------------------------------------------------------

    def connect(self, end: "Vertex[L]", weight: float = DEFAULT_EDGE_WEIGHT) -> bool:
        """
        Add an edge to end.

        Returns False for a self edge or when an edge to end already exists.
        """
        if end == self or self.edge_to(end) is not None:
            return False
        self._edges.append(Edge(end, float(weight)))
        return True

    def disconnect(self, end: "Vertex[L]") -> bool:
        """Remove the edge to end; False if there is none."""
        for i, edge in enumerate(self._edges):
            if edge.destination is end:
                del self._edges[i]
                return True
        return False

    def edge_to(self, end: "Vertex[L]") -> Optional[Edge[L]]:
        for edge in self._edges:
            if edge.destination is end:
                return edge
        return None

    def clear_edges(self) -> int:
        """Drop every outgoing edge and return how many there were."""
        dropped = len(self._edges)
        self._edges.clear()
        return dropped

    @property
    def out_degree(self) -> int:
        return len(self._edges)

    def edges(self) -> Iterator[Edge[L]]:
        return iter(self._edges)

    def neighbors(self) -> Iterator["Vertex[L]"]:
        """Destination vertices in edge insertion order."""
        return (edge.destination for edge in self._edges)

    def weighted_neighbors(self) -> Iterator[Tuple["Vertex[L]", float]]:
        return ((edge.destination, edge.weight) for edge in self._edges)

    def neighbor_labels(self, weight_min: float = DEFAULT_WEIGHT_MIN) -> List[L]:
        """Labels of neighbours reached by an edge of weight >= weight_min."""
        return [edge.destination.label for edge in self._edges if edge.weight >= weight_min]

    def has_neighbor(self, label: Any = _MISSING) -> bool:
        """
        Without a label: whether the vertex has any outgoing edge.
        With a label: whether an edge leads to the vertex carrying it.
        """
        if label is _MISSING:
            return bool(self._edges)
        return any(edge.destination.label == label for edge in self._edges)

    def unvisited_neighbor(self) -> Optional["Vertex[L]"]:
        """First neighbour, in edge order, that has not been visited."""
        for neighbor in self.neighbors():
            if not neighbor.visited:
                return neighbor
        return None

    # --- Identity ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vertex):
            return NotImplemented
        return self._label == other._label

    def __hash__(self) -> int:
        return hash(self._label)

    def __repr__(self) -> str:
        return f"Vertex({self._label!r})"

    def __str__(self) -> str:
        return str(self._label)
