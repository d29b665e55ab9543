"""
Undirected graph built on top of DirectedGraph.

Each logical edge is stored as a pair of directed edges. Mutations are applied
to both directions or to neither.
"""

from typing import FrozenSet, List, Optional, Sequence, Set, Tuple
import logging

import numpy as np

from algorithms import CheapestPathEngine
from config import DEFAULT_EDGE_WEIGHT, DEFAULT_WEIGHT_MIN
from directed_graph import DirectedGraph
from errors import UnsupportedOperationError
from graph import Graph, Label, PathResult

logger = logging.getLogger(__name__)


class UndirectedGraph(Graph):
    """
    Graph with bidirectional edges, wrapping a DirectedGraph.
    """

    def __init__(self, engine: Optional[CheapestPathEngine] = None) -> None:
        self._directed = DirectedGraph(engine)

    @property
    def directed(self) -> DirectedGraph:
        """Underlying directed graph holding both halves of every edge."""
        return self._directed

    @property
    def engine(self) -> CheapestPathEngine:
        return self._directed.engine

    # --- Vertices ------------------------------------------------------------

    def add_vertex(self, label: Label) -> bool:
        return self._directed.add_vertex(label)

    def remove_vertex(self, label: Label) -> bool:
        return self._directed.remove_vertex(label)

    def has_vertex(self, label: Label) -> bool:
        return self._directed.has_vertex(label)

    def labels(self) -> List[Label]:
        return self._directed.labels()

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, begin: Label, end: Label, weight: float = DEFAULT_EDGE_WEIGHT) -> bool:
        if not self._directed.add_edge(begin, end, weight):
            return False
        if not self._directed.add_edge(end, begin, weight):
            logger.warning("rolling back %r -> %r: reverse edge already present", begin, end)
            self._directed.remove_edge(begin, end)
            return False
        return True

    def remove_edge(self, begin: Label, end: Label) -> bool:
        weight = self._directed.edge_weight(begin, end)
        if weight is None or not self._directed.remove_edge(begin, end):
            return False
        if not self._directed.remove_edge(end, begin):
            logger.warning("restoring %r -> %r: reverse edge missing", begin, end)
            self._directed.add_edge(begin, end, weight)
            return False
        return True

    def has_edge(self, begin: Label, end: Label) -> bool:
        return self._directed.has_edge(begin, end)

    def edge_weight(self, begin: Label, end: Label) -> Optional[float]:
        return self._directed.edge_weight(begin, end)

    def edges(self) -> List[Tuple[Label, Label, float]]:
        """Each logical edge once, in the direction it was first stored."""
        seen: Set[FrozenSet[Label]] = set()
        result: List[Tuple[Label, Label, float]] = []
        for begin, end, weight in self._directed.edges():
            key = frozenset((begin, end))
            if key in seen:
                continue
            seen.add(key)
            result.append((begin, end, weight))
        return result

    def get_neighbors(
        self, label: Label, weight_min: float = DEFAULT_WEIGHT_MIN
    ) -> Optional[List[Label]]:
        return self._directed.get_neighbors(label, weight_min)

    # --- Container queries ---------------------------------------------------

    def is_empty(self) -> bool:
        return self._directed.is_empty()

    def number_of_vertices(self) -> int:
        return self._directed.number_of_vertices()

    def number_of_edges(self) -> int:
        return self._directed.number_of_edges() // 2

    def clear(self) -> None:
        self._directed.clear()

    def describe(self) -> str:
        return self._directed.describe()

    def adjacency_matrix(self, order: Optional[Sequence[Label]] = None) -> np.ndarray:
        """Symmetric weight matrix; see DirectedGraph.adjacency_matrix."""
        return self._directed.adjacency_matrix(order)

    # --- Algorithms ----------------------------------------------------------

    def breadth_first_traversal(self, origin: Label) -> List[Label]:
        return self._directed.breadth_first_traversal(origin)

    def depth_first_traversal(self, origin: Label) -> List[Label]:
        return self._directed.depth_first_traversal(origin)

    def shortest_path(self, begin: Label, end: Label) -> PathResult:
        return self._directed.shortest_path(begin, end)

    def cheapest_path(self, begin: Label, end: Label) -> PathResult:
        return self._directed.cheapest_path(begin, end)

    def topological_order(self) -> List[Label]:
        raise UnsupportedOperationError("Topological sort is illegal in an undirected graph.")
