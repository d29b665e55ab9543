"""
Concrete directed, weighted graph implementation for labelgraph.

Implements the Graph interface with a label -> Vertex mapping; each vertex
keeps its outgoing edges as an insertion-ordered list.
"""

from collections import deque
from typing import Deque, Dict, List, Optional, Sequence, Tuple, Union
import logging

import numpy as np

from algorithms import CheapestPathEngine
from config import DEFAULT_EDGE_WEIGHT, DEFAULT_WEIGHT_MIN
from dijkstra_engine import LazyDijkstraEngine
from errors import CyclicGraphError, NoPathError, UnknownVertexError
from graph import Graph, Label, PathResult
from vertex import Vertex

logger = logging.getLogger(__name__)


class DirectedGraph(Graph):
    """
    Directed, weighted graph backed by a label -> Vertex mapping.

    Not safe for concurrent use: the algorithms keep their working state on
    the vertices themselves.
    """

    def __init__(self, engine: Optional[CheapestPathEngine] = None) -> None:
        self._vertices: Dict[Label, Vertex] = {}
        self._edge_count = 0
        self.engine: CheapestPathEngine = engine or LazyDijkstraEngine()

    # --- Vertices ------------------------------------------------------------

    def add_vertex(self, label: Label) -> bool:
        if label in self._vertices:
            logger.debug("add_vertex rejected: %r already present", label)
            return False
        self._vertices[label] = Vertex(label)
        return True

    def remove_vertex(self, label: Label) -> bool:
        vertex = self._vertices.get(label)
        if vertex is None:
            return False

        # Incoming edges first, then the vertex's own list.
        for other in self._vertices.values():
            if other is not vertex and other.disconnect(vertex):
                self._edge_count -= 1
        self._edge_count -= vertex.clear_edges()

        del self._vertices[label]
        logger.debug("removed vertex %r", label)
        return True

    def has_vertex(self, label: Label) -> bool:
        return label in self._vertices

    def labels(self) -> List[Label]:
        return list(self._vertices)

    # --- Edges ---------------------------------------------------------------

    def add_edge(self, begin: Label, end: Label, weight: float = DEFAULT_EDGE_WEIGHT) -> bool:
        endpoints = self._endpoints(begin, end)
        if endpoints is None:
            logger.debug("add_edge rejected: %r or %r missing", begin, end)
            return False

        begin_vertex, end_vertex = endpoints
        if not begin_vertex.connect(end_vertex, weight):
            logger.debug("add_edge rejected: self loop or duplicate %r -> %r", begin, end)
            return False

        self._edge_count += 1
        return True

    def remove_edge(self, begin: Label, end: Label) -> bool:
        endpoints = self._endpoints(begin, end)
        if endpoints is None:
            return False

        begin_vertex, end_vertex = endpoints
        if not begin_vertex.disconnect(end_vertex):
            return False

        self._edge_count -= 1
        return True

    def has_edge(self, begin: Label, end: Label) -> bool:
        return self.edge_weight(begin, end) is not None

    def edge_weight(self, begin: Label, end: Label) -> Optional[float]:
        endpoints = self._endpoints(begin, end)
        if endpoints is None:
            return None
        edge = endpoints[0].edge_to(endpoints[1])
        return edge.weight if edge is not None else None

    def edges(self) -> List[Tuple[Label, Label, float]]:
        return [
            (vertex.label, edge.destination.label, edge.weight)
            for vertex in self._vertices.values()
            for edge in vertex.edges()
        ]

    def get_neighbors(
        self, label: Label, weight_min: float = DEFAULT_WEIGHT_MIN
    ) -> Optional[List[Label]]:
        vertex = self._vertices.get(label)
        if vertex is None:
            return None
        return vertex.neighbor_labels(weight_min)

    def _endpoints(self, begin: Label, end: Label) -> Optional[Tuple[Vertex, Vertex]]:
        begin_vertex = self._vertices.get(begin)
        end_vertex = self._vertices.get(end)
        if begin_vertex is None or end_vertex is None:
            return None
        return begin_vertex, end_vertex

    # --- Container queries ---------------------------------------------------

    def is_empty(self) -> bool:
        return not self._vertices

    def number_of_vertices(self) -> int:
        return len(self._vertices)

    def number_of_edges(self) -> int:
        return self._edge_count

    def clear(self) -> None:
        self._vertices.clear()
        self._edge_count = 0

    def describe(self) -> str:
        """
        One line per vertex listing its edge destinations and weights.
        """
        lines = []
        for vertex in self._vertices.values():
            parts = [f"{dest.label} - W: {weight}" for dest, weight in vertex.weighted_neighbors()]
            lines.append(f"Vertex: {vertex.label} - Edges: {', '.join(parts) or 'None; terminal'}")
        return "\n".join(lines)

    def adjacency_matrix(self, order: Optional[Sequence[Label]] = None) -> np.ndarray:
        """
        Dense weight matrix with rows/columns in the given label order.

        Missing edges are np.inf and the diagonal is 0.0.
        """
        order = list(self._vertices) if order is None else list(order)
        index = {label: i for i, label in enumerate(order)}
        missing = [label for label in order if label not in self._vertices]
        if missing:
            raise UnknownVertexError(missing[0])

        matrix = np.full((len(order), len(order)), np.inf)
        np.fill_diagonal(matrix, 0.0)
        for label in order:
            for dest, weight in self._vertices[label].weighted_neighbors():
                if dest.label in index:
                    matrix[index[label], index[dest.label]] = weight
        return matrix

    # --- Algorithms ----------------------------------------------------------

    def _reset_vertices(self) -> None:
        for vertex in self._vertices.values():
            vertex.reset()

    def _vertex(self, label: Label) -> Vertex:
        vertex = self._vertices.get(label)
        if vertex is None:
            raise UnknownVertexError(label)
        return vertex

    def breadth_first_traversal(self, origin: Label) -> List[Label]:
        origin_vertex = self._vertex(origin)
        self._reset_vertices()

        order: List[Label] = [origin]
        queue: Deque[Vertex] = deque([origin_vertex])
        origin_vertex.visit()

        while queue:
            front = queue.popleft()
            for neighbor in front.neighbors():
                if not neighbor.visited:
                    neighbor.visit()
                    order.append(neighbor.label)
                    queue.append(neighbor)

        return order

    def depth_first_traversal(self, origin: Label) -> List[Label]:
        origin_vertex = self._vertex(origin)
        self._reset_vertices()

        order: List[Label] = [origin]
        stack: List[Vertex] = [origin_vertex]
        origin_vertex.visit()

        while stack:
            neighbor = stack[-1].unvisited_neighbor()
            if neighbor is None:
                stack.pop()
                continue
            neighbor.visit()
            order.append(neighbor.label)
            stack.append(neighbor)

        return order

    def shortest_path(self, begin: Label, end: Label) -> PathResult:
        begin_vertex = self._vertex(begin)
        end_vertex = self._vertex(end)
        self._reset_vertices()

        begin_vertex.visit()
        queue: Deque[Vertex] = deque([begin_vertex])
        done = begin_vertex is end_vertex

        while not done and queue:
            front = queue.popleft()
            for neighbor in front.neighbors():
                if not neighbor.visited:
                    neighbor.visit()
                    neighbor.cost = 1 + front.cost
                    neighbor.predecessor = front
                    queue.append(neighbor)
                if neighbor is end_vertex:
                    done = True
                    break

        if not end_vertex.visited:
            raise NoPathError(begin, end)

        result = self._trace_path(end_vertex, int(end_vertex.cost))
        logger.debug("shortest path %r -> %r: %d hops", begin, end, result.cost)
        return result

    def cheapest_path(self, begin: Label, end: Label) -> PathResult:
        begin_vertex = self._vertex(begin)
        end_vertex = self._vertex(end)
        self._reset_vertices()

        if not self.engine.search(begin_vertex, end_vertex):
            raise NoPathError(begin, end)

        result = self._trace_path(end_vertex, float(end_vertex.cost))
        logger.debug("cheapest path %r -> %r: cost %s", begin, end, result.cost)
        return result

    @staticmethod
    def _trace_path(end: Vertex, cost: Union[int, float]) -> PathResult:
        """Walk predecessors back from end, pushing each label on a stack."""
        stack: List[Label] = [end.label]
        vertex = end
        while vertex.has_predecessor():
            vertex = vertex.predecessor
            stack.append(vertex.label)

        stack.reverse()
        return PathResult(cost=cost, path=tuple(stack))

    def topological_order(self) -> List[Label]:
        """
        Sources first. Raises CyclicGraphError if the graph has a cycle.
        """
        self._reset_vertices()
        stack: List[Label] = []

        for _ in range(len(self._vertices)):
            terminal = self._find_terminal()
            if terminal is None:
                logger.warning(
                    "topological order aborted after %d of %d vertices: cycle detected",
                    len(stack), len(self._vertices),
                )
                raise CyclicGraphError("Cannot get topological order for cyclic graph.")
            terminal.visit()
            stack.append(terminal.label)

        stack.reverse()
        return stack

    def _find_terminal(self) -> Optional[Vertex]:
        """Unvisited vertex with no unvisited neighbour."""
        for vertex in self._vertices.values():
            if not vertex.visited and vertex.unvisited_neighbor() is None:
                return vertex
        return None
