"""
Heap-based CheapestPathEngine implementation for labelgraph.

Uses Python's heapq with lazy deletion: every relaxation pushes a new entry,
and entries for vertices that are already settled are skipped when popped.
"""

from itertools import count
from typing import List, Optional, Tuple
import heapq
import logging

from algorithms import CheapestPathEngine
from vertex import Vertex

logger = logging.getLogger(__name__)

# (cost, insertion sequence, vertex, predecessor)
HeapEntry = Tuple[float, int, Vertex, Optional[Vertex]]


class LazyDijkstraEngine(CheapestPathEngine):
    """
    Single-pair Dijkstra using a binary heap.

    Complexity:
        O(E log E) over the edges reachable from the source, since stale
        entries stay in the heap until popped.
    """

    def __init__(self) -> None:
        # Instrumentation counters per invocation.
        self.last_edges_examined = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_pops = 0

    def search(self, begin: Vertex, end: Vertex) -> bool:
        """
        Settle vertices in cost order until end is settled.

        Entries carry their own predecessor, so a vertex's cost and
        predecessor are written exactly once, when its cheapest entry is
        popped. The insertion sequence breaks ties between equal costs so
        vertices themselves are never compared.
        """
        self.last_edges_examined = 0
        self.last_heap_pops = 0
        self.last_heap_pushes = 0
        self.last_stale_pops = 0

        seq = count()
        pq: List[HeapEntry] = [(0.0, next(seq), begin, None)]
        self.last_heap_pushes += 1

        while pq:
            cost, _, vertex, predecessor = heapq.heappop(pq)
            self.last_heap_pops += 1

            # Skip outdated entries
            if vertex.visited:
                self.last_stale_pops += 1
                continue

            vertex.visit()
            vertex.cost = cost
            vertex.predecessor = predecessor

            if vertex is end:
                logger.debug(
                    "settled %r at cost %s (pops=%d, stale=%d)",
                    end.label, cost, self.last_heap_pops, self.last_stale_pops,
                )
                return True

            for neighbor, weight in vertex.weighted_neighbors():
                self.last_edges_examined += 1
                if not neighbor.visited:
                    heapq.heappush(pq, (weight + cost, next(seq), neighbor, vertex))
                    self.last_heap_pushes += 1

        return False
