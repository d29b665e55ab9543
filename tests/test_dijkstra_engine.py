"""
Unit tests for LazyDijkstraEngine through DirectedGraph.cheapest_path.
"""

import numpy as np
import pytest
from scipy.sparse.csgraph import dijkstra

from dijkstra_engine import LazyDijkstraEngine
from directed_graph import DirectedGraph
from errors import NoPathError, UnknownVertexError
from topology_builder import random_graph
from undirected_graph import UndirectedGraph


def _graph(edges) -> DirectedGraph:
    g = DirectedGraph()
    for begin, end, weight in edges:
        g.add_vertex(begin)
        g.add_vertex(end)
        g.add_edge(begin, end, weight)
    return g


def test_cheapest_path_prefers_lighter_detour():
    g = _graph([("A", "B", 5.0), ("A", "C", 1.0), ("C", "B", 1.0)])

    result = g.cheapest_path("A", "B")

    assert result.cost == pytest.approx(2.0)
    assert isinstance(result.cost, float)
    assert result.path == ("A", "C", "B")
    assert result.stack() == ["B", "C", "A"]


def test_dijkstra_basic_paths():
    # A -> B (1), A -> C (4), B -> C (2)
    g = _graph([("A", "B", 1.0), ("A", "C", 4.0), ("B", "C", 2.0)])

    assert g.cheapest_path("A", "A").cost == 0.0
    assert g.cheapest_path("A", "B").cost == 1.0
    # Cheapest A->C is A->B->C with cost 3.0
    result = g.cheapest_path("A", "C")
    assert result.cost == 3.0
    assert result.path == ("A", "B", "C")


def test_dijkstra_unreachable_node_raises():
    g = _graph([("A", "B", 2.0)])
    g.add_vertex("C")  # unreachable from A

    with pytest.raises(NoPathError):
        g.cheapest_path("A", "C")
    # A failed search leaves the graph usable.
    assert g.cheapest_path("A", "B").cost == 2.0


def test_dijkstra_unknown_label_raises():
    g = _graph([("A", "B", 2.0)])
    with pytest.raises(UnknownVertexError):
        g.cheapest_path("A", "Z")
    with pytest.raises(UnknownVertexError):
        g.cheapest_path("Z", "B")


def test_stale_entries_are_skipped():
    # B is pushed at cost 10 from A, then again at cost 2 via C; the first
    # entry is popped after B settles and must be discarded.
    g = _graph([("A", "B", 10.0), ("A", "C", 1.0), ("C", "B", 1.0), ("B", "D", 20.0)])
    engine = g.engine

    result = g.cheapest_path("A", "D")

    assert result.cost == 22.0
    assert result.path == ("A", "C", "B", "D")
    assert isinstance(engine, LazyDijkstraEngine)
    assert engine.last_stale_pops == 1
    assert engine.last_heap_pushes == 5
    assert engine.last_heap_pops == 5


def test_engine_counters_reset_per_run():
    g = _graph([("A", "B", 1.0), ("B", "C", 1.0)])
    engine = LazyDijkstraEngine()
    g.engine = engine

    g.cheapest_path("A", "C")
    first = (engine.last_heap_pushes, engine.last_heap_pops, engine.last_edges_examined)
    g.cheapest_path("A", "C")
    second = (engine.last_heap_pushes, engine.last_heap_pops, engine.last_edges_examined)

    assert first == second == (3, 3, 2)


def test_equal_cost_entries_do_not_compare_vertices():
    # Unorderable labels force ties to be broken without comparing vertices.
    a, b, c, d = object(), object(), object(), object()
    g = _graph([(a, b, 1.0), (a, c, 1.0), (b, d, 1.0), (c, d, 1.0)])

    result = g.cheapest_path(a, d)

    assert result.cost == 2.0
    assert result.path == (a, b, d)


def test_undirected_cheapest_path_runs_both_ways():
    g = UndirectedGraph()
    for label in "ABC":
        g.add_vertex(label)
    g.add_edge("A", "B", 2.0)
    g.add_edge("B", "C", 3.0)

    assert g.cheapest_path("C", "A").path == ("C", "B", "A")
    assert g.cheapest_path("C", "A").cost == 5.0


@pytest.mark.parametrize("seed", range(6))
def test_costs_match_scipy_on_random_graphs(seed):
    g = random_graph(20, 0.15, seed=seed)
    order = g.labels()
    matrix = g.adjacency_matrix(order)
    # csgraph treats zero entries of a dense matrix as missing edges.
    expected = dijkstra(np.where(np.isinf(matrix), 0.0, matrix), indices=0)

    for j, end in enumerate(order):
        if np.isinf(expected[j]):
            with pytest.raises(NoPathError):
                g.cheapest_path(0, end)
            continue
        result = g.cheapest_path(0, end)
        assert result.cost == pytest.approx(expected[j])
        walked = sum(g.edge_weight(u, v) for u, v in zip(result.path, result.path[1:]))
        assert walked == pytest.approx(result.cost)
