"""
Unit tests for UndirectedGraph.
"""

from dataclasses import dataclass
import logging

import pytest

from errors import UnsupportedOperationError
from undirected_graph import UndirectedGraph


@dataclass(frozen=True)
class DummyProfile:
    name: str
    image: str = ""


def _friends() -> UndirectedGraph:
    g = UndirectedGraph()
    for name in ("ann", "bo", "cy", "di"):
        g.add_vertex(DummyProfile(name))
    return g


def test_add_edge_creates_both_directions():
    g = _friends()
    ann, bo = DummyProfile("ann"), DummyProfile("bo")

    assert g.add_edge(ann, bo, 2.0)

    assert g.has_edge(ann, bo)
    assert g.has_edge(bo, ann)
    assert g.edge_weight(bo, ann) == 2.0
    assert g.number_of_edges() == 1
    assert g.directed.number_of_edges() == 2


def test_add_edge_rejects_duplicates_either_way():
    g = _friends()
    ann, bo = DummyProfile("ann"), DummyProfile("bo")
    g.add_edge(ann, bo)

    assert not g.add_edge(ann, bo)
    assert not g.add_edge(bo, ann)
    assert not g.add_edge(ann, ann)
    assert not g.add_edge(ann, DummyProfile("nobody"))
    assert g.number_of_edges() == 1


def test_add_edge_rolls_back_half_edge(caplog):
    g = _friends()
    ann, bo = DummyProfile("ann"), DummyProfile("bo")
    # Plant a one-way edge directly so the reverse insert fails.
    g.directed.add_edge(bo, ann, 1.0)

    with caplog.at_level(logging.WARNING, logger="undirected_graph"):
        assert not g.add_edge(ann, bo, 1.0)
    assert "rolling back" in caplog.text

    assert not g.directed.has_edge(ann, bo)
    assert g.directed.has_edge(bo, ann)
    assert g.directed.number_of_edges() == 1


def test_remove_edge_removes_both_directions():
    g = _friends()
    ann, bo = DummyProfile("ann"), DummyProfile("bo")
    g.add_edge(ann, bo)

    assert g.remove_edge(bo, ann)

    assert not g.has_edge(ann, bo)
    assert not g.has_edge(bo, ann)
    assert g.number_of_edges() == 0
    assert not g.remove_edge(ann, bo)


def test_remove_edge_restores_half_edge():
    g = _friends()
    ann, bo = DummyProfile("ann"), DummyProfile("bo")
    g.directed.add_edge(ann, bo, 4.0)

    assert not g.remove_edge(ann, bo)

    assert g.directed.edge_weight(ann, bo) == 4.0
    assert g.directed.number_of_edges() == 1


def test_remove_vertex_drops_both_halves():
    g = _friends()
    ann, bo, cy, di = (DummyProfile(n) for n in ("ann", "bo", "cy", "di"))
    g.add_edge(ann, bo)
    g.add_edge(bo, cy)
    g.add_edge(cy, di)

    assert g.remove_vertex(bo)

    assert g.number_of_edges() == 1
    assert g.directed.number_of_edges() == 2
    for other in (ann, cy, di):
        assert not g.has_edge(other, bo)
        assert not g.has_edge(bo, other)


def test_edges_reports_each_edge_once():
    g = _friends()
    ann, bo, cy = DummyProfile("ann"), DummyProfile("bo"), DummyProfile("cy")
    g.add_edge(ann, bo, 1.0)
    g.add_edge(cy, ann, 2.0)

    assert g.edges() == [(ann, bo, 1.0), (ann, cy, 2.0)]
    assert len(g.edges()) == g.number_of_edges()


def test_friends_of_friends_via_neighbors():
    g = _friends()
    ann, bo, cy, di = (DummyProfile(n) for n in ("ann", "bo", "cy", "di"))
    g.add_edge(ann, bo)
    g.add_edge(bo, cy)
    g.add_edge(bo, di)

    friends = g.get_neighbors(ann)
    assert friends == [bo]
    fof = {f for friend in friends for f in g.get_neighbors(friend)} - {ann, *friends}
    assert fof == {cy, di}
    assert g.get_neighbors(DummyProfile("nobody")) is None


def test_traversals_and_paths_follow_both_directions():
    g = _friends()
    ann, bo, cy = DummyProfile("ann"), DummyProfile("bo"), DummyProfile("cy")
    g.add_edge(ann, bo)
    g.add_edge(bo, cy)

    assert g.breadth_first_traversal(cy) == [cy, bo, ann]
    assert g.depth_first_traversal(ann) == [ann, bo, cy]
    result = g.shortest_path(cy, ann)
    assert result.cost == 2
    assert result.path == (cy, bo, ann)


def test_topological_order_is_unsupported():
    g = _friends()
    with pytest.raises(UnsupportedOperationError):
        g.topological_order()


def test_clear_and_queries():
    g = _friends()
    g.add_edge(DummyProfile("ann"), DummyProfile("bo"))
    assert not g.is_empty()
    assert g.number_of_vertices() == 4
    assert DummyProfile("cy") in g

    g.clear()

    assert g.is_empty()
    assert g.number_of_edges() == 0


def test_adjacency_matrix_is_symmetric():
    g = UndirectedGraph()
    for label in "ABC":
        g.add_vertex(label)
    g.add_edge("A", "B", 2.0)
    g.add_edge("C", "B", 5.0)

    m = g.adjacency_matrix()
    assert (m == m.T).all()
    assert m[0, 1] == 2.0
    assert m[1, 2] == 5.0
    assert g.describe().splitlines()[1] == "Vertex: B - Edges: A - W: 2.0, C - W: 5.0"


def test_engine_is_shared_with_underlying_graph():
    g = UndirectedGraph()
    for label in "AB":
        g.add_vertex(label)
    g.add_edge("A", "B", 1.0)

    assert g.engine is g.directed.engine
    g.cheapest_path("A", "B")
    assert g.engine.last_heap_pops == 2
