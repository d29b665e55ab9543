"""
Utilities to build labelgraph graphs from declarative descriptions or at random.

A description is a mapping (usually read from YAML) of the form::

    directed: true
    vertices: [A, B, C]
    edges:
      - {begin: A, end: B, weight: 1.5}
      - [B, C]          # weight defaults to DEFAULT_EDGE_WEIGHT
      - [A, C, 4.0]
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Hashable, List, Mapping, Sequence, Tuple, Union
import logging
import random

import yaml

from config import DEFAULT_EDGE_WEIGHT, DEFAULT_RANDOM_WEIGHT_RANGE
from directed_graph import DirectedGraph
from errors import GraphSpecError
from undirected_graph import UndirectedGraph

logger = logging.getLogger(__name__)

AnyGraph = Union[DirectedGraph, UndirectedGraph]


@dataclass(frozen=True)
class EdgeSpec:
    begin: Hashable
    end: Hashable
    weight: float = DEFAULT_EDGE_WEIGHT


@dataclass(frozen=True)
class GraphSpec:
    directed: bool
    vertices: Sequence[Hashable]
    edges: Sequence[EdgeSpec]


def parse_graph_spec(data: Mapping[str, Any]) -> GraphSpec:
    """Validate a raw mapping and turn it into a GraphSpec."""
    if not isinstance(data, Mapping):
        raise GraphSpecError("Graph description must be a mapping.")

    vertices = data.get("vertices") or []
    raw_edges = data.get("edges") or []
    if not isinstance(vertices, list) or not isinstance(raw_edges, list):
        raise GraphSpecError("'vertices' and 'edges' must be lists.")

    directed = data.get("directed", True)
    if not isinstance(directed, bool):
        raise GraphSpecError(f"'directed' must be true or false, got {directed!r}.")

    for label in vertices:
        _check_label(label)

    return GraphSpec(
        directed=directed,
        vertices=list(vertices),
        edges=[_parse_edge(raw) for raw in raw_edges],
    )


def _check_label(label: Any) -> None:
    # hash() also catches tuples holding unhashable items.
    try:
        hash(label)
    except TypeError as exc:
        raise GraphSpecError(f"Vertex label {label!r} is not hashable.") from exc


def _parse_edge(raw: Any) -> EdgeSpec:
    if isinstance(raw, Mapping):
        try:
            begin, end = raw["begin"], raw["end"]
        except KeyError as exc:
            raise GraphSpecError(f"Edge {raw!r} is missing {exc.args[0]!r}.") from exc
        weight = raw.get("weight", DEFAULT_EDGE_WEIGHT)
    elif isinstance(raw, (list, tuple)) and len(raw) in (2, 3):
        begin, end = raw[0], raw[1]
        weight = raw[2] if len(raw) == 3 else DEFAULT_EDGE_WEIGHT
    else:
        raise GraphSpecError(f"Edge {raw!r} must be a mapping or a [begin, end, weight?] list.")

    try:
        weight = float(weight)
    except (TypeError, ValueError) as exc:
        raise GraphSpecError(f"Edge {begin!r} -> {end!r} has non-numeric weight {weight!r}.") from exc
    _check_label(begin)
    _check_label(end)
    return EdgeSpec(begin, end, weight)


def load_graph_spec(path: Path) -> GraphSpec:
    data = yaml.safe_load(Path(path).read_text())
    return parse_graph_spec(data)


def build_graph(spec: GraphSpec) -> AnyGraph:
    """
    Instantiate the graph a GraphSpec describes.

    Edge endpoints missing from `vertices` are added on the fly. An edge the
    graph rejects (self loop or duplicate) raises GraphSpecError.
    """
    graph: AnyGraph = DirectedGraph() if spec.directed else UndirectedGraph()
    for label in spec.vertices:
        _check_label(label)
        graph.add_vertex(label)

    for edge in spec.edges:
        _check_label(edge.begin)
        _check_label(edge.end)
        graph.add_vertex(edge.begin)
        graph.add_vertex(edge.end)
        if not graph.add_edge(edge.begin, edge.end, edge.weight):
            raise GraphSpecError(f"Edge {edge.begin!r} -> {edge.end!r} is a self loop or duplicate.")

    logger.debug(
        "built %s graph: %d vertices, %d edges",
        "directed" if spec.directed else "undirected",
        graph.number_of_vertices(),
        graph.number_of_edges(),
    )
    return graph


def load_graph(path: Path) -> AnyGraph:
    return build_graph(load_graph_spec(path))


def random_graph(
    n: int,
    edge_probability: float,
    seed: int | None = None,
    directed: bool = True,
    weight_range: Tuple[float, float] = DEFAULT_RANDOM_WEIGHT_RANGE,
    acyclic: bool = False,
) -> AnyGraph:
    """
    Random graph over integer labels 0..n-1, reproducible for a given seed.

    Args:
        n: number of vertices.
        edge_probability: chance that each candidate pair gets an edge.
        seed: RNG seed for reproducibility.
        directed: build a DirectedGraph (True) or an UndirectedGraph.
        weight_range: uniform range edge weights are drawn from.
        acyclic: only create edges i -> j with i < j, so the result is a DAG.
    """
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError("edge_probability must lie in [0, 1].")

    rng = random.Random(seed)
    graph: AnyGraph = DirectedGraph() if directed else UndirectedGraph()
    for label in range(n):
        graph.add_vertex(label)

    low, high = weight_range
    for begin, end in _candidate_pairs(n, directed and not acyclic):
        if rng.random() < edge_probability:
            graph.add_edge(begin, end, rng.uniform(low, high))
    return graph


def _candidate_pairs(n: int, both_directions: bool) -> List[Tuple[int, int]]:
    if both_directions:
        return [(i, j) for i in range(n) for j in range(n) if i != j]
    return [(i, j) for i in range(n) for j in range(i + 1, n)]
