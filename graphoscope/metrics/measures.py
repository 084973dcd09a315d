"""
Structural Measures for Graphoscope

Read-only measures composed from the shortest-path engine and the graph
store. Definitions follow the Cytoscape NetworkAnalyzer documentation:

    - closeness: reciprocal of the mean distance to reachable vertices
    - mean shortest path: mean of all finite, strictly positive distances
    - neighborhood connectivity: mean degree of the undirected neighbors
    - clustering coefficient: fraction of neighbor pairs that are adjacent
    - strong connectivity: forward and backward DFS both reach everything

Undefined Results:
    A mean over an empty set raises UndefinedMeasureError; it is never
    reported as 0 or NaN. Unreachable targets are returned as None.
"""

import logging
import math
from concurrent.futures import ProcessPoolExecutor
from itertools import combinations
from typing import Hashable, Optional

from graphoscope.errors import UndefinedMeasureError
from graphoscope.graph.digraph import DiGraph
from graphoscope.metrics.dijkstra import (
    INFINITY,
    distances_from,
    label_cost,
    reachable_ids,
    select_cost,
    unit_cost,
)
from graphoscope.models import Direction

logger = logging.getLogger(__name__)

# Set once per worker process by _init_worker
_worker_graph: Optional[DiGraph] = None


def _resolve_direction(directed) -> Direction:
    """Map a directed flag (or an explicit direction) to a Direction."""
    if isinstance(directed, bool):
        return Direction.from_directed(directed)
    return Direction.coerce(directed)


def _positive_distances(dist: list[float]) -> list[float]:
    return [d for d in dist if 0.0 < d < INFINITY]


# ---- shortest paths ------------------------------------------------------


def try_get_shortest_path(
    graph: DiGraph,
    source: Hashable,
    target: Hashable,
    directed: bool | Direction | str = False,
) -> Optional[float]:
    """
    Hop count of the shortest path from source to target.

    Args:
        graph: Graph to query
        source: Start vertex
        target: End vertex
        directed: False for the undirected view, True to follow outgoing
                  edges, or an explicit Direction

    Returns:
        Number of edges on the shortest path, or None if there is no path

    Raises:
        VertexNotFoundError: If source or target is missing
    """
    direction = _resolve_direction(directed)
    source_id = graph.index_of(source)
    target_id = graph.index_of(target)
    dist = distances_from(graph, source_id, direction, select_cost(graph, direction))
    return None if dist[target_id] == INFINITY else dist[target_id]


def try_get_shortest_path_weighted(
    graph: DiGraph,
    source: Hashable,
    target: Hashable,
    direction: Direction | str = Direction.OUT,
) -> Optional[float]:
    """
    Sum of edge weights along the cheapest path from source to target.

    Returns:
        Total weight, or None if there is no path

    Raises:
        VertexNotFoundError: If source or target is missing
        InvalidWeightError: If any edge label is not a valid weight
    """
    direction = Direction.coerce(direction)
    source_id = graph.index_of(source)
    target_id = graph.index_of(target)
    cost = select_cost(graph, direction, weighted=True)
    dist = distances_from(graph, source_id, direction, cost)
    return None if dist[target_id] == INFINITY else dist[target_id]


# ---- mean shortest path --------------------------------------------------


def _init_worker(graph: DiGraph) -> None:
    global _worker_graph
    _worker_graph = graph


def _source_partial(
    graph: DiGraph, source_id: int, direction: Direction, weighted: bool
) -> tuple[float, int]:
    """(sum, count) of the positive finite distances from one source."""
    # weights are validated once by the caller before any run
    cost = label_cost(graph, direction) if weighted else unit_cost(graph, direction)
    found = _positive_distances(distances_from(graph, source_id, direction, cost))
    return math.fsum(found), len(found)


def _worker_partial(task: tuple[int, Direction, bool]) -> tuple[float, int]:
    return _source_partial(_worker_graph, *task)


def mean_shortest_path(
    graph: DiGraph,
    directed: bool | Direction | str = False,
    weighted: bool = False,
    workers: Optional[int] = None,
) -> float:
    """
    Mean shortest-path length over all connected vertex pairs.

    Runs the engine from every vertex and averages every finite, strictly
    positive distance. Self-distances and unreachable pairs are excluded.

    Args:
        graph: Graph to measure
        directed: False for the undirected view, True to follow outgoing
                  edges, or an explicit Direction
        weighted: Use edge labels as costs
        workers: Number of worker processes; None or 1 runs sequentially.
                 The result does not depend on the worker count.

    Raises:
        UndefinedMeasureError: If no pair of distinct vertices is connected
        InvalidWeightError: If ``weighted`` and a label is not a valid weight
    """
    direction = _resolve_direction(directed)
    if weighted:
        graph.validate_weights()
    tasks = [(i, direction, weighted) for i in range(graph.vertex_count)]

    if workers is None or workers <= 1 or len(tasks) < 2:
        partials = [_source_partial(graph, *task) for task in tasks]
    else:
        logger.debug("Fanning out %d sources over %d workers", len(tasks), workers)
        with ProcessPoolExecutor(
            max_workers=workers, initializer=_init_worker, initargs=(graph,)
        ) as executor:
            # map() yields in submission order, so the merge is deterministic
            partials = list(executor.map(_worker_partial, tasks))

    count = sum(n for _, n in partials)
    if count == 0:
        raise UndefinedMeasureError("Mean shortest path is undefined: no connected vertex pairs")
    return math.fsum(s for s, _ in partials) / count


def mean_shortest_path_from_vertex(
    graph: DiGraph,
    source: Hashable,
    directed: bool | Direction | str = False,
    weighted: bool = False,
) -> float:
    """
    Mean shortest-path length from one source to the vertices it reaches.

    Raises:
        VertexNotFoundError: If source is missing
        UndefinedMeasureError: If source reaches no other vertex
    """
    direction = _resolve_direction(directed)
    source_id = graph.index_of(source)
    dist = distances_from(graph, source_id, direction, select_cost(graph, direction, weighted))
    found = _positive_distances(dist)
    if not found:
        raise UndefinedMeasureError(
            f"Mean shortest path from {source!r} is undefined: no reachable vertices"
        )
    return math.fsum(found) / len(found)


# ---- centrality and neighborhood ----------------------------------------


def closeness(
    graph: DiGraph,
    source: Hashable,
    direction: Direction | str = Direction.UNDIRECTED,
) -> float:
    """
    Closeness centrality of a vertex.

    The reciprocal of the mean hop distance to every vertex reachable in
    the given direction: UNDIRECTED, OUT (outward closeness) or IN
    (inward closeness).

    Raises:
        VertexNotFoundError: If source is missing
        UndefinedMeasureError: If source reaches no other vertex
    """
    direction = Direction.coerce(direction)
    source_id = graph.index_of(source)
    found = _positive_distances(
        distances_from(graph, source_id, direction, select_cost(graph, direction))
    )
    if not found:
        raise UndefinedMeasureError(
            f"Closeness of {source!r} is undefined: no reachable vertices ({direction.value})"
        )
    return len(found) / math.fsum(found)


def neighborhood_connectivity(graph: DiGraph, source: Hashable) -> float:
    """
    Mean degree of a vertex's undirected neighbors.

    Raises:
        VertexNotFoundError: If source is missing
        UndefinedMeasureError: If source has no neighbors
    """
    neighbors = graph.undirected_neighbors(source)
    if not neighbors:
        raise UndefinedMeasureError(
            f"Neighborhood connectivity of {source!r} is undefined: no neighbors"
        )
    return sum(graph.degree(v) for v in neighbors) / len(neighbors)


def clustering_coefficient(graph: DiGraph, source: Hashable) -> float:
    """
    Local clustering coefficient of a vertex.

    Among all unordered pairs of the vertex's undirected neighbors (the
    vertex itself excluded), the fraction that are directly connected in
    either direction. Always within [0, 1].

    Raises:
        VertexNotFoundError: If source is missing
        UndefinedMeasureError: If source has fewer than 2 neighbors
    """
    source_id = graph.index_of(source)
    neighbor_ids = [
        i for i in graph.neighbor_ids(source_id, Direction.UNDIRECTED) if i != source_id
    ]
    if len(neighbor_ids) < 2:
        raise UndefinedMeasureError(
            f"Clustering coefficient of {source!r} is undefined: "
            f"{len(neighbor_ids)} neighbor(s), need at least 2"
        )

    adjacency = {
        i: set(graph.neighbor_ids(i, Direction.UNDIRECTED)) for i in neighbor_ids
    }
    pairs = 0
    linked = 0
    for a, b in combinations(neighbor_ids, 2):
        pairs += 1
        if b in adjacency[a]:
            linked += 1
    return linked / pairs


# ---- connectivity --------------------------------------------------------


def is_strongly_connected(graph: DiGraph) -> bool:
    """
    Check whether every vertex can reach every other along directed edges.

    Picks the first vertex, then runs a depth-first search along outgoing
    edges and another along incoming edges; the graph is strongly
    connected iff both visit every vertex. An empty graph is vacuously
    strongly connected.
    """
    count = graph.vertex_count
    if count == 0:
        return True
    if len(reachable_ids(graph, 0, Direction.OUT)) != count:
        return False
    return len(reachable_ids(graph, 0, Direction.IN)) == count
