"""
Generic Shortest-Path Engine for Graphoscope

A single Dijkstra implementation parameterized by two things:
    - Direction: which edge set to relax (OUT, IN or UNDIRECTED)
    - Cost: unit cost (hop count), edge-label cost, or a custom callable

Every measure that needs distances calls into this module with a
different combination instead of carrying its own traversal.

Algorithm:
    Dense list of tentative distances indexed by vertex id, plus a binary
    heap of (distance, id) entries with lazy deletion. A popped entry whose
    distance is stale is skipped. Runs in O((V + E) log V).

Limitations:
    Costs must be non-negative. Label costs are validated before the run;
    custom costs are checked as they are produced.
"""

import heapq
import logging
import math
from typing import Callable, Hashable, Optional

from graphoscope.errors import InvalidWeightError
from graphoscope.graph.digraph import DiGraph
from graphoscope.models import Direction

logger = logging.getLogger(__name__)

# cost(origin_id, dest_id) for an edge being relaxed in traversal order
IndexCost = Callable[[int, int], float]

# cost(origin, dest) over vertex values, supplied by callers
VertexCost = Callable[[Hashable, Hashable], float]

INFINITY = math.inf


def unit_cost(graph: DiGraph, direction: Direction) -> IndexCost:
    """Every edge costs 1.0."""
    return lambda origin_id, dest_id: 1.0


def label_cost(graph: DiGraph, direction: Direction) -> IndexCost:
    """
    Edge label as cost, looked up to match the traversal direction.

    OUT reads the origin -> dest label, IN reads the dest -> origin label
    (the arc is being walked backwards), and UNDIRECTED takes the smaller
    of the two when both arcs exist. A missing arc costs infinity, so it
    can never win a comparison.
    """

    def forward(origin_id: int, dest_id: int) -> float:
        label = graph.weight_at(origin_id, dest_id)
        return INFINITY if label is None else float(label)

    if direction is Direction.OUT:
        return forward
    if direction is Direction.IN:
        return lambda origin_id, dest_id: forward(dest_id, origin_id)
    return lambda origin_id, dest_id: min(
        forward(origin_id, dest_id), forward(dest_id, origin_id)
    )


def _wrap_vertex_cost(graph: DiGraph, cost: VertexCost) -> IndexCost:
    def checked(origin_id: int, dest_id: int) -> float:
        origin = graph.vertex_at(origin_id)
        dest = graph.vertex_at(dest_id)
        value = float(cost(origin, dest))
        if math.isnan(value) or value < 0:
            raise InvalidWeightError(
                f"Cost function returned {value!r} for {origin!r} -> {dest!r}"
            )
        return value

    return checked


def select_cost(
    graph: DiGraph,
    direction: Direction,
    weighted: bool = False,
    cost: Optional[VertexCost] = None,
) -> IndexCost:
    """
    Resolve the cost function for a run, validating label weights.

    Args:
        graph: Graph being traversed
        direction: Traversal direction
        weighted: Use edge labels as costs
        cost: Custom cost over vertex values; overrides ``weighted``

    Raises:
        InvalidWeightError: If ``weighted`` and some label is not a
            finite non-negative number
    """
    if cost is not None:
        return _wrap_vertex_cost(graph, cost)
    if weighted:
        graph.validate_weights()
        return label_cost(graph, direction)
    return unit_cost(graph, direction)


def distances_from(
    graph: DiGraph,
    source_id: int,
    direction: Direction,
    cost: IndexCost,
) -> list[float]:
    """
    Single-source shortest distances over vertex ids.

    Returns a list indexed by vertex id; unreachable vertices hold
    infinity. The caller is responsible for validating costs.
    """
    dist = [INFINITY] * graph.vertex_count
    settled = [False] * graph.vertex_count
    dist[source_id] = 0.0
    frontier = [(0.0, source_id)]
    settled_count = 0

    while frontier:
        current, vertex_id = heapq.heappop(frontier)
        if settled[vertex_id] or current > dist[vertex_id]:
            continue
        settled[vertex_id] = True
        settled_count += 1

        for neighbor_id in graph.neighbor_ids(vertex_id, direction):
            if settled[neighbor_id]:
                continue
            alt = current + cost(vertex_id, neighbor_id)
            if alt < dist[neighbor_id]:
                dist[neighbor_id] = alt
                heapq.heappush(frontier, (alt, neighbor_id))

    logger.debug(
        "Dijkstra from id %d (%s): settled %d of %d vertices",
        source_id,
        direction.value,
        settled_count,
        graph.vertex_count,
    )
    return dist


def shortest_path_lengths(
    graph: DiGraph,
    source: Hashable,
    direction: Direction | str = Direction.OUT,
    weighted: bool = False,
    cost: Optional[VertexCost] = None,
) -> dict[Hashable, Optional[float]]:
    """
    Shortest accumulated cost from source to every vertex.

    Args:
        graph: Graph to traverse (read-only)
        source: Start vertex
        direction: Edge set to follow
        weighted: Use edge labels as costs instead of hop counts
        cost: Custom cost(origin, dest) -> float, overrides ``weighted``

    Returns:
        Dict over all vertices in insertion order: the distance for
        reachable vertices (0.0 for the source), None otherwise

    Raises:
        VertexNotFoundError: If source is not in the graph
        InvalidWeightError: On a negative or non-numeric cost

    Example:
        >>> graph = from_edges([("A", "B", 2.0), ("B", "C", 3.0)])
        >>> shortest_path_lengths(graph, "A", weighted=True)
        {'A': 0.0, 'B': 2.0, 'C': 5.0}
    """
    direction = Direction.coerce(direction)
    source_id = graph.index_of(source)
    dist = distances_from(
        graph, source_id, direction, select_cost(graph, direction, weighted, cost)
    )
    return {
        graph.vertex_at(i): (None if d == INFINITY else d)
        for i, d in enumerate(dist)
    }


def reachable(
    graph: DiGraph,
    source: Hashable,
    direction: Direction | str = Direction.OUT,
) -> set[Hashable]:
    """
    Vertices reachable from source by depth-first search, source included.

    Iterative, so deep graphs do not hit the recursion limit.

    Raises:
        VertexNotFoundError: If source is not in the graph
    """
    direction = Direction.coerce(direction)
    visited = reachable_ids(graph, graph.index_of(source), direction)
    return {graph.vertex_at(i) for i in visited}


def reachable_ids(graph: DiGraph, source_id: int, direction: Direction) -> set[int]:
    """Depth-first reachability over vertex ids."""
    visited = {source_id}
    stack = [source_id]
    while stack:
        vertex_id = stack.pop()
        for neighbor_id in graph.neighbor_ids(vertex_id, direction):
            if neighbor_id not in visited:
                visited.add(neighbor_id)
                stack.append(neighbor_id)
    return visited
