"""
Degree-based measures.

All degrees are taken in the undirected view: an edge contributes one to
the degree of each endpoint, so reciprocal and parallel edges count
separately.
"""

from collections import Counter

from graphoscope.errors import UndefinedMeasureError
from graphoscope.graph.digraph import DiGraph


def degree_distribution(graph: DiGraph) -> list[int]:
    """Degree of every vertex, in insertion order."""
    return [graph.degree(v) for v in graph]


def degree_histogram(graph: DiGraph) -> dict[int, int]:
    """Number of vertices per degree value, sorted by degree."""
    return dict(sorted(Counter(degree_distribution(graph)).items()))


def mean_degree(graph: DiGraph) -> float:
    """
    Average degree of the graph.

    Raises:
        UndefinedMeasureError: If the graph has no vertices
    """
    if graph.vertex_count == 0:
        raise UndefinedMeasureError("Mean degree of an empty graph is undefined")
    return 2 * graph.edge_count / graph.vertex_count


def maximum_degree(graph: DiGraph) -> int:
    if graph.vertex_count == 0:
        raise UndefinedMeasureError("Maximum degree of an empty graph is undefined")
    return max(degree_distribution(graph))


def minimum_degree(graph: DiGraph) -> int:
    if graph.vertex_count == 0:
        raise UndefinedMeasureError("Minimum degree of an empty graph is undefined")
    return min(degree_distribution(graph))


def volume(graph: DiGraph) -> int:
    """Total number of edges."""
    return graph.edge_count


def size(graph: DiGraph) -> int:
    """Total number of vertices."""
    return graph.vertex_count
