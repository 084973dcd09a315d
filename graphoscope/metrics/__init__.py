"""
Metrics module for Graphoscope.

This module provides the generic shortest-path engine and the
structural and degree measures built on it.
"""

from graphoscope.metrics.dijkstra import (
    reachable,
    shortest_path_lengths,
)
from graphoscope.metrics.measures import (
    closeness,
    clustering_coefficient,
    is_strongly_connected,
    mean_shortest_path,
    mean_shortest_path_from_vertex,
    neighborhood_connectivity,
    try_get_shortest_path,
    try_get_shortest_path_weighted,
)
from graphoscope.metrics.degree import (
    degree_distribution,
    degree_histogram,
    maximum_degree,
    mean_degree,
    minimum_degree,
    size,
    volume,
)

__all__ = [
    "reachable",
    "shortest_path_lengths",
    "closeness",
    "clustering_coefficient",
    "is_strongly_connected",
    "mean_shortest_path",
    "mean_shortest_path_from_vertex",
    "neighborhood_connectivity",
    "try_get_shortest_path",
    "try_get_shortest_path_weighted",
    "degree_distribution",
    "degree_histogram",
    "maximum_degree",
    "mean_degree",
    "minimum_degree",
    "size",
    "volume",
]
