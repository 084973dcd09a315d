"""
Graph and vertex reports for Graphoscope

This module gathers the individual measures into report objects for the
CLI and other reporting layers.

Design Decisions:
    - A measure that is undefined for the input (UndefinedMeasureError)
      is recorded as None instead of aborting the whole report
    - Unknown vertices and invalid weights still propagate
"""

import logging
from typing import Callable, Hashable, Optional, TypeVar

from graphoscope.config import AnalysisConfig
from graphoscope.errors import UndefinedMeasureError
from graphoscope.graph.digraph import DiGraph
from graphoscope.metrics import degree, measures
from graphoscope.models import GraphReport, VertexReport

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _defined(name: str, compute: Callable[[], T], undefined: list[str]) -> Optional[T]:
    """Run a measure, recording its name when it is undefined."""
    try:
        return compute()
    except UndefinedMeasureError as e:
        logger.debug("%s undefined: %s", name, e)
        undefined.append(name)
        return None


def analyze_graph(graph: DiGraph, config: Optional[AnalysisConfig] = None) -> GraphReport:
    """
    Compute graph-wide measures.

    Args:
        graph: Graph to analyze
        config: Direction, weighting and parallelism for path measures

    Returns:
        GraphReport with undefined measures set to None

    Example:
        >>> report = analyze_graph(complete(4))
        >>> report.mean_shortest_path
        1.0
    """
    config = config or AnalysisConfig()
    skipped: list[str] = []

    report = GraphReport(
        size=degree.size(graph),
        volume=degree.volume(graph),
        mean_degree=_defined("mean_degree", lambda: degree.mean_degree(graph), skipped),
        max_degree=_defined("max_degree", lambda: degree.maximum_degree(graph), skipped),
        strongly_connected=measures.is_strongly_connected(graph),
        mean_shortest_path=_defined(
            "mean_shortest_path",
            lambda: measures.mean_shortest_path(
                graph, config.direction, config.weighted, workers=config.workers
            ),
            skipped,
        ),
        direction=config.direction,
        weighted=config.weighted,
    )
    if skipped:
        logger.info("Graph report skipped undefined measures: %s", ", ".join(skipped))
    return report


def analyze_vertex(
    graph: DiGraph,
    vertex: Hashable,
    config: Optional[AnalysisConfig] = None,
) -> VertexReport:
    """
    Compute per-vertex measures.

    Closeness and mean shortest path follow the configured direction;
    neighborhood connectivity and clustering use the undirected view.

    Raises:
        VertexNotFoundError: If the vertex is not in the graph
    """
    config = config or AnalysisConfig()
    graph.index_of(vertex)
    undefined: list[str] = []

    return VertexReport(
        vertex=vertex,
        degree=graph.degree(vertex),
        out_degree=graph.out_degree(vertex),
        in_degree=graph.in_degree(vertex),
        closeness=_defined(
            "closeness",
            lambda: measures.closeness(graph, vertex, config.direction),
            undefined,
        ),
        neighborhood_connectivity=_defined(
            "neighborhood_connectivity",
            lambda: measures.neighborhood_connectivity(graph, vertex),
            undefined,
        ),
        clustering_coefficient=_defined(
            "clustering_coefficient",
            lambda: measures.clustering_coefficient(graph, vertex),
            undefined,
        ),
        mean_shortest_path=_defined(
            "mean_shortest_path",
            lambda: measures.mean_shortest_path_from_vertex(
                graph, vertex, config.direction, config.weighted
            ),
            undefined,
        ),
        undefined=undefined,
    )
