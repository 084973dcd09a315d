"""
Graph Builder for Graphoscope

This module constructs DiGraph instances from plain Python data and from
random-graph models. Everything here goes through the store's public
mutation contract (vertices are always added before the edges that
reference them), so the store's invariants hold for every graph built.

Generators:
    - complete: every ordered pair of distinct vertices, label 1.0
    - random_gnp: Erdos-Renyi G(n, p) digraph without self-loops
"""

import logging
from typing import Any, Hashable, Iterable, Optional

import networkx as nx

from graphoscope.graph.digraph import DiGraph

logger = logging.getLogger(__name__)


def from_vertices(vertices: Iterable[Hashable]) -> DiGraph:
    """
    Build an edgeless graph from a sequence of vertices.

    Raises:
        DuplicateVertexError: If a vertex repeats
    """
    graph = DiGraph()
    graph.add_vertices(vertices)
    return graph


def from_edges(edges: Iterable[tuple[Hashable, Hashable, Any]]) -> DiGraph:
    """
    Build a graph from (origin, dest, label) triples.

    Vertices are taken from the endpoints in first-seen order, then the
    edges are added in input order (parallel edges are kept).

    Args:
        edges: Iterable of (origin, dest, label) triples

    Returns:
        A DiGraph containing every endpoint and edge

    Example:
        >>> graph = from_edges([("A", "B", 1.0), ("B", "C", 2.0)])
        >>> graph.vertices
        ['A', 'B', 'C']
    """
    edges = list(edges)
    vertices: dict[Hashable, None] = {}
    for origin, dest, _ in edges:
        vertices.setdefault(origin)
        vertices.setdefault(dest)

    graph = from_vertices(vertices)
    graph.add_edges(edges)
    return graph


def complete(n: int, label: Any = 1.0) -> DiGraph:
    """
    Generate a complete digraph on vertices 0..n-1.

    Every ordered pair of distinct vertices gets one edge with the given
    label. Self-loops are excluded.

    Raises:
        ValueError: If n is negative
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    template = nx.complete_graph(n, create_using=nx.DiGraph)
    return _from_template(template, label)


def random_gnp(n: int, p: float, seed: Optional[int] = None) -> DiGraph:
    """
    Generate a directed G(n, p) random graph on vertices 0..n-1.

    Each ordered pair of distinct vertices is joined independently with
    probability p. Edge labels are 1.0.

    Args:
        n: Number of vertices
        p: Edge probability in [0, 1]
        seed: Seed for reproducible graphs

    Raises:
        ValueError: If n is negative or p is outside [0, 1]
    """
    if n < 0:
        raise ValueError(f"n must be >= 0, got {n}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must be within [0, 1], got {p}")
    template = nx.gnp_random_graph(n, p, seed=seed, directed=True)
    graph = _from_template(template, 1.0)
    logger.debug("Generated G(%d, %s) with %d edges", n, p, graph.edge_count)
    return graph


def _from_template(template: nx.DiGraph, label: Any) -> DiGraph:
    """Copy a networkx digraph's structure onto sorted integer vertices."""
    graph = from_vertices(sorted(template.nodes))
    graph.add_edges(
        (origin, dest, label)
        for origin, dest in sorted(template.edges)
        if origin != dest
    )
    return graph
