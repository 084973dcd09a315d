"""
Test fixtures for Graphoscope.

This module provides sample graphs and edge-list text for testing the
store, the shortest-path engine and the measures.
"""

from graphoscope.graph import DiGraph, from_edges

# A - B - C as single arcs; the undirected view is a path
PATH_EDGES = [("A", "B", 1.0), ("B", "C", 1.0)]

# A -> B (2.0) -> C (3.0)
WEIGHTED_PATH_EDGES = [("A", "B", 2.0), ("B", "C", 3.0)]

# Cheapest A -> D route is A-B-D (2.0), not the direct edge (10.0)
DIAMOND_EDGES = [
    ("A", "B", 1.0),
    ("B", "D", 1.0),
    ("A", "C", 5.0),
    ("C", "D", 1.0),
    ("A", "D", 10.0),
]

# Triangle A-B-C with a pendant D hanging off A
TRIANGLE_WITH_PENDANT_EDGES = [
    ("A", "B", 1.0),
    ("B", "C", 1.0),
    ("C", "A", 1.0),
    ("A", "D", 1.0),
]

# Directed cycle, strongly connected
CYCLE_EDGES = [("A", "B", 1.0), ("B", "C", 1.0), ("C", "A", 1.0)]

KONECT_TEXT = """\
% asym positive
% 4 3 3
1 2 3
2 3 1
3 1 2
1 3 5
"""

SIMPLE_EDGE_LIST = """\
A B 2.0
B C 3.0
"""


def path_graph() -> DiGraph:
    return from_edges(PATH_EDGES)


def weighted_path_graph() -> DiGraph:
    return from_edges(WEIGHTED_PATH_EDGES)


def diamond_graph() -> DiGraph:
    return from_edges(DIAMOND_EDGES)


def triangle_with_pendant() -> DiGraph:
    return from_edges(TRIANGLE_WITH_PENDANT_EDGES)


def isolated_vertices(*vertices) -> DiGraph:
    """A graph with the given vertices and no edges."""
    graph = DiGraph()
    graph.add_vertices(vertices)
    return graph
