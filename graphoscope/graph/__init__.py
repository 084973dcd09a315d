"""
Graph module for Graphoscope.

This module provides the indexed graph store plus the construction
helpers and converters built on its public contract.
"""

from graphoscope.graph.digraph import DiGraph
from graphoscope.graph.builder import (
    complete,
    from_edges,
    from_vertices,
    random_gnp,
)
from graphoscope.graph.converters import (
    from_networkx,
    normalize_out_edges,
    to_adjacency_matrix,
    to_networkx,
)

__all__ = [
    "DiGraph",
    "complete",
    "from_edges",
    "from_vertices",
    "random_gnp",
    "from_networkx",
    "normalize_out_edges",
    "to_adjacency_matrix",
    "to_networkx",
]
