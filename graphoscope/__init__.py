"""
Graphoscope

Graph-analytics engine: an index-addressed directed graph store, a
generic shortest-path engine, and centrality and structural measures
computed over arbitrary vertex and edge-label types.
"""

from graphoscope.errors import (
    DuplicateVertexError,
    EdgeNotFoundError,
    GraphoscopeError,
    InvalidWeightError,
    UndefinedMeasureError,
    VertexNotFoundError,
)
from graphoscope.graph import DiGraph
from graphoscope.models import Direction, Edge

__all__ = [
    "DiGraph",
    "Direction",
    "Edge",
    "GraphoscopeError",
    "DuplicateVertexError",
    "EdgeNotFoundError",
    "InvalidWeightError",
    "UndefinedMeasureError",
    "VertexNotFoundError",
]
__version__ = "0.1.0"
