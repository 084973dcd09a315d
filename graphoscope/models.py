"""
Core Data Models for Graphoscope

This module defines the small value types shared across the library:
- Direction: which edge set a traversal follows
- Edge: a labeled arc between two vertex values
- GraphReport / VertexReport: aggregated measures for reporting

Vertices themselves are opaque, hashable application values and have
no model class of their own.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Optional


class Direction(Enum):
    """
    Edge set followed by a traversal.

    States:
        OUT: Follow outgoing edges (successors).
        IN: Follow incoming edges (predecessors).
        UNDIRECTED: Follow both, treating every arc as an undirected edge.
    """

    OUT = "out"
    IN = "in"
    UNDIRECTED = "undirected"

    @classmethod
    def coerce(cls, value: "Direction | str") -> "Direction":
        """Accept a Direction or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown direction {value!r} (expected one of: {choices})") from None

    @classmethod
    def from_directed(cls, directed: bool) -> "Direction":
        return cls.OUT if directed else cls.UNDIRECTED


@dataclass(frozen=True)
class Edge:
    """
    A directed arc between two vertices.

    Attributes:
        origin: Vertex value the edge starts from
        dest: Vertex value the edge ends at
        label: Arbitrary payload; numeric when used as a weight

    Self-loops (origin == dest) are valid data.
    """

    origin: Hashable
    dest: Hashable
    label: Any = 1.0

    def reversed(self) -> "Edge":
        """Return the same edge pointing the other way."""
        return Edge(origin=self.dest, dest=self.origin, label=self.label)


@dataclass
class GraphReport:
    """
    Summary of graph-wide measures.

    Attributes:
        size: Number of vertices
        volume: Number of edges (parallel edges counted separately)
        mean_degree: Average undirected degree, None for an empty graph
        max_degree: Largest undirected degree, None for an empty graph
        strongly_connected: Result of the strong-connectivity check
        mean_shortest_path: Mean finite positive distance, None if undefined
        direction: Direction the shortest paths were computed in
        weighted: Whether edge labels were used as costs
    """

    size: int = 0
    volume: int = 0
    mean_degree: Optional[float] = None
    max_degree: Optional[int] = None
    strongly_connected: bool = True
    mean_shortest_path: Optional[float] = None
    direction: Direction = Direction.UNDIRECTED
    weighted: bool = False

    @property
    def density(self) -> float:
        """Edges present divided by ordered non-loop vertex pairs."""
        if self.size < 2:
            return 0.0
        return self.volume / (self.size * (self.size - 1))


@dataclass
class VertexReport:
    """
    Per-vertex measures. Undefined measures are None.

    Attributes:
        vertex: The vertex value
        degree: Undirected degree
        out_degree: Number of outgoing edges
        in_degree: Number of incoming edges
        closeness: Closeness centrality in the configured direction
        neighborhood_connectivity: Mean degree of the undirected neighbors
        clustering_coefficient: Fraction of connected neighbor pairs
        mean_shortest_path: Mean distance to reachable vertices
        undefined: Names of the measures that could not be computed
    """

    vertex: Hashable
    degree: int = 0
    out_degree: int = 0
    in_degree: int = 0
    closeness: Optional[float] = None
    neighborhood_connectivity: Optional[float] = None
    clustering_coefficient: Optional[float] = None
    mean_shortest_path: Optional[float] = None
    undefined: list[str] = field(default_factory=list)
