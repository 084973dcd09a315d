"""
Indexed Graph Store for Graphoscope

This module holds the adjacency structure every measure reads from.
Vertex values are opaque hashable application values; each one is mapped
to a dense integer id in insertion order, and all adjacency is stored
against those ids.

Design Decisions:
    - Bidirectional arena: a list of vertex values plus a dict from value
      to list index. The index is stable for the lifetime of the graph.
    - Outgoing lists hold (dest_id, label) pairs in insertion order.
    - The incoming mirror is materialized as lists of origin ids only;
      labels live in the outgoing lists so there is one source of truth.
      Predecessor queries cost O(in-degree) instead of a full scan.
    - Duplicate vertices are rejected (DuplicateVertexError).
    - Parallel edges are kept: inserting (a, b) twice yields two edges.

Graph Properties:
    - Directed arcs; undirected measures use the undirected view
    - Self-loops allowed
    - Not safe for concurrent mutation
"""

import math
from numbers import Real
from typing import Any, Hashable, Iterable, Iterator, Optional

from graphoscope.errors import (
    DuplicateVertexError,
    EdgeNotFoundError,
    InvalidWeightError,
    VertexNotFoundError,
)
from graphoscope.models import Direction, Edge


class DiGraph:
    """
    A directed graph over arbitrary hashable vertex values.

    Provides a clean interface for:
    - Adding vertices and labeled edges
    - Neighbor lookup in the outgoing, incoming and undirected views
    - Edge-label lookup used as weights by the shortest-path engine
    - Index-level access for traversal code that avoids rehashing

    Attributes:
        vertices: Vertex values in insertion order
        vertex_count: Number of vertices
        edge_count: Number of edges, parallel edges included

    Usage:
        graph = DiGraph()
        graph.add_vertices(["A", "B"])
        graph.add_edge("A", "B", 2.0)
        graph.edge_weight("A", "B")  # 2.0
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._id_map: dict[Hashable, int] = {}
        self._nodes: list[Hashable] = []
        self._out_edges: list[list[tuple[int, Any]]] = []
        self._in_edges: list[list[int]] = []
        self._edge_count = 0

    # ---- mutation --------------------------------------------------------

    def add_vertex(self, vertex: Hashable) -> int:
        """
        Add a vertex and return its identifier.

        Args:
            vertex: Any hashable value

        Returns:
            The dense integer id assigned to the vertex

        Raises:
            DuplicateVertexError: If the vertex is already in the graph
        """
        if vertex in self._id_map:
            raise DuplicateVertexError(f"Vertex already exists: {vertex!r}")
        index = len(self._nodes)
        self._id_map[vertex] = index
        self._nodes.append(vertex)
        self._out_edges.append([])
        self._in_edges.append([])
        return index

    def add_vertices(self, vertices: Iterable[Hashable]) -> None:
        """Add every vertex in order."""
        for vertex in vertices:
            self.add_vertex(vertex)

    def add_edge(self, origin: Hashable, dest: Hashable, label: Any = 1.0) -> None:
        """
        Add a directed edge from origin to dest.

        Both endpoints must already exist. No duplicate check is made;
        adding the same pair twice creates two parallel edges.

        Args:
            origin: Vertex the edge starts from
            dest: Vertex the edge ends at
            label: Edge payload, typically a float weight

        Raises:
            VertexNotFoundError: If either endpoint is missing
        """
        origin_id = self.index_of(origin)
        dest_id = self.index_of(dest)
        self._out_edges[origin_id].append((dest_id, label))
        self._in_edges[dest_id].append(origin_id)
        self._edge_count += 1

    def add_edges(self, edges: Iterable[tuple[Hashable, Hashable, Any]]) -> None:
        """Add every (origin, dest, label) triple in order."""
        for origin, dest, label in edges:
            self.add_edge(origin, dest, label)

    def set_out_labels(self, vertex: Hashable, labels: list[Any]) -> None:
        """
        Replace the labels of a vertex's outgoing edges, keeping their order.

        Raises:
            ValueError: If the number of labels differs from the out-degree
        """
        out = self._out_edges[self.index_of(vertex)]
        if len(labels) != len(out):
            raise ValueError(
                f"Expected {len(out)} labels for {vertex!r}, got {len(labels)}"
            )
        out[:] = [(dest_id, label) for (dest_id, _), label in zip(out, labels)]

    def clear(self) -> None:
        """Remove all vertices and edges from the graph."""
        self._id_map.clear()
        self._nodes.clear()
        self._out_edges.clear()
        self._in_edges.clear()
        self._edge_count = 0

    # ---- identity --------------------------------------------------------

    @property
    def vertices(self) -> list[Hashable]:
        """Vertex values in insertion order."""
        return list(self._nodes)

    @property
    def vertex_count(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._nodes)

    @property
    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return self._edge_count

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._id_map

    def index_of(self, vertex: Hashable) -> int:
        """
        Return the identifier of a vertex.

        Raises:
            VertexNotFoundError: If the vertex is not in the graph
        """
        try:
            return self._id_map[vertex]
        except KeyError:
            raise VertexNotFoundError(vertex) from None
        except TypeError:
            # unhashable values can never be vertices
            raise VertexNotFoundError(vertex) from None

    def vertex_at(self, index: int) -> Hashable:
        """Return the vertex value stored under an identifier."""
        return self._nodes[index]

    # ---- vertex-level queries -------------------------------------------

    def neighbors(self, vertex: Hashable) -> list[Hashable]:
        """Distinct destinations of the vertex's outgoing edges."""
        return [self._nodes[i] for i in self.successor_ids(self.index_of(vertex))]

    def predecessors(self, vertex: Hashable) -> list[Hashable]:
        """Distinct origins of edges ending at the vertex."""
        return [self._nodes[i] for i in self.predecessor_ids(self.index_of(vertex))]

    def undirected_neighbors(self, vertex: Hashable) -> list[Hashable]:
        """
        Union of neighbors and predecessors.

        A vertex connected in both directions appears once.
        """
        index = self.index_of(vertex)
        return [self._nodes[i] for i in self.neighbor_ids(index, Direction.UNDIRECTED)]

    def out_edges(self, vertex: Hashable) -> list[tuple[Hashable, Any]]:
        """(dest, label) pairs in insertion order, parallel edges included."""
        return [(self._nodes[d], label) for d, label in self._out_edges[self.index_of(vertex)]]

    def in_edges(self, vertex: Hashable) -> list[tuple[Hashable, Any]]:
        """(origin, label) pairs for every edge ending at the vertex."""
        index = self.index_of(vertex)
        result = []
        seen: set[int] = set()
        for origin_id in self._in_edges[index]:
            if origin_id in seen:
                continue
            seen.add(origin_id)
            # parallel edges from the same origin are expanded here in order
            for dest_id, label in self._out_edges[origin_id]:
                if dest_id == index:
                    result.append((self._nodes[origin_id], label))
        return result

    def out_degree(self, vertex: Hashable) -> int:
        return len(self._out_edges[self.index_of(vertex)])

    def in_degree(self, vertex: Hashable) -> int:
        return len(self._in_edges[self.index_of(vertex)])

    def degree(self, vertex: Hashable) -> int:
        """
        Number of incident edges in the undirected view.

        Reciprocal and parallel edges are counted separately; a self-loop
        counts twice.
        """
        index = self.index_of(vertex)
        return len(self._out_edges[index]) + len(self._in_edges[index])

    # ---- edge-level queries ---------------------------------------------

    def edge_weight(self, origin: Hashable, dest: Hashable) -> Optional[Any]:
        """
        Label of the first origin -> dest edge, or None if there is none.

        Raises:
            VertexNotFoundError: If either vertex is missing
        """
        return self.weight_at(self.index_of(origin), self.index_of(dest))

    def find_edge(self, origin: Hashable, dest: Hashable) -> Edge:
        """
        Return the first origin -> dest edge.

        Raises:
            EdgeNotFoundError: If no such edge exists
        """
        origin_id = self.index_of(origin)
        dest_id = self.index_of(dest)
        for d, label in self._out_edges[origin_id]:
            if d == dest_id:
                return Edge(origin=origin, dest=dest, label=label)
        raise EdgeNotFoundError(origin, dest)

    def has_edge(self, origin: Hashable, dest: Hashable) -> bool:
        dest_id = self.index_of(dest)
        return any(d == dest_id for d, _ in self._out_edges[self.index_of(origin)])

    def has_undirected_edge(self, a: Hashable, b: Hashable) -> bool:
        """True if an edge exists between a and b in either direction."""
        return self.has_edge(a, b) or self.has_edge(b, a)

    def edges(self) -> Iterator[Edge]:
        """Iterate over all edges, grouped by origin in insertion order."""
        for origin_id, out in enumerate(self._out_edges):
            origin = self._nodes[origin_id]
            for dest_id, label in out:
                yield Edge(origin=origin, dest=self._nodes[dest_id], label=label)

    def validate_weights(self) -> None:
        """
        Check that every label is usable as a shortest-path cost.

        Raises:
            InvalidWeightError: On a label that is not a finite,
                non-negative real number
        """
        for edge in self.edges():
            label = edge.label
            if isinstance(label, bool) or not isinstance(label, Real):
                raise InvalidWeightError(
                    f"Edge {edge.origin!r} -> {edge.dest!r} has non-numeric label {label!r}"
                )
            if not math.isfinite(label) or label < 0:
                raise InvalidWeightError(
                    f"Edge {edge.origin!r} -> {edge.dest!r} has invalid weight {label!r}"
                )

    # ---- index-level access (used by the traversal engine) ---------------

    def successor_ids(self, index: int) -> list[int]:
        """Distinct successor ids of a vertex id, first-seen order."""
        return list(dict.fromkeys(d for d, _ in self._out_edges[index]))

    def predecessor_ids(self, index: int) -> list[int]:
        """Distinct predecessor ids of a vertex id, first-seen order."""
        return list(dict.fromkeys(self._in_edges[index]))

    def neighbor_ids(self, index: int, direction: Direction) -> list[int]:
        """Distinct adjacent ids of a vertex id in the given direction."""
        if direction is Direction.OUT:
            return self.successor_ids(index)
        if direction is Direction.IN:
            return self.predecessor_ids(index)
        merged = dict.fromkeys(d for d, _ in self._out_edges[index])
        merged.update(dict.fromkeys(self._in_edges[index]))
        return list(merged)

    def weight_at(self, origin_id: int, dest_id: int) -> Optional[Any]:
        """Label of the first origin_id -> dest_id edge, or None."""
        for d, label in self._out_edges[origin_id]:
            if d == dest_id:
                return label
        return None

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        try:
            return vertex in self._id_map
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"DiGraph(vertices={self.vertex_count}, edges={self.edge_count})"
