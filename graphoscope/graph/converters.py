"""
Converters between DiGraph and other representations.

- Dense adjacency matrices (nested lists of floats)
- networkx multigraphs, for interop with the wider ecosystem
- In-place normalization of outgoing edge weights
"""

from typing import Any

import networkx as nx

from graphoscope.graph.digraph import DiGraph


def to_adjacency_matrix(graph: DiGraph) -> list[list[float]]:
    """
    Convert a weighted graph into a dense adjacency matrix.

    Rows and columns follow vertex identifiers. With parallel edges the
    label of the last one added wins. Missing edges are 0.0.
    """
    count = graph.vertex_count
    matrix = [[0.0] * count for _ in range(count)]
    for edge in graph.edges():
        matrix[graph.index_of(edge.origin)][graph.index_of(edge.dest)] = float(edge.label)
    return matrix


def normalize_out_edges(graph: DiGraph) -> None:
    """
    Rescale every vertex's outgoing weights so they sum to 1.

    Vertices whose outgoing weights sum to zero are left untouched.

    Raises:
        InvalidWeightError: If any label is not a valid weight
    """
    graph.validate_weights()
    for vertex in graph:
        labels = [label for _, label in graph.out_edges(vertex)]
        total = sum(labels)
        if total == 0:
            continue
        graph.set_out_labels(vertex, [label / total for label in labels])


def to_networkx(graph: DiGraph, weight: str = "weight") -> nx.MultiDiGraph:
    """
    Export to a networkx MultiDiGraph.

    Parallel edges survive as separate multiedges; labels are stored
    under the ``weight`` attribute name.
    """
    result = nx.MultiDiGraph()
    result.add_nodes_from(graph)
    for edge in graph.edges():
        result.add_edge(edge.origin, edge.dest, **{weight: edge.label})
    return result


def from_networkx(
    nx_graph: nx.Graph,
    weight: str = "weight",
    default: Any = 1.0,
) -> DiGraph:
    """
    Import any networkx graph.

    Undirected graphs contribute one arc per direction for every edge,
    so their undirected view is preserved.

    Args:
        nx_graph: Source graph (Graph, DiGraph, or multigraph variants)
        weight: Edge attribute to use as label
        default: Label for edges without that attribute
    """
    graph = DiGraph()
    graph.add_vertices(nx_graph.nodes)
    for origin, dest, data in nx_graph.edges(data=True):
        label = data.get(weight, default)
        graph.add_edge(origin, dest, label)
        if not nx_graph.is_directed() and origin != dest:
            graph.add_edge(dest, origin, label)
    return graph

