"""
Tests for graph construction and conversion.

Tests the generators, the plain-data builders and the adjacency-matrix
and networkx converters.
"""

import networkx as nx
import pytest

from graphoscope.errors import DuplicateVertexError, InvalidWeightError
from graphoscope.graph import (
    complete,
    from_edges,
    from_networkx,
    from_vertices,
    normalize_out_edges,
    random_gnp,
    to_adjacency_matrix,
    to_networkx,
)
from graphoscope.models import Edge
from tests.fixtures import diamond_graph, weighted_path_graph


class TestBuilders:
    """Tests for from_vertices() and from_edges()."""

    def test_from_vertices(self):
        """Test an edgeless graph."""
        graph = from_vertices(["A", "B"])

        assert graph.vertices == ["A", "B"]
        assert graph.edge_count == 0

    def test_from_vertices_rejects_duplicates(self):
        """Test that repeated vertices fail."""
        with pytest.raises(DuplicateVertexError):
            from_vertices(["A", "A"])

    def test_from_edges_first_seen_order(self):
        """Test that vertices are numbered as they first appear."""
        graph = from_edges([("C", "A", 1.0), ("B", "C", 2.0)])

        assert graph.vertices == ["C", "A", "B"]
        assert list(graph.edges()) == [Edge("C", "A", 1.0), Edge("B", "C", 2.0)]

    def test_from_edges_accepts_generators(self):
        """Test building from a one-shot iterable."""
        graph = from_edges((i, i + 1, 1.0) for i in range(3))

        assert graph.vertex_count == 4
        assert graph.edge_count == 3


class TestGenerators:
    """Tests for complete() and random_gnp()."""

    @pytest.mark.parametrize("n", [0, 1, 2, 5])
    def test_complete_edge_count(self, n):
        """Test that K_n has n(n-1) arcs and no self-loops."""
        graph = complete(n)

        assert graph.vertex_count == n
        assert graph.edge_count == n * (n - 1)
        assert all(e.origin != e.dest for e in graph.edges())

    def test_complete_label(self):
        """Test the label given to every edge."""
        graph = complete(3, label=0.5)

        assert {e.label for e in graph.edges()} == {0.5}

    def test_complete_negative_size(self):
        """Test that a negative size is rejected."""
        with pytest.raises(ValueError):
            complete(-1)

    def test_gnp_extremes(self):
        """Test that p=1 gives the complete graph and p=0 none."""
        assert random_gnp(10, 1.0).edge_count == 90
        assert random_gnp(10, 0.0).edge_count == 0

    def test_gnp_seed_is_reproducible(self):
        """Test that the same seed yields the same edges."""
        first = list(random_gnp(30, 0.1, seed=4).edges())
        second = list(random_gnp(30, 0.1, seed=4).edges())

        assert first == second

    def test_gnp_vertices(self):
        """Test that vertices are 0..n-1 in order."""
        assert random_gnp(6, 0.5, seed=1).vertices == list(range(6))

    @pytest.mark.parametrize("n,p", [(-1, 0.5), (5, -0.1), (5, 1.5)])
    def test_gnp_invalid_arguments(self, n, p):
        """Test argument validation."""
        with pytest.raises(ValueError):
            random_gnp(n, p)


class TestAdjacencyMatrix:
    """Tests for to_adjacency_matrix()."""

    def test_weighted_path(self):
        """Test rows and columns follow vertex ids."""
        assert to_adjacency_matrix(weighted_path_graph()) == [
            [0.0, 2.0, 0.0],
            [0.0, 0.0, 3.0],
            [0.0, 0.0, 0.0],
        ]

    def test_last_parallel_edge_wins(self):
        """Test that later parallel edges overwrite the cell."""
        graph = from_edges([("A", "B", 1.0), ("A", "B", 7.0)])

        assert to_adjacency_matrix(graph)[0][1] == 7.0


class TestNormalize:
    """Tests for normalize_out_edges()."""

    def test_outgoing_weights_sum_to_one(self):
        """Test per-vertex normalization in place."""
        graph = diamond_graph()

        normalize_out_edges(graph)

        assert graph.out_edges("A") == [
            ("B", pytest.approx(1 / 16)),
            ("C", pytest.approx(5 / 16)),
            ("D", pytest.approx(10 / 16)),
        ]
        assert graph.out_edges("B") == [("D", 1.0)]
        assert graph.out_edges("D") == []

    def test_zero_total_left_alone(self):
        """Test that all-zero outgoing weights are not divided."""
        graph = from_edges([("A", "B", 0.0)])

        normalize_out_edges(graph)

        assert graph.edge_weight("A", "B") == 0.0

    def test_invalid_weights_rejected(self):
        """Test that normalization validates labels first."""
        graph = from_edges([("A", "B", -2.0), ("A", "C", 4.0)])

        with pytest.raises(InvalidWeightError):
            normalize_out_edges(graph)
        assert graph.edge_weight("A", "C") == 4.0


class TestNetworkxConversion:
    """Tests for to_networkx() and from_networkx()."""

    def test_export_keeps_parallel_edges(self):
        """Test that multiedges and labels survive export."""
        graph = from_edges([("A", "B", 1.0), ("A", "B", 3.0), ("B", "C", 2.0)])
        graph.add_vertex("lonely")

        exported = to_networkx(graph)

        assert isinstance(exported, nx.MultiDiGraph)
        assert set(exported.nodes) == {"A", "B", "C", "lonely"}
        assert exported.number_of_edges("A", "B") == 2
        assert sorted(d["weight"] for d in exported.get_edge_data("A", "B").values()) == [1.0, 3.0]

    def test_import_directed(self):
        """Test importing a weighted DiGraph."""
        source = nx.DiGraph()
        source.add_edge("x", "y", weight=4.0)
        source.add_edge("y", "z")

        graph = from_networkx(source)

        assert graph.edge_weight("x", "y") == 4.0
        assert graph.edge_weight("y", "z") == 1.0
        assert not graph.has_edge("y", "x")

    def test_import_undirected_adds_both_arcs(self):
        """Test that an undirected edge becomes two arcs."""
        graph = from_networkx(nx.path_graph(3))

        assert graph.edge_count == 4
        assert graph.has_edge(1, 0)
        assert graph.has_edge(0, 1)

    def test_import_custom_attribute(self):
        """Test reading labels from a named attribute."""
        source = nx.DiGraph()
        source.add_edge(1, 2, cost=9)

        graph = from_networkx(source, weight="cost", default=0.0)

        assert graph.edge_weight(1, 2) == 9

    def test_round_trip_preserves_edges(self):
        """Test exporting and importing a random graph."""
        graph = random_gnp(15, 0.2, seed=8)

        restored = from_networkx(to_networkx(graph))

        assert restored.vertices == graph.vertices
        assert sorted((e.origin, e.dest) for e in restored.edges()) == sorted(
            (e.origin, e.dest) for e in graph.edges()
        )
