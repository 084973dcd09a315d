"""
Tests for the degree measures.
"""

import pytest

from graphoscope.errors import UndefinedMeasureError
from graphoscope.graph import DiGraph, complete
from graphoscope.metrics import (
    degree_distribution,
    degree_histogram,
    maximum_degree,
    mean_degree,
    minimum_degree,
    size,
    volume,
)
from tests.fixtures import path_graph, triangle_with_pendant


class TestDegreeMeasures:
    """Tests for the degree summary functions."""

    def test_complete_graph(self):
        """Test K4 where every vertex has 3 out and 3 in edges."""
        graph = complete(4)

        assert size(graph) == 4
        assert volume(graph) == 12
        assert mean_degree(graph) == 6.0
        assert maximum_degree(graph) == 6
        assert minimum_degree(graph) == 6

    def test_distribution_follows_insertion_order(self):
        """Test the per-vertex degree list."""
        assert degree_distribution(path_graph()) == [1, 2, 1]

    def test_histogram(self):
        """Test counting vertices per degree value."""
        histogram = degree_histogram(triangle_with_pendant())

        # A: 3, B: 2, C: 2, D: 1
        assert histogram == {1: 1, 2: 2, 3: 1}
        assert list(histogram) == [1, 2, 3]

    def test_mean_degree_counts_each_edge_twice(self):
        """Test that the mean degree is 2E / V."""
        assert mean_degree(path_graph()) == pytest.approx(4 / 3)

    def test_empty_graph(self):
        """Test that degree summaries of an empty graph are undefined."""
        graph = DiGraph()

        assert size(graph) == 0
        assert volume(graph) == 0
        assert degree_histogram(graph) == {}
        with pytest.raises(UndefinedMeasureError):
            mean_degree(graph)
        with pytest.raises(UndefinedMeasureError):
            maximum_degree(graph)
        with pytest.raises(UndefinedMeasureError):
            minimum_degree(graph)
