"""
Tests for the gscope command-line interface.
"""

import pytest
from typer.testing import CliRunner

from cli.main import app
from graphoscope import __version__
from tests.fixtures import KONECT_TEXT, SIMPLE_EDGE_LIST

runner = CliRunner()


@pytest.fixture
def edge_file(tmp_path):
    path = tmp_path / "edges.txt"
    path.write_text(SIMPLE_EDGE_LIST)
    return path


class TestInfo:
    """Tests for the info command."""

    def test_summary(self, edge_file):
        """Test the graph summary panel."""
        result = runner.invoke(app, ["info", str(edge_file)])

        assert result.exit_code == 0
        assert "Vertices" in result.output
        assert "Strongly connected" in result.output
        assert "no" in result.output

    def test_konect_with_skipped_header(self, tmp_path):
        """Test loading a KONECT dump."""
        path = tmp_path / "out.sample"
        path.write_text(KONECT_TEXT)

        result = runner.invoke(
            app, ["info", str(path), "--skip-lines", "2", "--direction", "out", "--weighted"]
        )

        assert result.exit_code == 0
        assert "out, weighted" in result.output

    def test_invalid_direction(self, edge_file):
        """Test that an unknown direction exits with an error."""
        result = runner.invoke(app, ["info", str(edge_file), "--direction", "sideways"])

        assert result.exit_code == 1
        assert "Unknown direction" in result.output

    def test_malformed_file(self, tmp_path):
        """Test that a malformed edge list exits with an error."""
        path = tmp_path / "bad.txt"
        path.write_text("A B\nC\n")

        result = runner.invoke(app, ["info", str(path)])

        assert result.exit_code == 1
        assert "Line 2" in result.output


class TestPath:
    """Tests for the path command."""

    def test_weighted(self, edge_file):
        """Test the weighted shortest path."""
        result = runner.invoke(app, ["path", str(edge_file), "A", "C", "--weighted"])

        assert result.exit_code == 0
        assert "5 weight" in result.output

    def test_hops(self, edge_file):
        """Test the hop count."""
        result = runner.invoke(app, ["path", str(edge_file), "A", "C"])

        assert result.exit_code == 0
        assert "2 hops" in result.output

    def test_unreachable(self, edge_file):
        """Test that an unreachable target exits with status 2."""
        result = runner.invoke(app, ["path", str(edge_file), "C", "A"])

        assert result.exit_code == 2
        assert "No path" in result.output

    def test_unreachable_reversed(self, edge_file):
        """Test that following incoming edges finds the reverse path."""
        result = runner.invoke(app, ["path", str(edge_file), "C", "A", "--direction", "in"])

        assert result.exit_code == 0

    def test_unknown_vertex(self, edge_file):
        """Test that an unknown vertex exits with status 1."""
        result = runner.invoke(app, ["path", str(edge_file), "A", "Z"])

        assert result.exit_code == 1
        assert "Unknown vertex" in result.output


class TestVertex:
    """Tests for the vertex command."""

    def test_measures_table(self, edge_file):
        """Test the per-vertex table."""
        result = runner.invoke(app, ["vertex", str(edge_file), "B"])

        assert result.exit_code == 0
        assert "Vertex B" in result.output
        assert "Closeness" in result.output

    def test_undefined_measures_listed(self, edge_file):
        """Test the hint about undefined measures."""
        result = runner.invoke(app, ["vertex", str(edge_file), "A"])

        assert result.exit_code == 0
        assert "clustering_coefficient" in result.output

    def test_unknown_vertex(self, edge_file):
        """Test that an unknown vertex exits with status 1."""
        result = runner.invoke(app, ["vertex", str(edge_file), "Z"])

        assert result.exit_code == 1


class TestDegrees:
    """Tests for the degrees command."""

    def test_histogram(self, edge_file):
        """Test the degree distribution table."""
        result = runner.invoke(app, ["degrees", str(edge_file)])

        assert result.exit_code == 0
        assert "Degree Distribution" in result.output

    def test_empty_file(self, tmp_path):
        """Test a file without edges."""
        path = tmp_path / "empty.txt"
        path.write_text("% nothing here\n")

        result = runner.invoke(app, ["degrees", str(path)])

        assert result.exit_code == 0
        assert "no vertices" in result.output


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        """Test the version flag."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
