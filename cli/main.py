"""
Graphoscope CLI

Command-line interface for the graph-analytics engine.
Loads an edge-list file and reports structural measures.

Commands:
    gscope info <file>                  Graph-wide summary
    gscope path <file> <source> <target> Shortest path length
    gscope vertex <file> <vertex>       Per-vertex measures
    gscope degrees <file>               Degree histogram

Usage:
    $ gscope info out.moreno_rhesus_rhesus --skip-lines 2
    $ gscope path edges.txt A C --direction out --weighted
    $ gscope vertex edges.txt B --direction undirected
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from graphoscope import __version__
from graphoscope.analysis import analyze_graph, analyze_vertex
from graphoscope.config import DEFAULT_DELIMITER, DEFAULT_DIRECTION, AnalysisConfig
from graphoscope.errors import GraphoscopeError
from graphoscope.graph import DiGraph
from graphoscope.io import read_edge_list
from graphoscope.metrics import degree_histogram, shortest_path_lengths
from graphoscope.models import Direction

# Initialize Typer app and Rich console
app = typer.Typer(
    name="gscope",
    help="Graphoscope: structural measures for directed graphs",
    add_completion=False,
)
console = Console()

FileArgument = typer.Argument(
    ...,
    help="Edge-list file: one 'origin dest [weight]' row per edge",
    exists=True,
    file_okay=True,
    dir_okay=False,
    resolve_path=True,
)
DelimiterOption = typer.Option(
    DEFAULT_DELIMITER,
    "--delimiter",
    help="Column separator (default: a single space)",
)
SkipLinesOption = typer.Option(
    0,
    "--skip-lines",
    help="Number of header lines to skip",
)
UnweightedFileOption = typer.Option(
    False,
    "--unweighted-file",
    help="Ignore the weight column; every edge gets weight 1.0",
)
DirectionOption = typer.Option(
    DEFAULT_DIRECTION.value,
    "--direction",
    help="Traversal direction: out, in or undirected",
)


def _load(path: Path, delimiter: str, skip_lines: int, unweighted_file: bool) -> DiGraph:
    """Read the edge list, turning load errors into a clean exit."""
    try:
        return read_edge_list(
            path,
            delimiter=delimiter,
            skip_lines=skip_lines,
            weighted=not unweighted_file,
        )
    except (GraphoscopeError, FileNotFoundError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _direction(value: str) -> Direction:
    try:
        return Direction.coerce(value)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


@app.command()
def info(
    path: Path = FileArgument,
    delimiter: str = DelimiterOption,
    skip_lines: int = SkipLinesOption,
    unweighted_file: bool = UnweightedFileOption,
    direction: str = DirectionOption,
    weighted: bool = typer.Option(
        False,
        "--weighted",
        "-w",
        help="Use edge weights as path costs",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-j",
        help="Worker processes for the mean shortest path",
    ),
) -> None:
    """
    Show a graph-wide summary.

    Reports:
    - Size, volume, mean and maximum degree
    - Strong connectivity
    - Mean shortest path length in the chosen direction
    """
    graph = _load(path, delimiter, skip_lines, unweighted_file)

    try:
        config = AnalysisConfig(direction=_direction(direction), weighted=weighted, workers=workers)
        report = analyze_graph(graph, config)
    except (GraphoscopeError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _print_graph_report(report, path)


@app.command()
def path(
    file: Path = FileArgument,
    source: str = typer.Argument(..., help="Start vertex"),
    target: str = typer.Argument(..., help="End vertex"),
    delimiter: str = DelimiterOption,
    skip_lines: int = SkipLinesOption,
    unweighted_file: bool = UnweightedFileOption,
    direction: str = typer.Option(
        Direction.OUT.value,
        "--direction",
        help="Traversal direction: out, in or undirected",
    ),
    weighted: bool = typer.Option(
        False,
        "--weighted",
        "-w",
        help="Sum edge weights instead of counting hops",
    ),
) -> None:
    """
    Show the shortest path length between two vertices.

    Exits with status 2 when the target is unreachable.
    """
    graph = _load(file, delimiter, skip_lines, unweighted_file)
    resolved = _direction(direction)

    try:
        graph.index_of(target)
        lengths = shortest_path_lengths(graph, source, resolved, weighted=weighted)
    except GraphoscopeError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    distance = lengths[target]
    unit = "weight" if weighted else "hops"
    if distance is None:
        console.print(
            f"[yellow]No path[/yellow] from [cyan]{source}[/cyan] to [cyan]{target}[/cyan] "
            f"[dim]({resolved.value})[/dim]"
        )
        raise typer.Exit(2)

    console.print(
        f"[cyan]{source}[/cyan] → [cyan]{target}[/cyan]: "
        f"[bold]{distance:g}[/bold] {unit} [dim]({resolved.value})[/dim]"
    )


@app.command()
def vertex(
    file: Path = FileArgument,
    name: str = typer.Argument(..., help="Vertex to analyze"),
    delimiter: str = DelimiterOption,
    skip_lines: int = SkipLinesOption,
    unweighted_file: bool = UnweightedFileOption,
    direction: str = DirectionOption,
) -> None:
    """
    Show measures for a single vertex.

    Provides:
    - Degree (total, in and out)
    - Closeness centrality and mean shortest path
    - Neighborhood connectivity and clustering coefficient
    """
    graph = _load(file, delimiter, skip_lines, unweighted_file)

    try:
        report = analyze_vertex(graph, name, AnalysisConfig(direction=_direction(direction)))
    except GraphoscopeError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    _print_vertex_report(report)


@app.command()
def degrees(
    file: Path = FileArgument,
    delimiter: str = DelimiterOption,
    skip_lines: int = SkipLinesOption,
) -> None:
    """
    Show the degree distribution as a histogram table.
    """
    graph = _load(file, delimiter, skip_lines, unweighted_file=True)
    histogram = degree_histogram(graph)

    if not histogram:
        console.print("[yellow]Graph has no vertices.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Degree Distribution", box=box.ROUNDED)
    table.add_column("Degree", justify="right", style="cyan")
    table.add_column("Vertices", justify="right")
    table.add_column("Share", justify="right")

    total = graph.vertex_count
    for value, count in histogram.items():
        table.add_row(str(value), str(count), f"{(count / total) * 100:.1f}%")

    console.print(table)


# Helper functions for output formatting

def _fmt(value: Optional[float]) -> str:
    return "[dim]undefined[/dim]" if value is None else f"{value:.4g}"


def _print_graph_report(report, path: Path) -> None:
    """Print the graph summary panel."""
    table = Table(box=box.SIMPLE, show_header=False)
    table.add_column("Label", style="dim")
    table.add_column("Value", style="bold")

    table.add_row("Vertices", str(report.size))
    table.add_row("Edges", str(report.volume))
    table.add_row("Density", f"{report.density:.4f}")
    table.add_row("Mean degree", _fmt(report.mean_degree))
    table.add_row("Max degree", "[dim]undefined[/dim]" if report.max_degree is None else str(report.max_degree))
    table.add_row(
        "Strongly connected",
        "[green]yes[/green]" if report.strongly_connected else "[yellow]no[/yellow]",
    )
    mode = f"{report.direction.value}, {'weighted' if report.weighted else 'hops'}"
    table.add_row(f"Mean shortest path ({mode})", _fmt(report.mean_shortest_path))

    panel = Panel(table, title=f"[bold green]📊 {path.name}[/bold green]", border_style="green")
    console.print(panel)


def _print_vertex_report(report) -> None:
    """Print the per-vertex measures table."""
    table = Table(title=f"Vertex {report.vertex}", box=box.ROUNDED)
    table.add_column("Measure", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Degree", str(report.degree))
    table.add_row("Out-degree", str(report.out_degree))
    table.add_row("In-degree", str(report.in_degree))
    table.add_row("Closeness", _fmt(report.closeness))
    table.add_row("Mean shortest path", _fmt(report.mean_shortest_path))
    table.add_row("Neighborhood connectivity", _fmt(report.neighborhood_connectivity))
    table.add_row("Clustering coefficient", _fmt(report.clustering_coefficient))

    console.print(table)

    if report.undefined:
        console.print(
            f"\n[dim]💡 Undefined for this vertex: {', '.join(report.undefined)}[/dim]"
        )


# Version command
def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]Graphoscope[/bold] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log engine activity to the console",
    ),
) -> None:
    """
    Graphoscope: structural measures for directed graphs.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
            force=True,
        )


if __name__ == "__main__":
    app()
