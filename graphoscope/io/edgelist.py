"""
Edge-list reader.

Parses delimited text where each data row is ``origin dest [weight]``,
the layout used by KONECT network dumps. Vertices are kept as strings;
rows are read with the csv module so quoted vertex names work.

Example file:
    % sym unweighted
    % 6 3 3
    1 2 3.0
    2 3 1.0
"""

import csv
import logging
from pathlib import Path
from typing import Iterable, Optional

from graphoscope.config import DEFAULT_COMMENT, DEFAULT_DELIMITER
from graphoscope.errors import EdgeListFormatError
from graphoscope.graph.builder import from_edges
from graphoscope.graph.digraph import DiGraph

logger = logging.getLogger(__name__)


def parse_edge_list(
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
    skip_lines: int = 0,
    weighted: bool = True,
    comment: Optional[str] = DEFAULT_COMMENT,
) -> DiGraph:
    """
    Build a graph from edge-list lines.

    Args:
        lines: Text lines (a file object works)
        delimiter: Column separator
        skip_lines: Number of leading lines to ignore
        weighted: Read the third column as a float weight; when False,
                  or when a row has only two columns, the weight is 1.0
        comment: Prefix marking comment lines, None to disable

    Returns:
        A DiGraph with vertices in first-seen order

    Raises:
        EdgeListFormatError: On a row with fewer than two columns or an
            unparseable weight
    """
    edges = []
    reader = csv.reader(lines, delimiter=delimiter, skipinitialspace=True)
    for line_number, row in enumerate(reader, start=1):
        if line_number <= skip_lines:
            continue
        row = [cell.strip() for cell in row if cell.strip()]
        if not row:
            continue
        if comment and row[0].startswith(comment):
            continue
        if len(row) < 2:
            raise EdgeListFormatError(
                f"Line {line_number}: expected at least 2 columns, got {len(row)}"
            )

        weight = 1.0
        if weighted and len(row) >= 3:
            try:
                weight = float(row[2])
            except ValueError:
                raise EdgeListFormatError(
                    f"Line {line_number}: invalid weight {row[2]!r}"
                ) from None
        edges.append((row[0], row[1], weight))

    return from_edges(edges)


def read_edge_list(
    path: Path | str,
    delimiter: str = DEFAULT_DELIMITER,
    skip_lines: int = 0,
    weighted: bool = True,
    comment: Optional[str] = DEFAULT_COMMENT,
) -> DiGraph:
    """
    Read an edge-list file into a graph.

    See parse_edge_list() for the row format.

    Raises:
        FileNotFoundError: If the file does not exist
        EdgeListFormatError: On a malformed row
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Edge list not found: {path}")

    with path.open(newline="", encoding="utf-8") as handle:
        graph = parse_edge_list(
            handle,
            delimiter=delimiter,
            skip_lines=skip_lines,
            weighted=weighted,
            comment=comment,
        )

    logger.info(
        "Loaded %s: %d vertices, %d edges", path, graph.vertex_count, graph.edge_count
    )
    return graph
