"""
Configuration defaults for Graphoscope.

Module-level constants feed the CLI option defaults; AnalysisConfig
bundles the knobs shared by the report functions.
"""

from dataclasses import dataclass
from typing import Optional

from graphoscope.models import Direction

DEFAULT_DELIMITER = " "  # KONECT edge lists are space separated
DEFAULT_COMMENT = "%"
DEFAULT_WORKERS: Optional[int] = None  # sequential
DEFAULT_DIRECTION = Direction.UNDIRECTED


@dataclass
class AnalysisConfig:
    """Options for analyze_graph() and analyze_vertex()."""

    direction: Direction = DEFAULT_DIRECTION
    weighted: bool = False
    workers: Optional[int] = DEFAULT_WORKERS

    def __post_init__(self) -> None:
        """Normalize the direction and validate the worker count."""
        self.direction = Direction.coerce(self.direction)
        if self.workers is not None and self.workers < 1:
            raise ValueError(f"workers must be >= 1 or None, got {self.workers}")

    @property
    def directed(self) -> bool:
        return self.direction is not Direction.UNDIRECTED
