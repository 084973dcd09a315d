"""
Exception taxonomy for Graphoscope.

Every error raised by the library derives from GraphoscopeError so callers
can catch the whole family at once. Each concrete error also derives from
the closest built-in exception, so code written against plain KeyError or
ValueError keeps working.

Note that an unreachable vertex is NOT an error: shortest-path queries
return None for it.
"""


class GraphoscopeError(Exception):
    """Base class for all Graphoscope errors."""

    pass


class VertexNotFoundError(GraphoscopeError, KeyError):
    """Raised when a vertex value is not present in the graph."""

    def __init__(self, vertex: object) -> None:
        super().__init__(vertex)
        self.vertex = vertex

    def __str__(self) -> str:
        return f"Unknown vertex: {self.vertex!r}"


class EdgeNotFoundError(GraphoscopeError, KeyError):
    """Raised when no edge connects the requested origin and destination."""

    def __init__(self, origin: object, dest: object) -> None:
        super().__init__((origin, dest))
        self.origin = origin
        self.dest = dest

    def __str__(self) -> str:
        return f"No edge from {self.origin!r} to {self.dest!r}"


class DuplicateVertexError(GraphoscopeError, ValueError):
    """Raised when a vertex value is added twice."""

    pass


class InvalidWeightError(GraphoscopeError, ValueError):
    """Raised when an edge weight is negative, NaN, infinite or not numeric."""

    pass


class UndefinedMeasureError(GraphoscopeError, ArithmeticError):
    """Raised when a measure would average over an empty set."""

    pass


class EdgeListFormatError(GraphoscopeError, ValueError):
    """Raised when an edge-list file contains a malformed row."""

    pass
