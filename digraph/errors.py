"""
Error taxonomy for digraph.

Every error raised by the graph backends derives from GraphError, and also
from the builtin exception a caller would naturally catch for that condition
(ValueError for bad or conflicting input, LookupError for missing entries).
"""

from typing import Any


class GraphError(Exception):
    """Base class for all graph errors."""


class InvalidValueError(GraphError, ValueError):
    """A None label or an otherwise unusable argument was supplied."""


class DuplicateVertexError(GraphError, ValueError):
    """A vertex with the given label already exists."""

    def __init__(self, label: Any) -> None:
        super().__init__(f"Vertex {label!r} already exists")
        self.label = label


class DuplicateEdgeError(GraphError, ValueError):
    """An edge between the given endpoints already exists."""

    def __init__(self, source: Any, destination: Any) -> None:
        super().__init__(f"Edge from {source!r} to {destination!r} already exists")
        self.source = source
        self.destination = destination


class NoSuchVertexError(GraphError, LookupError):
    """No vertex with the given label exists."""

    def __init__(self, label: Any) -> None:
        super().__init__(f"Vertex {label!r} does not exist")
        self.label = label


class NoSuchEdgeError(GraphError, LookupError):
    """Both endpoints exist but no edge connects them."""

    def __init__(self, source: Any, destination: Any) -> None:
        super().__init__(f"Edge from {source!r} to {destination!r} does not exist")
        self.source = source
        self.destination = destination
