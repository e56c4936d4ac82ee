"""
Adjacency-list backend.

Vertices live in a dict keyed by label. Edges live in a dict of dicts:
the outer key is the source label and the inner key the destination label.
Memory is proportional to vertices plus edges, and every lookup is an
expected O(1) hash lookup.
"""

import logging
from typing import Iterator

from digraph.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    NoSuchEdgeError,
    NoSuchVertexError,
)
from digraph.graph.base import DirectedGraph, E, V, _check_value
from digraph.models import Edge, Vertex


logger = logging.getLogger(__name__)


class ListGraph(DirectedGraph[V, E]):
    """
    Directed graph stored as adjacency lists.

    Attributes:
        _vertices: Mapping from label to Vertex
        _adjacency: Mapping from source label to {destination label: Edge}.
            Every vertex has a (possibly empty) row.
        _edge_count: Number of edges stored across all rows

    Usage:
        graph = ListGraph()
        graph.add("A")
        graph.add("B")
        graph.add_edge("A", "B", "x")
        for vertex in graph.adjacent("A"):
            print(vertex.label)
    """

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self._vertices: dict[V, Vertex[V]] = {}
        self._adjacency: dict[V, dict[V, Edge[V, E]]] = {}
        self._edge_count = 0

    def _require_vertex(self, label: V) -> None:
        _check_value(label, "Vertex label")
        if label not in self._vertices:
            raise NoSuchVertexError(label)

    def add(self, label: V) -> None:
        _check_value(label, "Vertex label")
        if label in self._vertices:
            raise DuplicateVertexError(label)

        self._vertices[label] = Vertex(label)
        self._adjacency[label] = {}

    def contains(self, label: V) -> bool:
        _check_value(label, "Vertex label")
        return label in self._vertices

    def get(self, label: V) -> Vertex[V]:
        self._require_vertex(label)
        return self._vertices[label]

    def remove(self, label: V) -> V:
        self._require_vertex(label)

        # Outgoing edges go with the row, incoming ones sit in other rows
        removed = len(self._adjacency.pop(label))
        for row in self._adjacency.values():
            if row.pop(label, None) is not None:
                removed += 1
        self._edge_count -= removed
        if removed:
            logger.debug("Removed %d edge(s) incident to %r", removed, label)

        return self._vertices.pop(label).label

    def add_edge(self, source: V, destination: V, label: E) -> None:
        _check_value(label, "Edge label")
        if self.contains_edge(source, destination):
            raise DuplicateEdgeError(source, destination)

        self._adjacency[source][destination] = Edge(source, destination, label)
        self._edge_count += 1

    def contains_edge(self, source: V, destination: V) -> bool:
        self._require_vertex(source)
        self._require_vertex(destination)
        return destination in self._adjacency[source]

    def get_edge(self, source: V, destination: V) -> Edge[V, E]:
        if not self.contains_edge(source, destination):
            raise NoSuchEdgeError(source, destination)
        return self._adjacency[source][destination]

    def remove_edge(self, source: V, destination: V) -> E:
        if not self.contains_edge(source, destination):
            raise NoSuchEdgeError(source, destination)

        self._edge_count -= 1
        return self._adjacency[source].pop(destination).label

    def size(self) -> int:
        return len(self._vertices)

    def degree(self, label: V) -> int:
        self._require_vertex(label)
        return len(self._adjacency[label])

    def edge_count(self) -> int:
        return self._edge_count

    def vertices(self) -> Iterator[Vertex[V]]:
        return iter(list(self._vertices.values()))

    def adjacent(self, label: V) -> Iterator[Vertex[V]]:
        self._require_vertex(label)
        return iter([self._vertices[dest] for dest in self._adjacency[label]])

    def edges(self) -> Iterator[Edge[V, E]]:
        return iter([edge for row in self._adjacency.values() for edge in row.values()])

    def clear(self) -> None:
        """Remove all vertices and edges from the graph."""
        self._vertices.clear()
        self._adjacency.clear()
        self._edge_count = 0
        logger.debug("Cleared %s", type(self).__name__)
