"""
Abstract base class for directed graphs.

Defines the contract that both storage backends (adjacency list and
adjacency matrix) must follow. Callers program against DirectedGraph and can
swap one backend for the other; only complexity and iteration order differ.

The base class holds no storage of its own. The concrete helpers defined here
(Python protocol methods, from_edges, labels, neighbors, rendering) are
written purely in terms of the abstract operations.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Iterator, TypeVar

from digraph.errors import InvalidValueError
from digraph.models import Edge, Vertex


V = TypeVar("V")
E = TypeVar("E")


def _check_value(value: Any, what: str = "label") -> None:
    """Raise InvalidValueError if value is None."""
    if value is None:
        raise InvalidValueError(f"{what} must not be None")


class DirectedGraph(ABC, Generic[V, E]):
    """
    Directed graph over vertex labels of type V and edge labels of type E.

    Vertices are unique by label, edges are unique by ordered endpoint pair,
    and self-loops are allowed. Removing a vertex also removes every edge
    that starts or ends at it.

    All iterators returned by the graph are snapshots taken at call time.
    """

    # ─────────────────────────────────────────────
    # Vertex Operations
    # ─────────────────────────────────────────────

    @abstractmethod
    def add(self, label: V) -> None:
        """
        Add a new vertex.

        Args:
            label: The vertex label

        Raises:
            InvalidValueError: If label is None
            DuplicateVertexError: If a vertex with this label exists
        """
        ...

    @abstractmethod
    def contains(self, label: V) -> bool:
        """Check if a vertex with this label exists."""
        ...

    @abstractmethod
    def get(self, label: V) -> Vertex[V]:
        """
        Fetch the vertex with this label.

        Raises:
            NoSuchVertexError: If the vertex does not exist
        """
        ...

    @abstractmethod
    def remove(self, label: V) -> V:
        """
        Remove a vertex together with all of its incident edges.

        Args:
            label: The vertex label

        Returns:
            The label of the removed vertex

        Raises:
            NoSuchVertexError: If the vertex does not exist
        """
        ...

    # ─────────────────────────────────────────────
    # Edge Operations
    # ─────────────────────────────────────────────

    @abstractmethod
    def add_edge(self, source: V, destination: V, label: E) -> None:
        """
        Add a directed edge from source to destination.

        Args:
            source: Label of the source vertex
            destination: Label of the destination vertex
            label: Edge payload

        Raises:
            InvalidValueError: If any argument is None
            NoSuchVertexError: If either endpoint does not exist
            DuplicateEdgeError: If an edge from source to destination exists
        """
        ...

    @abstractmethod
    def contains_edge(self, source: V, destination: V) -> bool:
        """
        Check if an edge exists from source to destination.

        Raises:
            NoSuchVertexError: If either endpoint does not exist
        """
        ...

    @abstractmethod
    def get_edge(self, source: V, destination: V) -> Edge[V, E]:
        """
        Fetch the edge from source to destination.

        Raises:
            NoSuchVertexError: If either endpoint does not exist
            NoSuchEdgeError: If both endpoints exist but are not connected
        """
        ...

    @abstractmethod
    def remove_edge(self, source: V, destination: V) -> E:
        """
        Remove the edge from source to destination.

        Returns:
            The label of the removed edge

        Raises:
            NoSuchVertexError: If either endpoint does not exist
            NoSuchEdgeError: If both endpoints exist but are not connected
        """
        ...

    # ─────────────────────────────────────────────
    # Counting
    # ─────────────────────────────────────────────

    @abstractmethod
    def size(self) -> int:
        """Return the number of vertices."""
        ...

    @abstractmethod
    def degree(self, label: V) -> int:
        """
        Return the number of edges leaving this vertex.

        Raises:
            NoSuchVertexError: If the vertex does not exist
        """
        ...

    @abstractmethod
    def edge_count(self) -> int:
        """Return the number of edges."""
        ...

    # ─────────────────────────────────────────────
    # Iteration
    # ─────────────────────────────────────────────

    @abstractmethod
    def vertices(self) -> Iterator[Vertex[V]]:
        """Iterate over all vertices (in no particular order)."""
        ...

    @abstractmethod
    def adjacent(self, label: V) -> Iterator[Vertex[V]]:
        """
        Iterate over the vertices reachable by one edge from this vertex.

        Raises:
            NoSuchVertexError: If the vertex does not exist
        """
        ...

    @abstractmethod
    def edges(self) -> Iterator[Edge[V, E]]:
        """Iterate over all edges (in no particular order)."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all vertices and edges."""
        ...

    def is_empty(self) -> bool:
        """Check if the graph has no vertices."""
        return self.size() == 0

    # ─────────────────────────────────────────────
    # Conveniences
    # ─────────────────────────────────────────────

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[V, V, E]],
        vertices: Iterable[V] = (),
        **kwargs: Any,
    ) -> "DirectedGraph[V, E]":
        """
        Build a graph from (source, destination, label) triples.

        Endpoints that are not yet in the graph are added on the fly.

        Args:
            edges: The edges to add
            vertices: Extra vertex labels, added first (e.g. isolated vertices)
            **kwargs: Passed to the backend constructor

        Returns:
            A new graph of this backend type

        Example:
            >>> g = ListGraph.from_edges([("A", "B", "x"), ("B", "C", "y")])
            >>> g.edge_count()
            2
        """
        graph = cls(**kwargs)
        for label in vertices:
            if not graph.contains(label):
                graph.add(label)
        for source, destination, label in edges:
            for endpoint in (source, destination):
                if not graph.contains(endpoint):
                    graph.add(endpoint)
            graph.add_edge(source, destination, label)
        return graph

    def labels(self) -> list[V]:
        """Return the labels of all vertices."""
        return [vertex.label for vertex in self.vertices()]

    def neighbors(self, label: V) -> list[V]:
        """Return the labels of all vertices adjacent to this one."""
        return [vertex.label for vertex in self.adjacent(label)]

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, label: object) -> bool:
        return self.contains(label)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[V]:
        return iter(self.labels())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(N={self.size()}, M={self.edge_count()})"

    def __str__(self) -> str:
        lines = []
        connected = set()
        for edge in self.edges():
            lines.append(str(edge))
            connected.update(edge.endpoints)
        for vertex in self.vertices():
            if vertex.label not in connected:
                lines.append(str(vertex))
        return "\n".join(lines)
