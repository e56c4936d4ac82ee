"""
Adjacency-matrix backend.

Vertices live in a fixed-capacity list of slots and edges in a square matrix
of slots addressed by the two vertices' slot indices. An empty slot is None.

Design Decisions:
    - Label lookup is a linear scan over the vertex slots (O(n))
    - Removing a vertex empties its slot without shifting the others, so the
      slot index of a surviving vertex never changes
    - A freed slot is reused by the next add, lowest index first
    - When every slot is taken, both lists are reallocated at twice the
      capacity and copied across index for index
"""

import logging
from typing import Iterator, Optional, cast

from digraph.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    InvalidValueError,
    NoSuchEdgeError,
    NoSuchVertexError,
)
from digraph.graph.base import DirectedGraph, E, V, _check_value
from digraph.models import Edge, Vertex


logger = logging.getLogger(__name__)


DEFAULT_CAPACITY = 10
GROWTH_FACTOR = 2

NOT_FOUND = -1

VertexSlot = Optional[Vertex[V]]
EdgeSlot = Optional[Edge[V, E]]


class MatrixGraph(DirectedGraph[V, E]):
    """
    Directed graph stored as an adjacency matrix.

    Attributes:
        _slots: Vertex slots, len(_slots) == capacity
        _matrix: Edge slots, _matrix[i][j] is the edge from slot i to slot j
        _used: High-water mark; slots at or past this index are always empty
        _size: Number of occupied vertex slots
        _edge_count: Number of occupied edge slots

    Usage:
        graph = MatrixGraph(capacity=4)
        graph.add("A")
        graph.add("B")
        graph.add_edge("A", "B", "x")
        graph.degree("A")  # 1
    """

    def __init__(self, capacity: int = 0) -> None:
        """
        Initialize an empty graph.

        Args:
            capacity: Initial number of slots; 0 selects DEFAULT_CAPACITY

        Raises:
            InvalidValueError: If capacity is negative or not an integer
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int):
            raise InvalidValueError(f"Capacity must be an integer, got {capacity!r}")
        if capacity < 0:
            raise InvalidValueError(f"Capacity must not be negative, got {capacity}")
        if capacity == 0:
            capacity = DEFAULT_CAPACITY

        self._slots: list[VertexSlot] = [None] * capacity
        self._matrix: list[list[EdgeSlot]] = [[None] * capacity for _ in range(capacity)]
        self._used = 0
        self._size = 0
        self._edge_count = 0

    @property
    def capacity(self) -> int:
        """Number of vertex slots currently allocated."""
        return len(self._slots)

    # ─────────────────────────────────────────────
    # Slot helpers
    # ─────────────────────────────────────────────

    def _index(self, label: V) -> int:
        """Return the slot index holding label, or NOT_FOUND."""
        _check_value(label, "Vertex label")
        for i in range(self._used):
            vertex = self._slots[i]
            if vertex is not None and vertex.label == label:
                return i
        return NOT_FOUND

    def _require_index(self, label: V) -> int:
        index = self._index(label)
        if index == NOT_FOUND:
            raise NoSuchVertexError(label)
        return index

    def _free_slot(self) -> int:
        """Return the lowest empty slot, growing the arrays if none is left."""
        for i in range(self._used):
            if self._slots[i] is None:
                return i
        if self._used == self.capacity:
            self._grow()
        self._used += 1
        return self._used - 1

    def _grow(self) -> None:
        old = self.capacity
        new = old * GROWTH_FACTOR

        slots: list[VertexSlot] = [None] * new
        matrix: list[list[EdgeSlot]] = [[None] * new for _ in range(new)]
        for i in range(old):
            slots[i] = self._slots[i]
            matrix[i][:old] = self._matrix[i]

        self._slots = slots
        self._matrix = matrix
        logger.debug("Grew %s capacity from %d to %d", type(self).__name__, old, new)

    # ─────────────────────────────────────────────
    # Vertex Operations
    # ─────────────────────────────────────────────

    def add(self, label: V) -> None:
        if self._index(label) != NOT_FOUND:
            raise DuplicateVertexError(label)

        # _free_slot may grow and rebind _slots, so resolve the index first
        index = self._free_slot()
        self._slots[index] = Vertex(label)
        self._size += 1

    def contains(self, label: V) -> bool:
        return self._index(label) != NOT_FOUND

    def get(self, label: V) -> Vertex[V]:
        return cast(Vertex[V], self._slots[self._require_index(label)])

    def remove(self, label: V) -> V:
        index = self._require_index(label)

        # Empty the row and the column so the slot can be reused cleanly
        removed = 0
        for i in range(self._used):
            if self._matrix[index][i] is not None:
                self._matrix[index][i] = None
                removed += 1
            if self._matrix[i][index] is not None:
                self._matrix[i][index] = None
                removed += 1
        self._edge_count -= removed
        if removed:
            logger.debug("Removed %d edge(s) incident to %r", removed, label)

        vertex = cast(Vertex[V], self._slots[index])
        self._slots[index] = None
        self._size -= 1
        return vertex.label

    # ─────────────────────────────────────────────
    # Edge Operations
    # ─────────────────────────────────────────────

    def _edge_indices(self, source: V, destination: V) -> tuple[int, int]:
        return self._require_index(source), self._require_index(destination)

    def add_edge(self, source: V, destination: V, label: E) -> None:
        _check_value(label, "Edge label")
        u, v = self._edge_indices(source, destination)
        if self._matrix[u][v] is not None:
            raise DuplicateEdgeError(source, destination)

        self._matrix[u][v] = Edge(source, destination, label)
        self._edge_count += 1

    def contains_edge(self, source: V, destination: V) -> bool:
        u, v = self._edge_indices(source, destination)
        return self._matrix[u][v] is not None

    def get_edge(self, source: V, destination: V) -> Edge[V, E]:
        u, v = self._edge_indices(source, destination)
        edge = self._matrix[u][v]
        if edge is None:
            raise NoSuchEdgeError(source, destination)
        return edge

    def remove_edge(self, source: V, destination: V) -> E:
        u, v = self._edge_indices(source, destination)
        edge = self._matrix[u][v]
        if edge is None:
            raise NoSuchEdgeError(source, destination)

        self._matrix[u][v] = None
        self._edge_count -= 1
        return edge.label

    # ─────────────────────────────────────────────
    # Counting and Iteration
    # ─────────────────────────────────────────────

    def size(self) -> int:
        return self._size

    def degree(self, label: V) -> int:
        row = self._matrix[self._require_index(label)]
        return sum(1 for i in range(self._used) if row[i] is not None)

    def edge_count(self) -> int:
        return self._edge_count

    def vertices(self) -> Iterator[Vertex[V]]:
        return iter([v for v in self._slots[: self._used] if v is not None])

    def adjacent(self, label: V) -> Iterator[Vertex[V]]:
        row = self._matrix[self._require_index(label)]
        # A non-empty edge slot always has an occupied vertex slot in its column
        return iter([self._slots[j] for j in range(self._used) if row[j] is not None])

    def edges(self) -> Iterator[Edge[V, E]]:
        return iter(
            [
                edge
                for row in self._matrix[: self._used]
                for edge in row[: self._used]
                if edge is not None
            ]
        )

    def clear(self) -> None:
        """Empty every slot; capacity is left as it is."""
        for i in range(self._used):
            self._slots[i] = None
            row = self._matrix[i]
            for j in range(self._used):
                row[j] = None
        self._used = 0
        self._size = 0
        self._edge_count = 0
        logger.debug("Cleared %s, capacity stays %d", type(self).__name__, self.capacity)
