"""
Core Data Models for digraph

This module defines the two value types stored by every graph backend:
- Vertex: an immutable holder for a vertex label
- Edge: a directed connection between two vertex labels with a payload label

These models are designed to be:
- Identified by value (vertex label, ordered endpoint pair)
- Never None-labelled
- Independent of the backend that stores them
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from digraph.errors import InvalidValueError


V = TypeVar("V")
E = TypeVar("E")


@dataclass(frozen=True)
class Vertex(Generic[V]):
    """
    A node of the graph, identified by its label.

    Attributes:
        label: The vertex label. Any hashable value except None.

    Invariants:
        - label is never None
        - two vertices are equal iff their labels are equal
    """

    label: V

    def __post_init__(self) -> None:
        """Reject None labels."""
        if self.label is None:
            raise InvalidValueError("Vertex label must not be None")

    def __str__(self) -> str:
        return str(self.label)


class Edge(Generic[V, E]):
    """
    A directed connection from ``source`` to ``destination``.

    The endpoints are fixed for the lifetime of the edge; the payload label
    can be reassigned. Identity is the ordered endpoint pair only, so two
    edges between the same vertices compare equal whatever their labels.

    Attributes:
        source: Label of the source vertex
        destination: Label of the destination vertex
        label: Payload carried by the edge (mutable, never None)
    """

    __slots__ = ("_source", "_destination", "_label")

    def __init__(self, source: V, destination: V, label: E) -> None:
        if source is None or destination is None:
            raise InvalidValueError("Edge endpoints must not be None")
        if label is None:
            raise InvalidValueError("Edge label must not be None")
        self._source = source
        self._destination = destination
        self._label = label

    @property
    def source(self) -> V:
        return self._source

    @property
    def destination(self) -> V:
        return self._destination

    @property
    def endpoints(self) -> tuple[V, V]:
        """Return the ordered (source, destination) pair."""
        return (self._source, self._destination)

    @property
    def label(self) -> E:
        return self._label

    @label.setter
    def label(self, value: E) -> None:
        if value is None:
            raise InvalidValueError("Edge label must not be None")
        self._label = value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __repr__(self) -> str:
        return (
            f"Edge(source={self._source!r}, destination={self._destination!r}, "
            f"label={self._label!r})"
        )

    def __str__(self) -> str:
        return f"{self._source} -[{self._label}]-> {self._destination}"
