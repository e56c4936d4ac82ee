"""
digraph

A generic directed graph container with interchangeable adjacency-list and
adjacency-matrix backends sharing one contract.
"""

import logging

from digraph.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    GraphError,
    InvalidValueError,
    NoSuchEdgeError,
    NoSuchVertexError,
)
from digraph.graph import DirectedGraph, ListGraph, MatrixGraph
from digraph.models import Edge, Vertex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DirectedGraph",
    "ListGraph",
    "MatrixGraph",
    "Vertex",
    "Edge",
    "GraphError",
    "InvalidValueError",
    "DuplicateVertexError",
    "DuplicateEdgeError",
    "NoSuchVertexError",
    "NoSuchEdgeError",
]
__version__ = "0.1.0"
