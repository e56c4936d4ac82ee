"""
Graph module for digraph.

This module provides the DirectedGraph contract and its two storage
backends: ListGraph (adjacency lists) and MatrixGraph (adjacency matrix).
"""

from digraph.graph.base import DirectedGraph
from digraph.graph.list_graph import ListGraph
from digraph.graph.matrix_graph import DEFAULT_CAPACITY, MatrixGraph

__all__ = [
    "DirectedGraph",
    "ListGraph",
    "MatrixGraph",
    "DEFAULT_CAPACITY",
]
