"""
Shared pytest fixtures for digraph.

The ``graph`` fixture is parametrized over both backends so that every
contract test runs once against ListGraph and once against MatrixGraph.
"""

import pytest

from digraph import ListGraph, MatrixGraph


BACKENDS = [ListGraph, MatrixGraph]


@pytest.fixture(params=BACKENDS, ids=lambda cls: cls.__name__)
def graph_type(request):
    """The backend class under test."""
    return request.param


@pytest.fixture
def graph(graph_type):
    """An empty graph of the backend under test."""
    return graph_type()


@pytest.fixture
def abc_graph(graph_type):
    """Vertices A, B, C with edges A -x-> B and B -y-> C."""
    graph = graph_type()
    for label in ("A", "B", "C"):
        graph.add(label)
    graph.add_edge("A", "B", "x")
    graph.add_edge("B", "C", "y")
    return graph
