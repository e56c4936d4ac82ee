"""
NetworkX interoperability for digraph.

Converts between the digraph backends and ``networkx.DiGraph`` so that the
NetworkX algorithm library can be run over a graph built here, and graphs
produced by NetworkX can be loaded into either backend.
"""

from typing import Any, Optional

import networkx as nx

from digraph.errors import InvalidValueError
from digraph.graph.base import DirectedGraph
from digraph.graph.list_graph import ListGraph


def to_networkx(graph: DirectedGraph, label_attr: str = "label") -> nx.DiGraph:
    """
    Export a graph to a NetworkX DiGraph.

    Vertex labels become node IDs; each edge label is stored as an edge
    attribute.

    Args:
        graph: The graph to export
        label_attr: Edge attribute name that receives the edge label

    Returns:
        A new NetworkX DiGraph
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.labels())
    for edge in graph.edges():
        nx_graph.add_edge(edge.source, edge.destination, **{label_attr: edge.label})
    return nx_graph


def from_networkx(
    nx_graph: nx.DiGraph,
    graph_type: type[DirectedGraph] = ListGraph,
    label_attr: str = "label",
    default: Optional[Any] = None,
    **kwargs: Any,
) -> DirectedGraph:
    """
    Build a graph from a NetworkX DiGraph.

    Args:
        nx_graph: A directed, non-multi NetworkX graph
        graph_type: The backend to build (ListGraph or MatrixGraph)
        label_attr: Edge attribute holding the edge label
        default: Label for edges whose ``label_attr`` is missing or None
        **kwargs: Passed to the backend constructor

    Returns:
        A new graph of type graph_type

    Raises:
        InvalidValueError: If nx_graph is undirected or a multigraph, or an
            edge has no label and no default was given
    """
    if not nx_graph.is_directed():
        raise InvalidValueError("Expected a directed NetworkX graph")
    if nx_graph.is_multigraph():
        raise InvalidValueError("Multigraphs cannot be represented")

    graph = graph_type(**kwargs)
    for node in nx_graph.nodes:
        graph.add(node)
    for source, destination, data in nx_graph.edges(data=True):
        label = data.get(label_attr)
        if label is None:
            label = default
        if label is None:
            raise InvalidValueError(
                f"Edge from {source!r} to {destination!r} has no {label_attr!r} attribute"
            )
        graph.add_edge(source, destination, label)
    return graph
