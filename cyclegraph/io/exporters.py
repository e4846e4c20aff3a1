"""
Functions for materializing cycle graphs in explicit forms.

The implicit graph stores no adjacency data. Algorithms that need an
explicit or mutable structure get one from these functions: a networkx
graph, an edge table or a dense adjacency matrix.
"""

import logging

import numpy as np
import pandas as pd
import networkx as nx

from ..core.base import AbstractGraph

__all__ = ["to_networkx", "to_edge_dataframe", "to_adjacency_matrix"]

logger = logging.getLogger(__name__)


def to_networkx(graph):
    """
    Convert a graph to a networkx.Graph.

    Parameters
    ----------
    graph : AbstractGraph
        Graph to convert

    Returns
    -------
    networkx.Graph
        Graph with nodes ``1..nv`` as Python ints and one edge per edge of
        ``graph``
    """
    if not isinstance(graph, AbstractGraph):
        raise TypeError(f"Expected an AbstractGraph, got {type(graph).__name__}")

    G = nx.DiGraph() if graph.is_directed() else nx.Graph()
    G.add_nodes_from(int(v) for v in graph.vertices())
    G.add_edges_from((int(e.src), int(e.dst)) for e in graph.edges())

    logger.debug("Materialized %r as networkx graph with %d nodes and %d edges",
                 graph, G.number_of_nodes(), G.number_of_edges())
    return G


def to_edge_dataframe(graph):
    """
    Build a table of the edges of a graph.

    Parameters
    ----------
    graph : AbstractGraph
        Graph to convert

    Returns
    -------
    pandas.DataFrame
        One row per edge, in enumeration order, with ``source`` and
        ``target`` columns of the graph's vertex type
    """
    dtype = np.dtype(graph.eltype) if graph.eltype is not int else np.int64
    edges = list(graph.edges())
    return pd.DataFrame({
        'source': np.array([e.src for e in edges], dtype=dtype),
        'target': np.array([e.dst for e in edges], dtype=dtype),
    })


def to_adjacency_matrix(graph, dtype=np.int8):
    """
    Build the dense adjacency matrix of a graph.

    Row and column ``i`` correspond to vertex ``i + 1``.

    Parameters
    ----------
    graph : AbstractGraph
        Graph to convert
    dtype : numpy dtype, optional
        Element type of the matrix

    Returns
    -------
    numpy.ndarray
        ``(nv, nv)`` matrix, symmetric for undirected graphs
    """
    n = len(graph.vertices())
    A = np.zeros((n, n), dtype=dtype)
    for e in graph.edges():
        i, j = int(e.src) - 1, int(e.dst) - 1
        A[i, j] = 1
        if not graph.is_directed():
            A[j, i] = 1
    return A
