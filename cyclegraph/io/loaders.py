"""
Functions for building cycle graphs from explicit graph data.
"""

import logging

import networkx as nx
import pandas as pd

from ..core.graph import CycleGraph
from ..core.arithmetic import ring_edge_count, ring_has_edge

__all__ = ["from_networkx", "from_edge_dataframe"]

logger = logging.getLogger(__name__)


def _check_ring_edges(nv, pairs):
    seen = set()
    for u, v in pairs:
        u, v = int(u), int(v)
        if not ring_has_edge(nv, u, v):
            raise ValueError(f"Edge ({u}, {v}) is not an edge of a cycle graph on {nv} vertices")
        pair = (min(u, v), max(u, v))
        if pair in seen:
            raise ValueError(f"Edge ({u}, {v}) is listed more than once")
        seen.add(pair)
    if len(seen) != ring_edge_count(nv):
        raise ValueError(f"Expected {ring_edge_count(nv)} edges for a cycle graph on {nv} vertices, "
                         f"found {len(seen)}")


def from_networkx(G, dtype=None):
    """
    Recognize a networkx graph as a cycle graph.

    Parameters
    ----------
    G : networkx.Graph
        Undirected simple graph with nodes ``1..n``
    dtype : type, optional
        Vertex type of the result

    Returns
    -------
    CycleGraph
        The cycle graph with the same vertices and edges as ``G``

    Raises
    ------
    ValueError
        If ``G`` is directed, a multigraph, or not the cycle graph on its nodes
    """
    if G.is_directed():
        raise ValueError("Directed graphs cannot be converted to a CycleGraph")
    if G.is_multigraph():
        raise ValueError("Multigraphs cannot be converted to a CycleGraph")

    n = G.number_of_nodes()
    if set(G.nodes()) != set(range(1, n + 1)):
        raise ValueError(f"Nodes must be the integers 1..{n}")

    _check_ring_edges(n, G.edges())

    logger.debug("Recognized networkx graph as cycle graph on %d vertices", n)
    return CycleGraph(n, dtype=dtype)


def from_edge_dataframe(df, nv=None, source='source', target='target', dtype=None):
    """
    Recognize an edge table as a cycle graph.

    Parameters
    ----------
    df : pandas.DataFrame
        Table with one row per edge
    nv : int, optional
        Number of vertices. Defaults to the largest vertex in the table.
    source : str, optional
        Name of the column holding the first endpoint
    target : str, optional
        Name of the column holding the second endpoint
    dtype : type, optional
        Vertex type of the result

    Returns
    -------
    CycleGraph

    Raises
    ------
    ValueError
        If a column is missing or the edges do not form a cycle graph
    """
    for col in (source, target):
        if col not in df.columns:
            raise ValueError(f"Required column '{col}' not found in DataFrame")

    if nv is None:
        nv = int(pd.concat([df[source], df[target]]).max()) if len(df) else 0

    _check_ring_edges(nv, zip(df[source], df[target]))

    return CycleGraph(nv, dtype=dtype)
