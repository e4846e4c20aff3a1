"""
Structural metrics of cycle graphs.

The metrics are computed in closed form from the vertex count and agree
with what networkx reports for the materialized graph.
"""

import math
import logging
from typing import Dict, Any, List

import networkx as nx

from ..core.graph import CycleGraph
from ..io.exporters import to_networkx

__all__ = ["CycleGraphMetrics"]

logger = logging.getLogger(__name__)


class CycleGraphMetrics:
    """
    Metrics calculator for a CycleGraph.

    Provides degree, density, diameter, girth and connectivity without
    building adjacency data. ``networkx_graph()`` gives the explicit graph
    for metrics that have no closed form here.
    """

    def __init__(self, graph: CycleGraph):
        """
        Initialize the metrics calculator.

        Parameters
        ----------
        graph : CycleGraph
            Graph to analyze
        """
        if not isinstance(graph, CycleGraph):
            raise TypeError(f"Expected a CycleGraph, got {type(graph).__name__}")
        self.graph = graph
        self.n = len(graph)
        self.m = graph.edge_count()
        self._nx_graph = None

    def networkx_graph(self) -> nx.Graph:
        """The materialized graph, built on first use."""
        if self._nx_graph is None:
            self._nx_graph = to_networkx(self.graph)
        return self._nx_graph

    def degree(self, v) -> int:
        return self.graph.degree(v)

    def degree_sequence(self) -> List[int]:
        """Degrees of the vertices ``1..nv``, in order."""
        return [self.degree(v) for v in self.graph.vertices()]

    def density(self) -> float:
        """
        Edge density ``2m / (n (n - 1))``.

        Returns 0 for graphs with fewer than two vertices, as networkx does.
        """
        if self.n <= 1:
            return 0.0
        return 2.0 * self.m / (self.n * (self.n - 1))

    def is_connected(self) -> bool:
        """
        Whether the graph is connected.

        Raises
        ------
        networkx.NetworkXPointlessConcept
            For the empty graph, where connectivity is undefined
        """
        if self.n == 0:
            raise nx.NetworkXPointlessConcept("Connectivity is undefined for the null graph.")
        return True

    def diameter(self) -> int:
        """
        Largest shortest-path distance between two vertices.

        Raises
        ------
        ValueError
            For the empty graph
        """
        if self.n == 0:
            raise ValueError("Diameter is undefined for the empty graph")
        return self.n // 2

    def girth(self) -> float:
        """Length of the shortest cycle; ``inf`` when the graph is acyclic."""
        if self.n >= 3:
            return self.n
        return math.inf

    def summary(self) -> Dict[str, Any]:
        """
        All metrics in one dictionary.

        Undefined metrics of the empty graph are reported as None.
        """
        result = {
            'num_vertices': self.n,
            'num_edges': self.m,
            'directed': self.graph.is_directed(),
            'density': self.density(),
            'girth': self.girth(),
            'connected': None,
            'diameter': None,
        }
        if self.n > 0:
            result['connected'] = self.is_connected()
            result['diameter'] = self.diameter()

        logger.debug("Metrics of %r: %s", self.graph, result)
        return result
