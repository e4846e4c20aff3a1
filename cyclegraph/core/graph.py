"""
Implicit cycle graph.

This module provides ``CycleGraph``, a graph on ``nv`` vertices arranged
in a ring where each vertex is connected to its two ring neighbors. Only
the vertex count is stored; vertex and edge membership, neighbor sets
and counts are computed when asked for.
"""

import logging
import numbers
import operator

import numpy as np

from .base import AbstractGraph, Edge
from .arithmetic import ring_edge_count, ring_has_edge
from .iterators import VertexRange, EdgeIter, NeighborsIter

__all__ = ["CycleGraph"]

logger = logging.getLogger(__name__)


def _resolve_dtype(nv, dtype):
    """Pick the vertex type for a count ``nv`` and an optional explicit dtype."""
    if dtype is None:
        dtype = type(nv)
    if dtype is int or dtype is bool or dtype is np.bool_:
        return int
    if isinstance(dtype, str) and dtype == 'int':
        return int
    if isinstance(dtype, str) or isinstance(dtype, np.dtype):
        dtype = np.dtype(dtype).type
    if isinstance(dtype, type) and issubclass(dtype, np.integer):
        return dtype
    if isinstance(dtype, type) and issubclass(dtype, numbers.Integral):
        return int
    raise TypeError(f"dtype must be an integer type, got {dtype!r}")


class CycleGraph(AbstractGraph):
    """
    An undirected cycle graph on the vertices ``1..nv``.

    ``nv == 0`` is the empty graph, ``nv == 1`` a single isolated vertex
    and ``nv == 2`` a single edge. From three vertices on every vertex has
    exactly two neighbors and the graph has ``nv`` edges.

    Instances are immutable values: two graphs are equal when they have
    the same vertex count and vertex type.
    """

    __slots__ = ('_nv', '_dtype', '_check_bounds')

    def __init__(self, nv, dtype=None, check_bounds=False):
        """
        Initialize a CycleGraph.

        Parameters
        ----------
        nv : int or numpy.integer
            Number of vertices, must be >= 0
        dtype : type or str, optional
            Integer type of the vertices (``int`` or a numpy integer type).
            Defaults to the type of ``nv``.
        check_bounds : bool, optional
            Raise ValueError for neighbor queries on vertices outside
            ``1..nv`` instead of leaving them unchecked

        Raises
        ------
        TypeError
            If ``nv`` is not an integer or ``dtype`` is not an integer type
        ValueError
            If ``nv`` is negative or does not fit into ``dtype``
        """
        value = operator.index(nv)
        T = _resolve_dtype(nv, dtype)
        if value < 0:
            raise ValueError("nv must be >= 0")
        if T is not int and value > np.iinfo(T).max:
            raise ValueError(f"nv={value} does not fit into {T.__name__}")

        object.__setattr__(self, '_nv', T(value))
        object.__setattr__(self, '_dtype', T)
        object.__setattr__(self, '_check_bounds', bool(check_bounds))

    @classmethod
    def from_config(cls, nv, config=None):
        """
        Create a CycleGraph using the settings of a GraphConfig.

        Parameters
        ----------
        nv : int
            Number of vertices
        config : GraphConfig or dict, optional
            Configuration providing ``default_dtype`` and ``check_bounds``

        Returns
        -------
        CycleGraph
        """
        from ..config import GraphConfig

        if not isinstance(config, GraphConfig):
            config = GraphConfig(config_dict=config)
        dtype = config.get_dtype()
        check_bounds = config.get('check_bounds', False)
        logger.debug("Creating CycleGraph(%s) with dtype=%s, check_bounds=%s",
                     nv, dtype.__name__, check_bounds)
        return cls(nv, dtype=dtype, check_bounds=check_bounds)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (type(self), (self._nv, self._dtype, self._check_bounds))

    def __repr__(self):
        if self._dtype is int:
            return f"CycleGraph({self._nv})"
        return f"CycleGraph({int(self._nv)}, dtype={self._dtype.__name__})"

    def __eq__(self, other):
        if not isinstance(other, CycleGraph):
            return NotImplemented
        return self._dtype is other._dtype and int(self._nv) == int(other._nv)

    def __hash__(self):
        return hash((CycleGraph, int(self._nv), self._dtype))

    def __len__(self):
        return int(self._nv)

    def __iter__(self):
        return iter(self.vertices())

    def __contains__(self, v):
        return self.has_vertex(v)

    # Element types

    @property
    def eltype(self):
        return self._dtype

    @property
    def edgetype(self):
        return Edge

    @classmethod
    def is_directed(cls) -> bool:
        return False

    # Vertices

    @property
    def nv(self):
        """Number of vertices."""
        return self._nv

    def vertex_count(self):
        return self._nv

    def vertices(self) -> VertexRange:
        """
        The vertices ``1..nv``.

        Returns
        -------
        VertexRange
            Restartable sequence of the vertices, in increasing order
        """
        return VertexRange(self._nv, self._dtype)

    def has_vertex(self, v) -> bool:
        return v in self.vertices()

    # Edges

    def edge_count(self) -> int:
        """
        Number of edges.

        Returns
        -------
        int
            0 for fewer than two vertices, 1 for two vertices, ``nv`` otherwise
        """
        return ring_edge_count(int(self._nv))

    def has_edge(self, u, v=None) -> bool:
        """
        Whether ``u`` and ``v`` are adjacent.

        Parameters
        ----------
        u : int or Edge
            First endpoint, or an edge (any pair) when ``v`` is omitted
        v : int, optional
            Second endpoint

        Returns
        -------
        bool
            True if both endpoints are vertices and lie next to each other
            on the ring
        """
        if v is None:
            u, v = u
        return ring_has_edge(int(self._nv), operator.index(u), operator.index(v))

    def edges(self) -> EdgeIter:
        """
        All edges of the graph.

        The consecutive edges ``(1, 2), ..., (nv - 1, nv)`` come first,
        followed by the closing edge ``(1, nv)`` when ``nv >= 3``.

        Returns
        -------
        EdgeIter
            Restartable sequence of ``edge_count()`` edges
        """
        return EdgeIter(self._nv, self._dtype)

    # Neighbors

    def outneighbors(self, v) -> NeighborsIter:
        """
        Neighbors of vertex ``v``.

        ``v`` must be a vertex of the graph. Out-of-range vertices are not
        checked unless the graph was created with ``check_bounds=True``;
        an assertion guards them when Python runs without ``-O``.

        Parameters
        ----------
        v : int
            Vertex in ``1..nv``

        Returns
        -------
        NeighborsIter
            Sequence of 0, 1 or 2 neighbors. Vertex 1 yields ``2, nv``,
            vertex ``nv`` yields ``1, nv - 1`` and any other vertex yields
            ``v - 1, v + 1``.
        """
        v = operator.index(v)
        if self._check_bounds and not self.has_vertex(v):
            raise ValueError(f"vertex {v} not in 1..{int(self._nv)}")
        assert 1 <= v <= self._nv, f"vertex {v} not in 1..{int(self._nv)}"
        return NeighborsIter(self._nv, v, self._dtype)

    def inneighbors(self, v) -> NeighborsIter:
        return self.outneighbors(v)

    def neighbors(self, v) -> NeighborsIter:
        return self.outneighbors(v)

    def all_neighbors(self, v) -> NeighborsIter:
        return self.outneighbors(v)

    def degree(self, v) -> int:
        """Number of neighbors of ``v``."""
        return len(self.outneighbors(v))

    # Conversion

    def to_networkx(self):
        """
        Materialize the graph as a networkx.Graph.

        Returns
        -------
        networkx.Graph
            Explicit adjacency graph with nodes ``1..nv``
        """
        from ..io.exporters import to_networkx

        return to_networkx(self)
