"""
Lazy sequences over the vertices, edges and neighbors of a cycle graph.

The sequences hold only the vertex count (and the vertex for neighbor
sequences). Each call to ``iter()`` starts from scratch with its own
position, so the same sequence can be walked any number of times, also
concurrently. Elements are also reachable by index in constant time.
"""

import numbers
import operator
from abc import abstractmethod
from collections.abc import Sequence

from .base import Edge
from .arithmetic import (
    ring_edge_count, ring_has_edge, first_edge_state, next_edge,
    edge_at, edge_index, neighbor_count, neighbor_at,
)

__all__ = ["VertexRange", "EdgeIter", "NeighborsIter"]


class _RingSequence(Sequence):
    """Random-access sequence whose elements are computed from their index."""

    __slots__ = ('_nv', '_dtype')

    def __init__(self, nv, dtype=int):
        self._nv = int(nv)
        self._dtype = dtype

    @abstractmethod
    def _at(self, i):
        """Element at the non-negative position ``i``."""

    def __getitem__(self, index):
        n = len(self)
        if isinstance(index, slice):
            return [self._at(i) for i in range(*index.indices(n))]
        i = operator.index(index)
        if i < 0:
            i += n
        if not 0 <= i < n:
            raise IndexError(f"{type(self).__name__} index out of range")
        return self._at(i)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self).__name__,) + self._key())

    def _key(self):
        return (self._nv, self._dtype)

    @property
    def eltype(self):
        return self._dtype


class VertexRange(_RingSequence):
    """
    The vertices ``1..nv`` of a graph.
    """

    __slots__ = ()

    def __len__(self):
        return self._nv

    def _at(self, i):
        return self._dtype(i + 1)

    def __iter__(self):
        T = self._dtype
        for v in range(1, self._nv + 1):
            yield T(v)

    def __contains__(self, v):
        if not isinstance(v, numbers.Integral):
            return False
        return 1 <= v <= self._nv

    def __repr__(self):
        return f"VertexRange(1:{self._nv})"


class EdgeIter(_RingSequence):
    """
    The edges of a cycle graph.

    For ``nv >= 3`` the order is ``(1, 2), (2, 3), ..., (nv - 1, nv)``
    followed by the closing edge ``(1, nv)``.
    """

    __slots__ = ()

    def __len__(self):
        return ring_edge_count(self._nv)

    def _make(self, src, dst):
        T = self._dtype
        return Edge(T(src), T(dst))

    def _at(self, i):
        return self._make(*edge_at(self._nv, i))

    def __iter__(self):
        nv = self._nv
        step = next_edge(nv, first_edge_state(nv))
        while step is not None:
            (src, dst), state = step
            yield self._make(src, dst)
            step = next_edge(nv, state)

    def __contains__(self, e):
        try:
            u, v = e
        except (TypeError, ValueError):
            return False
        if not (isinstance(u, numbers.Integral) and isinstance(v, numbers.Integral)):
            return False
        return ring_has_edge(self._nv, int(u), int(v))

    def index(self, e, start=0, stop=None):
        if e not in self:
            raise ValueError(f"{e!r} is not in edges")
        i = edge_index(self._nv, int(e[0]), int(e[1]))
        stop = len(self) if stop is None else stop
        if not start <= i < stop:
            raise ValueError(f"{e!r} is not in edges")
        return i

    def count(self, e):
        return 1 if e in self else 0

    def __repr__(self):
        return f"EdgeIter(nv={self._nv})"


class NeighborsIter(_RingSequence):
    """
    The neighbors of one vertex of a cycle graph.

    Serves as out-, in- and all-neighbors since the graph is undirected.
    """

    __slots__ = ('_vertex',)

    def __init__(self, nv, vertex, dtype=int):
        super().__init__(nv, dtype)
        self._vertex = int(vertex)

    @property
    def vertex(self):
        return self._dtype(self._vertex)

    def __len__(self):
        return neighbor_count(self._nv)

    def _at(self, i):
        return self._dtype(neighbor_at(self._nv, self._vertex, i))

    def __iter__(self):
        for i in range(len(self)):
            yield self._at(i)

    def _key(self):
        return (self._nv, self._vertex, self._dtype)

    def __repr__(self):
        return f"NeighborsIter(nv={self._nv}, vertex={self._vertex})"
