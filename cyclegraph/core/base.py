"""
Abstract graph interface and edge element type.

This module defines the contract shared by graph representations in
the package. Graph algorithms only rely on the members declared here,
so any representation implementing them can be passed around freely.
"""

from abc import ABC, abstractmethod
from typing import NamedTuple, Any

__all__ = ["Edge", "AbstractGraph"]


class Edge(NamedTuple):
    """
    An undirected edge between two vertices.

    Edges produced by the graphs in this package are normalized so that
    ``src < dst``. Being a tuple, an Edge compares equal to ``(src, dst)``.
    """

    src: Any
    dst: Any

    def reverse(self):
        """Return the edge with its endpoints swapped."""
        return Edge(self.dst, self.src)


class AbstractGraph(ABC):
    """
    Interface for graphs whose vertices are the integers ``1..nv``.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def eltype(self):
        """Type of the vertices."""

    @property
    @abstractmethod
    def edgetype(self):
        """Type of the edges."""

    @classmethod
    @abstractmethod
    def is_directed(cls) -> bool:
        """Whether the graph type is directed."""

    @abstractmethod
    def vertex_count(self):
        """Number of vertices."""

    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges."""

    @abstractmethod
    def vertices(self):
        """Sequence of all vertices."""

    @abstractmethod
    def has_vertex(self, v) -> bool:
        """Whether ``v`` is a vertex of the graph."""

    @abstractmethod
    def edges(self):
        """Sequence of all edges."""

    @abstractmethod
    def has_edge(self, u, v=None) -> bool:
        """Whether there is an edge between ``u`` and ``v``."""

    @abstractmethod
    def outneighbors(self, v):
        """Vertices reached by an edge leaving ``v``."""

    @abstractmethod
    def inneighbors(self, v):
        """Vertices with an edge entering ``v``."""

    @abstractmethod
    def neighbors(self, v):
        """Neighbors of ``v``."""

    @abstractmethod
    def all_neighbors(self, v):
        """Union of in and out neighbors of ``v``."""
