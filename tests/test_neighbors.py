import numpy as np
import pytest

from cyclegraph import CycleGraph
from cyclegraph.core import NeighborsIter

from conftest import DTYPES


class TestNeighbors:

    def test_interior_vertex(self, ring5):
        assert list(ring5.neighbors(3)) == [2, 4]

    def test_first_vertex(self, ring5):
        assert list(ring5.neighbors(1)) == [2, 5]

    def test_last_vertex(self, ring5):
        assert list(ring5.neighbors(5)) == [1, 4]

    def test_two_vertices(self):
        g = CycleGraph(2)
        assert list(g.neighbors(1)) == [2]
        assert list(g.neighbors(2)) == [1]

    def test_single_vertex(self):
        assert list(CycleGraph(1).neighbors(1)) == []

    def test_three_vertices(self):
        g = CycleGraph(3)
        assert list(g.neighbors(1)) == [2, 3]
        assert list(g.neighbors(2)) == [1, 3]
        assert list(g.neighbors(3)) == [1, 2]

    @pytest.mark.parametrize("nv", range(3, 12))
    def test_two_neighbors_joined_by_edges(self, nv):
        g = CycleGraph(nv)
        for v in g.vertices():
            ns = g.neighbors(v)
            assert len(ns) == 2
            assert len(set(ns)) == 2
            assert all(g.has_edge(v, u) for u in ns)

    def test_neighbors_are_symmetric(self, small_graph):
        for v in small_graph.vertices():
            for u in small_graph.neighbors(v):
                assert v in small_graph.neighbors(u)

    def test_aliases(self, ring5):
        for v in ring5.vertices():
            expected = list(ring5.outneighbors(v))
            assert list(ring5.inneighbors(v)) == expected
            assert list(ring5.neighbors(v)) == expected
            assert list(ring5.all_neighbors(v)) == expected

    @pytest.mark.parametrize("dtype", DTYPES)
    def test_element_type(self, dtype):
        g = CycleGraph(6, dtype=dtype)
        for v in g.vertices():
            assert all(type(u) is dtype for u in g.neighbors(v))
        assert list(g.neighbors(dtype(6))) == [1, 5]

    def test_restartable(self, ring5):
        ns = ring5.neighbors(2)
        assert list(ns) == list(ns)

    def test_independent_iterations(self, ring5):
        ns = ring5.neighbors(3)
        first, second = iter(ns), iter(ns)
        assert next(first) == 2
        assert next(second) == 2
        assert next(first) == 4
        assert list(second) == [4]

    def test_degree(self, ring5):
        assert [ring5.degree(v) for v in ring5.vertices()] == [2] * 5
        assert CycleGraph(2).degree(1) == 1
        assert CycleGraph(1).degree(1) == 0


class TestNeighborsLength:

    @pytest.mark.parametrize("nv, expected", [(1, 0), (2, 1), (3, 2), (50, 2)])
    def test_length(self, nv, expected):
        g = CycleGraph(nv)
        assert len(g.neighbors(1)) == expected
        assert len(g.neighbors(nv)) == expected

    def test_length_matches_iteration(self, small_graph):
        for v in small_graph.vertices():
            ns = small_graph.neighbors(v)
            assert len(ns) == len(list(ns))


class TestNeighborsSequence:

    def test_indexing(self, ring5):
        ns = ring5.neighbors(1)
        assert isinstance(ns, NeighborsIter)
        assert ns[0] == 2
        assert ns[1] == 5
        assert ns[-1] == 5
        assert ns[:] == [2, 5]
        with pytest.raises(IndexError):
            ns[2]

    def test_contains(self, ring5):
        ns = ring5.neighbors(4)
        assert 3 in ns
        assert 5 in ns
        assert 1 not in ns

    def test_vertex(self):
        ns = CycleGraph(4, dtype=np.int16).neighbors(2)
        assert ns.vertex == 2
        assert type(ns.vertex) is np.int16


class TestBoundsChecking:

    def test_check_bounds(self):
        g = CycleGraph(5, check_bounds=True)
        assert list(g.neighbors(5)) == [1, 4]
        with pytest.raises(ValueError, match="not in 1..5"):
            g.neighbors(0)
        with pytest.raises(ValueError):
            g.neighbors(6)

    def test_check_bounds_empty_graph(self):
        g = CycleGraph(0, check_bounds=True)
        with pytest.raises(ValueError):
            g.neighbors(1)
